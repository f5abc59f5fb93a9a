"""Bearer token providers.

A provider is anything with a zero-argument `get_token()` returning the token string.
`Service` accepts a provider, a plain token string or a callable (see `as_token_provider`).
"""

from collections.abc import Callable
from typing import Protocol, runtime_checkable

from gtasks.exceptions import AuthError

BEARER_PREFIX = "Bearer "


@runtime_checkable
class TokenProvider(Protocol):
    def get_token(self) -> str: ...


class StaticTokenProvider:
    """Wraps a pre-fetched access token."""

    def __init__(self, token: str):
        if not token:
            raise AuthError("Access token is empty.")
        self._token = token

    def get_token(self) -> str:
        return self._token

    def __repr__(self) -> str:
        return f"{type(self).__name__}(token=***)"


class DynamicTokenProvider:
    """Calls `func` on every request so short-lived tokens can be refreshed.

    The result is not cached. `func` may be called concurrently from several threads
    sharing one `Service`; making it safe for that is up to the caller.
    """

    def __init__(self, func: Callable[[], str]):
        if not callable(func):
            raise TypeError(f"Token function must be callable, got {type(func).__name__}")
        self._func = func

    def get_token(self) -> str:
        try:
            token = self._func()
        except AuthError:
            raise
        except Exception as e:
            raise AuthError(f"Failed to obtain access token: {e}") from e
        if not isinstance(token, str):
            raise AuthError(f"Token function returned {type(token).__name__}, expected str")
        if not token:
            raise AuthError("Token function returned an empty token.")
        return token


def as_token_provider(value: TokenProvider | str | Callable[[], str]) -> TokenProvider:
    if isinstance(value, str):
        return StaticTokenProvider(value)
    if isinstance(value, TokenProvider):
        return value
    if callable(value):
        return DynamicTokenProvider(value)
    raise TypeError(f"Expected a token, a token function or a TokenProvider, got {type(value).__name__}")


def authorization_header(token: str) -> str:
    """Return the Authorization header value, without doubling an existing `Bearer ` prefix."""
    if token.startswith(BEARER_PREFIX):
        return token
    return f"{BEARER_PREFIX}{token}"
