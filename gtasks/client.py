"""Authenticated HTTP client for the Google Tasks REST API v1.

Builds URLs and query strings, attaches the bearer token, sends exactly one request per
call and turns the response into a dict or a typed error.
"""

import logging
from collections.abc import Callable
from urllib.parse import quote

import requests

from gtasks.auth import TokenProvider, as_token_provider, authorization_header
from gtasks.config import get_settings
from gtasks.exceptions import ApiError, DecodeError, InvalidArgumentError, TransportError
from gtasks.http_client import build_session
from gtasks.models.common import QueryOptions

_logger = logging.getLogger(__name__)


def build_url(base_url: str, *segments: str) -> str:
    """Join path segments to the base URL, percent-encoding each segment.

    `@` is kept as-is so `users/@me/lists` and the `@default` list id stay readable.
    """
    parts = [base_url.rstrip("/")]
    for segment in segments:
        if not segment:
            raise InvalidArgumentError("Path segment cannot be empty.")
        parts.append(quote(segment, safe="@"))
    return "/".join(parts)


def _error_message(payload: dict | None, text: str) -> str:
    if payload:
        error = payload.get("error")
        if isinstance(error, dict) and error.get("message"):
            return error["message"]
        if isinstance(error, str):
            return payload.get("error_description") or error
    return text[:500] if text else "no response body"


def _handle_response(resp: requests.Response) -> dict | None:
    """Check the status and decode the body. Empty bodies (204) return None."""
    if not 200 <= resp.status_code < 300:
        try:
            payload = resp.json()
        except ValueError:
            payload = None
        if not isinstance(payload, dict):
            payload = None
        raise ApiError(resp.status_code, _error_message(payload, resp.text), payload=payload, body=resp.text)

    if resp.status_code == 204 or not resp.content:
        return None
    try:
        data = resp.json()
    except ValueError as e:
        raise DecodeError(f"Response body is not valid JSON: {resp.text[:200]}") from e
    if not isinstance(data, dict):
        raise DecodeError(f"Expected a JSON object, got {type(data).__name__}")
    return data


class TasksClient:
    """Holds the session, token provider and base URL shared by all endpoint functions.

    No state changes per call, so one client can serve concurrent requests.
    """

    def __init__(
        self,
        token_provider: TokenProvider | str | Callable[[], str],
        session: requests.Session | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
    ):
        settings = get_settings()
        self.token_provider = as_token_provider(token_provider)
        self._owns_session = session is None
        self.session = session if session is not None else build_session()
        self.base_url = (base_url or settings.base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.timeout

    def url(self, *segments: str) -> str:
        return build_url(self.base_url, *segments)

    def request(
        self,
        method: str,
        segments: tuple[str, ...],
        options: QueryOptions | None = None,
        body: dict | None = None,
    ) -> dict | None:
        """Send one authenticated request and return the decoded JSON object, or None if empty.

        The token is resolved before anything goes on the wire, so an AuthError means no
        request was made.
        """
        headers = {"Authorization": authorization_header(self.token_provider.get_token())}
        url = self.url(*segments)
        params = options.to_params() if options is not None else None
        if body is not None:
            headers["Content-Type"] = "application/json"

        _logger.debug("%s %s params=%s", method, url, params)
        try:
            resp = self.session.request(
                method,
                url,
                params=params,
                json=body,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise TransportError(f"{method} {url} failed: {e}") from e
        _logger.debug("%s %s -> %s", method, url, resp.status_code)
        return _handle_response(resp)

    def close(self) -> None:
        """Close the session if this client created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
