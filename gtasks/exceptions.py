class TasksError(Exception):
    """Base class for all errors raised by gtasks."""


class AuthError(TasksError):
    """Raised when a bearer token cannot be obtained."""


class TransportError(TasksError):
    """Raised when the request fails before a response is received (DNS, TLS, timeout)."""


class DecodeError(TasksError):
    """Raised when a successful response body is not valid JSON or does not match the model."""


class InvalidArgumentError(TasksError, ValueError):
    """Raised when a required argument is missing or empty."""


class ApiError(TasksError):
    """Raised when the Tasks API answers with a non-2xx status."""

    def __init__(self, status_code: int, message: str, payload: dict | None = None, body: str = ""):
        self.status_code = status_code
        self.message = message
        self.payload = payload
        self.body = body
        super().__init__(f"Tasks API error (HTTP {status_code}): {message}")

    @property
    def reason(self) -> str | None:
        """First `errors[].reason` of the Google error payload, if present."""
        if not self.payload:
            return None
        error = self.payload.get("error")
        if not isinstance(error, dict):
            return None
        errors = error.get("errors") or []
        if errors and isinstance(errors[0], dict):
            return errors[0].get("reason")
        return None
