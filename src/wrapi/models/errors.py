from typing import Any, Optional


class WrapiError(Exception):
    """Base class for every error raised by wrapi."""


class ClientError(WrapiError):
    """The HTTP client failed before a response was received.

    Raised for connection errors, timeouts, DNS and TLS failures and other
    transport problems. No status code or body is available; the underlying
    ``httpx.RequestError`` is chained as ``__cause__``.
    """

    def __init__(self, message: str = "HTTP client error") -> None:
        self.message = message
        super().__init__(self.message)


class ResponseError(WrapiError):
    """The API answered with a non-success status code.

    Attributes:
        status_code: The HTTP status code of the response.
        body: The response body parsed as JSON, or ``None`` when the body was
            empty or not valid JSON.
    """

    def __init__(self, status_code: int, body: Optional[Any] = None) -> None:
        self.status_code = status_code
        self.body = body
        self.message = (
            f"API response error with status {status_code} and body {body!r}"
        )
        super().__init__(self.message)


class ClientDecodeError(WrapiError):
    """The API answered successfully but the body did not match the result type."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"HTTP client failed to decode response: {message}")


class ConfigurationError(WrapiError):
    def __init__(
        self,
        message="Base URL missing. Pass base_url explicitly or set the WRAPI_BASE_URL environment variable.",
    ):
        self.message = message
        super().__init__(self.message)
