"""Errors raised by the Champion API client."""

from typing import Any, Dict, Optional

NETWORK_ERROR = "network_error"
HTTP_ERROR = "http_error"
PARSE_ERROR = "parse_error"
STREAM_ERROR = "stream_error"
UNKNOWN_ERROR = "unknown_error"


class ChampionAPIError(Exception):
    """Base exception for every failure surfaced by the client.

    Carries the machine code, human message, HTTP status (0 when no
    response was received), the endpoint path that failed and, for
    structured server errors, the parsed error body.
    """

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = 0,
        endpoint: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.code = code
        self.message = message
        self.status_code = status_code
        self.endpoint = endpoint
        self.details = details
        super().__init__(message)

    @classmethod
    def from_response(
        cls,
        body: Dict[str, Any],
        status_code: int,
        endpoint: Optional[str] = None,
    ) -> "ChampionAPIError":
        """Build an error from a `{"errors": [{"code", "message"}]}` body."""
        errors = body.get("errors")
        first = errors[0] if isinstance(errors, list) and errors else {}
        if not isinstance(first, dict):
            first = {}
        return cls(
            code=first.get("code") or UNKNOWN_ERROR,
            message=first.get("message") or "Unknown error occurred",
            status_code=status_code,
            endpoint=endpoint,
            details=body,
        )

    def __str__(self) -> str:
        return (
            f"{type(self).__name__}(code: {self.code}, message: {self.message}, "
            f"status_code: {self.status_code})"
        )


class NetworkError(ChampionAPIError):
    """Raised when the request never got a response."""

    def __init__(self, message: str, endpoint: Optional[str] = None):
        super().__init__(NETWORK_ERROR, message, status_code=0, endpoint=endpoint)


class HTTPError(ChampionAPIError):
    """Raised on a non-2xx response without a structured error body."""

    def __init__(
        self,
        message: str,
        status_code: int,
        endpoint: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(HTTP_ERROR, message, status_code, endpoint, details)


class ParseError(ChampionAPIError):
    """Raised when a 2xx response body is not valid JSON."""

    def __init__(self, message: str, status_code: int, endpoint: Optional[str] = None):
        super().__init__(PARSE_ERROR, message, status_code, endpoint)


class StreamError(ChampionAPIError):
    """Raised when an event stream cannot be established or is torn down."""

    def __init__(self, message: str, endpoint: Optional[str] = None):
        super().__init__(STREAM_ERROR, message, status_code=0, endpoint=endpoint)
