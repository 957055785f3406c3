"""Errors raised by the stream client."""
from typing import Mapping, Optional


class StreamClientError(Exception):
    """Base class for all stream client errors."""


class TransportError(StreamClientError):
    """The API answered with a status the client does not treat as success.

    Attributes:
        status_code: HTTP status code of the response
        headers: Response headers
        body: Raw response body
    """

    def __init__(
        self,
        status_code: int,
        headers: Optional[Mapping[str, str]] = None,
        body: bytes = b"",
    ):
        self.status_code = status_code
        self.headers = dict(headers or {})
        self.body = body
        super().__init__(f"Stream API request failed with status {status_code}")


class RedirectLoopError(StreamClientError):
    """More redirects were followed than the transport allows."""

    def __init__(self, max_redirects: int, location: str):
        self.max_redirects = max_redirects
        self.location = location
        super().__init__(
            f"Exceeded {max_redirects} redirects (last location: {location})"
        )


class UnsafeRedirectError(StreamClientError):
    """A redirect pointed away from the API host or off https.

    The request is not re-sent, so the signature never leaves the API host.
    """

    def __init__(self, location: str):
        self.location = location
        super().__init__(f"Refusing to follow redirect to {location}")


class SigningError(StreamClientError):
    """The credentials variant cannot be used to sign a request."""


class DecodeError(StreamClientError, ValueError):
    """The response body is not valid JSON."""

    def __init__(self, message: str, body: bytes = b""):
        self.body = body
        super().__init__(message)
