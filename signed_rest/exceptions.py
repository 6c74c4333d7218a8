"""
Exceptions raised by the signed REST client library.

Server and transport failures are not raised; they are returned as
``Failure`` values (see ``signed_rest.errors``).
"""


class SignedRestError(Exception):
    """Base exception for signed REST client errors."""
    pass


class ConfigurationError(SignedRestError):
    """Raised when client configuration or call arguments are invalid."""
    pass


class InvalidURLError(SignedRestError):
    """Raised when an endpoint does not build into a valid URI."""

    def __init__(self, url: str):
        super().__init__(f"Invalid URL: {url!r}")
        self.url = url


class ResponseDecodeError(SignedRestError):
    """Raised when a successful (2xx) response body cannot be decoded."""

    def __init__(self, status_code: int, body: str, reason: str = ""):
        message = f"Could not decode {status_code} response"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.status_code = status_code
        self.body = body
