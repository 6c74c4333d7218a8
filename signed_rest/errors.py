"""
Failure kinds returned inside ``Failure`` results.

The family is closed: every failure produced by ``RestClient`` is one of
the classes listed in ``ERROR_KINDS``.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class RestError:
    """Base class for all failure kinds."""

    @property
    def message(self) -> str:
        return "Unknown error"

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class InvalidURL(RestError):

    @property
    def message(self) -> str:
        return "Invalid URL"


@dataclass(frozen=True)
class NoResponse(RestError):

    @property
    def message(self) -> str:
        return "No response from server"


@dataclass(frozen=True)
class BadRequest(RestError):
    """400, carrying the raw response body."""

    error_message: str = ""

    @property
    def message(self) -> str:
        return self.error_message


@dataclass(frozen=True)
class Unauthorized(RestError):

    @property
    def message(self) -> str:
        return "Unauthorized access"


@dataclass(frozen=True)
class Forbidden(RestError):

    @property
    def message(self) -> str:
        return "Forbidden access"


@dataclass(frozen=True)
class NotFound(RestError):

    @property
    def message(self) -> str:
        return "Resource not found"


@dataclass(frozen=True)
class InternalServerError(RestError):

    @property
    def message(self) -> str:
        return "Internal server error"


@dataclass(frozen=True)
class BadGateway(RestError):

    @property
    def message(self) -> str:
        return "Bad gateway"


@dataclass(frozen=True)
class ServiceUnavailable(RestError):

    @property
    def message(self) -> str:
        return "Service unavailable"


@dataclass(frozen=True)
class Timeout(RestError):
    """504 from the server, or a read timeout on an open connection."""

    @property
    def message(self) -> str:
        return "Request timed out"


@dataclass(frozen=True)
class Unknown(RestError):
    """Any status code without a dedicated kind."""

    code: int = 0
    error_message: str = ""

    @property
    def message(self) -> str:
        return f"Unknown error: Code {self.code}, Message: {self.error_message}"


ERROR_KINDS = (
    InvalidURL,
    NoResponse,
    BadRequest,
    Unauthorized,
    Forbidden,
    NotFound,
    InternalServerError,
    BadGateway,
    ServiceUnavailable,
    Timeout,
    Unknown,
)

# Status codes with a fixed, payload-free kind
_STATUS_ERRORS = {
    401: Unauthorized,
    403: Forbidden,
    404: NotFound,
    500: InternalServerError,
    502: BadGateway,
    503: ServiceUnavailable,
    504: Timeout,
}


def error_for_status(status_code: int, body: str = "") -> RestError:
    """
    Map a non-2xx HTTP status code to its failure kind.

    Args:
        status_code: HTTP status code of the response
        body: Raw response body text

    Returns:
        The matching ``RestError`` instance
    """
    if status_code == 400:
        return BadRequest(body)
    kind = _STATUS_ERRORS.get(status_code)
    if kind is not None:
        return kind()
    return Unknown(status_code, body)
