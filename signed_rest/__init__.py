"""
Signed REST client library.

Builds endpoint URLs, signs requests with HMAC-SHA256 authentication
headers and maps responses to ``Success``/``Failure`` results.

Example usage:
    from signed_rest import ApiAuthentication, Endpoint, RestClient, Success

    auth = ApiAuthentication("device-uuid", "my-app", "app-secret")
    client = RestClient("https://api.example.com", authentication=auth)

    result = client.get(Endpoint().with_version("v1").with_path("users/{id}", {"id": "42"}))
    if isinstance(result, Success):
        print(result.value)
"""

from .authentication import ApiAuthentication
from .client import RequestOptions, RestClient
from .endpoint import Endpoint
from .errors import (
    ERROR_KINDS,
    BadGateway,
    BadRequest,
    Forbidden,
    InternalServerError,
    InvalidURL,
    NoResponse,
    NotFound,
    RestError,
    ServiceUnavailable,
    Timeout,
    Unauthorized,
    Unknown,
    error_for_status,
)
from .exceptions import (
    SignedRestError,
    ConfigurationError,
    InvalidURLError,
    ResponseDecodeError
)
from .hashing import hmac_sha256, sha256_hash, to_hex
from .methods import HTTPMethod
from .result import Failure, Result, Success

__version__ = "1.0.0"
__all__ = [
    "ApiAuthentication",
    "RequestOptions",
    "RestClient",
    "Endpoint",
    "HTTPMethod",
    "Result",
    "Success",
    "Failure",
    "RestError",
    "ERROR_KINDS",
    "InvalidURL",
    "NoResponse",
    "BadRequest",
    "Unauthorized",
    "Forbidden",
    "NotFound",
    "InternalServerError",
    "BadGateway",
    "ServiceUnavailable",
    "Timeout",
    "Unknown",
    "error_for_status",
    "SignedRestError",
    "ConfigurationError",
    "InvalidURLError",
    "ResponseDecodeError",
    "sha256_hash",
    "hmac_sha256",
    "to_hex"
]
