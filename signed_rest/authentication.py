"""
Request authentication headers.

Every request carries a stable device fingerprint plus a per-request
HMAC-SHA256 signature over::

    app_id + METHOD + timestamp + nonce [+ sha256(json body)]

The body hash is only appended when the request has a body. The server
is expected to reject timestamps outside its tolerance window and to
remember nonces; neither check is performed here.
"""

import hmac
import time
import uuid
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from .constants import (
    DEFAULT_USER_AGENT,
    FINGERPRINT_SEPARATOR,
    HEADER_APP_ID,
    HEADER_AUTHORIZATION,
    HEADER_BROWSER,
    HEADER_BROWSER_SIGNATURE,
    HEADER_CLIENT,
    HEADER_REQUEST_NONCE,
    HEADER_REQUEST_SIGNATURE,
    HEADER_REQUEST_TIMESTAMP,
)
from .exceptions import ConfigurationError
from .hashing import hmac_sha256, sha256_hash
from .methods import HTTPMethod
from .serialization import encode_json


def bearer(jwt: str) -> str:
    return f"Bearer {jwt}"


class ApiAuthentication:
    """
    Generates signed authentication headers for API requests.

    The base headers (app id, fingerprint, fingerprint signature and client
    label) are fixed at construction and exposed read-only; each call to
    ``generate_headers`` works on its own copy, so one instance can be
    shared by concurrent requests.
    """

    def __init__(self, device_id: str, app_id: str, app_key: str,
                 user_agent: str = DEFAULT_USER_AGENT):
        """
        Initialize request authentication.

        Args:
            device_id: Stable device identifier; only its hash is sent
            app_id: Application identifier
            app_key: Signing secret (must match server, never sent)
            user_agent: Client label sent in the ``x-client`` header
        """
        if not app_key:
            raise ConfigurationError("app_key cannot be empty")

        self.app_id = app_id
        self._app_key = app_key

        fingerprint = sha256_hash(f"{device_id}{FINGERPRINT_SEPARATOR}{user_agent}")
        self.fingerprint = fingerprint

        self._headers = MappingProxyType({
            HEADER_APP_ID: app_id,
            HEADER_BROWSER: fingerprint,
            HEADER_BROWSER_SIGNATURE: sha256_hash(fingerprint),
            HEADER_CLIENT: user_agent,
        })

    @property
    def headers(self) -> Mapping[str, str]:
        """Call-invariant base headers."""
        return self._headers

    def body_hash(self, body: Any) -> str:
        """SHA-256 of the canonical JSON body, or ``""`` without a body."""
        if body is None:
            return ""
        return sha256_hash(encode_json(body))

    def canonical_string(self, method: HTTPMethod, timestamp: str, nonce: str,
                         body: Any = None) -> str:
        return f"{self.app_id}{method.name}{timestamp}{nonce}{self.body_hash(body)}"

    def sign(self, method: HTTPMethod, timestamp: str, nonce: str, body: Any = None) -> str:
        """HMAC-SHA256 of the canonical string keyed with the app key."""
        return hmac_sha256(self.canonical_string(method, timestamp, nonce, body), self._app_key)

    def generate_headers(self, method: HTTPMethod, body: Any = None,
                         jwt: Optional[str] = None) -> Dict[str, str]:
        """
        Generate the headers authenticating one request.

        Authenticates both the client (signature) and the user (JWT).

        Args:
            method: HTTP method of the request
            body: JSON-serializable request body, ``None`` if none
            jwt: Bearer token for user authentication, ``None`` for none

        Returns:
            A fresh header dict
        """
        headers = dict(self._headers)

        nonce = str(uuid.uuid4())
        timestamp = str(time.time_ns() // 1_000_000)

        headers[HEADER_REQUEST_SIGNATURE] = self.sign(method, timestamp, nonce, body)
        headers[HEADER_REQUEST_NONCE] = nonce
        headers[HEADER_REQUEST_TIMESTAMP] = timestamp

        if jwt is not None:
            headers[HEADER_AUTHORIZATION] = bearer(jwt)

        return headers

    def verify_headers(self, method: HTTPMethod, headers: Mapping[str, str],
                       body: Any = None) -> bool:
        """
        Verify the request signature in ``headers``, as the server would.

        Args:
            method: HTTP method of the request
            headers: Headers produced by ``generate_headers``
            body: Request body that was signed

        Returns:
            True if the signature matches
        """
        try:
            timestamp = headers[HEADER_REQUEST_TIMESTAMP]
            nonce = headers[HEADER_REQUEST_NONCE]
            signature = headers[HEADER_REQUEST_SIGNATURE]
        except KeyError:
            return False

        expected = self.sign(method, timestamp, nonce, body)
        # Use constant-time comparison to prevent timing attacks
        return hmac.compare_digest(expected, signature)
