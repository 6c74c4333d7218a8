"""
REST client dispatching signed requests.

Each call issues exactly one HTTP request and returns a ``Result``:
``Success(payload)`` for 2xx responses, ``Failure(error)`` for everything
else. Nothing is retried.
"""

import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union
from urllib.parse import urlsplit

import requests

from . import errors
from .authentication import ApiAuthentication, bearer
from .constants import DEFAULT_CONFIG, HEADER_AUTHORIZATION, LOG_TAG
from .endpoint import Endpoint, validate_uri
from .exceptions import ConfigurationError, InvalidURLError, ResponseDecodeError
from .methods import HTTPMethod
from .result import Failure, Result, Success
from .serialization import Decoder, decode_json, encode_json

logger = logging.getLogger(__name__)


@dataclass
class RequestOptions:
    """
    Per-request overrides.

    Attributes:
        headers: Extra headers; they override authentication headers of the same name
        response_type: Type the JSON payload is validated into (pydantic), or a
            function receiving the parsed JSON
        timeout: Timeout in seconds, defaults to the client's ``timeout``
    """
    headers: Dict[str, str] = field(default_factory=dict)
    response_type: Optional[Decoder] = None
    timeout: Optional[float] = None


class RestClient:
    """
    Client for a REST API authenticated with ``ApiAuthentication`` and/or a JWT.

    The base URL, authentication and JWT may be changed at any time. The
    JWT is read once per request; when it is replaced while a request is in
    flight, the last value written is used by the next request.
    """

    def __init__(self, base_url: Optional[str] = None,
                 authentication: Optional[ApiAuthentication] = None,
                 jwt: Optional[str] = None,
                 session: Optional[requests.Session] = None,
                 **config):
        """
        Initialize the client.

        Args:
            base_url: Base URL prepended to every endpoint
            authentication: Signs every request when set
            jwt: Bearer token sent with every request when set
            session: HTTP session to use, a new one by default
            **config: Configuration options (timeout, logging_enabled)
        """
        self.base_url = base_url
        self.authentication = authentication

        self._jwt = jwt
        self._jwt_lock = threading.Lock()

        # Merge default config with user overrides
        self.config = {**DEFAULT_CONFIG, **config}

        # Validate configuration
        self._validate_config()

        self.session = session if session is not None else requests.Session()

    def _validate_config(self):
        """Validate client configuration."""
        unknown = set(self.config) - set(DEFAULT_CONFIG)
        if unknown:
            raise ConfigurationError(f"Unknown configuration options: {', '.join(sorted(unknown))}")

        if self.config['timeout'] is None or self.config['timeout'] <= 0:
            raise ConfigurationError("timeout must be positive")

    @property
    def jwt(self) -> Optional[str]:
        with self._jwt_lock:
            return self._jwt

    @jwt.setter
    def jwt(self, token: Optional[str]):
        with self._jwt_lock:
            self._jwt = token

    def set_jwt(self, token: Optional[str]):
        """Set the bearer token; ``None`` removes it."""
        self.jwt = token

    def clear_jwt(self):
        self.jwt = None

    @property
    def logging_enabled(self) -> bool:
        return self.config['logging_enabled']

    @logging_enabled.setter
    def logging_enabled(self, enabled: bool):
        self.config['logging_enabled'] = enabled

    def _write_log(self, message: str, *args):
        if self.config['logging_enabled']:
            logger.info(LOG_TAG + message, *args)

    def generate_headers(self, method: HTTPMethod, body: Any = None,
                         jwt: Optional[str] = None) -> Dict[str, str]:
        """
        Authentication headers for one request.

        Signed headers when ``authentication`` is configured, otherwise only
        the bearer header when a JWT is set.
        """
        if self.authentication is not None:
            return self.authentication.generate_headers(method, body, jwt)
        if jwt is not None:
            return {HEADER_AUTHORIZATION: bearer(jwt)}
        return {}

    def _request_url(self, endpoint: Union[Endpoint, str]) -> Optional[str]:
        if isinstance(endpoint, str):
            endpoint = Endpoint(endpoint)

        try:
            path = endpoint.build()
        except InvalidURLError:
            self._write_log("[invalidURL] Failed to build the URL: %s", endpoint.url)
            return None

        url = f"{self.base_url}{path}"
        try:
            validate_uri(url)
            parts = urlsplit(url)
            if not parts.scheme or not parts.netloc:
                raise InvalidURLError(url)
        except InvalidURLError:
            self._write_log("[invalidURL] Failed to build the URL: %s", url)
            return None

        return url

    def send(self, endpoint: Union[Endpoint, str], method: HTTPMethod, body: Any = None,
             options: Optional[RequestOptions] = None) -> Result:
        """
        Perform one HTTP request to the API.

        Args:
            endpoint: Endpoint (or already built path) relative to ``base_url``
            method: HTTP method
            body: JSON-serializable body, not allowed for GET and DELETE
            options: Extra headers, response type and timeout

        Returns:
            ``Success`` with the decoded payload (``None`` for an empty 2xx
            body) or ``Failure`` with the error kind

        Raises:
            ConfigurationError: If a body is given for GET or DELETE, or a
                header value (caller header or JWT) is not a valid HTTP header
            ResponseDecodeError: If a 2xx response body cannot be decoded
        """
        options = options or RequestOptions()

        if body is not None and not method.allows_body:
            raise ConfigurationError(f"{method.value} requests cannot carry a body")

        if self.base_url is None:
            self._write_log("[invalidURL] No base URL configured")
            return Failure(errors.InvalidURL())

        url = self._request_url(endpoint)
        if url is None:
            return Failure(errors.InvalidURL())

        self._write_log("[requestURL] Request URL: %s", url)

        headers = {'Accept': 'application/json'}
        data = None
        if body is not None:
            headers['Content-Type'] = 'application/json'
            data = encode_json(body).encode('utf-8')
        headers.update(self.generate_headers(method, body, self.jwt))
        headers.update(options.headers)

        timeout = options.timeout if options.timeout is not None else self.config['timeout']

        try:
            response = self.session.request(method.value, url, headers=headers,
                                            data=data, timeout=timeout)
        except requests.exceptions.InvalidHeader as e:
            # Raised while preparing the request; the message may contain the JWT
            self._write_log("[invalidHeader] Request not sent: invalid header value")
            raise ConfigurationError("Invalid request header value") from e
        except requests.ConnectionError as e:
            # Includes connect timeouts: no response was ever possible
            self._write_log("[requestError] No response from the server: %s", e)
            return Failure(errors.NoResponse())
        except requests.Timeout as e:
            self._write_log("[requestError] Request timed out: %s", e)
            return Failure(errors.Timeout())
        except requests.RequestException as e:
            self._write_log("[requestError] No response from the server: %s", e)
            return Failure(errors.NoResponse())

        try:
            return self._handle_response(response, options.response_type)
        finally:
            response.close()

    def _handle_response(self, response: requests.Response,
                         response_type: Optional[Decoder]) -> Result:
        status_code = response.status_code
        text = response.text
        self._write_log("[response] Server Response (%s): %s", status_code, text)

        if 200 <= status_code <= 299:
            if not response.content:
                return Success(None)
            try:
                return Success(decode_json(text, response_type))
            except Exception as e:
                raise ResponseDecodeError(status_code, text, str(e)) from e

        return Failure(errors.error_for_status(status_code, text))

    def get(self, endpoint: Union[Endpoint, str], headers: Optional[Dict[str, str]] = None,
            response_type: Optional[Decoder] = None) -> Result:
        """Perform a GET request."""
        return self.send(endpoint, HTTPMethod.GET,
                         options=RequestOptions(headers or {}, response_type))

    def post(self, endpoint: Union[Endpoint, str], body: Any,
             headers: Optional[Dict[str, str]] = None,
             response_type: Optional[Decoder] = None) -> Result:
        """Perform a POST request."""
        return self.send(endpoint, HTTPMethod.POST, body,
                         RequestOptions(headers or {}, response_type))

    def put(self, endpoint: Union[Endpoint, str], body: Any,
            headers: Optional[Dict[str, str]] = None,
            response_type: Optional[Decoder] = None) -> Result:
        """Perform a PUT request."""
        return self.send(endpoint, HTTPMethod.PUT, body,
                         RequestOptions(headers or {}, response_type))

    def patch(self, endpoint: Union[Endpoint, str], body: Any,
              headers: Optional[Dict[str, str]] = None,
              response_type: Optional[Decoder] = None) -> Result:
        """Perform a PATCH request."""
        return self.send(endpoint, HTTPMethod.PATCH, body,
                         RequestOptions(headers or {}, response_type))

    def delete(self, endpoint: Union[Endpoint, str], headers: Optional[Dict[str, str]] = None,
               response_type: Optional[Decoder] = None) -> Result:
        """Perform a DELETE request."""
        return self.send(endpoint, HTTPMethod.DELETE,
                         options=RequestOptions(headers or {}, response_type))

    def close(self):
        """Close HTTP session."""
        if self.session:
            self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
