"""
Constants for the signed REST client library.
Header names are part of the wire contract with the API server.
"""

# Authentication headers
HEADER_APP_ID = "x-app-id"
HEADER_BROWSER = "x-browser"
HEADER_BROWSER_SIGNATURE = "x-browser-sig"
HEADER_CLIENT = "x-client"
HEADER_REQUEST_SIGNATURE = "x-req-sig"
HEADER_REQUEST_NONCE = "x-req-nonce"
HEADER_REQUEST_TIMESTAMP = "x-req-timestamp"
HEADER_AUTHORIZATION = "Authorization"

# Separator between device id and client label in the fingerprint input
FINGERPRINT_SEPARATOR = " | "

DEFAULT_USER_AGENT = "SignedRest"

# Default client configuration
DEFAULT_CONFIG = {
    'timeout': 30,              # HTTP timeout in seconds
    'logging_enabled': False,   # Emit request/response log lines
}

LOG_TAG = "[SignedRest]"
