from enum import Enum


class HTTPMethod(Enum):
    """HTTP methods with their wire-format verb."""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"

    @property
    def allows_body(self) -> bool:
        return self not in (HTTPMethod.GET, HTTPMethod.DELETE)
