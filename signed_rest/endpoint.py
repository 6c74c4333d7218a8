"""
Immutable endpoint builder.

Each ``with_*`` call returns a new ``Endpoint`` so a partially built
endpoint can be shared and extended without aliasing:

    users = Endpoint().with_version("v1").with_controller("users")
    user = users.with_path("{id}", {"id": "42"})
    user.build()  # "/v1/users/42"
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Union
from urllib.parse import urlencode, urlsplit

from .exceptions import InvalidURLError

Segment = Union[str, Enum]

# RFC 3986 unreserved + reserved characters and the percent sign
_URI_CHARS = re.compile(r"[A-Za-z0-9\-._~:/?#\[\]@!$&'()*+,;=%]")
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def _segment(value: Segment) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    return value


def _is_uri_char(ch: str) -> bool:
    if _URI_CHARS.match(ch):
        return True
    # Non-ASCII printable characters are accepted unescaped
    return ord(ch) > 127 and ch.isprintable() and not ch.isspace()


def validate_uri(url: str) -> str:
    """
    Check that ``url`` is a syntactically valid URI reference.

    Raises:
        InvalidURLError: If the URL contains characters outside the URI
            grammar, a malformed percent escape or an unparsable authority
    """
    if not all(_is_uri_char(ch) for ch in url) or _BAD_ESCAPE.search(url):
        raise InvalidURLError(url)
    try:
        parts = urlsplit(url)
        parts.port
    except ValueError:
        raise InvalidURLError(url) from None
    return url


@dataclass(frozen=True)
class Endpoint:
    """A URL under construction. Segments must not carry their own slashes."""

    url: str = ""

    def _append(self, suffix: str) -> "Endpoint":
        return Endpoint(self.url + suffix)

    def with_version(self, version: Segment) -> "Endpoint":
        """Append an API version segment, e.g. ``v1``."""
        return self._append(f"/{_segment(version)}")

    def with_controller(self, controller: Segment) -> "Endpoint":
        """Append a controller segment; a controller usually groups several endpoints."""
        return self._append(f"/{_segment(controller)}")

    def with_path(self, path: Segment, parameters: Optional[Dict[str, str]] = None) -> "Endpoint":
        """
        Append a path and substitute ``{name}`` placeholders.

        Args:
            path: Path to append
            parameters: Placeholder values keyed by placeholder name
        """
        url = f"{self.url}/{_segment(path)}"
        for key, value in (parameters or {}).items():
            url = url.replace(f"{{{key}}}", str(value))
        return Endpoint(url)

    def with_query(self, query: Dict[str, str]) -> "Endpoint":
        """Append URL-encoded query parameters."""
        return self._append("?" + urlencode(query))

    def build(self) -> str:
        """
        Return the URL as a string.

        Raises:
            InvalidURLError: If the URL is not a valid URI
        """
        return validate_uri(self.url)

    finalize = build

    def __str__(self) -> str:
        return self.url
