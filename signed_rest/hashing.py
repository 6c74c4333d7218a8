"""
Hashing primitives used by request authentication.

A missing hash algorithm is a configuration problem of the interpreter,
so errors from ``hashlib``/``hmac`` are left to propagate.
"""

import hashlib
import hmac
from typing import Union

BytesLike = Union[bytes, str]


def _as_bytes(value: BytesLike) -> bytes:
    if isinstance(value, str):
        return value.encode('utf-8')
    return value


def to_hex(data: bytes) -> str:
    """Lower-case hex, two digits per byte, no separators."""
    return data.hex()


def sha256_hash(data: BytesLike) -> str:
    """
    Hex-encoded SHA-256 digest of ``data``.

    Strings are hashed as their UTF-8 bytes.
    """
    return to_hex(hashlib.sha256(_as_bytes(data)).digest())


def hmac_sha256(data: BytesLike, key: BytesLike) -> str:
    """
    Hex-encoded HMAC-SHA256 of ``data`` keyed with ``key``.

    Args:
        data: Data to sign
        key: Shared secret

    Returns:
        Hex-encoded HMAC signature
    """
    mac = hmac.new(_as_bytes(key), _as_bytes(data), hashlib.sha256)
    return to_hex(mac.digest())
