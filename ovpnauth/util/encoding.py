"""
Encoding and decoding utilities for ovpnauth.
Provides the text transport encoding used by challenge-response cookies.
"""

import base64
import binascii
from typing import Union

from ..types.errors import OvpnAuthError, ENCODING_ERROR


class EncodingError(OvpnAuthError):
    """Raised when encoded data cannot be decoded."""

    def __init__(self, message: str, cause: Exception = None):
        super().__init__(message, ENCODING_ERROR, cause=cause)


def base64_encode(data: Union[str, bytes]) -> str:
    """Encode data to base64 string."""
    if isinstance(data, str):
        data = data.encode('utf-8')

    return base64.b64encode(data).decode('ascii')


def base64_decode(encoded: str) -> bytes:
    """
    Decode base64 string to bytes.

    Characters outside the base64 alphabet are rejected rather than
    silently discarded.
    """
    try:
        return base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError) as e:
        raise EncodingError(f"Invalid base64 data: {e}", cause=e)


def base64_decode_text(encoded: str, errors: str = 'strict') -> str:
    """
    Decode base64 string to UTF-8 text.

    With ``errors='surrogateescape'`` bytes that are not valid UTF-8 are
    kept as lone surrogates and can be recovered with
    ``text.encode('utf-8', 'surrogateescape')``.
    """
    raw = base64_decode(encoded)
    try:
        return raw.decode('utf-8', errors)
    except UnicodeDecodeError as e:
        raise EncodingError(f"Decoded data is not valid UTF-8: {e}", cause=e)
