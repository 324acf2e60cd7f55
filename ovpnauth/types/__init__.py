"""
Shared types for ovpnauth.
"""

from .errors import (
    ErrorCode,
    OvpnAuthError,
    ConfigurationError,
    INVALID_REQUEST,
    INTERNAL_ERROR,
    CONFIGURATION_ERROR,
    OPTION_ERROR,
    ENCODING_ERROR,
    DYNAMIC_CHALLENGE_FORMAT,
)

__all__ = [
    "ErrorCode",
    "OvpnAuthError",
    "ConfigurationError",
    "INVALID_REQUEST",
    "INTERNAL_ERROR",
    "CONFIGURATION_ERROR",
    "OPTION_ERROR",
    "ENCODING_ERROR",
    "DYNAMIC_CHALLENGE_FORMAT",
]
