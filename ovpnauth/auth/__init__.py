"""
Challenge/response authentication for ovpnauth.
"""

from .challenge import (
    ChallengeCookie,
    ChallengeResponseCodec,
    is_dynamic,
    parse,
    validate_dynamic,
    construct_dynamic_password,
    construct_static_password,
)
from .errors import AuthError, DynamicChallengeFormatError

__all__ = [
    "ChallengeCookie",
    "ChallengeResponseCodec",
    "is_dynamic",
    "parse",
    "validate_dynamic",
    "construct_dynamic_password",
    "construct_static_password",
    "AuthError",
    "DynamicChallengeFormatError",
]
