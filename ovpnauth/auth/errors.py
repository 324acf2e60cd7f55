"""
Authentication error classes for ovpnauth.
"""

from ..types.errors import OvpnAuthError, ErrorCode, DYNAMIC_CHALLENGE_FORMAT, INVALID_REQUEST


class AuthError(OvpnAuthError):
    """Base authentication error."""

    def __init__(self, message: str, error_code: ErrorCode = None, details: dict = None,
                 cause: Exception = None):
        super().__init__(message, error_code or INVALID_REQUEST, details, cause)


class DynamicChallengeFormatError(AuthError):
    """A dynamic challenge cookie is not a well-formed CRV1 string."""

    def __init__(self, message: str = "dynamic challenge parse error", details: dict = None,
                 cause: Exception = None):
        super().__init__(message, DYNAMIC_CHALLENGE_FORMAT, details, cause)
