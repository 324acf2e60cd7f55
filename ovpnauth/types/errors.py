"""
Error types and error codes for the ovpnauth package.
Provides structured error handling across all packages.
"""

from enum import Enum
from typing import Dict, Any, Optional


class ErrorCode(str, Enum):
    """Standard error codes used across ovpnauth."""
    INVALID_REQUEST = "invalid_request"
    INTERNAL_ERROR = "internal_error"
    CONFIGURATION_ERROR = "configuration_error"
    OPTION_ERROR = "option_error"
    ENCODING_ERROR = "encoding_error"
    DYNAMIC_CHALLENGE_FORMAT = "dynamic_challenge_format"

    def __str__(self) -> str:
        return self.value


# Error code constants for easy import
INVALID_REQUEST = ErrorCode.INVALID_REQUEST
INTERNAL_ERROR = ErrorCode.INTERNAL_ERROR
CONFIGURATION_ERROR = ErrorCode.CONFIGURATION_ERROR
OPTION_ERROR = ErrorCode.OPTION_ERROR
ENCODING_ERROR = ErrorCode.ENCODING_ERROR
DYNAMIC_CHALLENGE_FORMAT = ErrorCode.DYNAMIC_CHALLENGE_FORMAT


class OvpnAuthError(Exception):
    """Base exception for all ovpnauth errors."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = INTERNAL_ERROR,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.cause = cause

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        result = {
            'error': self.error_code.value,
            'message': self.message,
            'details': self.details
        }

        if self.cause:
            result['cause'] = str(self.cause)

        return result

    def __str__(self) -> str:
        return f"{self.error_code.value}: {self.message}"


class ConfigurationError(OvpnAuthError):
    """Raised when there's a configuration error."""

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        config_value: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, CONFIGURATION_ERROR, details)
        self.config_key = config_key
        self.config_value = config_value

        if config_key:
            self.details['config_key'] = config_key
        if config_value is not None:
            self.details['config_value'] = str(config_value)
