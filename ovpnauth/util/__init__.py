"""
Utility package providing helper functions for ovpnauth.

This package includes:
- Encoding/decoding utilities for the base64 text transport encoding
- String helpers (bounded split, boolean parsing)
- Configuration management utilities for loading settings
"""

from .encoding import (
    base64_encode, base64_decode, base64_decode_text, EncodingError
)
from .strings import split_by_char, is_true
from .config import (
    parse_bool_value, get_config_value, get_bool_config,
    normalize_config_key, merge_configs, load_config_file
)

__all__ = [
    # Encoding utilities
    'base64_encode', 'base64_decode', 'base64_decode_text', 'EncodingError',

    # String utilities
    'split_by_char', 'is_true',

    # Configuration utilities
    'parse_bool_value', 'get_config_value', 'get_bool_config',
    'normalize_config_key', 'merge_configs', 'load_config_file'
]
