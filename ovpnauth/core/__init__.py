"""
Core configuration for ovpnauth.
"""

from .config import Config, configure_logging

__all__ = ["Config", "configure_logging"]
