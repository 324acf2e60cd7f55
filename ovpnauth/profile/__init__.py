"""
Client profile resolution.
"""

from .resolver import (
    ClientProfileResolver,
    SERVER_LOCKED_MESSAGE,
    is_autologin,
    is_external_pki,
    resolve,
    split_host_list,
)
from .types import ClientProfile, ServerEntry

__all__ = [
    "ClientProfile",
    "ClientProfileResolver",
    "ServerEntry",
    "SERVER_LOCKED_MESSAGE",
    "is_autologin",
    "is_external_pki",
    "resolve",
    "split_host_list",
]
