"""
ovpnauth Python Package

Challenge/response cookies and client profile resolution for VPN clients.
"""

__version__ = "0.1.0"

from .auth.challenge import (
    ChallengeCookie,
    ChallengeResponseCodec,
    is_dynamic,
    parse,
    validate_dynamic,
    construct_dynamic_password,
    construct_static_password,
)
from .auth.errors import AuthError, DynamicChallengeFormatError
from .core.config import Config
from .options import DirectiveSet, Option, OptionError, OptionList, RemoteEntry, RemoteList
from .profile import ClientProfile, ClientProfileResolver, ServerEntry, resolve
from .types.errors import OvpnAuthError

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
    "Config",
    "DirectiveSet",
    "Option",
    "OptionError",
    "OptionList",
    "RemoteEntry",
    "RemoteList",
    "ClientProfile",
    "ClientProfileResolver",
    "ServerEntry",
    "resolve",
    "OvpnAuthError",
]
