"""
Client profile value types.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class ServerEntry:
    """A user-selectable VPN server."""
    server: str
    friendly_name: str


@dataclass(frozen=True)
class ClientProfile:
    """
    How a user must authenticate against a profile.

    When ``error`` is set, ``message`` explains why and every other field
    must be ignored.
    """
    error: bool = False
    message: str = ""
    # this username must be used with the profile
    userlocked_username: str = ""
    profile_name: str = ""
    friendly_name: str = ""
    # true: no credentials required, false: username/password required
    autologin: bool = False
    # no cert/key directives, the certificate lives outside the profile
    external_pki: bool = False
    # may be empty, ignored if autologin
    static_challenge: str = ""
    static_challenge_echo: bool = False
    server_list: Tuple[ServerEntry, ...] = field(default_factory=tuple)

    @classmethod
    def failed(cls, message: str) -> "ClientProfile":
        return cls(error=True, message=message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'error': self.error,
            'message': self.message,
            'userlocked_username': self.userlocked_username,
            'profile_name': self.profile_name,
            'friendly_name': self.friendly_name,
            'autologin': self.autologin,
            'external_pki': self.external_pki,
            'static_challenge': self.static_challenge,
            'static_challenge_echo': self.static_challenge_echo,
            'server_list': [
                {'server': s.server, 'friendly_name': s.friendly_name}
                for s in self.server_list
            ],
        }

    def __str__(self) -> str:
        return (
            f"user={self.userlocked_username}"
            f" pn={self.profile_name}"
            f" fn={self.friendly_name}"
            f" auto={int(self.autologin)}"
            f" epki={int(self.external_pki)}"
            f" schal={self.static_challenge}"
            f" scecho={int(self.static_challenge_echo)}"
        )
