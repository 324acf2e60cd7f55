"""
Resolve a tokenized profile into a ClientProfile.

Resolution never raises: any failure while reading the directives is
reported through ``ClientProfile.error`` and ``ClientProfile.message``.
"""

import logging
from typing import List, Optional

from .types import ClientProfile, ServerEntry
from ..core.config import Config
from ..options.option_list import DirectiveSet
from ..options.remote_list import RemoteList
from ..util.strings import is_true

logger = logging.getLogger(__name__)

SERVER_LOCKED_MESSAGE = (
    "SERVER_LOCKED_UNSUPPORTED: server locked profiles are currently unsupported"
)


def is_external_pki(options: DirectiveSet) -> bool:
    """True if the profile has no embedded cert/key, unless EXTERNAL_PKI says otherwise."""
    epki = options.get("EXTERNAL_PKI")
    if epki is not None:
        return is_true(epki.get_optional(0))
    return options.get("cert") is None or options.get("key") is None


def is_autologin(options: DirectiveSet, external_pki: Optional[bool] = None) -> bool:
    autologin = options.get("AUTOLOGIN")
    if autologin is not None:
        return is_true(autologin.get_optional(0))

    ret = options.get("auth-user-pass") is None
    if ret:
        # External PKI profiles don't declare auth-user-pass and whether
        # they are autologin can only be told from the client certificate
        # store, so treat them as userlogin unless AUTOLOGIN says otherwise.
        if external_pki is None:
            external_pki = is_external_pki(options)
        if external_pki:
            return False
    return ret


def split_host_list(value: str, skip_blank: bool = True) -> List[ServerEntry]:
    """
    One server entry per line of a HOST_LIST value.

    Lines end at ``\\n`` only, with one trailing ``\\r`` removed. A final
    newline does not start another line.
    """
    lines = value.split("\n")
    if lines[-1] == "":
        lines.pop()

    entries = []
    for line in lines:
        if line.endswith("\r"):
            line = line[:-1]
        if skip_blank and not line.strip():
            continue
        entries.append(ServerEntry(server=line, friendly_name=line))
    return entries


class ClientProfileResolver:
    """Builds ClientProfile values from directive sets."""

    def __init__(self, config: Optional[Config] = None):
        self.config = config or Config()

    def resolve(self, options: DirectiveSet,
                remote_list: Optional[RemoteList] = None) -> ClientProfile:
        try:
            profile = self._resolve(options, remote_list)
        except Exception as e:
            logger.warning("Profile resolution failed: %s", e)
            return ClientProfile.failed(str(e))

        if profile.error:
            logger.warning("Profile rejected: %s", profile.message)
        else:
            logger.debug("Resolved profile: %s", profile)
        return profile

    def _resolve(self, options: DirectiveSet,
                 remote_list: Optional[RemoteList]) -> ClientProfile:
        for setenv in options.get_all("setenv"):
            if setenv.get_optional(0) == "GENERIC_CONFIG":
                return ClientProfile.failed(SERVER_LOCKED_MESSAGE)

        userlocked_username = ""
        o = options.get("USERNAME")
        if o is not None:
            userlocked_username = o.get(0)

        external_pki = is_external_pki(options)
        autologin = is_autologin(options, external_pki)

        static_challenge = ""
        static_challenge_echo = False
        o = options.get("static-challenge")
        if o is not None:
            static_challenge = o.get(0)
            static_challenge_echo = o.get_optional(1) == "1"

        profile_name = ""
        o = options.get("PROFILE")
        if o is not None:
            # everything up to the first '/'
            profile_name = o.get(0).partition("/")[0]
        else:
            if remote_list is None:
                remote_list = RemoteList.from_options(options)
            if len(remote_list) >= 1:
                profile_name = remote_list[0].host

        friendly_name = ""
        o = options.get("FRIENDLY_NAME")
        if o is not None:
            friendly_name = o.get(0)

        server_list = ()
        o = options.get("HOST_LIST")
        if o is not None:
            server_list = tuple(split_host_list(o.get(0), self.config.skip_blank_host_lines))

        return ClientProfile(
            userlocked_username=userlocked_username,
            profile_name=profile_name,
            friendly_name=friendly_name,
            autologin=autologin,
            external_pki=external_pki,
            static_challenge=static_challenge,
            static_challenge_echo=static_challenge_echo,
            server_list=server_list,
        )


_default_resolver = ClientProfileResolver()


def resolve(options: DirectiveSet, remote_list: Optional[RemoteList] = None,
            config: Optional[Config] = None) -> ClientProfile:
    """Resolve ``options`` into a ClientProfile; never raises."""
    resolver = ClientProfileResolver(config) if config is not None else _default_resolver
    return resolver.resolve(options, remote_list)
