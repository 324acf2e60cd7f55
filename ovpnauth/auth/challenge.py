"""
Challenge/response cookies exchanged with the server during credential
verification.

Static challenge response:
    SCRV1:<BASE64_PASSWORD>:<BASE64_RESPONSE>

Dynamic challenge (server to client):
    CRV1:<FLAGS>:<STATE_ID>:<BASE64_USERNAME>:<CHALLENGE_TEXT>

    FLAGS is a comma-separated list of options:
        E -- echo
        R -- response required

Dynamic challenge response (client to server):
    Username: the username decoded from BASE64_USERNAME
    Password: CRV1::<STATE_ID>::<RESPONSE_TEXT>
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .errors import DynamicChallengeFormatError
from ..core.config import Config
from ..util.encoding import EncodingError, base64_decode_text, base64_encode
from ..util.strings import split_by_char

logger = logging.getLogger(__name__)

DYNAMIC_TAG = "CRV1"
STATIC_TAG = "SCRV1"
FLAG_ECHO = "E"
FLAG_RESPONSE_REQUIRED = "R"
KNOWN_FLAGS = frozenset((FLAG_ECHO, FLAG_RESPONSE_REQUIRED))


@dataclass(frozen=True)
class ChallengeCookie:
    """A parsed dynamic challenge."""
    state_id: str
    username: str
    challenge_text: str
    echo: bool = False
    response_required: bool = False

    def construct_dynamic_password(self, response: str) -> str:
        """Build the password field answering this challenge."""
        return construct_dynamic_password(self.state_id, response)


class ChallengeResponseCodec:
    """Parses and builds CRV1/SCRV1 challenge-response strings."""

    def __init__(self, config: Optional[Config] = None, strict_flags: Optional[bool] = None):
        self.config = config or Config()
        if strict_flags is None:
            strict_flags = self.config.strict_challenge_flags
        self.strict_flags = strict_flags

    @staticmethod
    def is_dynamic(s: str) -> bool:
        """True if ``s`` is a dynamic challenge rather than a plain password."""
        return s.startswith(DYNAMIC_TAG + ":")

    def parse(self, cookie: str) -> ChallengeCookie:
        """
        Parse a dynamic challenge cookie.

        Raises DynamicChallengeFormatError if the cookie does not have five
        colon-delimited fields, is not tagged CRV1, or carries a username
        field that is not valid base64 text. The challenge text is the
        remainder of the cookie after the fourth colon and may itself
        contain colons.
        """
        parts = split_by_char(cookie, ":", 4)
        if len(parts) != 5:
            logger.debug("Dynamic challenge has %d fields, expected 5", len(parts))
            raise DynamicChallengeFormatError(
                "dynamic challenge must have 5 fields",
                details={"fields": len(parts)},
            )
        tag, flags, state_id, username_b64, challenge_text = parts
        if tag != DYNAMIC_TAG:
            logger.debug("Dynamic challenge has no %s tag", DYNAMIC_TAG)
            raise DynamicChallengeFormatError(f"dynamic challenge is not tagged {DYNAMIC_TAG}")

        echo = False
        response_required = False
        for code in split_by_char(flags, ","):
            if code == FLAG_ECHO:
                echo = True
            elif code == FLAG_RESPONSE_REQUIRED:
                response_required = True
            elif self.strict_flags and code:
                raise DynamicChallengeFormatError(
                    f"unknown dynamic challenge flag: {code}",
                    details={"flag": code},
                )

        try:
            # non-UTF-8 bytes survive as surrogates
            username = base64_decode_text(username_b64, errors='surrogateescape')
        except EncodingError as e:
            logger.debug("Dynamic challenge username is not decodable")
            raise DynamicChallengeFormatError(
                "dynamic challenge username is not valid base64", cause=e
            ) from e

        return ChallengeCookie(
            state_id=state_id,
            username=username,
            challenge_text=challenge_text,
            echo=echo,
            response_required=response_required,
        )

    def validate_dynamic(self, cookie: str) -> None:
        """Raise DynamicChallengeFormatError unless ``cookie`` parses."""
        self.parse(cookie)

    @staticmethod
    def construct_dynamic_password(state_id: str, response: str) -> str:
        """Build the CRV1 reply echoing ``state_id`` with ``response``."""
        # flags and username stay empty in the reply
        return f"{DYNAMIC_TAG}::{state_id}::{response}"

    @staticmethod
    def construct_static_password(password: str, response: str) -> str:
        """Build the SCRV1 reply from base64 password and response."""
        return f"{STATIC_TAG}:{base64_encode(password)}:{base64_encode(response)}"


_default_codec = ChallengeResponseCodec()


def is_dynamic(s: str) -> bool:
    return ChallengeResponseCodec.is_dynamic(s)


def parse(cookie: str) -> ChallengeCookie:
    return _default_codec.parse(cookie)


def validate_dynamic(cookie: str) -> None:
    _default_codec.validate_dynamic(cookie)


def construct_dynamic_password(state_id: str, response: str) -> str:
    return ChallengeResponseCodec.construct_dynamic_password(state_id, response)


def construct_static_password(password: str, response: str) -> str:
    return ChallengeResponseCodec.construct_static_password(password, response)
