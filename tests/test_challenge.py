"""
Tests for CRV1/SCRV1 challenge-response cookies.
"""

import pytest

from ovpnauth.auth import (
    ChallengeCookie,
    ChallengeResponseCodec,
    DynamicChallengeFormatError,
    construct_dynamic_password,
    construct_static_password,
    is_dynamic,
    parse,
    validate_dynamic,
)
from ovpnauth.core.config import Config
from ovpnauth.types.errors import DYNAMIC_CHALLENGE_FORMAT


class TestIsDynamic:
    """Test the CRV1 prefix check"""

    @pytest.mark.parametrize("value,expected", [
        ("CRV1:R,E:abc123:dXNlcg==:Enter your token", True),
        ("CRV1:", True),
        ("SCRV1:cGFzcw==:cmVzcA==", False),
        ("CRV1", False),
        ("crv1:R:x:y:z", False),
        ("", False),
        ("hunter2", False),
    ])
    def test_prefix(self, value, expected):
        assert is_dynamic(value) is expected


class TestParse:
    """Test dynamic challenge parsing"""

    def test_full_cookie(self):
        cookie = parse("CRV1:R,E:abc123:dXNlcg==:Enter your token")

        assert cookie == ChallengeCookie(
            state_id="abc123",
            username="user",
            challenge_text="Enter your token",
            echo=True,
            response_required=True,
        )

    def test_challenge_text_keeps_colons(self):
        cookie = parse("CRV1:R:state:dXNlcg==:Code: 1:2:3")
        assert cookie.challenge_text == "Code: 1:2:3"
        assert cookie.state_id == "state"

    def test_empty_challenge_text(self):
        cookie = parse("CRV1:R:state:dXNlcg==:")
        assert cookie.challenge_text == ""

    def test_flags(self):
        assert parse("CRV1:E:s:dXNlcg==:t").echo is True
        assert parse("CRV1:E:s:dXNlcg==:t").response_required is False
        assert parse("CRV1:R:s:dXNlcg==:t").response_required is True
        assert parse("CRV1::s:dXNlcg==:t").echo is False

    def test_unknown_flags_ignored(self):
        cookie = parse("CRV1:X,R,Q:s:dXNlcg==:t")
        assert cookie.response_required is True
        assert cookie.echo is False

    def test_state_id_is_opaque(self):
        state = "  weird/state+id==  "
        assert parse(f"CRV1:R:{state}:dXNlcg==:t").state_id == state

    def test_utf8_username(self):
        # "jürgen"
        assert parse("CRV1:R:s:asO8cmdlbg==:t").username == "jürgen"

    def test_non_utf8_username(self):
        # b"j\xfcrgen", latin-1 encoded
        cookie = parse("CRV1:R:s:avxyZ2Vu:t")
        assert cookie.username.encode("utf-8", "surrogateescape") == b"j\xfcrgen"
        assert cookie.challenge_text == "t"

    def test_non_utf8_username_validates(self):
        assert validate_dynamic("CRV1::s:/w==:t") is None

    @pytest.mark.parametrize("cookie", [
        "",
        "CRV1",
        "CRV1:R",
        "CRV1:R:state",
        "CRV1:R:state:dXNlcg==",
    ])
    def test_too_few_fields(self, cookie):
        with pytest.raises(DynamicChallengeFormatError):
            parse(cookie)

    @pytest.mark.parametrize("cookie", [
        "CRV2:R:state:dXNlcg==:text",
        "SCRV1:R:state:dXNlcg==:text",
        "crv1:R:state:dXNlcg==:text",
    ])
    def test_wrong_tag(self, cookie):
        with pytest.raises(DynamicChallengeFormatError):
            parse(cookie)

    @pytest.mark.parametrize("username", ["!!!", "dXNlcg=", "abc$", "dXN"])
    def test_undecodable_username(self, username):
        with pytest.raises(DynamicChallengeFormatError) as exc_info:
            parse(f"CRV1:R:state:{username}:text")
        assert exc_info.value.error_code == DYNAMIC_CHALLENGE_FORMAT

    def test_validate_dynamic(self):
        assert validate_dynamic("CRV1:R:state:dXNlcg==:text") is None
        with pytest.raises(DynamicChallengeFormatError):
            validate_dynamic("CRV1:R:state")


class TestStrictFlags:
    """Test rejection of unknown flag codes"""

    def test_strict_codec_rejects_unknown_flag(self):
        codec = ChallengeResponseCodec(strict_flags=True)
        with pytest.raises(DynamicChallengeFormatError) as exc_info:
            codec.parse("CRV1:R,X:state:dXNlcg==:text")
        assert exc_info.value.details["flag"] == "X"

    def test_strict_codec_accepts_known_and_empty_flags(self):
        codec = ChallengeResponseCodec(strict_flags=True)
        assert codec.parse("CRV1:E,R:state:dXNlcg==:text").echo is True
        assert codec.parse("CRV1::state::text").echo is False

    def test_strict_from_config(self):
        codec = ChallengeResponseCodec(Config(strict_challenge_flags=True))
        assert codec.strict_flags is True
        with pytest.raises(DynamicChallengeFormatError):
            codec.parse("CRV1:Z:state:dXNlcg==:text")


class TestConstruct:
    """Test building challenge replies"""

    def test_static_password(self):
        assert construct_static_password("pass", "resp") == "SCRV1:cGFzcw==:cmVzcA=="

    @pytest.mark.parametrize("password,response", [
        ("", ""),
        ("p:a:s:s", "r:e:s:p"),
        ("pässwörd", "123456"),
    ])
    def test_static_password_shape(self, password, response):
        value = construct_static_password(password, response)
        assert value.startswith("SCRV1:")
        assert len(value.split(":")) == 3

    def test_dynamic_password(self):
        assert construct_dynamic_password("abc123", "999999") == "CRV1::abc123::999999"

    def test_dynamic_password_reparses(self):
        cookie = parse(construct_dynamic_password("abc123", "999999"))

        assert cookie.state_id == "abc123"
        assert cookie.challenge_text == "999999"
        assert cookie.username == ""
        assert cookie.echo is False
        assert cookie.response_required is False

    @pytest.mark.parametrize("state_id,response", [
        ("", ""),
        ("s", "with:colons:inside"),
        ("opaque-token_42", "one two three"),
    ])
    def test_dynamic_password_round_trip(self, state_id, response):
        cookie = parse(construct_dynamic_password(state_id, response))
        assert cookie.state_id == state_id
        assert cookie.challenge_text == response

    def test_reply_from_parsed_cookie(self):
        cookie = parse("CRV1:R,E:abc123:dXNlcg==:Enter your token")
        assert cookie.construct_dynamic_password("999999") == "CRV1::abc123::999999"

    def test_cookie_is_immutable(self):
        cookie = parse("CRV1:R:abc123:dXNlcg==:text")
        with pytest.raises(AttributeError):
            cookie.state_id = "other"
