"""
Tests for directive sets and remote lists.
"""

import pytest

from ovpnauth.options import (
    DirectiveSet,
    Option,
    OptionError,
    OptionList,
    RemoteEntry,
    RemoteList,
)


@pytest.fixture
def options():
    """Create a small tokenized profile"""
    return OptionList.from_directives([
        ["client"],
        ["remote", "vpn1.example.com", "443", "tcp"],
        ["remote", "vpn2.example.com"],
        ["setenv", "FORWARD_COMPATIBLE", "1"],
        ["setenv", "PUSH_PEER_INFO"],
    ])


class TestOption:
    """Test positional argument access"""

    def test_get(self):
        option = Option("remote", "host", "1194")
        assert option.get(0) == "host"
        assert option.get(1) == "1194"
        assert option.size() == 2
        assert len(option) == 2

    def test_get_missing_raises(self):
        option = Option("USERNAME")
        with pytest.raises(OptionError) as exc_info:
            option.get(0)
        assert exc_info.value.option == "USERNAME"
        assert "USERNAME" in str(exc_info.value)

    def test_get_optional(self):
        option = Option("static-challenge", "Enter PIN")
        assert option.get_optional(0) == "Enter PIN"
        assert option.get_optional(1) == ""
        assert option.get_optional(-1) == ""

    def test_has(self):
        option = Option("x", "a")
        assert option.has(0)
        assert not option.has(1)

    def test_empty_name_rejected(self):
        with pytest.raises(OptionError):
            Option("")

    def test_equality(self):
        assert Option("a", "b") == Option("a", "b")
        assert Option("a", "b") != Option("a", "c")


class TestOptionList:
    """Test directive lookup"""

    def test_is_directive_set(self, options):
        assert isinstance(options, DirectiveSet)

    def test_get_all_in_order(self, options):
        remotes = options.get_all("remote")
        assert [r.get(0) for r in remotes] == ["vpn1.example.com", "vpn2.example.com"]

    def test_get_all_absent(self, options):
        assert options.get_all("cert") == []

    def test_get_single(self, options):
        assert options.get("client") == Option("client")
        assert options.get("cert") is None

    def test_get_duplicated_raises(self, options):
        with pytest.raises(OptionError) as exc_info:
            options.get("remote")
        assert exc_info.value.option == "remote"

    def test_contains(self, options):
        assert "setenv" in options
        assert "key" not in options

    def test_iteration_and_names(self, options):
        assert len(options) == 5
        assert [o.name for o in options][:2] == ["client", "remote"]
        assert options.names() == ["client", "remote", "setenv"]

    def test_empty_directive_rejected(self):
        with pytest.raises(OptionError):
            OptionList.from_directives([[]])


class TestRemoteList:
    """Test remote endpoint derivation"""

    def test_from_options(self, options):
        remotes = RemoteList.from_options(options)

        assert len(remotes) == 2
        assert remotes[0] == RemoteEntry("vpn1.example.com", "443", "tcp")
        assert remotes[1] == RemoteEntry("vpn2.example.com", "1194", "udp")

    def test_empty(self):
        assert len(RemoteList.from_options(OptionList())) == 0

    def test_remote_without_host(self):
        with pytest.raises(OptionError):
            RemoteList.from_options(OptionList.from_directives([["remote"]]))

    def test_sequence_behaviour(self):
        remotes = RemoteList([RemoteEntry("a"), RemoteEntry("b")])
        assert [r.host for r in remotes] == ["a", "b"]
        assert remotes[-1].host == "b"
