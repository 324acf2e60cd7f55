"""
Connection endpoints taken from ``remote`` directives.
"""

from collections import abc
from dataclasses import dataclass
from typing import Iterator, List, Sequence

from .option_list import DirectiveSet

DEFAULT_PORT = "1194"
DEFAULT_PROTO = "udp"


@dataclass(frozen=True)
class RemoteEntry:
    """One ``remote <host> [port] [proto]`` endpoint."""
    host: str
    port: str = DEFAULT_PORT
    proto: str = DEFAULT_PROTO


class RemoteList(abc.Sequence):
    """Ordered, read-only list of remote endpoints."""

    def __init__(self, entries: Sequence[RemoteEntry] = ()):
        self._entries = tuple(entries)

    @classmethod
    def from_options(cls, options: DirectiveSet) -> "RemoteList":
        entries: List[RemoteEntry] = []
        for option in options.get_all("remote"):
            entries.append(RemoteEntry(
                host=option.get(0),
                port=option.get_optional(1) or DEFAULT_PORT,
                proto=option.get_optional(2) or DEFAULT_PROTO,
            ))
        return cls(entries)

    def __getitem__(self, index):
        return self._entries[index]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[RemoteEntry]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"RemoteList({list(self._entries)!r})"
