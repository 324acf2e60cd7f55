"""
Tokenized configuration directives.

A directive set maps a directive name to every directive carrying that
name, in the order they appeared. Tokenizing profile text is left to the
caller; this module only models the result.
"""

from abc import ABC, abstractmethod
from collections import OrderedDict
from typing import Dict, Iterable, Iterator, List, Optional, Sequence

from ..types.errors import OvpnAuthError, OPTION_ERROR


class OptionError(OvpnAuthError):
    """Raised when a directive is missing an argument or is duplicated."""

    def __init__(self, message: str, option: Optional[str] = None):
        details = {'option': option} if option else None
        super().__init__(message, OPTION_ERROR, details)
        self.option = option


class Option:
    """A single directive: a name followed by positional arguments."""

    __slots__ = ('name', 'args')

    def __init__(self, name: str, *args: str):
        if not name:
            raise OptionError("option name must not be empty")
        self.name = name
        self.args = tuple(args)

    def __len__(self) -> int:
        return len(self.args)

    def size(self) -> int:
        return len(self.args)

    def has(self, pos: int) -> bool:
        """True if an argument is present at ``pos`` (0 is the first argument)."""
        return 0 <= pos < len(self.args)

    def get(self, pos: int) -> str:
        if not self.has(pos):
            raise OptionError(
                f"{self.name}: missing argument {pos + 1}",
                option=self.name,
            )
        return self.args[pos]

    def get_optional(self, pos: int) -> str:
        return self.args[pos] if self.has(pos) else ""

    def __eq__(self, other) -> bool:
        if not isinstance(other, Option):
            return NotImplemented
        return self.name == other.name and self.args == other.args

    def __hash__(self) -> int:
        return hash((self.name, self.args))

    def __repr__(self) -> str:
        return f"Option({', '.join(repr(a) for a in (self.name,) + self.args)})"


class DirectiveSet(ABC):
    """Read-only lookup of directives by name."""

    @abstractmethod
    def get_all(self, name: str) -> List[Option]:
        """Return every directive named ``name`` in order, possibly none."""

    def get(self, name: str) -> Optional[Option]:
        """
        Return the single directive named ``name``, or None if absent.

        Raises OptionError if the directive occurs more than once.
        """
        found = self.get_all(name)
        if not found:
            return None
        if len(found) > 1:
            raise OptionError(f"more than one instance of option '{name}'", option=name)
        return found[0]

    def __contains__(self, name: str) -> bool:
        return bool(self.get_all(name))


class OptionList(DirectiveSet):
    """In-memory ordered directive set."""

    def __init__(self, options: Optional[Iterable[Option]] = None):
        self._options: List[Option] = []
        self._index: Dict[str, List[int]] = OrderedDict()
        for option in options or ():
            self.append(option)

    @classmethod
    def from_directives(cls, directives: Iterable[Sequence[str]]) -> "OptionList":
        """Build from already tokenized ``[name, arg1, ...]`` sequences."""
        result = cls()
        for tokens in directives:
            if not tokens:
                raise OptionError("empty directive")
            result.add(*tokens)
        return result

    def append(self, option: Option) -> None:
        self._index.setdefault(option.name, []).append(len(self._options))
        self._options.append(option)

    def add(self, name: str, *args: str) -> Option:
        option = Option(name, *args)
        self.append(option)
        return option

    def get_all(self, name: str) -> List[Option]:
        return [self._options[i] for i in self._index.get(name, ())]

    def names(self) -> List[str]:
        return list(self._index)

    def __iter__(self) -> Iterator[Option]:
        return iter(self._options)

    def __len__(self) -> int:
        return len(self._options)

    def __repr__(self) -> str:
        return f"OptionList({self._options!r})"
