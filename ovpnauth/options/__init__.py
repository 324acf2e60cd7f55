"""
Directive sets and remote endpoint lists consumed by the profile resolver.
"""

from .option_list import DirectiveSet, Option, OptionError, OptionList
from .remote_list import RemoteEntry, RemoteList

__all__ = [
    "DirectiveSet",
    "Option",
    "OptionError",
    "OptionList",
    "RemoteEntry",
    "RemoteList",
]
