"""
String helpers shared by the challenge codec and the profile resolver.
"""

from typing import List


def split_by_char(text: str, sep: str, max_terms: int = -1) -> List[str]:
    """
    Split ``text`` on ``sep``, honouring at most ``max_terms`` separators.

    Once ``max_terms`` separators have been consumed, the rest of the
    string (further separators included) becomes the final element
    verbatim. A negative ``max_terms`` splits on every separator.
    """
    if len(sep) != 1:
        raise ValueError("separator must be a single character")

    result = []
    term = []
    nterms = 0
    for ch in text:
        if ch == sep and (max_terms < 0 or nterms < max_terms):
            result.append(''.join(term))
            term = []
            nterms += 1
        else:
            term.append(ch)
    result.append(''.join(term))
    return result


def is_true(value: str) -> bool:
    """Return True for "1" or a case-insensitive "true"."""
    return value == "1" or value.lower() == "true"
