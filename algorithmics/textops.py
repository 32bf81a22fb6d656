"""String reversal, ordering and tokenising."""

from __future__ import annotations

import re
from collections.abc import Iterable


def reverse_string(text: str) -> str:
    """Return text with its characters in reverse order."""
    return text[::-1]


def sort_strings(strings: Iterable[str]) -> list[str]:
    """Sort longest first; strings of equal length in lexicographic order."""
    return sorted(strings, key=lambda s: (-len(s), s))


def tokenize(text: str, delimiters: str = " ") -> list[str]:
    """Split text at any delimiter character, dropping empty tokens."""
    if not delimiters:
        return [text] if text else []
    pattern = "[" + re.escape(delimiters) + "]+"
    return [token for token in re.split(pattern, text) if token]