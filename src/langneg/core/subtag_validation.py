"""Unified subtag shape validation for language tags.

This module provides the single source of truth for subtag grammar rules,
ensuring consistent validation across the parser and the identifier
field setters.

Subtag Grammar (BCP47 subset):
    language  = 2*3ALPHA
    extlang   = 3ALPHA
    script    = 4ALPHA
    region    = 2ALPHA / 3DIGIT
    variant   = 4*8alphanum
    singleton = ALPHA

Checks run on TinyStr values so each test is a handful of integer
operations regardless of subtag length.

Thread Safety:
    All functions in this module are pure functions with no shared state.
    Safe for concurrent use across multiple threads.

Python 3.11+.
"""

from __future__ import annotations

from langneg.constants import MAX_SUBTAG_LENGTH
from langneg.core.tinystr import TinyStr4, TinyStr8
from langneg.diagnostics import TinyStrError

__all__ = [
    "is_extlang_subtag",
    "is_language_subtag",
    "is_region_subtag",
    "is_script_subtag",
    "is_singleton",
    "is_variant_subtag",
    "pack4",
    "pack8",
]


def pack4(subtag: str) -> TinyStr4 | None:
    """Pack a subtag of up to 4 characters, or return None if it cannot be stored."""
    if not 0 < len(subtag) <= TinyStr4.CAPACITY:
        return None
    try:
        return TinyStr4.new(subtag)
    except TinyStrError:
        return None


def pack8(subtag: str) -> TinyStr8 | None:
    """Pack a subtag of up to 8 characters, or return None if it cannot be stored."""
    if not 0 < len(subtag) <= MAX_SUBTAG_LENGTH:
        return None
    try:
        return TinyStr8.new(subtag)
    except TinyStrError:
        return None


def is_language_subtag(subtag: str) -> bool:
    """Check for a primary language subtag: 2-3 ASCII letters.

    Example:
        >>> is_language_subtag("en")
        True
        >>> is_language_subtag("e1")
        False
    """
    tiny = pack4(subtag)
    return tiny is not None and 2 <= len(tiny) <= 3 and tiny.is_all_ascii_alpha()


def is_extlang_subtag(subtag: str) -> bool:
    """Check for an extended language subtag: exactly 3 ASCII letters."""
    tiny = pack4(subtag)
    return tiny is not None and len(tiny) == 3 and tiny.is_all_ascii_alpha()


def is_script_subtag(subtag: str) -> bool:
    """Check for a script subtag: exactly 4 ASCII letters.

    Example:
        >>> is_script_subtag("Latn")
        True
        >>> is_script_subtag("1234")
        False
    """
    tiny = pack4(subtag)
    return tiny is not None and len(tiny) == 4 and tiny.is_all_ascii_alpha()


def is_region_subtag(subtag: str) -> bool:
    """Check for a region subtag: 2 ASCII letters or 3 ASCII digits.

    Example:
        >>> is_region_subtag("US")
        True
        >>> is_region_subtag("419")
        True
        >>> is_region_subtag("U1")
        False
    """
    tiny = pack4(subtag)
    if tiny is None:
        return False
    match len(tiny):
        case 2:
            return tiny.is_all_ascii_alpha()
        case 3:
            return tiny.is_all_ascii_numeric()
        case _:
            return False


def is_variant_subtag(subtag: str) -> bool:
    """Check for a variant subtag: 4-8 ASCII letters or digits.

    Positional priority (a 4-letter subtag right after the language is a
    script) is the parser's concern, not this predicate's.

    Example:
        >>> is_variant_subtag("1996")
        True
        >>> is_variant_subtag("valencia")
        True
        >>> is_variant_subtag("abc")
        False
    """
    tiny = pack8(subtag)
    return tiny is not None and len(tiny) >= 4 and tiny.is_all_ascii_alphanumeric()


def is_singleton(subtag: str) -> bool:
    """Check for an extension or private-use singleton: one ASCII letter."""
    return len(subtag) == 1 and subtag.isascii() and subtag.isalpha()
