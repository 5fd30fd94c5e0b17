"""Single-subtag validation and canonical casing.

The parser classifies subtags by position and then calls the casing
helpers here. The identifier field setters call the ``parse_*`` functions,
which validate a lone subtag and raise LanguageTagError on failure.

Canonical casing:
    language, extlang, variant, extension key/value -> lowercase
    script                                          -> titlecase
    region                                          -> uppercase

Python 3.11+.
"""

from __future__ import annotations

from langneg.constants import UNDETERMINED_LANGUAGE
from langneg.core.subtag_validation import (
    is_language_subtag,
    is_region_subtag,
    is_script_subtag,
    is_variant_subtag,
    pack4,
    pack8,
)
from langneg.diagnostics import ErrorTemplate, LanguageTagError, SourceSpan
from langneg.enums import ParseErrorKind

__all__ = [
    "is_extension_subtag",
    "lowercase",
    "parse_extension_key",
    "parse_extension_value",
    "parse_language_subtag",
    "parse_region_subtag",
    "parse_script_subtag",
    "parse_variant_subtag",
    "titlecase",
    "uppercase",
]


def lowercase(subtag: str) -> str:
    """Lowercase a valid subtag of up to 8 ASCII characters."""
    tiny = pack8(subtag)
    assert tiny is not None, f"lowercase() called with unpackable subtag {subtag!r}"
    return tiny.to_ascii_lowercase().as_str()


def uppercase(subtag: str) -> str:
    """Uppercase a valid subtag of up to 4 ASCII characters."""
    tiny = pack4(subtag)
    assert tiny is not None, f"uppercase() called with unpackable subtag {subtag!r}"
    return tiny.to_ascii_uppercase().as_str()


def titlecase(subtag: str) -> str:
    """Titlecase a valid subtag of up to 4 ASCII characters."""
    tiny = pack4(subtag)
    assert tiny is not None, f"titlecase() called with unpackable subtag {subtag!r}"
    return tiny.to_ascii_titlecase().as_str()


def is_extension_subtag(subtag: str) -> bool:
    """Check for an extension key or value: 2-8 ASCII letters or digits."""
    tiny = pack8(subtag)
    return tiny is not None and len(tiny) >= 2 and tiny.is_all_ascii_alphanumeric()


def _invalid(kind: ParseErrorKind, subtag: str) -> LanguageTagError:
    span = SourceSpan(0, len(subtag))
    if kind is ParseErrorKind.INVALID_LANGUAGE:
        diagnostic = ErrorTemplate.invalid_language(subtag, subtag, span)
    else:
        diagnostic = ErrorTemplate.invalid_subtag(subtag, subtag, span)
    return LanguageTagError(diagnostic, kind=kind, tag=subtag, subtag=subtag)


def parse_language_subtag(subtag: str) -> str | None:
    """Validate and canonicalize a language subtag.

    Args:
        subtag: Candidate subtag; "" or "und" mean "no language"

    Returns:
        Lowercased subtag, or None for an undetermined language

    Raises:
        LanguageTagError: If the subtag is not 2-3 ASCII letters

    Example:
        >>> parse_language_subtag("EN")
        'en'
        >>> parse_language_subtag("und") is None
        True
    """
    if not subtag:
        return None
    if not is_language_subtag(subtag):
        raise _invalid(ParseErrorKind.INVALID_LANGUAGE, subtag)
    language = lowercase(subtag)
    return None if language == UNDETERMINED_LANGUAGE else language


def parse_script_subtag(subtag: str) -> str | None:
    """Validate and titlecase a script subtag ("" clears the field).

    Raises:
        LanguageTagError: If the subtag is not 4 ASCII letters
    """
    if not subtag:
        return None
    if not is_script_subtag(subtag):
        raise _invalid(ParseErrorKind.INVALID_SUBTAG, subtag)
    return titlecase(subtag)


def parse_region_subtag(subtag: str) -> str | None:
    """Validate and uppercase a region subtag ("" clears the field).

    Raises:
        LanguageTagError: If the subtag is not 2 ASCII letters or 3 digits
    """
    if not subtag:
        return None
    if not is_region_subtag(subtag):
        raise _invalid(ParseErrorKind.INVALID_SUBTAG, subtag)
    return uppercase(subtag)


def parse_variant_subtag(subtag: str) -> str:
    """Validate and lowercase a variant subtag.

    Raises:
        LanguageTagError: If the subtag is not 4-8 ASCII letters or digits
    """
    if not is_variant_subtag(subtag):
        raise _invalid(ParseErrorKind.INVALID_SUBTAG, subtag)
    return lowercase(subtag)


def parse_extension_key(key: str) -> str:
    """Validate and lowercase an extension key (short form).

    Raises:
        LanguageTagError: If the key is not 2-8 ASCII letters or digits
    """
    if not is_extension_subtag(key):
        raise _invalid(ParseErrorKind.INVALID_SUBTAG, key)
    return lowercase(key)


def parse_extension_value(value: str) -> str:
    """Validate and lowercase an extension value.

    Raises:
        LanguageTagError: If the value is not 2-8 ASCII letters or digits
    """
    if not is_extension_subtag(value):
        raise _invalid(ParseErrorKind.INVALID_SUBTAG, value)
    return lowercase(value)
