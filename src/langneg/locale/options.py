"""Extension and option name tables.

Maps extension singletons to their names ("u" -> "unicode") and Unicode
extension keys to ECMA-402 style option names ("hc" -> "hour-cycle").
Identifiers store the long names; serialization maps them back.

Unknown singletons and keys map to themselves, so tags using extensions
this table does not describe still round-trip.

Python 3.11+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from langneg.locale.identifier import LanguageIdentifier

__all__ = [
    "UNICODE_EXTENSION",
    "apply_options",
    "ext_key_for_name",
    "ext_name_for_key",
    "option_key_for_name",
    "option_name_for_key",
]

UNICODE_EXTENSION = "unicode"

_EXTENSION_NAMES: Mapping[str, str] = MappingProxyType({
    "u": UNICODE_EXTENSION,
})
_EXTENSION_KEYS: Mapping[str, str] = MappingProxyType(
    {name: key for key, name in _EXTENSION_NAMES.items()}
)

# Unicode extension keys with an Intl.Locale option counterpart.
_OPTION_NAMES: Mapping[str, str] = MappingProxyType({
    "ca": "calendar",
    "co": "collation",
    "hc": "hour-cycle",
    "kf": "case-first",
    "kn": "numeric",
    "nu": "numbering-system",
})
_OPTION_KEYS: Mapping[str, str] = MappingProxyType(
    {name: key for key, name in _OPTION_NAMES.items()}
)


def ext_name_for_key(key: str) -> str:
    """Return the extension name for a singleton ("u" -> "unicode")."""
    return _EXTENSION_NAMES.get(key, key)


def ext_key_for_name(name: str) -> str:
    """Return the singleton for an extension name ("unicode" -> "u")."""
    return _EXTENSION_KEYS.get(name, name)


def option_name_for_key(key: str) -> str:
    """Return the option name for a Unicode extension key ("hc" -> "hour-cycle")."""
    return _OPTION_NAMES.get(key, key)


def option_key_for_name(name: str) -> str:
    """Return the Unicode extension key for an option name ("calendar" -> "ca")."""
    return _OPTION_KEYS.get(name, name)


def apply_options(identifier: LanguageIdentifier, options: Mapping[str, str]) -> LanguageIdentifier:
    """Apply Intl.Locale style options to an identifier.

    ``language``, ``script`` and ``region`` replace the corresponding
    fields. Every other option becomes a field of the ``unicode``
    extension, overriding a value already present in the tag.

    Args:
        identifier: Identifier to start from
        options: Option name (or short key) to value

    Returns:
        New identifier with the options applied

    Raises:
        LanguageTagError: If an option value is not a valid subtag

    Example:
        >>> str(apply_options(parse_tag("en"), {"hour-cycle": "h12"}))
        'en-u-hc-h12'
    """
    result = identifier
    for name, value in options.items():
        match name:
            case "language":
                result = result.with_language(value)
            case "script":
                result = result.with_script(value)
            case "region":
                result = result.with_region(value)
            case _:
                result = result.with_extension(UNICODE_EXTENSION, name, value)
    return result
