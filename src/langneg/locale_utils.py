"""Locale utilities: POSIX conversion, system locale detection, Babel bridge.

Bridges canonical language identifiers to the two other locale spellings a
localization stack meets in practice: POSIX codes from the environment
("de_DE.UTF-8") and babel.Locale objects for CLDR-backed formatting.

Python 3.11+.
"""

from __future__ import annotations

import functools
import logging
import os
from typing import TYPE_CHECKING

from langneg.constants import DEFAULT_SYSTEM_LOCALE, MAX_LOCALE_CACHE_SIZE
from langneg.core.babel_compat import get_locale_class
from langneg.diagnostics import LanguageTagError
from langneg.locale import LanguageIdentifier, parse_language_tag

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "get_system_locale",
    "to_posix",
]

logger = logging.getLogger(__name__)

_PSEUDO_LOCALES = frozenset({"C", "POSIX"})


def to_posix(locale: LanguageIdentifier | str) -> str:
    """Convert a language tag to POSIX format for Babel.

    Identifiers are serialized canonically first; strings are converted
    as given.

    Args:
        locale: Identifier or BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> to_posix("en-US")
        'en_US'
        >>> to_posix(parse_tag("sr-latn-rs"))
        'sr_Latn_RS'
    """
    return str(locale).replace("-", "_")


def _parse_environment_locale(value: str) -> LanguageIdentifier | None:
    """Parse "de_DE.UTF-8" / "sr_RS@latin" style values, or None if unusable."""
    code = value.split(".", 1)[0].split("@", 1)[0]
    if not code or code in _PSEUDO_LOCALES:
        return None
    try:
        return parse_language_tag(code)
    except LanguageTagError as e:
        logger.debug("Ignoring unparseable system locale '%s': %s", value, e.kind)
        return None


def get_system_locale(*, raise_on_failure: bool = False) -> LanguageIdentifier:
    """Return the user's locale as a canonical identifier.

    Sources, first usable one wins: locale.getlocale(), then the LC_ALL,
    LC_MESSAGES and LANG environment variables. Encodings (".UTF-8") and
    modifiers ("@latin") are dropped. The "C" and "POSIX" pseudo-locales
    and values that fail to parse count as unusable.

    Args:
        raise_on_failure: Raise RuntimeError instead of falling back to en-US
            when no source is usable

    Returns:
        The detected identifier, or en-US

    Raises:
        RuntimeError: No usable source and raise_on_failure is set

    Example:
        >>> str(get_system_locale())  # LANG=de_DE.UTF-8
        'de-DE'
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale()
    except (ValueError, AttributeError):
        system_locale = None
    if system_locale:
        identifier = _parse_environment_locale(system_locale)
        if identifier is not None:
            return identifier

    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(var)
        if value:
            identifier = _parse_environment_locale(value)
            if identifier is not None:
                return identifier

    if raise_on_failure:
        msg = (
            "Could not determine system locale. "
            "Set the LC_ALL, LC_MESSAGES or LANG environment variable."
        )
        raise RuntimeError(msg)

    logger.debug("No system locale detected, falling back to %s", DEFAULT_SYSTEM_LOCALE)
    return parse_language_tag(DEFAULT_SYSTEM_LOCALE)


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale: LanguageIdentifier | str) -> Locale:
    """Return the babel.Locale for an identifier or tag string, cached.

    Args:
        locale: Identifier or locale code (BCP-47 or POSIX format accepted)

    Returns:
        The cached babel.Locale

    Raises:
        BabelImportError: If Babel is not installed
        babel.core.UnknownLocaleError: CLDR has no data for the locale
        ValueError: Babel cannot parse the POSIX form

    Example:
        >>> babel_locale = get_babel_locale("en-US")
        >>> babel_locale.language, babel_locale.territory
        ('en', 'US')
    """
    locale_class = get_locale_class()
    return locale_class.parse(to_posix(locale))


def clear_locale_cache() -> None:
    """Clear the babel.Locale cache used by get_babel_locale."""
    get_babel_locale.cache_clear()
