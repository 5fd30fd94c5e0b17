"""Shared constants for langneg.

This module provides centralized configuration constants used across
the locale, parser and negotiation packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Grammar limits: Subtag and extlang size constraints
- Sentinel subtags: Placeholder values that carry no information
- Cache limits: Memory bounds for caching subsystems
- Fallbacks: Values used when the environment gives no answer

Python 3.11+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Grammar limits
    "MAX_SUBTAG_LENGTH",
    "MAX_EXTLANGS",
    "SUBTAG_SEPARATORS",
    # Sentinel subtags
    "UNDETERMINED_LANGUAGE",
    "UNKNOWN_SCRIPT",
    "UNKNOWN_REGION",
    "PRIVATE_USE_SINGLETON",
    # Cache limits
    "MAX_TAG_CACHE_SIZE",
    "MAX_LOCALE_CACHE_SIZE",
    # Fallbacks
    "DEFAULT_SYSTEM_LOCALE",
]

# ============================================================================
# GRAMMAR LIMITS
# ============================================================================

# Every subtag of a language tag is 1-8 characters long.
MAX_SUBTAG_LENGTH: int = 8

# BCP47 permits up to three extended language subtags after the primary
# language. They are stored and serialized but never take part in matching.
MAX_EXTLANGS: int = 3

# Both BCP47 ("en-US") and POSIX ("en_US") separators are accepted on input.
# Output always uses "-".
SUBTAG_SEPARATORS: str = "-_"

# ============================================================================
# SENTINEL SUBTAGS
# ============================================================================

# Rendered in place of an absent language. Parsing "und" yields no language.
UNDETERMINED_LANGUAGE: str = "und"

# "Unknown" script and region. Stripped before likely-subtag lookup.
UNKNOWN_SCRIPT: str = "Zzzz"
UNKNOWN_REGION: str = "ZZ"

# Singleton introducing private-use subtags. Everything after it is opaque.
PRIVATE_USE_SINGLETON: str = "x"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum memoized parse results. Identifiers are immutable, so a cached
# instance can be shared freely between callers.
MAX_TAG_CACHE_SIZE: int = 512

# Maximum cached babel.Locale instances (see locale_utils.get_babel_locale).
# 128 covers typical multi-region applications (major locales + variants).
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# FALLBACKS
# ============================================================================

# Returned by get_system_locale() when nothing can be detected.
DEFAULT_SYSTEM_LOCALE: str = "en-US"
