"""Lazy access to the CLDR data shipped with Babel.

Tag parsing, negotiation against an injected expander and the
Accept-Language tokenizer never touch Babel. Two features do:

    - LocaleExpander() without explicit data reads CLDR likelySubtags
    - locale_utils.get_babel_locale() builds babel.Locale objects

Importing Babel loads its global CLDR data, so the import happens on first
use of one of those features and a missing install surfaces as
BabelImportError naming the feature that needed it.

Python 3.11+.
"""

from __future__ import annotations

from collections.abc import Mapping
from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "BabelImportError",
    "get_likely_subtags_data",
    "get_locale_class",
    "is_babel_available",
    "require_babel",
]


@lru_cache(maxsize=1)
def _check_babel_available() -> bool:
    try:
        import babel  # noqa: F401, PLC0415
    except ImportError:
        return False
    return True


class BabelImportError(ImportError):
    """A Babel-backed feature was used without Babel installed.

    Attributes:
        feature: Name of the function or class that needed Babel
    """

    def __init__(self, feature: str) -> None:
        super().__init__(
            f"{feature} requires Babel for CLDR data. Install with: pip install babel"
        )
        self.feature = feature


def is_babel_available() -> bool:
    """Whether Babel can be imported. The answer is computed once."""
    return _check_babel_available()


def require_babel(feature: str) -> None:
    """Raise BabelImportError for ``feature`` unless Babel is importable."""
    if not _check_babel_available():
        raise BabelImportError(feature)


def get_locale_class() -> type[Locale]:
    """Return babel.Locale, importing Babel on first call.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_babel_locale")
    from babel import Locale  # noqa: PLC0415

    return Locale


def get_likely_subtags_data() -> Mapping[str, str]:
    """Return CLDR likelySubtags from Babel's global data.

    Keys and values use "_" separators and "und" for an absent language,
    e.g. ``{"en": "en_Latn_US", "und_Cyrl": "ru_Cyrl_RU", "az_IQ": "az_Arab_IQ"}``.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("LocaleExpander")
    from babel.core import get_global  # noqa: PLC0415

    return get_global("likely_subtags")
