"""Likely-subtag expansion ("maximize").

Expands an underspecified identifier to its most probable full form using
CLDR likelySubtags data, e.g. "en" -> "en-Latn-US", "zh-TW" -> "zh-Hant-TW".

Lookup order (first hit wins):
    1. Whole-identifier overrides (full equality)
    2. (region, script), then (region), with the language absent
    3. (language, region)
    4. (language, script)
    5. (language)
    6. ("", script) whenever a script is present and nothing above matched

The "unknown" sentinels Zzzz and ZZ are stripped before lookup. A table
entry only fills fields that are absent; it never replaces a subtag the
caller supplied.

Table layout:
    Each table is a pair of parallel tuples (keys, expansions) sorted by
    key and searched with bisect. A key packs two TinyStr4 words into one
    int, the first key component in the high 32 bits:

        key = (TinyStr4(first).word << 32) | TinyStr4(second).word

    An absent component packs as 0, so ("", "Cyrl") sorts before every
    key with a language.

Thread Safety:
    Tables are built once per LocaleExpander and never mutated. The shared
    default expander is created under lru_cache.

Python 3.11+.
"""

from __future__ import annotations

import functools
import logging
from bisect import bisect_left
from collections.abc import Mapping
from dataclasses import replace
from types import MappingProxyType
from typing import NamedTuple

from langneg.constants import UNKNOWN_REGION, UNKNOWN_SCRIPT
from langneg.core.babel_compat import get_likely_subtags_data
from langneg.core.subtag_validation import pack4
from langneg.diagnostics import LanguageTagError
from langneg.enums import TransformResult

from .identifier import LanguageIdentifier
from .parser import parse_language_tag

__all__ = [
    "LocaleExpander",
    "maximize",
]

logger = logging.getLogger(__name__)

# Table construction parses thousands of CLDR entries once; keep them out of
# the shared parse cache.
_parse_uncached = parse_language_tag.__wrapped__


class _Expansion(NamedTuple):
    """Fields supplied by a likely-subtags entry."""

    language: str | None
    script: str | None
    region: str | None


# Languages without a single dominant expansion in context. Matched against
# the whole (stripped) identifier before any table lookup.
_OVERRIDES: Mapping[LanguageIdentifier, _Expansion] = MappingProxyType({
    LanguageIdentifier(language="sr", region="RU"): _Expansion("sr", "Latn", "RU"),
    LanguageIdentifier(language="az", region="IR"): _Expansion("az", "Arab", "IR"),
    LanguageIdentifier(language="zh", region="GB"): _Expansion("zh", "Hant", "GB"),
    LanguageIdentifier(language="zh", region="US"): _Expansion("zh", "Hant", "US"),
})


def _pack_key(first: str | None, second: str | None = None) -> int:
    """Pack up to two subtags of at most 4 characters into one sortable int."""
    high = pack4(first) if first else None
    low = pack4(second) if second else None
    assert bool(first) == (high is not None), f"unpackable key component {first!r}"
    assert bool(second) == (low is not None), f"unpackable key component {second!r}"
    return ((high.word if high else 0) << 32) | (low.word if low else 0)


class _Table:
    """Sorted key -> expansion table searched with bisect."""

    __slots__ = ("_expansions", "_keys")

    def __init__(self, entries: dict[int, _Expansion]) -> None:
        ordered = sorted(entries.items())
        self._keys: tuple[int, ...] = tuple(key for key, _ in ordered)
        self._expansions: tuple[_Expansion, ...] = tuple(exp for _, exp in ordered)

    def __len__(self) -> int:
        return len(self._keys)

    def get(self, key: int) -> _Expansion | None:
        index = bisect_left(self._keys, key)
        if index < len(self._keys) and self._keys[index] == key:
            return self._expansions[index]
        return None


class LocaleExpander:
    """Likely-subtags expander backed by CLDR data.

    Args:
        data: likelySubtags mapping in CLDR form ("und_Cyrl" -> "ru_Cyrl_RU").
            Defaults to the data shipped with Babel.

    Raises:
        BabelImportError: If data is omitted and Babel is not installed

    Example:
        >>> expander = LocaleExpander()
        >>> loc, result = expander.maximize(parse_tag("fr"))
        >>> str(loc), result
        ('fr-Latn-FR', <TransformResult.MODIFIED: 'modified'>)
    """

    __slots__ = ("_lang", "_lang_region", "_lang_script", "_region_script")

    def __init__(self, data: Mapping[str, str] | None = None) -> None:
        if data is None:
            data = get_likely_subtags_data()

        region_script: dict[int, _Expansion] = {}
        lang_region: dict[int, _Expansion] = {}
        lang_script: dict[int, _Expansion] = {}
        lang: dict[int, _Expansion] = {}

        for source, target in data.items():
            try:
                key = _parse_uncached(source)
                full = _parse_uncached(target)
            except LanguageTagError as e:
                logger.warning("Skipping malformed likely-subtags entry %s -> %s: %s", source, target, e)
                continue

            expansion = _Expansion(full.language, full.script, full.region)
            # Bare "und" has no key fields and is not stored.
            if key.language is None:
                if key.region is not None:
                    region_script[_pack_key(key.region, key.script)] = expansion
                elif key.script is not None:
                    lang_script[_pack_key(None, key.script)] = expansion
            elif key.script is None and key.region is not None:
                lang_region[_pack_key(key.language, key.region)] = expansion
            elif key.region is None and key.script is not None:
                lang_script[_pack_key(key.language, key.script)] = expansion
            elif key.script is None and key.region is None:
                lang[_pack_key(key.language)] = expansion

        self._region_script = _Table(region_script)
        self._lang_region = _Table(lang_region)
        self._lang_script = _Table(lang_script)
        self._lang = _Table(lang)
        logger.debug(
            "Built likely-subtags tables: region+script=%d language+region=%d "
            "language+script=%d language=%d",
            len(self._region_script),
            len(self._lang_region),
            len(self._lang_script),
            len(self._lang),
        )

    def _lookup(self, identifier: LanguageIdentifier) -> _Expansion | None:
        language, script, region = identifier.language, identifier.script, identifier.region

        override = _OVERRIDES.get(identifier)
        if override is not None:
            return override

        found: _Expansion | None = None
        if language is None:
            if region is not None:
                found = self._region_script.get(_pack_key(region, script))
                if found is None and script is not None:
                    found = self._region_script.get(_pack_key(region))
        else:
            if region is not None:
                found = self._lang_region.get(_pack_key(language, region))
            if found is None and script is not None:
                found = self._lang_script.get(_pack_key(language, script))
            if found is None:
                found = self._lang.get(_pack_key(language))

        # Last resort for any shape: the script alone ("und_Hebr").
        if found is None and script is not None:
            found = self._lang_script.get(_pack_key(None, script))
        return found

    def maximize(self, identifier: LanguageIdentifier) -> tuple[LanguageIdentifier, TransformResult]:
        """Add the likely script and region (and language) to an identifier.

        Args:
            identifier: Identifier to expand

        Returns:
            Tuple of (identifier, TransformResult). MODIFIED only when the
            returned identifier differs from the input; otherwise the input
            object itself is returned with UNMODIFIED.
        """
        stripped = identifier
        if identifier.script == UNKNOWN_SCRIPT or identifier.region == UNKNOWN_REGION:
            stripped = replace(
                identifier,
                script=None if identifier.script == UNKNOWN_SCRIPT else identifier.script,
                region=None if identifier.region == UNKNOWN_REGION else identifier.region,
            )

        expansion = self._lookup(stripped)
        if expansion is None:
            return identifier, TransformResult.UNMODIFIED

        result = replace(
            stripped,
            language=stripped.language or expansion.language,
            script=stripped.script or expansion.script,
            region=stripped.region or expansion.region,
        )
        if result == identifier:
            return identifier, TransformResult.UNMODIFIED
        return result, TransformResult.MODIFIED


@functools.lru_cache(maxsize=1)
def _default_expander() -> LocaleExpander:
    return LocaleExpander()


def maximize(identifier: LanguageIdentifier) -> tuple[LanguageIdentifier, TransformResult]:
    """Expand an identifier with the shared Babel-backed expander.

    Example:
        >>> loc, result = maximize(parse_tag("und-Cyrl"))
        >>> str(loc)
        'ru-Cyrl-RU'
    """
    return _default_expander().maximize(identifier)

