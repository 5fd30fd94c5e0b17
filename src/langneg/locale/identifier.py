"""Structured language identifier.

LanguageIdentifier is the canonical, immutable form of a parsed language
tag. Every field holds canonically cased subtags; casing is applied when the
value is built (by the parser or a ``with_*`` method), never by callers.

Identifiers compare, hash and deduplicate by value. There is no identity
beyond the fields, so "setting" a field returns a new identifier.

Python 3.11+.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Self

from langneg.constants import PRIVATE_USE_SINGLETON, UNDETERMINED_LANGUAGE
from langneg.diagnostics import ErrorTemplate, LanguageTagError, SourceSpan
from langneg.enums import ParseErrorKind

from .options import (
    UNICODE_EXTENSION,
    apply_options,
    ext_key_for_name,
    ext_name_for_key,
    option_key_for_name,
    option_name_for_key,
)
from .subtags import (
    parse_extension_key,
    parse_extension_value,
    parse_language_subtag,
    parse_region_subtag,
    parse_script_subtag,
    parse_variant_subtag,
)

if TYPE_CHECKING:
    from collections.abc import Iterator

__all__ = ["Extension", "LanguageIdentifier"]


@dataclass(frozen=True, slots=True)
class Extension:
    """One extension block of a language tag.

    Attributes:
        name: Extension name ("unicode" for singleton "u", otherwise the singleton)
        fields: Ordered (key, value) pairs. Unicode keys use option names
            where one is known ("hour-cycle" for "hc").
            subtags() always writes the short key, whichever spelling was parsed.

    Example:
        >>> ext = parse_tag("en-u-hc-h12").get_extension("unicode")
        >>> ext.fields
        (('hour-cycle', 'h12'),)
        >>> ext.subtags()
        ['u', 'hc', 'h12']
    """

    name: str
    fields: tuple[tuple[str, str], ...] = ()

    @property
    def singleton(self) -> str:
        """Single-letter key introducing this extension."""
        return ext_key_for_name(self.name)

    def get(self, key: str) -> str | None:
        """Look up a field by option name or short key."""
        name = option_name_for_key(key) if self.name == UNICODE_EXTENSION else key
        for field_key, value in self.fields:
            if field_key == name:
                return value
        return None

    def subtags(self) -> list[str]:
        """Serialized subtags: singleton followed by alternating keys and values."""
        parts = [self.singleton]
        for key, value in self.fields:
            if self.name == UNICODE_EXTENSION:
                key = option_key_for_name(key)
            parts.append(key)
            parts.append(value)
        return parts


@dataclass(frozen=True, slots=True)
class LanguageIdentifier:
    """Canonical structured form of a language tag.

    Attributes:
        language: 2-3 lowercase letters, or None when undetermined
        extlangs: Up to three 3-letter extended language subtags (not matched)
        script: 4 letters, titlecased, or None
        region: 2 uppercase letters or 3 digits, or None
        variants: Lowercase variant subtags in input order
        extensions: Extension blocks in input order, names unique
        private_use: Subtags after the "x" singleton, verbatim

    Example:
        >>> loc = LanguageIdentifier.parse("en-latn-us")
        >>> loc.language, loc.script, loc.region
        ('en', 'Latn', 'US')
        >>> str(loc.with_region("GB"))
        'en-Latn-GB'
    """

    language: str | None = None
    extlangs: tuple[str, ...] = ()
    script: str | None = None
    region: str | None = None
    variants: tuple[str, ...] = ()
    extensions: tuple[Extension, ...] = ()
    private_use: tuple[str, ...] = ()

    @classmethod
    def parse(cls, text: str) -> LanguageIdentifier:
        """Parse a language tag. See ``langneg.locale.parser.parse_language_tag``.

        Raises:
            LanguageTagError: If the tag is malformed
        """
        from .parser import parse_language_tag  # noqa: PLC0415 - circular

        return parse_language_tag(text)

    @property
    def is_undetermined(self) -> bool:
        """True when no language subtag is present ("und")."""
        return self.language is None

    @property
    def extension_map(self) -> dict[str, dict[str, str]]:
        """Extensions as a plain nested mapping, in input order."""
        return {ext.name: dict(ext.fields) for ext in self.extensions}

    def get_extension(self, name: str) -> Extension | None:
        """Look up an extension by name or singleton."""
        name = ext_name_for_key(name.lower())
        for ext in self.extensions:
            if ext.name == name:
                return ext
        return None

    def subtags(self) -> Iterator[str]:
        """Yield the canonical subtags in serialization order."""
        yield self.language or UNDETERMINED_LANGUAGE
        yield from self.extlangs
        if self.script is not None:
            yield self.script
        if self.region is not None:
            yield self.region
        yield from self.variants
        for ext in self.extensions:
            yield from ext.subtags()
        if self.private_use:
            yield PRIVATE_USE_SINGLETON
            yield from self.private_use

    def to_string(self) -> str:
        """Serialize to a canonical BCP47 string.

        Example:
            >>> parse_tag("EN_latn_us_u_hc_H12").to_string()
            'en-Latn-US-u-hc-h12'
        """
        return "-".join(self.subtags())

    def __str__(self) -> str:
        return self.to_string()

    # ------------------------------------------------------------------
    # Field replacement
    # ------------------------------------------------------------------

    def with_language(self, value: str) -> Self:
        """Return a copy with the language replaced ("" or "und" clears it).

        Raises:
            LanguageTagError: If value is not a valid language subtag
        """
        return replace(self, language=parse_language_subtag(value))

    def with_script(self, value: str) -> Self:
        """Return a copy with the script replaced ("" clears it).

        Raises:
            LanguageTagError: If value is not a valid script subtag
        """
        return replace(self, script=parse_script_subtag(value))

    def with_region(self, value: str) -> Self:
        """Return a copy with the region replaced ("" clears it).

        Raises:
            LanguageTagError: If value is not a valid region subtag
        """
        return replace(self, region=parse_region_subtag(value))

    def with_variant(self, value: str) -> Self:
        """Return a copy with a variant appended.

        Raises:
            LanguageTagError: If value is not a valid variant subtag
        """
        return replace(self, variants=(*self.variants, parse_variant_subtag(value)))

    def without_variant(self, value: str) -> Self:
        """Return a copy with the first occurrence of a variant removed."""
        lowered = value.lower()
        if lowered not in self.variants:
            return self
        index = self.variants.index(lowered)
        return replace(self, variants=self.variants[:index] + self.variants[index + 1 :])

    def without_variants(self) -> Self:
        """Return a copy with no variants."""
        return replace(self, variants=())

    def with_extension(self, name: str, key: str, value: str) -> Self:
        """Return a copy with an extension field added or replaced.

        Args:
            name: Extension name or singleton ("unicode" or "u")
            key: Field key; for the unicode extension either the short key
                ("hc") or the option name ("hour-cycle")
            value: Field value

        Raises:
            LanguageTagError: If the singleton, key or value is invalid

        Example:
            >>> str(parse_tag("en").with_extension("u", "calendar", "buddhist"))
            'en-u-ca-buddhist'
        """
        ext_name = ext_name_for_key(name.lower())
        singleton = ext_key_for_name(ext_name)
        if len(singleton) != 1 or not singleton.isalpha() or singleton == PRIVATE_USE_SINGLETON:
            diagnostic = ErrorTemplate.invalid_subtag(name, name, SourceSpan(0, len(name)))
            raise LanguageTagError(
                diagnostic, kind=ParseErrorKind.INVALID_SUBTAG, tag=name, subtag=name
            )

        if ext_name == UNICODE_EXTENSION:
            field_key = option_name_for_key(parse_extension_key(option_key_for_name(key.lower())))
        else:
            field_key = parse_extension_key(key)
        field_value = parse_extension_value(value)

        extensions = list(self.extensions)
        for index, ext in enumerate(extensions):
            if ext.name == ext_name:
                fields = dict(ext.fields)
                fields[field_key] = field_value
                extensions[index] = Extension(ext_name, tuple(fields.items()))
                break
        else:
            extensions.append(Extension(ext_name, ((field_key, field_value),)))
        return replace(self, extensions=tuple(extensions))

    def with_options(self, options: Mapping[str, str]) -> Self:
        """Return a copy with Intl.Locale style options applied.

        See ``langneg.locale.options.apply_options``.
        """
        return apply_options(self, options)  # type: ignore[return-value]

    # ------------------------------------------------------------------
    # Matching
    # ------------------------------------------------------------------

    def matches(self, other: LanguageIdentifier, self_as_range: bool, other_as_range: bool) -> bool:
        """Compare language, script, region and variants, optionally as ranges.

        A side treated as a range matches any value in the fields it leaves
        absent. Variants compare as a whole sequence. Extlangs, extensions
        and private-use subtags do not participate.

        Args:
            other: Identifier to compare against
            self_as_range: Treat absent fields of this identifier as wildcards
            other_as_range: Treat absent fields of ``other`` as wildcards

        Returns:
            True if every compared field matches

        Example:
            >>> parse_tag("en").matches(parse_tag("en-US"), True, False)
            True
            >>> parse_tag("en").matches(parse_tag("en-US"), False, False)
            False
        """
        return (
            _subtag_matches(self.language, other.language, self_as_range, other_as_range)
            and _subtag_matches(self.script, other.script, self_as_range, other_as_range)
            and _subtag_matches(self.region, other.region, self_as_range, other_as_range)
            and _subtag_matches(self.variants, other.variants, self_as_range, other_as_range)
        )


def _subtag_matches(
    value1: str | tuple[str, ...] | None,
    value2: str | tuple[str, ...] | None,
    as_range1: bool,
    as_range2: bool,
) -> bool:
    # None and () are both "absent".
    return (as_range1 and not value1) or (as_range2 and not value2) or value1 == value2
