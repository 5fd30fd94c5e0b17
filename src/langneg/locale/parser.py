"""Language tag parser and canonicalizer.

Converts a raw tag string into a LanguageIdentifier in a single
left-to-right pass over its subtags, with no backtracking.

Grammar positions:
    LANGUAGE -> EXTLANG -> SCRIPT -> REGION -> VARIANT

    A subtag is accepted by the first rule it satisfies at or after the
    current position (script before region before variant); accepting it
    moves the position forward. A one-letter subtag is a singleton and
    switches to extension mode, where subtags are consumed as key/value
    pairs until the next singleton. The singleton "x" switches to
    private-use mode for the rest of the input.

Canonical casing is applied while parsing:
    language, extlang, variant, extension key/value -> lowercase
    script -> titlecase, region -> uppercase, private-use -> verbatim

Thread Safety:
    parse_language_tag is a pure function memoized with lru_cache.
    Safe for concurrent use across multiple threads.

Python 3.11+.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Iterator, Mapping
from enum import IntEnum

from langneg.constants import (
    MAX_EXTLANGS,
    MAX_SUBTAG_LENGTH,
    MAX_TAG_CACHE_SIZE,
    PRIVATE_USE_SINGLETON,
    SUBTAG_SEPARATORS,
    UNDETERMINED_LANGUAGE,
)
from langneg.core.subtag_validation import (
    is_extlang_subtag,
    is_language_subtag,
    is_region_subtag,
    is_script_subtag,
    is_singleton,
    is_variant_subtag,
)
from langneg.diagnostics import Diagnostic, ErrorTemplate, LanguageTagError, SourceSpan
from langneg.enums import ParseErrorKind

from .identifier import Extension, LanguageIdentifier
from .options import UNICODE_EXTENSION, apply_options, ext_name_for_key, option_name_for_key
from .subtags import is_extension_subtag, lowercase, titlecase, uppercase

__all__ = [
    "parse_language_tag",
    "parse_language_tag_with_options",
]

logger = logging.getLogger(__name__)


class _Position(IntEnum):
    """Grammar position of the next expected subtag."""

    LANGUAGE = 0
    EXTLANG = 1
    SCRIPT = 2
    REGION = 3
    VARIANT = 4


def _split_subtags(text: str) -> Iterator[tuple[str, SourceSpan]]:
    """Yield each subtag with its span, splitting on "-" and "_"."""
    start = 0
    for index, char in enumerate(text):
        if char in SUBTAG_SEPARATORS:
            yield text[start:index], SourceSpan(start, index)
            start = index + 1
    yield text[start:], SourceSpan(start, len(text))


def _error(kind: ParseErrorKind, text: str, subtag: str, span: SourceSpan) -> LanguageTagError:
    """Build the LanguageTagError for a grammar violation."""
    diagnostic: Diagnostic
    match kind:
        case ParseErrorKind.INVALID_LANGUAGE:
            diagnostic = ErrorTemplate.invalid_language(text, subtag, span)
        case ParseErrorKind.SUBTAG_TOO_LONG:
            diagnostic = ErrorTemplate.subtag_too_long(text, subtag, span, MAX_SUBTAG_LENGTH)
        case ParseErrorKind.DUPLICATE_EXTENSION:
            diagnostic = ErrorTemplate.duplicate_extension(text, subtag, span)
        case ParseErrorKind.EMPTY_EXTENSION:
            diagnostic = ErrorTemplate.empty_extension(text, subtag, span)
        case ParseErrorKind.EMPTY_PRIVATE_USE:
            diagnostic = ErrorTemplate.empty_private_use(text, span)
        case ParseErrorKind.TOO_MANY_EXTLANGS:
            diagnostic = ErrorTemplate.too_many_extlangs(text, subtag, span, MAX_EXTLANGS)
        case _:
            diagnostic = ErrorTemplate.invalid_subtag(text, subtag, span)
    return LanguageTagError(diagnostic, kind=kind, tag=text, subtag=subtag)


class _ExtensionBuilder:
    """Collects the key/value pairs of one extension block."""

    __slots__ = ("fields", "name", "pending_key", "pending_span", "singleton", "span")

    def __init__(self, singleton: str, span: SourceSpan) -> None:
        self.singleton = singleton
        self.span = span
        self.name = ext_name_for_key(singleton)
        self.fields: dict[str, str] = {}
        self.pending_key: str | None = None
        self.pending_span: SourceSpan | None = None

    def feed(self, subtag: str, span: SourceSpan) -> None:
        lowered = lowercase(subtag)
        if self.pending_key is None:
            if self.name == UNICODE_EXTENSION:
                lowered = option_name_for_key(lowered)
            self.pending_key = lowered
            self.pending_span = span
        else:
            self.fields[self.pending_key] = lowered
            self.pending_key = None
            self.pending_span = None

    def finish(self, text: str) -> Extension:
        if self.pending_key is not None:
            assert self.pending_span is not None
            key_text = text[self.pending_span.start : self.pending_span.end]
            raise _error(ParseErrorKind.INVALID_SUBTAG, text, key_text, self.pending_span)
        if not self.fields:
            raise _error(ParseErrorKind.EMPTY_EXTENSION, text, self.singleton, self.span)
        return Extension(self.name, tuple(self.fields.items()))


@functools.lru_cache(maxsize=MAX_TAG_CACHE_SIZE)
def parse_language_tag(text: str) -> LanguageIdentifier:
    """Parse and canonicalize a language tag.

    Accepts "-" and "_" as separators. The empty string yields an
    identifier with every field absent; "und" yields no language.

    Within one extension a repeated key keeps its first position and takes
    the last value ("en-u-ca-buddhist-ca-gregory" -> "en-u-ca-gregory").
    Unicode keys are stored under their option names, so a key spelled as an
    option name ("calendar") serializes as the short key ("ca").

    Args:
        text: Raw language tag

    Returns:
        Canonical LanguageIdentifier (shared, immutable)

    Raises:
        LanguageTagError: With kind
            INVALID_LANGUAGE for non-ASCII input or a bad primary subtag,
            SUBTAG_TOO_LONG for a subtag over 8 characters,
            INVALID_SUBTAG for a subtag matching no rule at its position,
            DUPLICATE_EXTENSION for a repeated singleton,
            EMPTY_EXTENSION / EMPTY_PRIVATE_USE for a singleton with no subtags,
            TOO_MANY_EXTLANGS for more than three extlangs.

    Example:
        >>> str(parse_language_tag("en-latn-us"))
        'en-Latn-US'
        >>> str(parse_language_tag("de_DE_1996"))
        'de-DE-1996'
    """
    if not text.isascii():
        raise LanguageTagError(
            ErrorTemplate.non_ascii(text), kind=ParseErrorKind.INVALID_LANGUAGE, tag=text
        )
    if not text:
        return LanguageIdentifier()

    language: str | None = None
    extlangs: list[str] = []
    script: str | None = None
    region: str | None = None
    variants: list[str] = []
    extensions: list[Extension] = []
    seen_singletons: set[str] = set()
    private_use: list[str] = []

    position = _Position.LANGUAGE
    current: _ExtensionBuilder | None = None
    private_span: SourceSpan | None = None

    for subtag, span in _split_subtags(text):
        if len(subtag) > MAX_SUBTAG_LENGTH:
            raise _error(ParseErrorKind.SUBTAG_TOO_LONG, text, subtag, span)

        if private_span is not None:
            if not subtag:
                raise _error(ParseErrorKind.INVALID_SUBTAG, text, subtag, span)
            private_use.append(subtag)
            continue

        if len(subtag) == 1:
            if not is_singleton(subtag):
                raise _error(ParseErrorKind.INVALID_SUBTAG, text, subtag, span)
            if current is not None:
                extensions.append(current.finish(text))
                current = None
            singleton = subtag.lower()
            if singleton == PRIVATE_USE_SINGLETON:
                private_span = span
                continue
            if singleton in seen_singletons:
                raise _error(ParseErrorKind.DUPLICATE_EXTENSION, text, subtag, span)
            seen_singletons.add(singleton)
            current = _ExtensionBuilder(singleton, span)
            continue

        if current is not None:
            if not is_extension_subtag(subtag):
                raise _error(ParseErrorKind.INVALID_SUBTAG, text, subtag, span)
            current.feed(subtag, span)
            continue

        if position == _Position.LANGUAGE:
            if not is_language_subtag(subtag):
                raise _error(ParseErrorKind.INVALID_LANGUAGE, text, subtag, span)
            lowered = lowercase(subtag)
            language = None if lowered == UNDETERMINED_LANGUAGE else lowered
            position = _Position.EXTLANG
        elif position == _Position.EXTLANG and is_extlang_subtag(subtag):
            if len(extlangs) == MAX_EXTLANGS:
                raise _error(ParseErrorKind.TOO_MANY_EXTLANGS, text, subtag, span)
            extlangs.append(lowercase(subtag))
        elif position <= _Position.SCRIPT and is_script_subtag(subtag):
            script = titlecase(subtag)
            position = _Position.REGION
        elif position <= _Position.REGION and is_region_subtag(subtag):
            region = uppercase(subtag)
            position = _Position.VARIANT
        elif is_variant_subtag(subtag):
            variants.append(lowercase(subtag))
            position = _Position.VARIANT
        else:
            raise _error(ParseErrorKind.INVALID_SUBTAG, text, subtag, span)

    if current is not None:
        extensions.append(current.finish(text))
    if private_span is not None and not private_use:
        raise _error(ParseErrorKind.EMPTY_PRIVATE_USE, text, PRIVATE_USE_SINGLETON, private_span)

    return LanguageIdentifier(
        language=language,
        extlangs=tuple(extlangs),
        script=script,
        region=region,
        variants=tuple(variants),
        extensions=tuple(extensions),
        private_use=tuple(private_use),
    )


def parse_language_tag_with_options(text: str, options: Mapping[str, str]) -> LanguageIdentifier:
    """Parse a tag and apply Intl.Locale style options on top.

    Args:
        text: Raw language tag
        options: "language", "script", "region", or unicode extension
            options such as "hour-cycle" / "hc"

    Returns:
        Canonical LanguageIdentifier with options applied

    Raises:
        LanguageTagError: If the tag or an option value is invalid

    Example:
        >>> str(parse_language_tag_with_options("en-Latn-US-u-hc-h23", {"hour-cycle": "h12"}))
        'en-Latn-US-u-hc-h12'
    """
    identifier = parse_language_tag(text)
    if options:
        logger.debug("Applying %d option(s) to '%s'", len(options), identifier)
        identifier = apply_options(identifier, options)
    return identifier
