"""Language negotiation.

Selects, from the locales an application has available, the ones that best
serve an ordered list of requested locales.

Each requested identifier runs through six stages against the pool of
available identifiers not matched yet:

    1. Exact match
    2. Available as range   (absent available fields match anything)
    3. Maximized requested, available as range
    4. Variants cleared, both sides as range
    5. Region cleared and re-maximized, available as range
    6. Region cleared, both sides as range

Stages 3-6 need a language to expand and are skipped for "und". Every
match is removed from the pool, so an available locale is returned at most
once. Results keep discovery order: requested, then stage, then pool order.

Strategies:
    FILTERING: every match of every stage for every requested locale
    MATCHING:  first match of the first matching stage per requested locale
    LOOKUP:    the first match overall

Negotiation never raises. Malformed strings passed to the ``*_tags``
helpers are dropped and logged at DEBUG.

Python 3.11+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import replace

from langneg.diagnostics import LanguageTagError
from langneg.enums import NegotiationStrategy, TransformResult
from langneg.locale import LanguageIdentifier, LocaleExpander, maximize, parse_language_tag

__all__ = [
    "convert_to_identifiers_lossy",
    "filter_matches",
    "negotiate_language_tags",
    "negotiate_languages",
]

logger = logging.getLogger(__name__)


class _Negotiation:
    """Mutable state of one filter_matches call."""

    __slots__ = ("expander", "pool", "strategy", "supported")

    def __init__(
        self,
        available: Sequence[LanguageIdentifier],
        strategy: NegotiationStrategy,
        expander: LocaleExpander | None,
    ) -> None:
        self.pool: list[LanguageIdentifier] = list(available)
        self.supported: list[LanguageIdentifier] = []
        self.strategy = strategy
        self.expander = expander

    def maximize(self, identifier: LanguageIdentifier) -> tuple[LanguageIdentifier, TransformResult]:
        if self.expander is None:
            return maximize(identifier)
        return self.expander.maximize(identifier)

    def run_stage(
        self,
        stage: int,
        requested: LanguageIdentifier,
        available_as_range: bool,
        requested_as_range: bool,
    ) -> bool:
        """Move matching pool entries to the result. Return True on any match."""
        take_all = self.strategy is NegotiationStrategy.FILTERING
        remaining: list[LanguageIdentifier] = []
        found = False
        for candidate in self.pool:
            if (take_all or not found) and candidate.matches(
                requested, available_as_range, requested_as_range
            ):
                found = True
                self.supported.append(candidate)
                logger.debug("Stage %d: '%s' matched '%s'", stage, requested, candidate)
            else:
                remaining.append(candidate)
        self.pool = remaining
        return found

    def done(self, found: bool) -> bool:
        """Whether the current requested identifier is finished after a stage."""
        return found and self.strategy is not NegotiationStrategy.FILTERING

    def run(self, requested: LanguageIdentifier) -> None:
        """Run the stages for one requested identifier."""
        if self.done(self.run_stage(1, requested, False, False)):
            return
        if self.done(self.run_stage(2, requested, True, False)):
            return
        if requested.language is None:
            return

        req, result = self.maximize(requested)
        if result is TransformResult.MODIFIED and self.done(self.run_stage(3, req, True, False)):
            return

        req = req.without_variants()
        if self.done(self.run_stage(4, req, True, True)):
            return

        req, result = self.maximize(replace(req, region=None))
        if result is TransformResult.MODIFIED and self.done(self.run_stage(5, req, True, False)):
            return

        req = replace(req, region=None)
        self.run_stage(6, req, True, True)


def filter_matches(
    requested: Iterable[LanguageIdentifier],
    available: Sequence[LanguageIdentifier],
    strategy: NegotiationStrategy = NegotiationStrategy.FILTERING,
    *,
    expander: LocaleExpander | None = None,
) -> list[LanguageIdentifier]:
    """Match requested identifiers against available ones, without a default.

    Args:
        requested: Requested identifiers, most preferred first
        available: Available identifiers, in preference order for ties
        strategy: How many matches to collect
        expander: Likely-subtags expander; defaults to the shared Babel one

    Returns:
        The matched objects from ``available`` (not copies), in discovery order
    """
    state = _Negotiation(available, strategy, expander)
    for req in requested:
        state.run(req)
        if state.supported and strategy is NegotiationStrategy.LOOKUP:
            break
    return state.supported


def negotiate_languages(
    requested: Iterable[LanguageIdentifier],
    available: Sequence[LanguageIdentifier],
    default: LanguageIdentifier | None = None,
    strategy: NegotiationStrategy = NegotiationStrategy.FILTERING,
    *,
    expander: LocaleExpander | None = None,
) -> list[LanguageIdentifier]:
    """Negotiate the best available locales for a list of requested ones.

    Args:
        requested: Requested identifiers, most preferred first
        available: Available identifiers
        default: Fallback appended to the result. Under LOOKUP only when
            nothing matched; otherwise whenever no equal identifier is
            already in the result.
        strategy: FILTERING (default), MATCHING or LOOKUP
        expander: Likely-subtags expander; defaults to the shared Babel one

    Returns:
        Matched objects from ``available`` (plus ``default``), in discovery order

    Example:
        >>> requested = [parse_tag(t) for t in ("de", "it", "ru")]
        >>> available = [parse_tag(t) for t in ("en-US", "de", "it", "ru", "pl")]
        >>> [str(loc) for loc in negotiate_languages(requested, available)]
        ['de', 'it', 'ru']
    """
    supported = filter_matches(requested, available, strategy, expander=expander)

    if default is not None:
        if strategy is NegotiationStrategy.LOOKUP:
            if not supported:
                supported.append(default)
        elif default not in supported:
            supported.append(default)
    return supported


def convert_to_identifiers_lossy(tags: Iterable[str]) -> list[LanguageIdentifier]:
    """Parse tag strings, dropping the ones that fail to parse.

    Example:
        >>> [str(loc) for loc in convert_to_identifiers_lossy(["en-US", "verybroken-tag", "fr"])]
        ['en-US', 'fr']
    """
    identifiers: list[LanguageIdentifier] = []
    for tag in tags:
        try:
            identifiers.append(parse_language_tag(tag))
        except LanguageTagError as e:
            logger.debug("Dropping unparseable language tag '%s': %s", tag, e.kind)
    return identifiers


def negotiate_language_tags(
    requested: Iterable[str],
    available: Iterable[str],
    default: str | None = None,
    strategy: NegotiationStrategy = NegotiationStrategy.FILTERING,
) -> list[str]:
    """String-in, string-out wrapper around negotiate_languages.

    Unparseable tags (including an unparseable default) are dropped.
    Results are canonical tag strings.

    Example:
        >>> negotiate_language_tags(["xx"], ["fr"], "fr", NegotiationStrategy.LOOKUP)
        ['fr']
    """
    default_id = None
    if default is not None:
        parsed_default = convert_to_identifiers_lossy([default])
        default_id = parsed_default[0] if parsed_default else None

    supported = negotiate_languages(
        convert_to_identifiers_lossy(requested),
        convert_to_identifiers_lossy(available),
        default_id,
        strategy,
    )
    return [str(loc) for loc in supported]
