"""Enumerations for langneg type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.11+.
"""

from enum import StrEnum


class NegotiationStrategy(StrEnum):
    """Policy controlling how many matches are collected and when to stop.

    StrEnum provides automatic string conversion: str(NegotiationStrategy.LOOKUP) == "lookup"
    """

    FILTERING = "filtering"
    """Collect every available match for every requested locale."""

    MATCHING = "matching"
    """Take the first match of the first successful stage per requested locale."""

    LOOKUP = "lookup"
    """Stop the whole negotiation at the first match."""


class TransformResult(StrEnum):
    """Outcome of a likely-subtags transformation.

    StrEnum provides automatic string conversion: str(TransformResult.MODIFIED) == "modified"
    """

    MODIFIED = "modified"
    """The identifier gained at least one subtag."""

    UNMODIFIED = "unmodified"
    """No table entry applied; the identifier is returned unchanged."""


class ParseErrorKind(StrEnum):
    """Reason a language tag was rejected by the parser.

    StrEnum provides automatic string conversion: str(ParseErrorKind.SUBTAG_TOO_LONG) == "subtag_too_long"
    """

    INVALID_LANGUAGE = "invalid_language"
    """Primary subtag has the wrong shape, or the input is not ASCII."""

    INVALID_SUBTAG = "invalid_subtag"
    """A subtag matches no grammar rule at its position."""

    SUBTAG_TOO_LONG = "subtag_too_long"
    """A subtag exceeds eight characters."""

    DUPLICATE_EXTENSION = "duplicate_extension"
    """The same extension singleton appears twice."""

    EMPTY_EXTENSION = "empty_extension"
    """An extension singleton is not followed by any subtag."""

    EMPTY_PRIVATE_USE = "empty_private_use"
    """The private-use singleton ``x`` is not followed by any subtag."""

    TOO_MANY_EXTLANGS = "too_many_extlangs"
    """More than three extended language subtags."""


class TinyStrErrorKind(StrEnum):
    """Reason a compact subtag value could not be constructed.

    StrEnum provides automatic string conversion: str(TinyStrErrorKind.NON_ASCII) == "non_ascii"
    """

    INVALID_SIZE = "invalid_size"
    """Empty, or longer than the fixed capacity."""

    NON_ASCII = "non_ascii"
    """Contains a byte >= 0x80."""

    INVALID_NULL = "invalid_null"
    """Contains an embedded NUL byte (reserved as padding)."""


__all__ = [
    "NegotiationStrategy",
    "ParseErrorKind",
    "TinyStrErrorKind",
    "TransformResult",
]
