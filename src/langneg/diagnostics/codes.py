"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.11+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Language tag parse errors
        2000-2999: Compact subtag value errors
    """

    # Language tag parse errors (1000-1999)
    INVALID_LANGUAGE = 1001
    INVALID_SUBTAG = 1002
    SUBTAG_TOO_LONG = 1003
    DUPLICATE_EXTENSION = 1004
    EMPTY_EXTENSION = 1005
    EMPTY_PRIVATE_USE = 1006
    TOO_MANY_EXTLANGS = 1007

    # Compact subtag value errors (2000-2999)
    TINYSTR_INVALID_SIZE = 2001
    TINYSTR_NON_ASCII = 2002
    TINYSTR_INVALID_NULL = 2003


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Location of a subtag inside the tag being parsed.

    Language tags are single-line, so only character offsets are tracked.
    The column is derived for display.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative or end precedes start.
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)

    @property
    def column(self) -> int:
        """1-indexed column of the span start."""
        return self.start + 1


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Location of the offending subtag (None when not applicable)
        hint: Suggestion for fixing the error
        help_url: Documentation URL for this error
        tag: The full input that failed
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    help_url: str | None = None
    tag: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output with
        control-character escaping.

        Example output:
            error[SUBTAG_TOO_LONG]: Subtag 'verybroken' exceeds 8 characters
              --> column 1
               |
               | verybroken-tag
               | ^^^^^^^^^^
              = help: Shorten the subtag or remove it
              = note: see https://www.rfc-editor.org/rfc/rfc5646#section-2.1

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
