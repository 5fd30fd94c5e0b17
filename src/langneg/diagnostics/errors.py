"""langneg exception hierarchy with structured diagnostics.

Integrates with diagnostic codes for Rust/Elm-inspired error messages.
All exceptions store Diagnostic objects for rich error information.

Python 3.11+. Zero external dependencies.
"""

from langneg.enums import ParseErrorKind, TinyStrErrorKind

from .codes import Diagnostic

__all__ = [
    "LangNegError",
    "LanguageTagError",
    "TinyStrError",
]


class LangNegError(Exception):
    """Base exception for all langneg errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize LangNegError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class LanguageTagError(LangNegError, ValueError):
    """A language tag could not be parsed or a subtag failed validation.

    Subclasses ValueError so that callers treating tags as plain values
    can catch the usual exception type.

    Attributes:
        kind: Which grammar rule was violated
        tag: The full input that failed
        subtag: The offending subtag ("" for whole-input failures)

    Example:
        >>> try:
        ...     parse_tag("verybroken-tag")
        ... except LanguageTagError as e:
        ...     print(e.kind)
        subtag_too_long
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        kind: ParseErrorKind,
        tag: str = "",
        subtag: str = "",
    ) -> None:
        """Initialize LanguageTagError.

        Args:
            message: Error message string OR Diagnostic object
            kind: Violated grammar rule
            tag: The full input that failed
            subtag: The offending subtag
        """
        super().__init__(message)
        self.kind = kind
        self.tag = tag
        self.subtag = subtag


class TinyStrError(LangNegError, ValueError):
    """A compact subtag value could not be constructed.

    Attributes:
        kind: Why the input was rejected
    """

    def __init__(self, message: str | Diagnostic, *, kind: TinyStrErrorKind) -> None:
        """Initialize TinyStrError.

        Args:
            message: Error message string OR Diagnostic object
            kind: Rejection reason
        """
        super().__init__(message)
        self.kind = kind
