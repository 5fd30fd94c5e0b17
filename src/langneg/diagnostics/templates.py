"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.11+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This solves EM101/EM102 violations while providing:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    # Base documentation URL (RFC 5646, Tags for Identifying Languages)
    _DOCS_BASE = "https://www.rfc-editor.org/rfc/rfc5646"

    @staticmethod
    def invalid_language(tag: str, subtag: str, span: SourceSpan | None) -> Diagnostic:
        """Primary language subtag has the wrong shape.

        Args:
            tag: The full input
            subtag: The rejected primary subtag
            span: Location of the subtag (None for whole-input failures)

        Returns:
            Diagnostic for INVALID_LANGUAGE
        """
        msg = f"Invalid language subtag '{subtag}'"
        return Diagnostic(
            code=DiagnosticCode.INVALID_LANGUAGE,
            message=msg,
            span=span,
            hint="The primary language must be 2-3 ASCII letters, or 'und'",
            help_url=f"{ErrorTemplate._DOCS_BASE}#section-2.2.1",
            tag=tag,
        )

    @staticmethod
    def non_ascii(tag: str) -> Diagnostic:
        """Tag contains a non-ASCII character.

        Args:
            tag: The full input

        Returns:
            Diagnostic for INVALID_LANGUAGE
        """
        msg = f"Language tag {tag!r} contains non-ASCII characters"
        return Diagnostic(
            code=DiagnosticCode.INVALID_LANGUAGE,
            message=msg,
            span=None,
            hint="Language tags are restricted to ASCII letters, digits and '-'",
            help_url=f"{ErrorTemplate._DOCS_BASE}#section-2.1",
            tag=tag,
        )

    @staticmethod
    def invalid_subtag(tag: str, subtag: str, span: SourceSpan) -> Diagnostic:
        """Subtag matches no grammar rule at its position.

        Args:
            tag: The full input
            subtag: The rejected subtag
            span: Location of the subtag

        Returns:
            Diagnostic for INVALID_SUBTAG
        """
        msg = f"Invalid subtag '{subtag}' in '{tag}'"
        return Diagnostic(
            code=DiagnosticCode.INVALID_SUBTAG,
            message=msg,
            span=span,
            hint="Subtags must follow language-script-region-variant order",
            help_url=f"{ErrorTemplate._DOCS_BASE}#section-2.1",
            tag=tag,
        )

    @staticmethod
    def subtag_too_long(tag: str, subtag: str, span: SourceSpan, max_length: int) -> Diagnostic:
        """Subtag exceeds the maximum length.

        Args:
            tag: The full input
            subtag: The rejected subtag
            span: Location of the subtag
            max_length: Maximum allowed subtag length

        Returns:
            Diagnostic for SUBTAG_TOO_LONG
        """
        msg = f"Subtag '{subtag}' exceeds {max_length} characters"
        return Diagnostic(
            code=DiagnosticCode.SUBTAG_TOO_LONG,
            message=msg,
            span=span,
            hint="Shorten the subtag or remove it",
            help_url=f"{ErrorTemplate._DOCS_BASE}#section-2.1",
            tag=tag,
        )

    @staticmethod
    def duplicate_extension(tag: str, singleton: str, span: SourceSpan) -> Diagnostic:
        """Extension singleton repeated.

        Args:
            tag: The full input
            singleton: The repeated singleton
            span: Location of the second occurrence

        Returns:
            Diagnostic for DUPLICATE_EXTENSION
        """
        msg = f"Extension '{singleton}' appears more than once in '{tag}'"
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_EXTENSION,
            message=msg,
            span=span,
            hint=f"Merge all '{singleton}-' fields into a single extension",
            help_url=f"{ErrorTemplate._DOCS_BASE}#section-2.2.6",
            tag=tag,
        )

    @staticmethod
    def empty_extension(tag: str, singleton: str, span: SourceSpan) -> Diagnostic:
        """Extension singleton with no following subtags.

        Args:
            tag: The full input
            singleton: The empty singleton
            span: Location of the singleton

        Returns:
            Diagnostic for EMPTY_EXTENSION
        """
        msg = f"Extension '{singleton}' has no subtags in '{tag}'"
        return Diagnostic(
            code=DiagnosticCode.EMPTY_EXTENSION,
            message=msg,
            span=span,
            hint="Add key-value subtags after the singleton, or remove it",
            help_url=f"{ErrorTemplate._DOCS_BASE}#section-2.2.6",
            tag=tag,
        )

    @staticmethod
    def empty_private_use(tag: str, span: SourceSpan) -> Diagnostic:
        """Private-use singleton with no following subtags.

        Args:
            tag: The full input
            span: Location of the singleton

        Returns:
            Diagnostic for EMPTY_PRIVATE_USE
        """
        msg = f"Private-use section is empty in '{tag}'"
        return Diagnostic(
            code=DiagnosticCode.EMPTY_PRIVATE_USE,
            message=msg,
            span=span,
            hint="Add subtags after 'x', or remove it",
            help_url=f"{ErrorTemplate._DOCS_BASE}#section-2.2.7",
            tag=tag,
        )

    @staticmethod
    def too_many_extlangs(tag: str, subtag: str, span: SourceSpan, max_extlangs: int) -> Diagnostic:
        """Extended language subtag limit exceeded.

        Args:
            tag: The full input
            subtag: The extlang that exceeded the limit
            span: Location of the subtag
            max_extlangs: Maximum number of extlangs

        Returns:
            Diagnostic for TOO_MANY_EXTLANGS
        """
        msg = f"More than {max_extlangs} extended language subtags in '{tag}'"
        return Diagnostic(
            code=DiagnosticCode.TOO_MANY_EXTLANGS,
            message=msg,
            span=span,
            hint=f"Remove '{subtag}'; at most {max_extlangs} extlangs are allowed",
            help_url=f"{ErrorTemplate._DOCS_BASE}#section-2.2.2",
            tag=tag,
        )

    @staticmethod
    def tinystr_invalid_size(text: str, capacity: int) -> Diagnostic:
        """Compact value input is empty or too long.

        Args:
            text: The rejected input
            capacity: Capacity of the compact type in bytes

        Returns:
            Diagnostic for TINYSTR_INVALID_SIZE
        """
        msg = f"Cannot store {text!r} in {capacity} bytes: length must be 1-{capacity}"
        return Diagnostic(
            code=DiagnosticCode.TINYSTR_INVALID_SIZE,
            message=msg,
            hint=f"Use an input of 1 to {capacity} ASCII characters",
        )

    @staticmethod
    def tinystr_non_ascii(text: str) -> Diagnostic:
        """Compact value input contains non-ASCII bytes.

        Args:
            text: The rejected input

        Returns:
            Diagnostic for TINYSTR_NON_ASCII
        """
        msg = f"Cannot store {text!r}: contains non-ASCII characters"
        return Diagnostic(
            code=DiagnosticCode.TINYSTR_NON_ASCII,
            message=msg,
            hint="Only ASCII characters can be stored in a compact subtag",
        )

    @staticmethod
    def tinystr_invalid_null(text: str) -> Diagnostic:
        """Compact value input contains an embedded NUL.

        Args:
            text: The rejected input

        Returns:
            Diagnostic for TINYSTR_INVALID_NULL
        """
        msg = f"Cannot store {text!r}: contains a NUL character"
        return Diagnostic(
            code=DiagnosticCode.TINYSTR_INVALID_NULL,
            message=msg,
            hint="NUL is reserved as padding in compact subtags",
        )
