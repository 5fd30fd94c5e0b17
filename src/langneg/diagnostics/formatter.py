"""Diagnostic formatting service.

Renders language tag diagnostics for terminals, logs and tooling. The
default style quotes the tag and underlines the offending subtag:

    error[INVALID_SUBTAG]: Invalid subtag 'a1' in 'en-US-a1'
      --> column 7
       |
       | en-US-a1
       |       ^^
      = help: Subtags must follow language-script-region-variant order

Python 3.11+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic, SourceSpan

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]

# C0 controls and DEL, escaped so that user-supplied tags cannot forge log lines.
_CONTROL_ESCAPES = {i: f"\\x{i:02x}" for i in (*range(0x20), 0x7F)}

_GUTTER = "   |"

_BOLD_RED = "\033[1;31m"
_BOLD_YELLOW = "\033[1;33m"
_RESET = "\033[0m"


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Quoted tag with caret underline (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


def _escape(text: str) -> str:
    return text.translate(_CONTROL_ESCAPES)


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Attributes:
        output_format: Output style (rust, simple, json)
        sanitize: Truncate messages and tags longer than max_content_length
        color: Enable ANSI color codes (for terminal output)
        max_content_length: Maximum content length when sanitizing

    Example:
        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> span = SourceSpan(0, 10)
        >>> diagnostic = ErrorTemplate.subtag_too_long("verybroken-tag", "verybroken", span, 8)
        >>> print(formatter.format(diagnostic))
        SUBTAG_TOO_LONG: Subtag 'verybroken' exceeds 8 characters
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    color: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic according to output_format."""
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return f"{diagnostic.code.name}: {self._text(diagnostic.message)}"
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format several diagnostics, separated by blank lines."""
        return "\n\n".join(self.format(d) for d in diagnostics)

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        severity = "warning" if diagnostic.severity == "warning" else "error"
        if self.color:
            highlight = _BOLD_YELLOW if severity == "warning" else _BOLD_RED
            severity = f"{highlight}{severity}{_RESET}"

        lines = [f"{severity}[{diagnostic.code.name}]: {self._text(diagnostic.message)}"]

        if diagnostic.span is not None:
            lines.append(f"  --> column {diagnostic.span.column}")
        if diagnostic.tag is not None:
            lines.append(_GUTTER)
            lines.extend(self._quote_tag(diagnostic.tag, diagnostic.span))

        if diagnostic.hint:
            lines.append(f"  = help: {self._text(diagnostic.hint)}")
        if diagnostic.help_url:
            lines.append(f"  = note: see {diagnostic.help_url}")
        return "\n".join(lines)

    def _quote_tag(self, tag: str, span: SourceSpan | None) -> list[str]:
        """Quote the tag under the gutter, with carets below the span.

        Caret offsets are measured on the escaped text so they stay aligned
        when the tag contains control characters. The underline is dropped
        when sanitizing cut the tag before the span starts.
        """
        if self.sanitize and len(tag) > self.max_content_length:
            tag = tag[: self.max_content_length]
            truncated = True
        else:
            truncated = False

        quoted = [f"{_GUTTER} {_escape(tag)}{'...' if truncated else ''}"]
        if span is None or span.start > len(tag):
            return quoted

        indent = len(_escape(tag[: span.start]))
        width = max(len(_escape(tag[span.start : span.end])), 1)
        carets = "^" * width
        if self.color:
            carets = f"{_BOLD_RED}{carets}{_RESET}"
        quoted.append(f"{_GUTTER} {' ' * indent}{carets}")
        return quoted

    def _format_json(self, diagnostic: Diagnostic) -> str:
        data: dict[str, str | int | None] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": self._truncate(diagnostic.message),
            "severity": diagnostic.severity,
        }
        if diagnostic.span:
            data["start"] = diagnostic.span.start
            data["end"] = diagnostic.span.end
            data["column"] = diagnostic.span.column
        if diagnostic.tag is not None:
            data["tag"] = self._truncate(diagnostic.tag)
        if diagnostic.hint:
            data["hint"] = self._truncate(diagnostic.hint)
        if diagnostic.help_url:
            data["help_url"] = diagnostic.help_url
        return json.dumps(data, ensure_ascii=False)

    def _text(self, text: str) -> str:
        return _escape(self._truncate(text))

    def _truncate(self, text: str) -> str:
        if self.sanitize and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text
