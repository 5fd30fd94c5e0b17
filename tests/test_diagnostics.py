"""Tests for diagnostics - codes, templates, formatter and exceptions.

Python 3.11+.
"""

import json

import pytest
from hypothesis import given
from hypothesis import strategies as st

from langneg import LangNegError, LanguageTagError, TinyStrError, parse_tag
from langneg.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorTemplate,
    OutputFormat,
    SourceSpan,
)
from langneg.enums import ParseErrorKind, TinyStrErrorKind


class TestSourceSpan:
    def test_column_is_one_indexed(self) -> None:
        assert SourceSpan(0, 2).column == 1
        assert SourceSpan(6, 8).column == 7

    def test_negative_start_rejected(self) -> None:
        with pytest.raises(ValueError, match="start must be >= 0"):
            SourceSpan(-1, 2)

    def test_end_before_start_rejected(self) -> None:
        with pytest.raises(ValueError, match="must be >= start"):
            SourceSpan(3, 2)


class TestDiagnosticCodes:
    def test_parse_error_kinds_have_codes(self) -> None:
        """Every ParseErrorKind has a same-named code in the 1000 range."""
        for kind in ParseErrorKind:
            assert 1000 < DiagnosticCode[kind.name].value < 2000

    def test_tinystr_kinds_have_codes(self) -> None:
        for kind in TinyStrErrorKind:
            assert 2000 < DiagnosticCode[f"TINYSTR_{kind.name}"].value < 3000

    def test_codes_unique(self) -> None:
        values = [code.value for code in DiagnosticCode]
        assert len(values) == len(set(values))


class TestErrorTemplate:
    def test_subtag_too_long(self) -> None:
        diagnostic = ErrorTemplate.subtag_too_long("verybroken-tag", "verybroken", SourceSpan(0, 10), 8)
        assert diagnostic.code == DiagnosticCode.SUBTAG_TOO_LONG
        assert diagnostic.message == "Subtag 'verybroken' exceeds 8 characters"
        assert diagnostic.tag == "verybroken-tag"
        assert diagnostic.help_url is not None
        assert diagnostic.help_url.startswith("https://www.rfc-editor.org/rfc/rfc5646")
        assert str(diagnostic) == diagnostic.message

    def test_non_ascii_has_no_span(self) -> None:
        diagnostic = ErrorTemplate.non_ascii("ü")
        assert diagnostic.code == DiagnosticCode.INVALID_LANGUAGE
        assert diagnostic.span is None

    def test_too_many_extlangs_hint_names_subtag(self) -> None:
        diagnostic = ErrorTemplate.too_many_extlangs("zh-a-b", "jkl", SourceSpan(0, 3), 3)
        assert diagnostic.hint is not None
        assert "'jkl'" in diagnostic.hint

    def test_tinystr_templates(self) -> None:
        assert ErrorTemplate.tinystr_invalid_size("", 4).code == DiagnosticCode.TINYSTR_INVALID_SIZE
        assert ErrorTemplate.tinystr_non_ascii("é").code == DiagnosticCode.TINYSTR_NON_ASCII
        assert ErrorTemplate.tinystr_invalid_null("\x00").code == DiagnosticCode.TINYSTR_INVALID_NULL


class TestDiagnosticFormatter:
    @pytest.fixture
    def diagnostic(self) -> Diagnostic:
        return ErrorTemplate.invalid_subtag("en-US-a1", "a1", SourceSpan(6, 8))

    def test_rust_format(self, diagnostic: Diagnostic) -> None:
        output = DiagnosticFormatter().format(diagnostic)
        lines = output.splitlines()
        assert lines[0] == "error[INVALID_SUBTAG]: Invalid subtag 'a1' in 'en-US-a1'"
        assert lines[1:5] == ["  --> column 7", "   |", "   | en-US-a1", "   |       ^^"]
        assert lines[5].startswith("  = help: ")
        assert lines[6].startswith("  = note: see https://")

    def test_rust_format_without_span(self) -> None:
        output = DiagnosticFormatter().format(ErrorTemplate.non_ascii("ü"))
        lines = output.splitlines()
        assert "   | ü" in lines
        assert not any("^" in line for line in lines)
        assert not any(line.startswith("  -->") for line in lines)

    def test_caret_aligned_after_escaped_control(self) -> None:
        diagnostic = ErrorTemplate.invalid_subtag("a\tb-cd", "cd", SourceSpan(4, 6))
        lines = DiagnosticFormatter().format(diagnostic).splitlines()
        assert "   | a\\x09b-cd" in lines
        assert "   |        ^^" in lines

    def test_sanitize_drops_caret_past_truncation(self) -> None:
        tag = "en-" + "a" * 20
        diagnostic = ErrorTemplate.invalid_subtag(tag, "b", SourceSpan(20, 21))
        formatter = DiagnosticFormatter(sanitize=True, max_content_length=10)
        lines = formatter.format(diagnostic).splitlines()
        assert "   | en-aaaaaaa..." in lines
        assert not any(line.startswith("   | ") and set(line[5:]) == {" ", "^"} for line in lines)

    def test_simple_format(self, diagnostic: Diagnostic) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        assert formatter.format(diagnostic) == "INVALID_SUBTAG: Invalid subtag 'a1' in 'en-US-a1'"

    def test_json_format(self, diagnostic: Diagnostic) -> None:
        data = json.loads(DiagnosticFormatter(output_format=OutputFormat.JSON).format(diagnostic))
        assert data["code"] == "INVALID_SUBTAG"
        assert data["code_value"] == 1002
        assert (data["start"], data["end"], data["column"]) == (6, 8, 7)
        assert data["tag"] == "en-US-a1"
        assert data["severity"] == "error"

    def test_color(self, diagnostic: Diagnostic) -> None:
        output = DiagnosticFormatter(color=True).format(diagnostic)
        assert output.startswith("\033[1;31merror\033[0m")

    def test_warning_severity(self) -> None:
        diagnostic = Diagnostic(code=DiagnosticCode.INVALID_SUBTAG, message="m", severity="warning")
        assert DiagnosticFormatter().format(diagnostic).startswith("warning[")

    def test_sanitize_truncates(self) -> None:
        diagnostic = Diagnostic(code=DiagnosticCode.INVALID_SUBTAG, message="x" * 50)
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE, sanitize=True, max_content_length=10)
        assert formatter.format(diagnostic) == "INVALID_SUBTAG: " + "x" * 10 + "..."

    def test_control_characters_escaped(self) -> None:
        diagnostic = ErrorTemplate.invalid_subtag("en\nfake", "a", SourceSpan(0, 1))
        output = DiagnosticFormatter().format(diagnostic)
        assert "en\\x0afake" in output
        assert len(output.splitlines()) == 7

    def test_format_all(self, diagnostic: Diagnostic) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        assert formatter.format_all([diagnostic, diagnostic]).count("\n\n") == 1

    @given(text=st.text(max_size=40))
    def test_rust_output_never_gains_lines(self, text: str) -> None:
        """User-controlled text cannot inject extra output lines."""
        diagnostic = ErrorTemplate.invalid_subtag(text, text, SourceSpan(0, len(text)))
        output = DiagnosticFormatter().format(diagnostic)
        assert output.count("\n") == 6


class TestExceptions:
    def test_hierarchy(self) -> None:
        assert issubclass(LanguageTagError, LangNegError)
        assert issubclass(LanguageTagError, ValueError)
        assert issubclass(TinyStrError, LangNegError)
        assert issubclass(TinyStrError, ValueError)

    def test_plain_message(self) -> None:
        error = LangNegError("boom")
        assert str(error) == "boom"
        assert error.diagnostic is None

    def test_language_tag_error_attributes(self) -> None:
        with pytest.raises(LanguageTagError) as exc_info:
            parse_tag("en-u-hc-h12-u-ca-gregory")
        error = exc_info.value
        assert error.kind is ParseErrorKind.DUPLICATE_EXTENSION
        assert error.tag == "en-u-hc-h12-u-ca-gregory"
        assert error.subtag == "u"
        assert str(error) == "Extension 'u' appears more than once in 'en-u-hc-h12-u-ca-gregory'"
