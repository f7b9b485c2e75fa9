# =============================================================================
# test_diagnostics.py - Diagnostic and Error Formatting Tests
# =============================================================================
# Covers LexError rendering, conversion to RoxSyntaxError and the
# aggregate ScanFailedError report.
# =============================================================================

from rox.diagnostics import LexError, LexErrorKind, format_report
from rox.errors import (
    RoxError,
    RoxSyntaxError,
    ScanFailedError,
    SourceLocation,
)
from rox.scanner import scan


class TestLexError:
    """Short and detailed renderings of a single diagnostic."""

    def test_short_format(self):
        error = LexError(LexErrorKind.UNEXPECTED_CHARACTER, "Unexpected character.", 3, 9)
        assert str(error) == "[line 3] Error: Unexpected character."

    def test_messages(self):
        _, errors = scan('@ "x')
        assert [e.message for e in errors] == [
            "Unexpected character.",
            "Unterminated string.",
        ]

    def test_only_invalid_number_is_internal(self):
        assert LexError(LexErrorKind.INVALID_NUMBER, "bad", 1).is_internal
        assert not LexError(LexErrorKind.UNTERMINATED_STRING, "bad", 1).is_internal
        assert not LexError(LexErrorKind.UNEXPECTED_CHARACTER, "bad", 1).is_internal

    def test_to_exception_points_at_column(self):
        _, errors = scan("var @")
        exc = errors[0].to_exception("f.rox")
        assert isinstance(exc, RoxSyntaxError)
        assert exc.location == SourceLocation("f.rox", 1, 5)
        assert str(exc) == (
            "f.rox:1:5: error: Unexpected character.\n"
            "    var @\n"
            "        ^"
        )

    def test_unterminated_string_has_hint(self):
        _, errors = scan('"abc')
        exc = errors[0].to_exception("f.rox")
        assert str(exc).splitlines()[-1] == "hint: add closing '\"' to complete the string"

    def test_format_report(self):
        _, errors = scan("@\n#")
        assert format_report(errors) == (
            "[line 1] Error: Unexpected character.\n"
            "[line 2] Error: Unexpected character."
        )


class TestExceptions:
    """Exception hierarchy behaviour."""

    def test_hierarchy(self):
        assert issubclass(RoxSyntaxError, RoxError)
        assert issubclass(ScanFailedError, RoxError)

    def test_syntax_error_without_location(self):
        assert str(RoxSyntaxError("oops")) == "error: oops"

    def test_source_location_str(self):
        assert str(SourceLocation("a.rox", 4, 2)) == "a.rox:4:2"

    def test_scan_failed_detailed(self):
        _, errors = scan("@")
        exc = ScanFailedError(errors, "bad.rox")
        assert str(exc) == "[line 1] Error: Unexpected character."
        assert exc.detailed().startswith("bad.rox:1:1: error: Unexpected character.")
