"""Tests for error position lookup and context rendering."""

from unittest.mock import patch

import pytest

from jfmt.diagnostics import describe_syntax_error, locate_position, render_error_context
from jfmt.types import JsonSyntaxError


class TestLocatePosition:
    @pytest.mark.parametrize(
        "text,offset,expected",
        [
            ("abc", 0, (1, 1)),
            ("abc", 2, (1, 3)),
            ("ab\ncd", 3, (2, 1)),
            ("ab\ncd", 4, (2, 2)),
            ("a\n\nb", 3, (3, 1)),
        ],
    )
    def test_positions(self, text, offset, expected):
        assert locate_position(text, offset) == expected

    def test_offset_at_end_of_input(self):
        assert locate_position("ab", 2) == (1, 3)

    def test_offset_beyond_input_is_clamped(self):
        assert locate_position("ab\nc", 100) == (2, 2)

    def test_negative_offset(self):
        assert locate_position("abc", -5) == (1, 1)


class TestRenderErrorContext:
    def test_caret_under_faulting_column(self):
        lines = render_error_context('{"a":}', 5, color=False)
        assert lines == ['  {"a":}', "       ^"]

    def test_selects_offending_line(self):
        text = '{\n  "a":\n}'
        lines = render_error_context(text, 9, color=False)
        assert lines == ["  }", "  ^"]

    def test_offset_equal_to_length(self):
        lines = render_error_context('{"a":', 5, color=False)
        assert lines == ['  {"a":', "       ^"]

    def test_colored_caret(self):
        lines = render_error_context("x", 0)
        assert lines[1] == "  \x1b[31m^\x1b[0m"

    def test_line_past_end_is_silent(self):
        with patch("jfmt.diagnostics.locate_position", return_value=(5, 1)):
            assert render_error_context("one line", 0) == []


class TestDescribeSyntaxError:
    def test_with_offset(self):
        error = JsonSyntaxError("Expecting value", text='{"a":}', offset=5)
        assert describe_syntax_error(error, color=False) == [
            "Error: Invalid JSON",
            "  at line 1, column 6",
            "",
            '  {"a":}',
            "       ^",
        ]

    def test_without_offset(self):
        error = JsonSyntaxError("Invalid JSON literal: NaN")
        assert describe_syntax_error(error, color=False) == [
            "Error: Invalid JSON",
            "  Invalid JSON literal: NaN",
        ]

    def test_colored_header(self):
        error = JsonSyntaxError("bad")
        assert describe_syntax_error(error)[0] == "\x1b[31mError:\x1b[0m Invalid JSON"

    def test_error_position_property(self):
        error = JsonSyntaxError("bad", text="[\n 1,,\n]", offset=5)
        assert error.position == (2, 5)
        assert JsonSyntaxError("bad").position is None
