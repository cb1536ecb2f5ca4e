"""Tests for the JSON syntax colorizer."""

import json

import click
import pytest

from jfmt.colorizer import JsonColorizer, colorize
from jfmt.config import ColorTheme

KEY, STRING, NUMBER, BOOL, NULL, BRACE = 75, 114, 209, 170, 245, 248


def styled(text: str, code: int) -> str:
    return f"\x1b[38;5;{code}m{text}\x1b[0m"


class TestKeyClassification:
    def test_key_and_string_value(self):
        result = colorize('"name": "Bob"')
        assert result == styled('"name"', KEY) + ": " + styled('"Bob"', STRING)

    def test_key_followed_by_newline_before_colon(self):
        result = colorize('"a"\n  : 1')
        assert result.startswith(styled('"a"', KEY))

    def test_string_in_array_is_value(self):
        result = colorize('["x", "y"]')
        assert styled('"x"', STRING) in result
        assert styled('"y"', STRING) in result

    def test_colon_inside_string_does_not_make_key(self):
        result = colorize('{"a": "b:"}')
        assert styled('"b:"', STRING) in result

    def test_escaped_quotes_stay_inside_literal(self):
        text = r'{"k\"ey": "va\"l"}'
        result = colorize(text)
        assert styled(r'"k\"ey"', KEY) in result
        assert styled(r'"va\"l"', STRING) in result

    def test_escaped_backslash_before_closing_quote(self):
        text = r'["a\\", 1]'
        result = colorize(text)
        assert styled(r'"a\\"', STRING) in result
        assert styled("1", NUMBER) in result


class TestLexemes:
    def test_number_run_is_one_token(self):
        assert colorize("-3.14e+10") == styled("-3.14e+10", NUMBER)

    def test_compact_document(self):
        result = colorize('{"a":[1,true,null,false]}')
        expected = (
            styled("{", BRACE)
            + styled('"a"', KEY)
            + ":"
            + styled("[", BRACE)
            + styled("1", NUMBER)
            + ","
            + styled("true", BOOL)
            + ","
            + styled("null", NULL)
            + ","
            + styled("false", BOOL)
            + styled("]", BRACE)
            + styled("}", BRACE)
        )
        assert result == expected

    def test_braces_inside_strings_are_not_colored(self):
        result = colorize('["{[1]}"]')
        assert result == styled("[", BRACE) + styled('"{[1]}"', STRING) + styled("]", BRACE)

    def test_literal_words_inside_strings_are_opaque(self):
        result = colorize('"true null 12"')
        assert result == styled('"true null 12"', STRING)

    def test_empty_input(self):
        assert colorize("") == ""


class TestInvariants:
    @pytest.mark.parametrize("indent", [None, 2, 4])
    def test_unstyle_restores_serialization(self, sample_document, indent):
        text = json.dumps(sample_document, indent=indent, ensure_ascii=False)
        assert click.unstyle(colorize(text)) == text

    def test_unicode_content_preserved(self):
        text = json.dumps({"ключ": "значение ☃"}, ensure_ascii=False)
        result = colorize(text)
        assert click.unstyle(result) == text
        assert styled('"ключ"', KEY) in result


class TestTheme:
    def test_custom_theme(self):
        theme = ColorTheme(key=1, string=2, number=3, boolean=4, null=5, brace=6)
        colorizer = JsonColorizer(theme)
        result = colorizer.colorize('{"a": 1}')
        assert result == styled("{", 6) + styled('"a"', 1) + ": " + styled("1", 3) + styled("}", 6)

    def test_default_theme(self):
        assert JsonColorizer().theme == ColorTheme()


class TestScannerHelpers:
    def test_string_end(self):
        assert JsonColorizer.string_end('"ab" rest', 0) == 4
        assert JsonColorizer.string_end(r'"a\"b"', 0) == 6

    def test_string_end_unterminated(self):
        assert JsonColorizer.string_end('"abc', 0) == 4

    def test_is_key(self):
        assert JsonColorizer.is_key('"a" \t:', 3) is True
        assert JsonColorizer.is_key('"a" ,', 3) is False
        assert JsonColorizer.is_key('"a"', 3) is False
