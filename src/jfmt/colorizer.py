"""
Terminal syntax highlighting for serialized JSON.

The scanner only inserts escape sequences; removing them with
``click.unstyle`` gives back the input text unchanged.
"""

from typing import List, Optional

import click

from .config import ColorTheme

BRACES = frozenset("{}[]")
NUMBER_START = frozenset("0123456789-.")
NUMBER_CHARS = frozenset("0123456789.-eE+")
WHITESPACE = frozenset(" \t\r\n")

# (literal, theme attribute)
LITERALS = (
    ("true", "boolean"),
    ("false", "boolean"),
    ("null", "null"),
)


class JsonColorizer:
    """
    Single-pass colorizer over valid JSON text produced by our own encoder.

    Handles:
    - Key vs string value classification by looking past the closing quote
    - Escaped quotes inside string literals
    - Numbers with sign, fraction and exponent as one run
    - true/false/null literals and structural braces
    """

    def __init__(self, theme: Optional[ColorTheme] = None):
        self.theme = theme or ColorTheme()

    def colorize(self, text: str) -> str:
        """
        Wrap every JSON lexeme in text with its color and a reset.

        Args:
            text: Serialized JSON (indented or compact)

        Returns:
            Text with ANSI escape sequences inserted
        """
        parts: List[str] = []
        length = len(text)
        i = 0

        while i < length:
            char = text[i]

            if char == '"':
                end = self.string_end(text, i)
                color = self.theme.key if self.is_key(text, end) else self.theme.string
                parts.append(click.style(text[i:end], fg=color))
                i = end
                continue

            if char in BRACES:
                parts.append(click.style(char, fg=self.theme.brace))
                i += 1
                continue

            if char in NUMBER_START:
                end = i + 1
                while end < length and text[end] in NUMBER_CHARS:
                    end += 1
                parts.append(click.style(text[i:end], fg=self.theme.number))
                i = end
                continue

            literal = self._match_literal(text, i)
            if literal:
                word, attr = literal
                parts.append(click.style(word, fg=getattr(self.theme, attr)))
                i += len(word)
                continue

            parts.append(char)
            i += 1

        return "".join(parts)

    @staticmethod
    def string_end(text: str, start: int) -> int:
        """Index just past the closing quote of the literal opening at start."""
        length = len(text)
        i = start + 1
        while i < length:
            char = text[i]
            if char == "\\":
                i += 2
                continue
            if char == '"':
                return i + 1
            i += 1
        return length

    @staticmethod
    def is_key(text: str, end: int) -> bool:
        """True if the first non-whitespace character at or after end is a colon."""
        length = len(text)
        i = end
        while i < length and text[i] in WHITESPACE:
            i += 1
        return i < length and text[i] == ":"

    @staticmethod
    def _match_literal(text: str, position: int):
        for word, attr in LITERALS:
            if text.startswith(word, position):
                return word, attr
        return None


def colorize(text: str, theme: Optional[ColorTheme] = None) -> str:
    """Colorize serialized JSON with the given (or default) theme."""
    return JsonColorizer(theme).colorize(text)
