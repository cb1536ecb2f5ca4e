"""
Error position reporting for invalid JSON input.
"""

from typing import List, Tuple

import click

from .types import JsonSyntaxError


def locate_position(text: str, offset: int) -> Tuple[int, int]:
    """
    Map an offset in text to a 1-based (line, column) pair.

    Offsets past the end of text stop at the end of input, so this never
    fails.

    Args:
        text: Input as decoded text
        offset: Zero-based character offset reported by the decoder

    Returns:
        Tuple of (line, column)
    """
    line = 1
    col = 1
    for char in text[:max(offset, 0)]:
        if char == "\n":
            line += 1
            col = 1
        else:
            col += 1
    return line, col


def render_error_context(text: str, offset: int, color: bool = True) -> List[str]:
    """
    Render the line containing offset with a caret under the faulting column.

    Returns an empty list when the located line does not exist in text.
    """
    lines = text.split("\n")
    line, col = locate_position(text, offset)

    if line > len(lines):
        return []

    caret = click.style("^", fg="red") if color else "^"
    return [
        f"  {lines[line - 1]}",
        f"  {' ' * (col - 1)}{caret}",
    ]


def describe_syntax_error(error: JsonSyntaxError, color: bool = True) -> List[str]:
    """Build the full stderr diagnostic for a JSON syntax error."""
    label = click.style("Error:", fg="red") if color else "Error:"
    output = [f"{label} Invalid JSON"]

    position = error.position
    if position is None:
        output.append(f"  {error.message}")
        return output

    line, col = position
    output.append(f"  at line {line}, column {col}")
    output.append("")
    output.extend(render_error_context(error.text, error.offset, color=color))
    return output
