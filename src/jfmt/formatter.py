"""
Decode, reorder, re-encode and highlight a JSON document.
"""

import json
from dataclasses import dataclass
from typing import Optional

from loguru import logger

from .colorizer import colorize
from .config import FormatOptions, JfmtSettings
from .repair import repair_json
from .sorter import sort_keys
from .types import JsonSyntaxError, JsonValue, SerializationError, from_python, to_python


@dataclass
class FormattedDocument:
    """Result of formatting: plain text for the clipboard, rendered text for display."""
    serialized: str
    rendered: str


def _reject_constant(name: str):
    raise ValueError(f"Invalid JSON literal: {name}")


def decode_text(raw: bytes) -> str:
    """Decode raw input as UTF-8, replacing invalid sequences."""
    return raw.decode("utf-8", errors="replace")


def decode_document(raw: bytes, repair: bool = False) -> JsonValue:
    """
    Parse raw input into a value tree.

    Args:
        raw: Input bytes
        repair: Apply the lenient repair pass before parsing

    Returns:
        Decoded JsonValue

    Raises:
        JsonSyntaxError: If the text is not valid JSON
    """
    text = decode_text(raw)
    if repair:
        text = repair_json(text)

    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise JsonSyntaxError(e.msg, text=text, offset=e.pos) from e
    except (ValueError, RecursionError) as e:
        raise JsonSyntaxError(str(e)) from e

    logger.debug(f"Decoded {type(data).__name__} document from {len(raw)} bytes")
    return from_python(data)


def encode_document(value: JsonValue, compact: bool = False, indent: int = 2) -> str:
    """
    Serialize a value tree.

    Raises:
        SerializationError: If the tree cannot be encoded
    """
    try:
        data = to_python(value)
        if compact:
            return json.dumps(data, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
        return json.dumps(data, indent=indent, ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError, RecursionError) as e:
        raise SerializationError(str(e)) from e


def format_document(
    raw: bytes,
    options: FormatOptions,
    settings: Optional[JfmtSettings] = None,
    color: bool = False,
) -> FormattedDocument:
    """Run the full decode / sort / encode / colorize pipeline for one document."""
    settings = settings or JfmtSettings()

    value = decode_document(raw, repair=options.attempt_repair)
    if options.sort_keys:
        value = sort_keys(value)

    serialized = encode_document(value, compact=options.compact, indent=settings.indent)
    rendered = colorize(serialized, settings.theme) if color else serialized
    return FormattedDocument(serialized=serialized, rendered=rendered)
