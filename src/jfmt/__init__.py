"""jfmt - JSON formatter in a flash

Pretty-prints JSON from files, URLs, pipes or the clipboard with optional
key sorting, lenient repair and terminal syntax highlighting.
"""

__version__ = "0.1.0"

from .colorizer import JsonColorizer, colorize
from .config import ColorTheme, FormatOptions, JfmtSettings, load_settings
from .diagnostics import describe_syntax_error, locate_position, render_error_context
from .formatter import FormattedDocument, decode_document, encode_document, format_document
from .repair import repair_json
from .sorter import sort_keys
from .types import (
    ClipboardError,
    ClipboardUnsupportedError,
    InputError,
    JfmtError,
    JsonArray,
    JsonBool,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonSyntaxError,
    JsonValue,
    NoInputError,
    SerializationError,
)

__all__ = [
    "__version__",
    # Pipeline
    "format_document",
    "decode_document",
    "encode_document",
    "FormattedDocument",
    # Components
    "JsonColorizer",
    "colorize",
    "repair_json",
    "sort_keys",
    "locate_position",
    "render_error_context",
    "describe_syntax_error",
    # Configuration
    "FormatOptions",
    "ColorTheme",
    "JfmtSettings",
    "load_settings",
    # Value tree
    "JsonValue",
    "JsonObject",
    "JsonArray",
    "JsonString",
    "JsonNumber",
    "JsonBool",
    "JsonNull",
    # Errors
    "JfmtError",
    "InputError",
    "NoInputError",
    "JsonSyntaxError",
    "SerializationError",
    "ClipboardError",
    "ClipboardUnsupportedError",
]
