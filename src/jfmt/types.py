"""
JSON value tree and error types for jfmt.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union


@dataclass
class JsonObject:
    """Mapping node. Member order is the iteration order used on output."""
    members: Dict[str, "JsonValue"] = field(default_factory=dict)


@dataclass
class JsonArray:
    """Ordered sequence node."""
    items: List["JsonValue"] = field(default_factory=list)


@dataclass
class JsonString:
    value: str


@dataclass
class JsonNumber:
    value: Union[int, float]


@dataclass
class JsonBool:
    value: bool


@dataclass
class JsonNull:
    pass


JsonValue = Union[JsonObject, JsonArray, JsonString, JsonNumber, JsonBool, JsonNull]


LONE_SURROGATE = re.compile("[\ud800-\udfff]")


def replace_surrogates(text: str) -> str:
    """Replace unpaired UTF-16 surrogates with U+FFFD so the text encodes as UTF-8."""
    return LONE_SURROGATE.sub("\ufffd", text)


def _node(obj: Any) -> JsonValue:
    """Scalar node, or an empty container node to be filled by the caller."""
    # bool before int: bool is an int subclass
    if obj is None:
        return JsonNull()
    if isinstance(obj, bool):
        return JsonBool(obj)
    if isinstance(obj, (int, float)):
        return JsonNumber(obj)
    if isinstance(obj, str):
        return JsonString(replace_surrogates(obj))
    if isinstance(obj, dict):
        return JsonObject()
    if isinstance(obj, list):
        return JsonArray()
    raise TypeError(f"Unsupported JSON type: {type(obj).__name__}")


def from_python(obj: Any) -> JsonValue:
    """
    Build a value tree from the output of the stdlib json decoder.

    Uses an explicit stack, so nesting depth is bounded by memory rather
    than the interpreter recursion limit.

    Args:
        obj: dict/list/str/int/float/bool/None as produced by ``json.loads``

    Returns:
        Equivalent JsonValue tree

    Raises:
        TypeError: If obj contains a type JSON cannot represent
    """
    root = _node(obj)
    stack = [(obj, root)]
    while stack:
        source, node = stack.pop()
        if isinstance(node, JsonObject):
            for key, val in source.items():
                child = _node(val)
                node.members[replace_surrogates(key)] = child
                stack.append((val, child))
        elif isinstance(node, JsonArray):
            for item in source:
                child = _node(item)
                node.items.append(child)
                stack.append((item, child))
    return root


def _plain(value: JsonValue) -> Any:
    if isinstance(value, JsonObject):
        return {}
    if isinstance(value, JsonArray):
        return []
    if isinstance(value, (JsonString, JsonNumber, JsonBool)):
        return value.value
    if isinstance(value, JsonNull):
        return None
    raise TypeError(f"Unknown JSON value variant: {type(value).__name__}")


def to_python(value: JsonValue) -> Any:
    """Convert a value tree back to plain Python objects for ``json.dumps``."""
    root = _plain(value)
    stack = [(value, root)]
    while stack:
        node, target = stack.pop()
        if isinstance(node, JsonObject):
            for key, val in node.members.items():
                child = _plain(val)
                target[key] = child
                stack.append((val, child))
        elif isinstance(node, JsonArray):
            for item in node.items:
                child = _plain(item)
                target.append(child)
                stack.append((item, child))
    return root


class JfmtError(Exception):
    """Base class for all jfmt errors."""
    pass


class InputError(JfmtError):
    """Raised when input cannot be read from its source."""
    pass


class NoInputError(InputError):
    """Raised when no usable input source was found."""
    pass


class JsonSyntaxError(JfmtError):
    """Invalid JSON, optionally carrying the offset the decoder stopped at."""

    def __init__(self, message: str, text: Optional[str] = None, offset: Optional[int] = None):
        self.message = message
        self.text = text
        self.offset = offset
        super().__init__(message)

    @property
    def position(self) -> Optional[Tuple[int, int]]:
        """1-based (line, column) of the offset, or None without one."""
        if self.text is None or self.offset is None:
            return None
        from .diagnostics import locate_position
        return locate_position(self.text, self.offset)


class SerializationError(JfmtError):
    """Raised when a decoded document cannot be re-encoded."""
    pass


class ClipboardError(JfmtError):
    """Raised when the clipboard helper fails."""
    pass


class ClipboardUnsupportedError(ClipboardError):
    """Raised on platforms without a known clipboard helper."""
    pass
