"""Object key ordering over the whole value tree."""

from .types import JsonArray, JsonBool, JsonNull, JsonNumber, JsonObject, JsonString, JsonValue


def _check_variant(value: JsonValue) -> None:
    if not isinstance(value, (JsonObject, JsonArray, JsonString, JsonNumber, JsonBool, JsonNull)):
        raise TypeError(f"Unknown JSON value variant: {type(value).__name__}")


def sort_keys(value: JsonValue) -> JsonValue:
    """
    Order the keys of every object in the tree lexicographically.

    Objects are rebuilt, arrays are updated in place with their element
    order kept, scalars are returned as-is. Walks with an explicit stack,
    so deeply nested documents do not hit the recursion limit.
    """
    _check_variant(value)
    root = JsonObject() if isinstance(value, JsonObject) else value
    stack = [(value, root)]
    while stack:
        source, target = stack.pop()
        if isinstance(source, JsonObject):
            for key in sorted(source.members):
                child = source.members[key]
                _check_variant(child)
                copy = JsonObject() if isinstance(child, JsonObject) else child
                target.members[key] = copy
                stack.append((child, copy))
        elif isinstance(source, JsonArray):
            for i, item in enumerate(source.items):
                _check_variant(item)
                copy = JsonObject() if isinstance(item, JsonObject) else item
                target.items[i] = copy
                stack.append((item, copy))
    return root
