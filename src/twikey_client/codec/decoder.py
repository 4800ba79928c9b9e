"""
Response decoding helpers.

Responses routinely omit optional attributes, so lookups come in two
flavours: ``require`` for structural elements whose absence makes the
response unusable (raises DecodeError) and ``optional`` for leaves, which
yield None when anything along the path is missing.
"""

from __future__ import annotations
import json
from typing import Any, Dict, Optional, Tuple, Type, Union

from ..runtime.errors import DecodeError, ErrorCode


_MISSING = object()


def parse_body(text: Union[str, bytes]) -> Any:
    """
    Parse a JSON response body.

    Raises:
        DecodeError: If the body is not valid JSON
    """
    try:
        if isinstance(text, bytes):
            text = text.decode("utf-8")
        return json.loads(text)
    except ValueError as e:
        raise DecodeError(f"Invalid JSON response: {e}", ErrorCode.INVALID_JSON, cause=e)


def require(obj: Any, key: str, expected: Union[Type, Tuple[Type, ...]] = dict) -> Any:
    """
    Fetch a required element.

    Args:
        obj: Mapping to read from
        key: Element name
        expected: Type (or types) the element must have

    Raises:
        DecodeError: If ``obj`` is not a mapping, the element is missing,
            or it has the wrong type
    """
    if not isinstance(obj, dict):
        raise DecodeError(f"Expected an object holding {key!r}, got {type(obj).__name__}")
    value = obj.get(key, _MISSING)
    if value is _MISSING or value is None:
        raise DecodeError(f"Missing required element {key!r}", details={"keys": sorted(obj)})
    if not isinstance(value, expected):
        raise DecodeError(f"Element {key!r} has unexpected type {type(value).__name__}")
    return value


def optional(obj: Any, *path: str) -> Any:
    """Walk ``path`` through nested objects, returning None on the first gap."""
    current = obj
    for key in path:
        if not isinstance(current, dict):
            return None
        current = current.get(key)
        if current is None:
            return None
    return current


def optional_str(obj: Any, *path: str) -> Optional[str]:
    """Like ``optional`` but renders scalars as text."""
    value = optional(obj, *path)
    if value is None or isinstance(value, str):
        return value
    return render_value(value)


def optional_int(obj: Any, *path: str) -> Optional[int]:
    value = optional(obj, *path)
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise DecodeError(f"Element {'/'.join(path)!r} is not an integer: {value!r}", cause=e)


def optional_float(obj: Any, *path: str) -> Optional[float]:
    value = optional(obj, *path)
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise DecodeError(f"Element {'/'.join(path)!r} is not a number: {value!r}", cause=e)


def render_value(value: Any) -> str:
    """Text form of a scalar or nested JSON value."""
    if isinstance(value, str):
        return value
    return json.dumps(value, separators=(",", ":"))


def key_value_entries(entries: Any, key_field: str = "Key", value_field: str = "Value") -> Dict[str, str]:
    """
    Collapse a list of key/value objects into a mapping.

    Entries without a key, or with an empty key, are skipped. A missing
    list gives an empty mapping.
    """
    result: Dict[str, str] = {}
    if not isinstance(entries, list):
        return result
    for entry in entries:
        if not isinstance(entry, dict):
            continue
        key = entry.get(key_field)
        if not key:
            continue
        value = entry.get(value_field)
        result[str(key)] = "" if value is None else render_value(value)
    return result


__all__ = [
    "parse_body",
    "require",
    "optional",
    "optional_str",
    "optional_int",
    "optional_float",
    "render_value",
    "key_value_entries",
]
