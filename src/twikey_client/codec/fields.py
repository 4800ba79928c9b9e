"""
Wire field descriptors for request records.

Each request record declares a static table of WireField entries mapping an
attribute to its wire key and coercion. The encoder walks that table; no
reflection over the record's attributes is involved.
"""

from __future__ import annotations
import json
import math
from abc import ABC, abstractmethod
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Optional, TYPE_CHECKING

from ..runtime.errors import EncodeError

if TYPE_CHECKING:
    from .encoder import FieldEncoder


class EncodeMode(str, Enum):
    """Wire payload flavours used by the remote API."""

    FORM = "form"
    JSON = "json"


def format_bool(value: bool) -> str:
    """Boolean wire token."""
    return "true" if value else "false"


def format_number(value: Any) -> str:
    """
    Canonical decimal string for a number.

    Floats use their shortest round-trip representation, written out in
    positional notation (``100.0``, ``0.0000001``, never ``1e-07``).

    Raises:
        EncodeError: For booleans, non-finite values and non-numbers
    """
    if isinstance(value, bool):
        raise EncodeError(f"Boolean {value!r} is not a number")
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise EncodeError(f"Non-finite number {value!r} has no wire form")
        return format(Decimal(repr(value)), "f")
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise EncodeError(f"Non-finite number {value!r} has no wire form")
        return format(value, "f")
    raise EncodeError(f"Cannot encode {type(value).__name__} as a number")


class WireField(ABC):
    """
    Base class for wire field descriptors.

    Args:
        attribute: Attribute name on the request record
        wire_key: Key on the wire (defaults to the attribute name)
    """

    def __init__(self, attribute: str, wire_key: Optional[str] = None):
        self.attribute = attribute
        self.wire_key = wire_key or attribute

    @abstractmethod
    def encode(self, value: Any, mode: EncodeMode, encoder: FieldEncoder) -> Any:
        """Coerce a present value to its wire form."""

    def emit(self, payload: Dict[str, Any], value: Any, mode: EncodeMode, encoder: FieldEncoder) -> None:
        """Write the coerced value into the payload."""
        payload[self.wire_key] = self.encode(value, mode, encoder)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.attribute!r} -> {self.wire_key!r})"


class StringField(WireField):
    """Text field. Enum members are sent by value."""

    def encode(self, value: Any, mode: EncodeMode, encoder: FieldEncoder) -> str:
        if isinstance(value, Enum):
            value = value.value
        if isinstance(value, (dict, list, tuple, set)):
            raise EncodeError(f"Field {self.attribute} expects text, got {type(value).__name__}")
        return str(value)


class IntegerField(WireField):
    """Whole number field."""

    def encode(self, value: Any, mode: EncodeMode, encoder: FieldEncoder) -> Any:
        if isinstance(value, bool) or not isinstance(value, int):
            raise EncodeError(f"Field {self.attribute} expects an integer, got {type(value).__name__}")
        return value if mode is EncodeMode.JSON else str(value)


class DecimalField(WireField):
    """Amount field (float, int or Decimal)."""

    def encode(self, value: Any, mode: EncodeMode, encoder: FieldEncoder) -> Any:
        text = format_number(value)
        if mode is EncodeMode.JSON:
            return value if isinstance(value, (int, float)) else float(text)
        return text


class BooleanField(WireField):
    """Flag field, sent as the literal tokens true/false."""

    def encode(self, value: Any, mode: EncodeMode, encoder: FieldEncoder) -> Any:
        if not isinstance(value, bool):
            raise EncodeError(f"Field {self.attribute} expects a boolean, got {type(value).__name__}")
        return value if mode is EncodeMode.JSON else format_bool(value)


class NestedField(WireField):
    """
    Nested record.

    In JSON mode the record becomes a sub-object under ``wire_key``; in form
    mode (or always, with ``flatten=True``) its entries are merged into the
    parent payload. Keys the parent already holds are kept.
    """

    def __init__(self, attribute: str, wire_key: Optional[str] = None, flatten: bool = False):
        super().__init__(attribute, wire_key)
        self.flatten = flatten

    def _flattens(self, mode: EncodeMode) -> bool:
        return self.flatten or mode is EncodeMode.FORM

    def encode(self, value: Any, mode: EncodeMode, encoder: FieldEncoder) -> Dict[str, Any]:
        return encoder.encode(value, mode)

    def emit(self, payload: Dict[str, Any], value: Any, mode: EncodeMode, encoder: FieldEncoder) -> None:
        if self._flattens(mode):
            encoder.extend(payload, value, mode)
        else:
            payload[self.wire_key] = self.encode(value, mode, encoder)


class RecordListField(WireField):
    """
    List of nested records, e.g. invoice lines.

    JSON mode yields an array of objects. Form mode yields the same array
    serialized as compact JSON text. Empty lists are omitted.
    """

    def encode(self, value: Any, mode: EncodeMode, encoder: FieldEncoder) -> Any:
        items = [encoder.encode(item, EncodeMode.JSON) for item in value]
        if mode is EncodeMode.JSON:
            return items
        return json.dumps(items, separators=(",", ":"))

    def emit(self, payload: Dict[str, Any], value: Any, mode: EncodeMode, encoder: FieldEncoder) -> None:
        if not value:
            return
        payload[self.wire_key] = self.encode(value, mode, encoder)


__all__ = [
    "EncodeMode",
    "format_bool",
    "format_number",
    "WireField",
    "StringField",
    "IntegerField",
    "DecimalField",
    "BooleanField",
    "NestedField",
    "RecordListField",
]
