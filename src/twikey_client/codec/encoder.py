"""
Nullable-field request encoder.

Turns a sparse request record into a wire payload: attributes that were
never set are omitted entirely, booleans and numbers are coerced to their
wire form, and nested records are flattened or embedded depending on the
payload flavour.

Example:
    ```python
    from twikey_client.codec import EncodeMode, encode, to_form_body
    from twikey_client.models import InviteRequest, MandateFields

    invite = InviteRequest(ct=1988, fields=MandateFields(check=True))
    payload = encode(invite, EncodeMode.FORM)  # {"ct": "1988", "check": "true"}
    body = to_form_body(payload)                # "ct=1988&check=true"
    ```
"""

from __future__ import annotations
import json
from typing import Any, Dict, Iterable, List, Mapping, Sequence, Tuple, Union
from urllib.parse import urlencode

from .fields import EncodeMode, WireField
from ..runtime.errors import EncodeError


WirePayload = Dict[str, Any]


class FieldEncoder:
    """Walks a record's static field table and builds its wire payload."""

    def fields_of(self, record: Any) -> Sequence[WireField]:
        table = getattr(type(record), "WIRE_FIELDS", None)
        if table is None:
            raise EncodeError(f"{type(record).__name__} declares no wire fields")
        return table

    def encode(self, record: Any, mode: EncodeMode = EncodeMode.FORM) -> WirePayload:
        """
        Encode a record.

        Args:
            record: Request record declaring ``WIRE_FIELDS``
            mode: Payload flavour

        Returns:
            Ordered mapping of wire keys to wire values

        Raises:
            EncodeError: If a value has no wire representation
        """
        payload: WirePayload = {}
        for wire_field in self.fields_of(record):
            value = getattr(record, wire_field.attribute, None)
            if value is None:
                continue
            wire_field.emit(payload, value, mode, self)
        return payload

    def extend(self, payload: WirePayload, record: Any, mode: EncodeMode = EncodeMode.FORM) -> WirePayload:
        """
        Merge a shared record into an existing payload.

        Keys the payload already holds are kept.
        """
        if record is None:
            return payload
        for key, value in self.encode(record, mode).items():
            payload.setdefault(key, value)
        return payload

    def encode_many(self, records: Iterable[Any], mode: EncodeMode = EncodeMode.JSON) -> List[WirePayload]:
        """Encode a sequence of records, e.g. for bulk endpoints."""
        return [self.encode(record, mode) for record in records]


default_encoder = FieldEncoder()


def encode(record: Any, mode: EncodeMode = EncodeMode.FORM) -> WirePayload:
    """Encode a record with the default encoder."""
    return default_encoder.encode(record, mode)


def extend_payload(payload: WirePayload, record: Any, mode: EncodeMode = EncodeMode.FORM) -> WirePayload:
    """Merge a shared record into ``payload`` with the default encoder."""
    return default_encoder.extend(payload, record, mode)


def _pairs(payload: Mapping[str, Any]) -> List[Tuple[str, str]]:
    pairs: List[Tuple[str, str]] = []
    for key, value in payload.items():
        if isinstance(value, (dict, list)):
            raise EncodeError(f"Form payload value for {key!r} must be flat")
        pairs.append((key, str(value)))
    return pairs


def to_form_body(payload: Mapping[str, Any]) -> str:
    """application/x-www-form-urlencoded body for a form payload."""
    return urlencode(_pairs(payload))


def to_query_string(payload: Union[Mapping[str, Any], Sequence[Tuple[str, str]]]) -> str:
    """Query string (without the leading ``?``) for a form payload or pair list."""
    if isinstance(payload, Mapping):
        return urlencode(_pairs(payload))
    return urlencode(list(payload))


def to_json_body(payload: Any) -> str:
    """Compact JSON text for a JSON payload."""
    return json.dumps(payload, separators=(",", ":"))


__all__ = [
    "WirePayload",
    "FieldEncoder",
    "default_encoder",
    "encode",
    "extend_payload",
    "to_form_body",
    "to_query_string",
    "to_json_body",
]
