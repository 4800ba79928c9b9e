"""
Wire codec for the Twikey client: request encoding and response decoding.
"""

from .fields import (
    EncodeMode,
    WireField,
    StringField,
    IntegerField,
    DecimalField,
    BooleanField,
    NestedField,
    RecordListField,
    format_bool,
    format_number,
)
from .encoder import (
    WirePayload,
    FieldEncoder,
    encode,
    extend_payload,
    to_form_body,
    to_query_string,
    to_json_body,
)
from .decoder import (
    parse_body,
    require,
    optional,
    key_value_entries,
)

__all__ = [
    "EncodeMode",
    "WireField",
    "StringField",
    "IntegerField",
    "DecimalField",
    "BooleanField",
    "NestedField",
    "RecordListField",
    "format_bool",
    "format_number",
    "WirePayload",
    "FieldEncoder",
    "encode",
    "extend_payload",
    "to_form_body",
    "to_query_string",
    "to_json_body",
    "parse_body",
    "require",
    "optional",
    "key_value_entries",
]
