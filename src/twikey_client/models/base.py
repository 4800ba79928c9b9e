"""
Base class for request records.
"""

from __future__ import annotations
from typing import Any, ClassVar, Dict, Tuple

from pydantic import BaseModel, ConfigDict

from ..codec.encoder import default_encoder
from ..codec.fields import EncodeMode, WireField


class WireRecord(BaseModel):
    """
    Immutable request record with a static wire field table.

    Attributes left at None were never set and are omitted from the wire
    payload. Records are built once with named fields; use
    ``model_copy(update=...)`` to derive a variant.
    """

    WIRE_FIELDS: ClassVar[Tuple[WireField, ...]] = ()

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    def to_dict(self, mode: EncodeMode = EncodeMode.FORM) -> Dict[str, Any]:
        """Convert to an API-compatible payload."""
        return default_encoder.encode(self, mode)
