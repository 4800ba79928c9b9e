"""
Classified mandate feed events.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional, Union

from ..models.responses import Document


class EventKind(str, Enum):
    """Kinds of mandate feed events."""

    CREATED = "created"
    UPDATED = "updated"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class DocumentCreated:
    """A new mandate."""
    document: Document
    event_time: Optional[str] = None

    kind: ClassVar[EventKind] = EventKind.CREATED


@dataclass(frozen=True)
class DocumentUpdated:
    """An amended mandate; ``original_id`` is the mandate number before the change."""
    document: Document
    original_id: Optional[str] = None
    reason: Optional[str] = None
    originator_email: Optional[str] = None
    event_time: Optional[str] = None

    kind: ClassVar[EventKind] = EventKind.UPDATED


@dataclass(frozen=True)
class DocumentCancelled:
    """A cancelled mandate. No mandate body is decoded for cancellations."""
    original_id: str
    reason: Optional[str] = None
    originator_email: Optional[str] = None
    event_time: Optional[str] = None

    kind: ClassVar[EventKind] = EventKind.CANCELLED


FeedEvent = Union[DocumentCreated, DocumentUpdated, DocumentCancelled]


__all__ = [
    "EventKind",
    "DocumentCreated",
    "DocumentUpdated",
    "DocumentCancelled",
    "FeedEvent",
]
