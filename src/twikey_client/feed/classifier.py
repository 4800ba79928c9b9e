"""
Mandate feed entry classification.

An entry is classified by which structural markers it carries, checked in
priority order:

1. ``CxlRsn`` present: the mandate was cancelled
2. else ``AmdmntRsn`` present: the mandate was updated
3. else: a new mandate

An entry carrying both markers is a cancellation.
"""

from typing import Any, Callable, Dict, List, Tuple

from .events import DocumentCancelled, DocumentCreated, DocumentUpdated, FeedEvent
from ..codec.decoder import optional_str, require
from ..models.responses import Document
from ..runtime.errors import DecodeError


def _reason(entry: Dict[str, Any], marker: str) -> Dict[str, Any]:
    return {
        "reason": optional_str(entry, marker, "Rsn"),
        "originator_email": optional_str(entry, marker, "Orgtr", "CtctDtls", "EmailAdr"),
        "event_time": optional_str(entry, "EvtTime"),
    }


def _cancelled(entry: Dict[str, Any]) -> FeedEvent:
    original_id = require(entry, "OrgnlMndtId", str)
    return DocumentCancelled(original_id=original_id, **_reason(entry, "CxlRsn"))


def _updated(entry: Dict[str, Any]) -> FeedEvent:
    return DocumentUpdated(
        document=Document.from_json(entry),
        original_id=optional_str(entry, "OrgnlMndtId"),
        **_reason(entry, "AmdmntRsn"),
    )


def _created(entry: Dict[str, Any]) -> FeedEvent:
    return DocumentCreated(document=Document.from_json(entry), event_time=optional_str(entry, "EvtTime"))


def _has(marker: str) -> Callable[[Dict[str, Any]], bool]:
    return lambda entry: marker in entry


RULES: List[Tuple[Callable[[Dict[str, Any]], bool], Callable[[Dict[str, Any]], FeedEvent]]] = [
    (_has("CxlRsn"), _cancelled),
    (_has("AmdmntRsn"), _updated),
    (lambda entry: True, _created),
]


def classify(entry: Any) -> FeedEvent:
    """
    Classify one raw mandate feed entry.

    Raises:
        DecodeError: If the entry is not an object or lacks an element its
            kind requires (``Mndt`` for created/updated, ``OrgnlMndtId`` for
            cancelled)
    """
    if not isinstance(entry, dict):
        raise DecodeError(f"Feed entry must be an object, got {type(entry).__name__}")
    for matches, build in RULES:
        if matches(entry):
            return build(entry)
    raise DecodeError("Unclassifiable feed entry")


__all__ = ["RULES", "classify"]
