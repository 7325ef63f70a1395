from __future__ import annotations

from typing import Any, Dict, List

from .exceptions import ParseError
from .models import Record
from .parser import parse_document


def to_record(entry: Dict[str, Any]) -> Record:
    """
    Convert a parsed document dict into a Record.
    Requires:
    - id (non-empty)
    Optional:
    - title (defaults to empty), date, description, status, extra
    """
    record_id = entry.get("id")
    if not record_id:
        raise ParseError("Entry lacks required field for Record: id")

    return Record(
        id=record_id,
        title=entry.get("title") or "",
        date=entry.get("date"),
        description=entry.get("description"),
        status=entry.get("status"),
        extra=dict(entry.get("extra") or {}),
    )


def to_records(body: Any) -> List[Record]:
    """Convert a decoded response body (expected: JSON array of objects) to Records."""
    if not isinstance(body, list):
        raise ParseError(f"Expected a JSON array, got {type(body).__name__}")
    return [to_record(parse_document(doc)) for doc in body]
