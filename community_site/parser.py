from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .exceptions import ParseError

logger = logging.getLogger(__name__)

_CORE_KEYS = {"_id", "id", "title", "name", "date", "description", "status"}
# Bookkeeping keys the store adds that carry no meaning for display
_IGNORED_KEYS = {"__v"}


def _to_datetime(value: Any) -> Optional[datetime]:
    """
    Convert a document date field to a timezone-aware UTC datetime.
    Accepts ISO-8601 strings (trailing 'Z' and date-only forms included) and datetimes.
    Naive values are taken as UTC so every parsed date compares with every other.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, str):
        s = value.strip()
        if not s:
            return None
        if s.endswith(("Z", "z")):
            s = s[:-1] + "+00:00"
        try:
            dt = datetime.fromisoformat(s)
        except ValueError as e:
            raise ParseError(f"Unparseable date: {value!r}") from e
    else:
        raise ParseError(f"Unexpected date type: {type(value).__name__}")

    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def _get_id(doc: Dict[str, Any]) -> str:
    for key in ("_id", "id"):
        v = doc.get(key)
        if isinstance(v, str) and v.strip():
            return v.strip()
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
    raise ParseError("Document has no id")


def _get_text(doc: Dict[str, Any], *keys: str) -> Optional[str]:
    for key in keys:
        v = doc.get(key)
        if isinstance(v, str):
            return v
    return None


def parse_document(doc: Any) -> Dict[str, Any]:
    """
    Map a raw JSON document (as served by the API) to a normalized dict.
    Fields: id, title, date (datetime|None), description, status, extra

    Team members carry `name` instead of `title`; it is used as the title.
    """
    if not isinstance(doc, dict):
        raise ParseError(f"Expected a JSON object, got {type(doc).__name__}")

    status = doc.get("status")
    if status is not None and not isinstance(status, str):
        raise ParseError(f"Unexpected status type: {type(status).__name__}")

    doc_id = _get_id(doc)
    try:
        date = _to_datetime(doc.get("date"))
    except ParseError:
        logger.warning("Document %s has an unusable date: %r", doc_id, doc.get("date"))
        raise

    extra = {
        k: v for k, v in doc.items()
        if k not in _CORE_KEYS and k not in _IGNORED_KEYS
    }

    return {
        "id": doc_id,
        "title": (_get_text(doc, "title", "name") or "").strip(),
        "date": date,
        "description": _get_text(doc, "description"),
        "status": status,
        "extra": extra,
    }
