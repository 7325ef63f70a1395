from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional

# Positional order matters: the view navigates these by index.
STATUSES = ("upcoming", "ongoing", "past")
DEFAULT_STATUS = "upcoming"

COLLECTIONS = ("events", "news", "team-members")


@dataclass(frozen=True)
class Record:
    """
    Stable public model for one stored document (event, news item or team member).

    `status` is kept exactly as stored, so values outside STATUSES survive parsing
    and are simply never matched by a partition. Variant-specific fields
    (image, link, company, role, social handles...) live in `extra` untouched.
    """
    id: str
    title: str
    date: Optional[datetime] = None
    description: Optional[str] = None
    status: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict, compare=False)
