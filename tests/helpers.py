import asyncio
from datetime import datetime, timezone
from typing import List, Optional

from community_site.exceptions import FetchError
from community_site.models import Record


def make_record(
    rid: str,
    day: Optional[int] = None,
    status: Optional[str] = "upcoming",
    title: str = "",
) -> Record:
    date = datetime(2024, 1, day, tzinfo=timezone.utc) if day is not None else None
    return Record(id=rid, title=title or rid, date=date, status=status)


class StaticSource:
    """Record source that answers from memory and counts calls."""

    def __init__(self, records: Optional[List[Record]] = None, error: Optional[FetchError] = None):
        self.records = records or []
        self.error = error
        self.calls = 0

    async def fetch_all(self) -> List[Record]:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return list(self.records)


class GatedSource(StaticSource):
    """Like StaticSource, but every fetch waits until `release()` is called."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.gate = asyncio.Event()

    def release(self) -> None:
        self.gate.set()

    async def fetch_all(self) -> List[Record]:
        self.calls += 1
        await self.gate.wait()
        if self.error is not None:
            raise self.error
        return list(self.records)
