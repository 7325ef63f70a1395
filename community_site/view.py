from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Protocol, Sequence

from .exceptions import FetchError
from .models import STATUSES, Record

logger = logging.getLogger(__name__)


class RecordSource(Protocol):
    async def fetch_all(self) -> List[Record]:  # pragma: no cover - interface
        ...


class ViewState(str, Enum):
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


@dataclass(frozen=True)
class ViewSnapshot:
    """Everything a rendering surface needs, frozen at one point in time."""
    state: ViewState
    active_status: str
    records: Sequence[Record]
    error: Optional[str] = None


def _sort_by_date(records: List[Record]) -> List[Record]:
    # Undated variants (news without a date, team members) keep store order.
    if any(r.date is None for r in records):
        return records
    return sorted(records, key=lambda r: r.date)


class PartitionedView:
    """
    Owns one display session over a collection: fetch state, date order and
    the active status tab.

    Lifecycle: LOADING -> READY | FAILED. Both outcomes are final for the session;
    build a new view to fetch again.

    Pipeline: fetch (once) → sort by date (stable, ascending) → partition by status on demand
    """

    def __init__(self, source: RecordSource) -> None:
        self._source = source
        self._state = ViewState.LOADING
        self._records: List[Record] = []
        self._error: Optional[str] = None
        self._active_index = 0
        self._started = False
        self._in_flight = False
        self._alive = True

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def error(self) -> Optional[str]:
        return self._error

    @property
    def records(self) -> List[Record]:
        return list(self._records)

    @property
    def active_index(self) -> int:
        return self._active_index

    @property
    def active_status(self) -> str:
        return STATUSES[self._active_index]

    @property
    def alive(self) -> bool:
        return self._alive

    async def initialize(self) -> None:
        """
        Fetch the collection exactly once and settle into READY or FAILED.

        Calls made while a fetch is outstanding, after one has completed, or
        after `close()` are ignored.
        """
        if self._started or self._in_flight or not self._alive:
            logger.debug("initialize() ignored (started=%s, alive=%s)", self._started, self._alive)
            return
        self._started = True
        self._in_flight = True
        try:
            records = await self._source.fetch_all()
        except FetchError as e:
            if self._alive:
                self._error = str(e) or "An error occurred"
                self._state = ViewState.FAILED
                logger.warning("Fetch failed: %s", self._error)
            return
        finally:
            self._in_flight = False

        if not self._alive:
            logger.debug("View closed during fetch; discarding %d records", len(records))
            return
        self._records = _sort_by_date(list(records))
        self._state = ViewState.READY
        logger.debug("View ready with %d records", len(self._records))

    def close(self) -> None:
        """Tear the view down. A fetch still outstanding is discarded when it lands."""
        self._alive = False

    def partition(self, status: str) -> List[Record]:
        """
        Records whose status equals `status`, in date order.

        Empty unless READY: check `state` before reading emptiness as "no matches".
        Statuses outside STATUSES never match anything.
        """
        if self._state is not ViewState.READY or status not in STATUSES:
            return []
        matched = [r for r in self._records if r.status == status]
        logger.debug("partition(%s): %d of %d", status, len(matched), len(self._records))
        return matched

    def active_partition(self) -> List[Record]:
        return self.partition(self.active_status)

    def navigate(self, delta: int) -> None:
        """Move the active tab by `delta`; moves that leave [0, len(STATUSES)-1] are ignored."""
        new_index = self._active_index + delta
        if 0 <= new_index < len(STATUSES):
            self._active_index = new_index

    def snapshot(self) -> ViewSnapshot:
        return ViewSnapshot(
            state=self._state,
            active_status=self.active_status,
            records=tuple(self.active_partition()),
            error=self._error,
        )
