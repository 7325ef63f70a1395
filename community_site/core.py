from __future__ import annotations

from typing import Optional

import httpx

from .config import Settings
from .gateway import RecordGateway
from .models import COLLECTIONS
from .view import PartitionedView


class CommunityClient:
    """
    High-level API: load one collection of the community site into a ready view.

    Pipeline: open gateway → fetch once → sort by date → hand back a PartitionedView

    Each call is a fresh display session with its own snapshot. A shared
    httpx.AsyncClient may be passed in to reuse connections across calls.
    """

    def __init__(
        self,
        api_url: str,
        *,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.api_url = api_url
        self.timeout = timeout
        self._client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> "CommunityClient":
        return cls(settings.api_url, timeout=settings.fetch_timeout_sec)

    def gateway(self, collection: str) -> RecordGateway:
        if collection not in COLLECTIONS:
            raise ValueError(f"Unknown collection: {collection!r}")
        return RecordGateway(self.api_url, collection, timeout=self.timeout, client=self._client)

    async def load(self, collection: str) -> PartitionedView:
        """Fetch `collection` into a new view; the view is READY or FAILED on return."""
        async with self.gateway(collection) as gw:
            view = PartitionedView(gw)
            await view.initialize()
        return view

    async def events(self) -> PartitionedView:
        return await self.load("events")

    async def news(self) -> PartitionedView:
        return await self.load("news")

    async def team(self) -> PartitionedView:
        return await self.load("team-members")
