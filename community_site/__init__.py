"""
community_site

Backend and client for a small community-organization site: events, news items
and team members kept in a document database behind a minimal REST API.

Core ideas:
- Server: GET/POST/DELETE per collection, straight onto the document store
- Client: fetch once → sort by date → partition events by status (upcoming / ongoing / past)
- Output: ViewSnapshot (state, active status, records) for whatever renders it

Example
-------
import asyncio
from community_site import CommunityClient

async def main():
    client = CommunityClient("http://localhost:5000")
    view = await client.events()
    if view.state == "failed":
        print("error:", view.error)
        return
    for status in ("upcoming", "ongoing", "past"):
        for event in view.partition(status):
            print(status, event.date, event.title)

asyncio.run(main())
"""
from .models import Record, STATUSES
from .exceptions import FetchError, ParseError, ResponseError, TransportError
from .gateway import RecordGateway
from .view import PartitionedView, ViewSnapshot, ViewState
from .core import CommunityClient

__all__ = [
    "Record",
    "STATUSES",
    "FetchError",
    "TransportError",
    "ResponseError",
    "ParseError",
    "RecordGateway",
    "PartitionedView",
    "ViewSnapshot",
    "ViewState",
    "CommunityClient",
]
