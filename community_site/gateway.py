from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx

from .exceptions import FetchError, ParseError, ResponseError, TransportError
from .models import Record
from .normalizer import to_record, to_records
from .parser import parse_document

logger = logging.getLogger(__name__)


class RecordGateway:
    """
    Boundary to one collection of the community API (`/events`, `/news`, `/team-members`).

    The gateway owns an httpx.AsyncClient for its lifetime. Use it as an async
    context manager, or call `open()` / `aclose()` explicitly:

        async with RecordGateway("http://localhost:5000", "events") as gw:
            records = await gw.fetch_all()

    Every call is exactly one round trip. Nothing is retried; failures surface
    immediately as FetchError subclasses.
    """

    def __init__(
        self,
        base_url: str,
        collection: str,
        *,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.collection = collection.strip("/")
        self._timeout = timeout
        self._client = client
        self._owns_client = client is None

    @property
    def url(self) -> str:
        return f"{self.base_url}/{self.collection}"

    async def open(self) -> "RecordGateway":
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)
            self._owns_client = True
        return self

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
        self._client = None

    async def __aenter__(self) -> "RecordGateway":
        return await self.open()

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    def _require_client(self) -> httpx.AsyncClient:
        if self._client is None:
            raise FetchError(f"Gateway for {self.url} is not open")
        return self._client

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        client = self._require_client()
        try:
            response = await client.request(method, url, **kwargs)
        except httpx.TimeoutException as e:
            raise TransportError(f"Timed out: {method} {url}") from e
        except httpx.DecodingError as e:
            raise ParseError(f"Response body could not be decoded: {method} {url} ({e})") from e
        except httpx.RequestError as e:
            raise TransportError(f"Failed to reach: {method} {url} ({e})") from e

        if not response.is_success:
            raise ResponseError(
                f"Failed to {method.lower()} {self.collection}: HTTP {response.status_code}",
                status_code=response.status_code,
            )
        return response

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise ParseError(f"Response body is not valid JSON: {response.url}") from e

    async def fetch_all(self) -> List[Record]:
        """
        Fetch every record in the collection, in store order.

        An empty collection is a valid result, not an error.
        Raises TransportError, ResponseError or ParseError (all FetchError).
        """
        response = await self._request("GET", self.url)
        records = to_records(self._decode(response))
        logger.debug("Fetched %d records from %s", len(records), self.url)
        return records

    async def create(self, payload: Dict[str, Any]) -> Record:
        """POST a new document and return the stored Record (with its assigned id)."""
        response = await self._request("POST", self.url, json=payload)
        record = to_record(parse_document(self._decode(response)))
        logger.debug("Created %s/%s", self.collection, record.id)
        return record

    async def delete(self, record_id: str) -> None:
        """DELETE one document by id."""
        await self._request("DELETE", f"{self.url}/{record_id}")
        logger.debug("Deleted %s/%s", self.collection, record_id)
