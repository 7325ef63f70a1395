"""
Community site REST API
=======================

Thin CRUD layer over the document store.

Endpoints (per collection: events, news, team-members):
- GET    /{collection}        -> every document
- POST   /{collection}        -> created document (with `_id`)
- DELETE /{collection}/{id}   -> confirmation message, 404 when missing

Usage:
    uvicorn --factory community_site.server:build_app --reload
"""
import logging
from contextlib import asynccontextmanager
from typing import Any, Dict, List, Optional, Type

from fastapi import APIRouter, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from .config import Settings, configure_logging, load_settings
from .exceptions import StoreError
from .schemas import EventIn, MessageResponse, NewsIn, TeamMemberIn
from .store import DocumentStore, MemoryStore, MongoStore

logger = logging.getLogger(__name__)

# collection -> (body schema, singular label used in messages)
RESOURCES: Dict[str, tuple] = {
    "events": (EventIn, "Event"),
    "news": (NewsIn, "News item"),
    "team-members": (TeamMemberIn, "Team member"),
}


def build_store(settings: Settings) -> DocumentStore:
    if settings.store_backend == "memory":
        return MemoryStore()
    return MongoStore(settings.mongodb_uri, settings.mongodb_db)


def _store(request: Request) -> DocumentStore:
    return request.app.state.store


def _add_resource(router: APIRouter, collection: str, schema: Type[BaseModel], label: str) -> None:
    noun = label.lower()

    async def list_documents(request: Request) -> List[Dict[str, Any]]:
        try:
            return await _store(request).find_all(collection)
        except StoreError as e:
            logger.error("Error listing %s: %s", collection, e)
            raise HTTPException(status_code=500, detail=f"Failed to fetch {collection}") from e

    async def create_document(body: schema, request: Request) -> Dict[str, Any]:  # type: ignore[valid-type]
        try:
            return await _store(request).insert(collection, body.model_dump(exclude_none=True))
        except StoreError as e:
            logger.error("Error creating %s: %s", noun, e)
            raise HTTPException(status_code=500, detail=f"Failed to create {noun}") from e

    async def delete_document(doc_id: str, request: Request) -> MessageResponse:
        try:
            deleted = await _store(request).delete(collection, doc_id)
        except StoreError as e:
            logger.error("Error deleting %s %s: %s", noun, doc_id, e)
            raise HTTPException(status_code=500, detail=f"Failed to delete {noun}") from e
        if not deleted:
            raise HTTPException(status_code=404, detail=f"{label} not found")
        logger.info("Deleted %s %s", noun, doc_id)
        return MessageResponse(message=f"{label} deleted successfully")

    router.add_api_route(f"/{collection}", list_documents, methods=["GET"])
    router.add_api_route(f"/{collection}", create_document, methods=["POST"])
    router.add_api_route(
        f"/{collection}/{{doc_id}}", delete_document, methods=["DELETE"], response_model=MessageResponse
    )


def create_app(store: Optional[DocumentStore] = None, settings: Optional[Settings] = None) -> FastAPI:
    """Build the API around an explicitly constructed store; the store is opened and closed with the app."""
    settings = settings or load_settings()
    store = store if store is not None else build_store(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await store.open()
        try:
            yield
        finally:
            await store.close()

    app = FastAPI(title="Community Site API", version="0.1.0", lifespan=lifespan)
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "PUT"],
        allow_headers=["*"],
    )

    router = APIRouter()
    for collection, (schema, label) in RESOURCES.items():
        _add_resource(router, collection, schema, label)
    app.include_router(router)
    return app


def build_app() -> FastAPI:
    """App factory for uvicorn: settings and logging are applied only when the server starts."""
    settings = load_settings()
    configure_logging(settings.log_level)
    return create_app(settings=settings)

