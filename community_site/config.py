from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

DEFAULT_ORIGINS = [
    "http://localhost:5173",  # Vite dev server
    "http://localhost:5000",  # Local backend
]


def _origins_from_env() -> List[str]:
    raw = os.getenv("ALLOWED_ORIGINS")
    origins = [o.strip() for o in raw.split(",") if o.strip()] if raw else list(DEFAULT_ORIGINS)
    # Vercel preview deployments
    vercel_url = os.getenv("VERCEL_URL")
    if vercel_url:
        origins.append(f"https://{vercel_url}")
    return origins


@dataclass
class Settings:
    api_url: str = "http://localhost:5000"
    fetch_timeout_sec: float = 10.0
    mongodb_uri: str = "mongodb://localhost:27017"
    mongodb_db: str = "community"
    store_backend: str = "mongo"  # "mongo" | "memory"
    port: int = 5000
    allowed_origins: List[str] = field(default_factory=lambda: list(DEFAULT_ORIGINS))
    log_level: str = "INFO"
    discord_token: Optional[str] = None


def load_settings() -> Settings:
    """Read settings from the environment, loading a .env file first if present."""
    load_dotenv()
    return Settings(
        api_url=os.getenv("COMMUNITY_API_URL", "http://localhost:5000"),
        fetch_timeout_sec=float(os.getenv("FETCH_TIMEOUT_SEC", "10")),
        mongodb_uri=os.getenv("MONGODB_URI", "mongodb://localhost:27017"),
        mongodb_db=os.getenv("MONGODB_DB", "community"),
        store_backend=os.getenv("STORE_BACKEND", "mongo").lower(),
        port=int(os.getenv("PORT", "5000")),
        allowed_origins=_origins_from_env(),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        discord_token=os.getenv("DISCORD_BOT_TOKEN"),
    )


def configure_logging(level: str = "INFO") -> None:
    root = logging.getLogger("community_site")
    root.setLevel(level)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        root.addHandler(handler)
