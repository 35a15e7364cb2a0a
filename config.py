# config.py
import logging
import os
from datetime import tzinfo
from typing import List, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel

from errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_URL = "sqlite:///./headache.db"


def normalize_database_url(url: str) -> str:
    # Hosted Postgres (Neon) wants TLS; add sslmode if the URL lacks it
    if url.startswith("postgresql://") and "sslmode=" not in url:
        sep = "&" if "?" in url else "?"
        url = f"{url}{sep}sslmode=require"

    # some drivers drop the SSL connection on channel_binding=require
    if "channel_binding=require" in url:
        url = url.replace("&channel_binding=require", "").replace("?channel_binding=require", "?")
    return url


def parse_origins(raw: str | None) -> List[str]:
    origins = [o.strip() for o in (raw or "").split(",") if o.strip()]
    return origins or ["*"]


class Settings(BaseModel):
    password: Optional[str] = None
    database_url: str = DEFAULT_DATABASE_URL
    origins: List[str] = ["*"]
    timezone: Optional[str] = None
    log_level: str = "info"

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv(find_dotenv(usecwd=True))  # local .env; deployed environments set real variables

        database_url = os.getenv("DATABASE_URL")
        if not database_url:
            logger.warning("DATABASE_URL not set, falling back to local SQLite file.")
            database_url = DEFAULT_DATABASE_URL

        password = os.getenv("HEADACHE_PASSWORD") or None
        if not password:
            logger.warning("HEADACHE_PASSWORD not set, login will fail with a configuration error.")

        return cls(
            password=password,
            database_url=normalize_database_url(database_url),
            origins=parse_origins(os.getenv("ORIGINS")),
            timezone=os.getenv("HEADACHE_TIMEZONE") or None,
            log_level=os.getenv("LOG_LEVEL", "info").lower(),
        )

    def zone(self) -> tzinfo | None:
        """Zone for day windows and date labels; None means process-local time."""
        if not self.timezone:
            return None
        try:
            return ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ConfigurationError(f"Unknown timezone {self.timezone!r}") from exc
