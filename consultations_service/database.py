import logging
from collections.abc import Generator
from pathlib import Path
from urllib.parse import parse_qsl, urlencode, urlparse, urlunparse

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from .config import get_settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    pass


def normalize_database_url(url: str) -> str:
    """Translate asyncpg-style SSL query params into what psycopg2 understands."""
    if url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql://", 1)
    parsed = urlparse(url)
    if not parsed.scheme.startswith("postgresql"):
        return url
    q = dict(parse_qsl(parsed.query, keep_blank_values=True))
    q.pop("channel_binding", None)
    ssl_val = (q.pop("ssl", None) or "").strip().lower()
    if ssl_val in {"true", "1", "require"} and "sslmode" not in q:
        q["sslmode"] = "require"
    return urlunparse(parsed._replace(query=urlencode(q, doseq=True)))


def get_engine():
    settings = get_settings()
    url = normalize_database_url(settings.database_url)
    connect_args = {}
    if url.startswith("sqlite"):
        connect_args = {"check_same_thread": False}
        db_path = make_url(url).database
        if db_path and db_path != ":memory:":
            Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    logger.info("Using DB URL scheme: %s", urlparse(url).scheme)
    return create_engine(url, echo=settings.echo_sql, connect_args=connect_args)


engine = get_engine()
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
