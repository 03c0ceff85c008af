# =======================================================================================
# checkin/database.py - Database Management
# =======================================================================================
import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Connection, Engine

from .config import config
from .models.tables import metadata

logger = logging.getLogger(__name__)


def _engine_options(db_url: str) -> Dict[str, Any]:
    if db_url.startswith("sqlite"):
        # FastAPI runs sync routes in a threadpool
        return {"connect_args": {"check_same_thread": False}, "future": True}
    return {
        "pool_size": config.DB_POOL_SIZE,
        "max_overflow": config.DB_MAX_OVERFLOW,
        "pool_pre_ping": True,
        "isolation_level": config.DB_ISOLATION_LEVEL,
        "future": True,
    }


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class DatabaseManager:
    """Manages database connections and transactions."""

    def __init__(self, db_url: Optional[str] = None):
        self.db_url = db_url or config.DB_URL
        self.engine: Engine = create_engine(self.db_url, **_engine_options(self.db_url))
        if self.engine.dialect.name == "sqlite":
            event.listen(self.engine, "connect", _enable_sqlite_foreign_keys)

    def create_schema(self) -> None:
        """Create missing tables. No migration versioning."""
        metadata.create_all(self.engine)
        logger.info("Database schema ready (%s)", self.engine.url.render_as_string(hide_password=True))

    @contextmanager
    def get_connection(self) -> Iterator[Connection]:
        """One unit of work: commits on success, rolls back if the block raises."""
        with self.engine.begin() as conn:
            yield conn

    def fetch_one(self, query: str, params: dict = None):
        """Fetch a single result."""
        with self.get_connection() as conn:
            result = conn.execute(text(query), params or {})
            return result.mappings().first()

    def ping(self) -> bool:
        return self.fetch_one("SELECT 1 AS ok") is not None

    def dispose(self) -> None:
        self.engine.dispose()

# Global database instance
db_manager = DatabaseManager()
