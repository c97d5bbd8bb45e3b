"""
Database connection and statement execution
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from fastapi import Request
from sqlalchemy import event, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from app.db.binder import ParamStyle, ParameterBinder
from .config import settings
from .exceptions import DatabaseError

logger = logging.getLogger(__name__)


def enable_sqlite_foreign_keys(engine: AsyncEngine) -> AsyncEngine:
    """SQLite ignores FOREIGN KEY clauses unless each connection turns them on"""

    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return engine


def create_database_engine(database_url: Optional[str] = None) -> AsyncEngine:
    """Create the async engine shared by every repository"""
    url = database_url or settings.DATABASE_URL
    options: Dict[str, Any] = {"echo": settings.DEBUG}
    if url.startswith("postgresql"):
        options.update(
            pool_size=settings.DATABASE_POOL_SIZE,
            max_overflow=settings.DATABASE_MAX_OVERFLOW,
            pool_pre_ping=True,
        )
    engine = create_async_engine(url, **options)
    if engine.dialect.name == "sqlite":
        enable_sqlite_foreign_keys(engine)
    return engine


@dataclass
class QueryResult:
    """Rows returned by a statement and the number of rows it touched"""
    rows: List[Dict[str, Any]] = field(default_factory=list)
    affected_count: int = 0

    def first(self) -> Optional[Dict[str, Any]]:
        return self.rows[0] if self.rows else None


class Database:
    """
    Thin executor over an AsyncEngine.

    Every call runs one statement in its own transaction. Statements use the
    ``named`` placeholder style (``:p1``) understood by SQLAlchemy's ``text()``
    on every backend; callers build placeholders through ``self.binder``.
    """

    def __init__(self, engine: AsyncEngine):
        self.engine = engine
        self.binder = ParameterBinder(ParamStyle.NAMED)

    async def execute(self, statement: str, params: Sequence[Any] = ()) -> QueryResult:
        """
        Execute a single statement with positional parameters

        Raises:
            DatabaseError: connectivity, constraint or driver failure
        """
        try:
            async with self.engine.begin() as conn:
                result = await conn.execute(text(statement), self.binder.bind(params))
                if result.returns_rows:
                    rows = [dict(row) for row in result.mappings().all()]
                    return QueryResult(rows=rows, affected_count=len(rows))
                return QueryResult(rows=[], affected_count=max(result.rowcount, 0))
        except SQLAlchemyError as e:
            message = str(getattr(e, "orig", None) or e)
            logger.error(f"Database statement failed: {message}")
            raise DatabaseError(message, {"statement": statement.split(" ", 1)[0].upper()}) from e

    async def health_check(self) -> bool:
        """
        Check database health

        Returns:
            bool: True if database is healthy
        """
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"Database health check failed: {e}")
            return False

    async def dispose(self) -> None:
        """Close pooled connections"""
        await self.engine.dispose()
        logger.info("Database connections closed")


def get_database(request: Request) -> Database:
    """Dependency returning the process-wide database handle"""
    database = getattr(request.app.state, "database", None)
    if database is None:
        raise DatabaseError("Database is not initialized")
    return database
