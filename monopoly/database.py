from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, List, Mapping, Optional
import logging

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, create_async_engine

from monopoly.config import Settings

logger = logging.getLogger(__name__)

Row = Dict[str, Any]


class QueryResultError(Exception):
    """A statement returned rows where none were expected."""


class Queryable:
    """The four query shapes, bound to one open connection.

    Every variable value goes through a named bind parameter (``:id``) taken
    from ``params``; SQL text is never assembled from request data.
    """

    def __init__(self, conn: AsyncConnection):
        self.conn = conn

    async def one_or_none(self, sql: str, params: Optional[Mapping[str, Any]] = None) -> Optional[Row]:
        result = await self.conn.execute(text(sql), dict(params or {}))
        row = result.mappings().one_or_none()
        return dict(row) if row is not None else None

    async def one(self, sql: str, params: Optional[Mapping[str, Any]] = None) -> Row:
        result = await self.conn.execute(text(sql), dict(params or {}))
        return dict(result.mappings().one())

    async def many_or_none(self, sql: str, params: Optional[Mapping[str, Any]] = None) -> List[Row]:
        result = await self.conn.execute(text(sql), dict(params or {}))
        return [dict(row) for row in result.mappings().all()]

    async def none(self, sql: str, params: Optional[Mapping[str, Any]] = None) -> None:
        result = await self.conn.execute(text(sql), dict(params or {}))
        if result.returns_rows and result.first() is not None:
            raise QueryResultError("No return data was expected.")


class Database:
    """Gateway over the async engine and its connection pool.

    Single-statement calls run in their own short transaction. Use
    ``transaction()`` when several statements must commit or roll back together.
    """

    def __init__(self, engine: AsyncEngine):
        self.engine = engine

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        # ✅ Use create_async_engine for async operations
        engine = create_async_engine(settings.database_url, echo=settings.db_echo)
        return cls(engine)

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[Queryable]:
        # engine.begin() commits on a clean exit and rolls back on any exception
        async with self.engine.begin() as conn:
            yield Queryable(conn)

    async def one_or_none(self, sql: str, params: Optional[Mapping[str, Any]] = None) -> Optional[Row]:
        async with self.transaction() as q:
            return await q.one_or_none(sql, params)

    async def one(self, sql: str, params: Optional[Mapping[str, Any]] = None) -> Row:
        async with self.transaction() as q:
            return await q.one(sql, params)

    async def many_or_none(self, sql: str, params: Optional[Mapping[str, Any]] = None) -> List[Row]:
        async with self.transaction() as q:
            return await q.many_or_none(sql, params)

    async def none(self, sql: str, params: Optional[Mapping[str, Any]] = None) -> None:
        async with self.transaction() as q:
            await q.none(sql, params)

    async def dispose(self) -> None:
        logger.info("Closing database connection pool")
        await self.engine.dispose()


# ✅ Dependency to get the database gateway built at startup
async def get_db(request: Request) -> Database:
    return request.app.state.db
