"""
Persistence gateway for FoodShare.

Thin wrapper around a pooled async SQLAlchemy engine. Every statement is
executed through ``sqlalchemy.text`` with bound parameters; callers never
format values into SQL.
"""

from typing import Any, Mapping, Optional

from loguru import logger
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from foodshare.exceptions import DatabaseError
from .models import Base


class Database:
    """
    Pooled relational store.

    Each ``query``/``execute`` call runs in its own transaction. Driver and
    pool failures are logged in full and re-raised as ``DatabaseError``.
    """

    def __init__(
        self,
        url: str,
        echo: bool = False,
        ssl: bool = False,
    ):
        """
        Initialize the engine.

        Args:
            url: SQLAlchemy async database URL.
            echo: Log every statement.
            ssl: Require TLS (asyncpg only).
        """
        self.url = url

        connect_args = {}
        if ssl and url.startswith("postgresql+asyncpg"):
            connect_args["ssl"] = "require"

        self.engine: AsyncEngine = create_async_engine(
            url,
            echo=echo,
            pool_pre_ping=True,
            connect_args=connect_args,
        )

    async def query(
        self,
        sql: str,
        params: Optional[Mapping[str, Any]] = None,
    ) -> list[dict]:
        """
        Run a statement and return its rows as dictionaries.

        Raises:
            DatabaseError: On any database failure.
        """
        try:
            async with self.engine.begin() as conn:
                result = await conn.execute(text(sql), dict(params or {}))
                return [dict(row) for row in result.mappings().all()]
        except SQLAlchemyError as e:
            logger.error(f"Query failed: {e}")
            raise DatabaseError() from e

    async def execute(
        self,
        sql: str,
        params: Optional[Mapping[str, Any]] = None,
    ) -> int:
        """
        Run a statement that returns no rows.

        Returns:
            Number of affected rows.

        Raises:
            DatabaseError: On any database failure.
        """
        try:
            async with self.engine.begin() as conn:
                result = await conn.execute(text(sql), dict(params or {}))
                return result.rowcount
        except SQLAlchemyError as e:
            logger.error(f"Statement failed: {e}")
            raise DatabaseError() from e

    async def create_tables(self) -> None:
        """Create missing tables."""
        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except SQLAlchemyError as e:
            logger.error(f"Failed to create tables: {e}")
            raise DatabaseError() from e

    async def ping(self) -> bool:
        """Check that a connection can be acquired."""
        try:
            await self.query("SELECT 1")
            return True
        except DatabaseError:
            return False

    async def dispose(self) -> None:
        """Close every pooled connection."""
        await self.engine.dispose()
