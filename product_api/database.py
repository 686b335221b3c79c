# product_api/database.py
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

logger = logging.getLogger(__name__)

# Base declarative
Base = declarative_base()


class Database:
    """Store handle: one engine (and its connection pool) plus a session factory.

    Built once per application and handed to it explicitly, so tests can give
    every app its own store.
    """

    def __init__(self, url: str, echo: bool = False, **engine_kwargs):
        self.url = url
        self.engine = create_async_engine(url, echo=echo, future=True, **engine_kwargs)
        self.session_maker = async_sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        async with self.session_maker() as session:
            yield session

    async def create_schema(self) -> None:
        # Importing the models registers the products table on Base.metadata.
        from . import models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def ping(self) -> bool:
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except Exception as exc:
            logger.error("Store ping failed: %s", exc)
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()


async def get_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    database: Database = request.app.state.database
    async with database.session() as session:
        yield session
