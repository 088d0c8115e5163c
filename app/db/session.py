from __future__ import annotations

from functools import lru_cache

from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine


def make_engine(database_url: str) -> AsyncEngine:
    return create_async_engine(database_url, pool_pre_ping=True)


@lru_cache(maxsize=4)
def get_session_factory(database_url: str) -> async_sessionmaker:
    return async_sessionmaker(make_engine(database_url), expire_on_commit=False)
