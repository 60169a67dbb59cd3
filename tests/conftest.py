"""
Shared fixtures: an in-memory SQLite database (aiosqlite) per test.
"""
from __future__ import annotations

import asyncio

import pytest
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from services.db import create_all

SQLITE_URL = "sqlite+aiosqlite://"


@pytest.fixture
def run_db():
    """
    `run_db(fn)` runs `await fn(maker)` on a fresh database inside one
    event loop and returns its result.  Pass `tables=False` to get a
    database with no schema (every write fails).
    """

    def _run(fn, tables: bool = True):
        async def _main():
            eng = create_async_engine(SQLITE_URL, poolclass=StaticPool)
            if tables:
                await create_all(eng)
            maker = async_sessionmaker(eng, expire_on_commit=False)
            try:
                return await fn(maker)
            finally:
                await eng.dispose()

        return asyncio.run(_main())

    return _run
