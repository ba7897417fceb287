"""Integration test configuration.

These tests run against a real PostgreSQL (``DATABASE__URL``) and are
skipped when it cannot be reached.
"""

import uuid
from collections.abc import Callable

import pytest
import pytest_asyncio
from sqlalchemy.exc import DBAPIError

from nyumba.config import Settings
from nyumba.persistence.database import create_engine
from nyumba.persistence.tables import metadata


@pytest_asyncio.fixture(autouse=True)
async def postgres_schema() -> None:
    """Skip unless PostgreSQL is up; create any table the migrations missed."""
    engine = create_engine(Settings())
    try:
        async with engine.begin() as conn:
            await conn.run_sync(metadata.create_all)
    except (OSError, DBAPIError) as e:
        pytest.skip(f"PostgreSQL not reachable: {e}")
    finally:
        await engine.dispose()


@pytest.fixture
def next_user_id() -> Callable[[], int]:
    """Account ids from a random block, clear of rows other tests may leave."""
    ids = iter(range(1_000_000_000 + uuid.uuid4().int % 1_000_000_000, 2**31 - 1))
    return lambda: next(ids)
