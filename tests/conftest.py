import pytest
import pytest_asyncio

from attachment_quiz.core.config import Settings
from attachment_quiz.db.session import Database


@pytest.fixture
def database_url(tmp_path):
    """A throwaway SQLite file per test; :memory: is per-connection with aiosqlite."""
    return f"sqlite+aiosqlite:///{tmp_path / 'quiz_test.db'}"


@pytest.fixture
def test_settings(database_url):
    return Settings(database_url=database_url, result_threshold=3.2, log_level="WARNING")


@pytest_asyncio.fixture
async def database(database_url):
    """Provides a Database with the schema created, disposed after the test."""
    db = Database(database_url)
    await db.create_all()
    yield db
    await db.dispose()
