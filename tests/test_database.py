import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import inspect, text
from sqlalchemy.ext.asyncio import create_async_engine

from app.database import Database
from app.errors import DatabaseUnavailableError
from app.main import create_app

pytestmark = pytest.mark.anyio


def _columns(connection):
    inspector = inspect(connection)
    return {table: {c["name"] for c in inspector.get_columns(table)} for table in inspector.get_table_names()}


async def test_connect_creates_tables(database):
    async with database.engine.connect() as conn:
        columns = await conn.run_sync(_columns)
    assert columns == {
        "todo": {"id", "text", "done", "user_id"},
        "user": {"id", "name"},
    }


async def test_connect_adds_missing_columns_without_dropping(tmp_path):
    url = f"sqlite+aiosqlite:///{tmp_path / 'todo.db'}"
    engine = create_async_engine(url)
    async with engine.begin() as conn:
        await conn.execute(text('CREATE TABLE "user" (id INTEGER PRIMARY KEY, nickname VARCHAR(20))'))
        await conn.execute(text('INSERT INTO "user" (id, nickname) VALUES (1, \'jj\')'))
    await engine.dispose()

    db = Database(url)
    await db.connect()
    try:
        async with db.engine.connect() as conn:
            columns = await conn.run_sync(_columns)
            row = (await conn.execute(text('SELECT id, nickname, name FROM "user"'))).one()
    finally:
        await db.dispose()

    assert columns["user"] == {"id", "nickname", "name"}
    assert tuple(row) == (1, "jj", None)


async def test_added_column_fills_existing_rows_with_server_default(tmp_path):
    url = f"sqlite+aiosqlite:///{tmp_path / 'todo.db'}"
    engine = create_async_engine(url)
    async with engine.begin() as conn:
        await conn.execute(text('CREATE TABLE "user" (id INTEGER PRIMARY KEY, name VARCHAR(255) NOT NULL)'))
        await conn.execute(text('CREATE TABLE todo (id INTEGER PRIMARY KEY, text VARCHAR(255) NOT NULL, user_id INTEGER NOT NULL)'))
        await conn.execute(text("INSERT INTO \"user\" (id, name) VALUES (1, 'Jamie')"))
        await conn.execute(text("INSERT INTO todo (id, text, user_id) VALUES (1, 'old', 1)"))
    await engine.dispose()

    db = Database(url)
    await db.connect()
    try:
        app = create_app(db)
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
            res = await ac.post("/query", json={"query": "{ todos { id text done userID } }"})
    finally:
        await db.dispose()

    assert res.json() == {"data": {"todos": [{"id": 1, "text": "old", "done": False, "userID": 1}]}}


async def test_connect_fails_fast(tmp_path):
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'todo.db'}")
    with pytest.raises(DatabaseUnavailableError):
        await db.connect()
    assert not db.is_connected


async def test_session_requires_connect():
    db = Database("sqlite+aiosqlite:///:memory:")
    with pytest.raises(RuntimeError):
        async with db.session():
            pass


async def test_dispose_is_idempotent():
    db = Database("sqlite+aiosqlite:///:memory:")
    await db.connect()
    assert db.is_connected
    await db.dispose()
    await db.dispose()
    assert not db.is_connected
