import pytest
from httpx import ASGITransport, AsyncClient

from app.database import Database
from app.main import create_app

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"

@pytest.fixture
async def database():
    db = Database(TEST_DATABASE_URL)
    await db.connect()
    yield db
    await db.dispose()

@pytest.fixture
async def client(database):
    # ASGITransport skips the lifespan; the database fixture is already connected
    app = create_app(database)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

@pytest.fixture
def graphql(client):
    async def execute(query: str, **variables):
        res = await client.post("/query", json={"query": query, "variables": variables})
        assert res.status_code == 200
        return res.json()
    return execute

@pytest.fixture
def create_user(graphql):
    async def _create(name: str = "Jamie") -> dict:
        body = await graphql(
            "mutation ($name: String!) { createUser(input: {name: $name}) { id name } }",
            name=name,
        )
        return body["data"]["createUser"]
    return _create
