from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from app import config
from app.database import Database
from app.graphql.schema import create_graphql_router
from app.logging import configure_logging
from app.models import todo, user  # noqa: F401  registers the tables on Base.metadata


def create_app(database: Database | None = None) -> FastAPI:
    configure_logging(debug=config.LOG_DEBUG)
    if database is None:
        database = Database(config.get_database_url(), echo=config.SQL_ECHO)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # DatabaseUnavailableError propagates and aborts startup
        await database.connect()
        try:
            yield
        finally:
            await database.dispose()

    app = FastAPI(title="Todo GraphQL", lifespan=lifespan)
    app.state.database = database
    app.include_router(create_graphql_router(), tags=["GraphQL"])

    # Root health
    @app.get("/")
    async def read_root():
        return {"status": "ok"}

    return app


app = create_app()


def main() -> None:
    uvicorn.run("app.main:app", host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    main()
