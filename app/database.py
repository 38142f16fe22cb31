from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy import Column, Connection, DefaultClause, inspect, literal, text
from sqlalchemy.engine import URL, Dialect, make_url
from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool

from app.errors import DatabaseUnavailableError
from app.logging import get_logger

logger = get_logger(__name__)

Base = declarative_base()


def _server_default_sql(column: Column, dialect: Dialect) -> str | None:
    default = column.server_default
    if not isinstance(default, DefaultClause):
        return None
    arg = default.arg if not isinstance(default.arg, str) else literal(default.arg)
    return str(arg.compile(dialect=dialect, compile_kwargs={"literal_binds": True}))


def add_missing_columns(connection: Connection) -> list[str]:
    """Add model columns that are missing from existing tables.

    Additive only: existing columns are never dropped or altered. A column
    with a server default gets it in the ALTER, so existing rows are filled.
    Returns the ``table.column`` names that were added.
    """
    inspector = inspect(connection)
    preparer = connection.dialect.identifier_preparer
    added = []
    for table in Base.metadata.sorted_tables:
        existing = {column["name"] for column in inspector.get_columns(table.name)}
        for column in table.columns:
            if column.name in existing:
                continue
            ddl = (
                f"ALTER TABLE {preparer.format_table(table)} "
                f"ADD COLUMN {preparer.format_column(column)} "
                f"{column.type.compile(dialect=connection.dialect)}"
            )
            default = _server_default_sql(column, connection.dialect)
            if default is not None:
                ddl += f" DEFAULT {default}"
            connection.exec_driver_sql(ddl)
            logger.info("Added missing column", table=table.name, column=column.name, default=default)
            added.append(f"{table.name}.{column.name}")
    return added


class Database:
    """Owns the async engine and hands out sessions.

    Construct it once at startup, ``await connect()``, and ``await dispose()``
    at shutdown.
    """

    def __init__(self, url: str | URL, *, echo: bool = False) -> None:
        self.url = make_url(url)
        self.echo = echo
        self.engine: AsyncEngine | None = None
        self._sessionmaker: async_sessionmaker[AsyncSession] | None = None

    @property
    def is_connected(self) -> bool:
        return self.engine is not None

    def _engine_options(self) -> dict:
        options = {"echo": self.echo, "pool_pre_ping": True}
        if self.url.get_backend_name() == "sqlite" and self.url.database in (None, "", ":memory:"):
            # one shared connection, otherwise every session sees an empty database
            options["poolclass"] = StaticPool
        return options

    async def _ensure_database(self) -> None:
        server_engine = create_async_engine(self.url.set(database=None), pool_pre_ping=True)
        try:
            async with server_engine.begin() as conn:
                name = conn.dialect.identifier_preparer.quote_identifier(self.url.database)
                await conn.execute(text(f"CREATE DATABASE IF NOT EXISTS {name}"))
        finally:
            await server_engine.dispose()

    async def connect(self) -> None:
        """Connect, create the database if absent and ensure every table exists."""
        if self.is_connected:
            return
        engine = None
        try:
            if self.url.get_backend_name() == "mysql" and self.url.database:
                await self._ensure_database()
            engine = create_async_engine(self.url, **self._engine_options())
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
                await conn.run_sync(add_missing_columns)
        except DBAPIError as e:
            if engine is not None:
                await engine.dispose()
            logger.error(
                "Failed to connect to database",
                database_url=self.url.render_as_string(hide_password=True),
                error=str(e),
            )
            raise DatabaseUnavailableError(f"Failed to connect to database: {e}") from e

        self.engine = engine
        self._sessionmaker = async_sessionmaker(
            bind=engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        logger.info("Database connected", database_url=self.url.render_as_string(hide_password=True))

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        if self._sessionmaker is None:
            raise RuntimeError("Database is not connected")
        async with self._sessionmaker() as session:
            yield session

    async def dispose(self) -> None:
        if self.engine is None:
            return
        await self.engine.dispose()
        self.engine = None
        self._sessionmaker = None
        logger.info("Database engine disposed")
