import os

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


DB_DRIVER = os.getenv("DB_DRIVER", "mysql+aiomysql")
DB_HOST = os.getenv("DB_HOST", "localhost")
DB_PORT = int(os.getenv("DB_PORT", "3306"))
DB_USER = os.getenv("DB_USER", "root")
DB_PASSWORD = os.getenv("DB_PASSWORD", "")
DB_NAME = os.getenv("DB_NAME", "gqlgen")

SQL_ECHO = _env_flag("SQL_ECHO")
LOG_DEBUG = _env_flag("LOG_DEBUG")

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8080"))


def get_database_url() -> str:
    """DATABASE_URL wins; otherwise the URL is built from the DB_* values."""
    url = os.getenv("DATABASE_URL")
    if url:
        return url
    credentials = DB_USER if not DB_PASSWORD else f"{DB_USER}:{DB_PASSWORD}"
    return f"{DB_DRIVER}://{credentials}@{DB_HOST}:{DB_PORT}/{DB_NAME}"
