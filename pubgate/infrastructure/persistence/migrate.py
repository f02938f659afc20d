"""Alembic migrations, run synchronously before the async app starts serving."""

import logging
from pathlib import Path

from alembic import command
from alembic.config import Config as AlembicConfig

logger = logging.getLogger(__name__)

# Repository root holding alembic.ini and migrations/
PROJECT_ROOT = Path(__file__).parent.parent.parent.parent
MIGRATIONS_DIR = PROJECT_ROOT / "migrations"


def to_sync_url(database_url: str) -> str:
    """Swap async drivers for their sync counterparts and expand ~ in SQLite paths.

    - sqlite+aiosqlite:///~/x.db -> sqlite:////home/me/x.db
    - postgresql+asyncpg://...  -> postgresql://...
    """
    url = database_url.replace("+aiosqlite", "").replace("+asyncpg", "")
    if url.startswith("sqlite:///"):
        path = url[len("sqlite:///") :]
        if path.startswith("~"):
            url = f"sqlite:///{Path(path).expanduser()}"
    return url


def is_in_memory(database_url: str) -> bool:
    return database_url.startswith("sqlite") and ":memory:" in database_url


def get_alembic_config(database_url: str) -> AlembicConfig:
    config = AlembicConfig(str(PROJECT_ROOT / "alembic.ini"))
    config.set_main_option("script_location", str(MIGRATIONS_DIR))
    config.set_main_option("sqlalchemy.url", to_sync_url(database_url))
    return config


def run_migrations(database_url: str) -> None:
    """Upgrade the database to the latest revision.

    In-memory SQLite databases are skipped: a separate sync connection would
    see an empty database of its own. Callers create those schemas directly
    from the table metadata.
    """
    if is_in_memory(database_url):
        logger.info("In-memory database, skipping migrations")
        return

    sync_url = to_sync_url(database_url)
    if sync_url.startswith("sqlite:///"):
        Path(sync_url.split("///", 1)[1]).parent.mkdir(parents=True, exist_ok=True)

    command.upgrade(get_alembic_config(database_url), "head")
    logger.info("Database migrations complete")
