import os
from logging.config import fileConfig

from alembic import context
from sqlalchemy import engine_from_config, pool

from pubgate.infrastructure.persistence.migrate import to_sync_url
from pubgate.infrastructure.persistence.tables import metadata

config = context.config

# From the alembic CLI only; inside the app, run_migrations sets the URL and logging is configured
if config.cmd_opts is not None:
    if config.config_file_name is not None:
        fileConfig(config.config_file_name)
    env_url = os.environ.get("PUBGATE_DATABASE__URL")
    if env_url:
        config.set_main_option("sqlalchemy.url", to_sync_url(env_url))

target_metadata = metadata


def run_migrations_offline() -> None:
    context.configure(
        url=config.get_main_option("sqlalchemy.url"),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        render_as_batch=True,
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    connectable = engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            render_as_batch=True,
        )
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
