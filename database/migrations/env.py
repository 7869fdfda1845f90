from logging.config import fileConfig

from alembic import context
import os
import sys

# Project root on the path so the catalog models import
sys.path.append(os.path.join(os.path.dirname(__file__), '../../'))

from database.connection import engine as app_engine, get_connection_url
from database.models import Base

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# users, mods, categories, minecraft_versions
target_metadata = Base.metadata


def run_migrations_offline() -> None:
    """Emit the catalog DDL as SQL without connecting.

    The URL is resolved the same way the application resolves it, so
    `alembic upgrade head --sql` prints statements for the configured dialect.
    """
    url = get_connection_url()
    if not isinstance(url, str):
        url = url.render_as_string(hide_password=False)

    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Migrate through the engine the application uses."""
    with app_engine.connect() as connection:
        # SQLite can't ALTER most things; batch mode rebuilds the table instead
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            render_as_batch=connection.dialect.name == "sqlite",
            compare_type=True,
        )

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
