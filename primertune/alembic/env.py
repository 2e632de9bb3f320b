# File: primertune/alembic/env.py
# Version: v0.2.0
"""
Alembic environment for PrimerTune.

- Reads DATABASE_URL from environment (recommended).
- Falls back to alembic.ini sqlalchemy.url, then to settings.DB_URL.
- Uses primertune.app.db.base.Base.metadata as target_metadata.
- Imports the models module so autogenerate sees every table.
"""

from __future__ import annotations

import os
from logging.config import fileConfig

from sqlalchemy import engine_from_config, pool
from alembic import context

from primertune.app.core.config import settings

# this is the Alembic Config object, which provides access to the values within the .ini file in use.
config = context.config

# Interpret the config file for Python logging.
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# --- Database URL wiring ---
DB_URL = os.getenv("DATABASE_URL") or config.get_main_option("sqlalchemy.url") or settings.DB_URL
config.set_main_option("sqlalchemy.url", DB_URL)

# --- Target metadata ---
from primertune.app.db.base import Base  # noqa: E402

# Registers SavedWorkspace on Base.metadata for autogenerate
import primertune.app.db.models  # noqa: E402,F401

target_metadata = Base.metadata


def run_migrations_offline():
    """Run migrations in 'offline' mode."""
    url = config.get_main_option("sqlalchemy.url")
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        compare_type=True,
        compare_server_default=True,
        render_as_batch=url.startswith("sqlite"),
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online():
    """Run migrations in 'online' mode."""
    connectable = engine_from_config(
        config.get_section(config.config_ini_section) or {},
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            compare_type=True,
            compare_server_default=True,
            render_as_batch=connection.dialect.name == "sqlite",
        )

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
