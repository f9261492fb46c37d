"""Alembic migration environment (async engine).

The database URL always comes from Settings; ``sqlalchemy.url`` in
alembic.ini is ignored. After an online ``alembic upgrade`` the idempotent
seeders in ``alembic/seeds`` run in their own session. Pass ``-x seed=false``
to skip them.
"""

import asyncio
import sys
from logging.config import fileConfig
from pathlib import Path

from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_engine_from_config

from alembic import context
from src.core.config import settings
from src.infrastructure.persistence import BaseModel
from src.infrastructure.persistence import models  # noqa: F401  (registers tables)

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)
config.set_main_option("sqlalchemy.url", settings.database_url)

target_metadata = BaseModel.metadata

SEEDS_DIR = Path(__file__).resolve().parent


def _seeding_requested() -> bool:
    """True for ``alembic upgrade`` unless disabled with ``-x seed=false``."""
    flag = context.get_x_argument(as_dictionary=True).get("seed", "true")
    return flag.strip().lower() in {"1", "true", "yes"} and "upgrade" in sys.argv


def run_migrations_offline() -> None:
    """Emit migration SQL without connecting (``alembic upgrade --sql``)."""
    context.configure(
        url=settings.database_url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def _migrate(connection: Connection) -> None:
    context.configure(connection=connection, target_metadata=target_metadata)
    with context.begin_transaction():
        context.run_migrations()


async def _seed(engine: AsyncEngine) -> None:
    if str(SEEDS_DIR) not in sys.path:
        sys.path.insert(0, str(SEEDS_DIR))
    from seeds import run_all_seeders

    async with AsyncSession(engine, expire_on_commit=False) as session:
        await run_all_seeders(session)
        await session.commit()


async def run_migrations_online() -> None:
    """Migrate over an async connection, then seed."""
    engine = async_engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    try:
        async with engine.connect() as connection:
            await connection.run_sync(_migrate)
        if _seeding_requested():
            await _seed(engine)
    finally:
        await engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())
