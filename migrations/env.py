from __future__ import annotations

from alembic import context

from eisenhower.config import SETTINGS
from eisenhower.infra import models  # noqa: F401
from eisenhower.infra.db import Base, create_db_engine

target_metadata = Base.metadata


def run_migrations_offline() -> None:
    context.configure(
        url=SETTINGS.database_url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    connectable = create_db_engine(SETTINGS.database_url)
    with connectable.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata)
        with context.begin_transaction():
            context.run_migrations()
    connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
