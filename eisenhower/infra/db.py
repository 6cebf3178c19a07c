from __future__ import annotations

from pathlib import Path

from sqlalchemy import create_engine, text
from sqlalchemy.engine import URL, Engine, make_url
from sqlalchemy.orm import declarative_base, sessionmaker

Base = declarative_base()


def create_db_engine(database_url: str) -> Engine:
    return create_engine(database_url, pool_pre_ping=True)


def create_session_factory(bind: Engine) -> sessionmaker:
    return sessionmaker(bind=bind, autoflush=False, expire_on_commit=False)


def _ensure_sqlite_dir(database_url: str | URL) -> None:
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite":
        return
    if url.database in (None, "", ":memory:"):
        return
    Path(url.database).parent.mkdir(parents=True, exist_ok=True)


def init_db(bind: Engine) -> None:
    from . import models  # noqa: F401  registers tables on Base.metadata

    _ensure_sqlite_dir(bind.url)
    Base.metadata.create_all(bind)
    with bind.connect() as connection:
        connection.execute(text("SELECT 1"))
