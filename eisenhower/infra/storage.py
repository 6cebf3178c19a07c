from __future__ import annotations

import logging

from eisenhower.config import SETTINGS, Settings

from .db import create_db_engine, create_session_factory, init_db
from .json_store import JsonTaskRepository
from .repository import SqlTaskRepository

logger = logging.getLogger(__name__)


def create_repository(settings: Settings = SETTINGS) -> JsonTaskRepository | SqlTaskRepository:
    if settings.storage_backend == "sql":
        engine = create_db_engine(settings.database_url)
        init_db(engine)
        logger.info("Using SQL storage at %s", engine.url.render_as_string(hide_password=True))
        return SqlTaskRepository(create_session_factory(engine))

    logger.info("Using JSON storage in %s", settings.data_path)
    return JsonTaskRepository(settings.data_path)
