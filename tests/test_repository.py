from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest

from eisenhower.config import Settings
from eisenhower.domain.entities import TaskEntity
from eisenhower.domain.enums import Category
from eisenhower.domain.errors import PersistenceError
from eisenhower.infra.db import Base, create_db_engine, create_session_factory, init_db
from eisenhower.infra.json_store import JsonTaskRepository
from eisenhower.infra.repository import SqlTaskRepository
from eisenhower.infra.storage import create_repository
from eisenhower.services.task_store import TaskStore


@pytest.fixture()
def engine(tmp_path: Path):
    engine = create_db_engine(f"sqlite:///{(tmp_path / 'db' / 'tasks.db').as_posix()}")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def sql_repo(engine) -> SqlTaskRepository:
    return SqlTaskRepository(create_session_factory(engine))


def _tasks() -> list[TaskEntity]:
    return [
        TaskEntity(
            title="Deadline project",
            notes="Complete the urgent project",
            category=Category.URGENT_IMPORTANT,
            completed=True,
            created_at=datetime(2026, 4, 10, 12, 0, 0, 999999),
        ),
        TaskEntity(title="Phone calls", notes="", category=Category.URGENT_NOT_IMPORTANT),
        TaskEntity(title="Team meeting", notes="", category=Category.URGENT_IMPORTANT),
    ]


def test_save_then_load_round_trips(sql_repo: SqlTaskRepository) -> None:
    tasks = _tasks()

    assert sql_repo.save("alice", tasks) is True

    assert sql_repo.load("alice") == tasks


def test_save_replaces_previous_order(sql_repo: SqlTaskRepository) -> None:
    tasks = _tasks()
    sql_repo.save("alice", tasks)

    reordered = [tasks[2], tasks[0]]
    sql_repo.save("alice", reordered)

    assert sql_repo.load("alice") == reordered


def test_users_are_isolated(sql_repo: SqlTaskRepository) -> None:
    tasks = _tasks()
    sql_repo.save("alice", tasks[:1])
    sql_repo.save("bob", tasks[1:])

    assert sql_repo.load("alice") == tasks[:1]
    assert sql_repo.load("bob") == tasks[1:]
    assert sql_repo.load("carol") == []
    assert sql_repo.list_users() == ["alice", "bob"]


def test_save_failure_returns_false(sql_repo: SqlTaskRepository) -> None:
    task = _tasks()[0]

    assert sql_repo.save("alice", [task, task]) is False
    assert sql_repo.load("alice") == []


def test_load_failure_raises_persistence_error(engine, sql_repo: SqlTaskRepository) -> None:
    Base.metadata.drop_all(engine)

    with pytest.raises(PersistenceError):
        sql_repo.load("alice")


def test_create_repository_picks_backend(tmp_path: Path) -> None:
    json_repo = create_repository(Settings(storage_backend="json", data_dir=str(tmp_path)))
    sql_repo = create_repository(
        Settings(
            storage_backend="sql",
            database_url=f"sqlite:///{(tmp_path / 'app.db').as_posix()}",
        )
    )

    assert isinstance(json_repo, JsonTaskRepository)
    assert json_repo.data_dir == tmp_path
    assert isinstance(sql_repo, SqlTaskRepository)
    assert sql_repo.load("alice") == []


def test_unencodable_title_becomes_save_warning(sql_repo: SqlTaskRepository) -> None:
    seen = []
    store = TaskStore(sql_repo, "alice", on_warning=seen.append)
    saved_before = sql_repo.load("alice")

    task = store.add("bad \ud800 title", "", Category.URGENT_IMPORTANT)

    assert task in store.tasks
    assert [warning.operation for warning in seen] == ["save"]
    assert sql_repo.load("alice") == saved_before
