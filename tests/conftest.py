from __future__ import annotations

from collections.abc import Callable, Sequence

import pytest

from eisenhower.domain.entities import TaskEntity
from eisenhower.domain.errors import PersistenceError, PersistenceWarning
from eisenhower.services.task_store import TaskStore

USER = "alice"


class FakeRepo:
    def __init__(self) -> None:
        self.stored: dict[str, list[TaskEntity]] = {}
        self.saves: list[list[TaskEntity]] = []
        self.fail_load = False
        self.fail_save = False

    def load(self, user_id: str) -> list[TaskEntity]:
        if self.fail_load:
            raise PersistenceError("disk unavailable")
        return list(self.stored.get(user_id, []))

    def save(self, user_id: str, tasks: Sequence[TaskEntity]) -> bool:
        self.saves.append(list(tasks))
        if self.fail_save:
            return False
        self.stored[user_id] = list(tasks)
        return True


@pytest.fixture()
def repo() -> FakeRepo:
    return FakeRepo()


@pytest.fixture()
def warnings_seen() -> list[PersistenceWarning]:
    return []


@pytest.fixture()
def make_store(
    repo: FakeRepo, warnings_seen: list[PersistenceWarning]
) -> Callable[..., TaskStore]:
    """Build a store whose repository already holds ``tasks`` (no seeding)."""

    def factory(*tasks: TaskEntity) -> TaskStore:
        if tasks:
            repo.stored[USER] = list(tasks)
        store = TaskStore(repo, USER, on_warning=warnings_seen.append)
        repo.saves.clear()
        return store

    return factory
