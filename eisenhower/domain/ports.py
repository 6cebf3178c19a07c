"""Persistence collaborator used by the task store."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import TaskEntity


class TaskRepository(Protocol):
    def load(self, user_id: str) -> list[TaskEntity]:
        """Return the user's tasks in stored order, or [] if none were saved.

        Raises PersistenceError when stored data exists but cannot be read.
        """
        ...

    def save(self, user_id: str, tasks: Sequence[TaskEntity]) -> bool:
        """Replace the user's stored tasks. Returns False on failure."""
        ...
