from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional

from .entities import TaskEntity
from .enums import Category


@dataclass(frozen=True)
class TaskFilters:
    category: Optional[Category] = None
    completed: bool | None = None

    def matches(self, task: TaskEntity) -> bool:
        if self.category is not None and task.category != self.category:
            return False
        if self.completed is not None and task.completed != self.completed:
            return False
        return True

    def apply(self, tasks: Iterable[TaskEntity]) -> Iterator[TaskEntity]:
        return (task for task in tasks if self.matches(task))
