from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from dataclasses import replace

from eisenhower.domain.entities import TaskEntity
from eisenhower.domain.enums import Category, DropAction
from eisenhower.domain.errors import PersistenceError, PersistenceWarning, ValidationError
from eisenhower.domain.filters import TaskFilters
from eisenhower.domain.ports import TaskRepository
from eisenhower.domain.seed import sample_tasks

from .drop import DropPlan, plan_drop

logger = logging.getLogger(__name__)

Listener = Callable[[], None]
WarningHandler = Callable[[PersistenceWarning], None]


class TaskStore:
    """Ordered task list of one user, saved after every change.

    Quadrant membership is always computed by filtering the single sequence;
    the relative order of a quadrant's tasks is their order in that sequence.
    Unknown ids are treated as no-ops throughout.
    """

    def __init__(
        self,
        repo: TaskRepository,
        user_id: str,
        on_warning: WarningHandler | None = None,
    ) -> None:
        user_id = (user_id or "").strip()
        if not user_id:
            raise ValidationError("User id must not be empty.")
        self._repo = repo
        self._user_id = user_id
        self._on_warning = on_warning
        self._listeners: list[Listener] = []
        self._tasks: list[TaskEntity] = []
        self._load()

    @property
    def user_id(self) -> str:
        return self._user_id

    @property
    def tasks(self) -> tuple[TaskEntity, ...]:
        return tuple(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __contains__(self, task_id: object) -> bool:
        return self._index_of(task_id) is not None

    def get(self, task_id: str) -> TaskEntity | None:
        index = self._index_of(task_id)
        return self._tasks[index] if index is not None else None

    # ---- listeners ----

    def subscribe(self, listener: Listener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def set_warning_handler(self, handler: WarningHandler | None) -> None:
        self._on_warning = handler

    # ---- queries ----

    def filter_by_category(
        self, category: Category, completed: bool | None = None
    ) -> Iterator[TaskEntity]:
        return TaskFilters(category=category, completed=completed).apply(tuple(self._tasks))

    def counts(self, category: Category) -> tuple[int, int]:
        total = done = 0
        for task in self.filter_by_category(category):
            total += 1
            done += task.completed
        return total, done

    # ---- mutations ----

    def add(self, title: str, notes: str, category: Category) -> TaskEntity:
        title = _require_title(title)
        task = TaskEntity(title=title, notes=notes or "", category=Category(category))
        self._tasks.append(task)
        logger.debug("Added task %s to %s", task.id, task.category.name)
        self._commit("add")
        return task

    def toggle_completed(self, task_id: str) -> TaskEntity | None:
        index = self._index_of(task_id)
        if index is None:
            return None
        task = self._tasks[index]
        updated = replace(task, completed=not task.completed)
        self._tasks[index] = updated
        logger.debug("Toggled task %s completed=%s", task_id, updated.completed)
        self._commit("toggle")
        return updated

    def delete(self, task_id: str) -> bool:
        index = self._index_of(task_id)
        if index is None:
            return False
        del self._tasks[index]
        logger.debug("Deleted task %s", task_id)
        self._commit("delete")
        return True

    def delete_in_category(self, category: Category, positions: Iterable[int]) -> int:
        """Delete by position within the quadrant view, e.g. a list swipe."""
        view = list(self.filter_by_category(category))
        doomed = {view[pos].id for pos in positions if 0 <= pos < len(view)}
        if not doomed:
            return 0
        self._tasks = [task for task in self._tasks if task.id not in doomed]
        logger.debug("Deleted %s tasks from %s", len(doomed), Category(category).name)
        self._commit("delete")
        return len(doomed)

    def update(
        self, task_id: str, title: str, notes: str, category: Category
    ) -> TaskEntity | None:
        title = _require_title(title)
        index = self._index_of(task_id)
        if index is None:
            return None
        task = self._tasks[index]
        updated = replace(task, title=title, notes=notes or "", category=Category(category))
        if updated == task:
            return task
        self._tasks[index] = updated
        logger.debug("Updated task %s", task_id)
        self._commit("update")
        return updated

    def move_to_category(self, task_id: str, category: Category) -> bool:
        index = self._index_of(task_id)
        if index is None or self._tasks[index].category == category:
            return False
        self._tasks[index] = replace(self._tasks[index], category=Category(category))
        logger.debug("Moved task %s to %s", task_id, Category(category).name)
        self._commit("move")
        return True

    def reorder(self, task_id: str, category: Category, before_id: str | None = None) -> bool:
        """Place ``task_id`` right before ``before_id`` in ``category``'s view.

        With no anchor the task goes to the end of the view. Both tasks must
        already belong to ``category``.
        """
        if not self._reposition(task_id, category, before_id):
            return False
        logger.debug(
            "Reordered task %s in %s before %s", task_id, Category(category).name, before_id
        )
        self._commit("reorder")
        return True

    def preview_drop(
        self, task_id: str, category: Category, anchor_id: str | None = None
    ) -> DropPlan:
        return plan_drop(self._tasks, task_id, category, anchor_id)

    def drop(self, task_id: str, category: Category, anchor_id: str | None = None) -> DropPlan:
        plan = plan_drop(self._tasks, task_id, category, anchor_id)
        if plan.is_noop:
            return plan

        changed = False
        if plan.action == DropAction.MOVE:
            index = self._index_of(plan.task_id)
            self._tasks[index] = replace(self._tasks[index], category=plan.category)
            changed = True
        if self._reposition(plan.task_id, plan.category, plan.before_id):
            changed = True

        if changed:
            logger.debug(
                "Drop %s: task %s -> %s before %s",
                plan.action.value,
                plan.task_id,
                plan.category.name,
                plan.before_id,
            )
            self._commit("drop")
        return plan

    def reset_sample_data(self) -> None:
        self._tasks = sample_tasks()
        logger.info("Reset sample data for %s", self._user_id)
        self._commit("reset")

    # ---- internals ----

    def _load(self) -> None:
        try:
            loaded = self._repo.load(self._user_id)
        except PersistenceError as exc:
            self._warn("load", str(exc))
            return

        seen: set[str] = set()
        for task in loaded:
            if task.id in seen:
                logger.warning("Dropping duplicate task id %s for %s", task.id, self._user_id)
                continue
            seen.add(task.id)
            self._tasks.append(task)

        if self._tasks:
            logger.info("Loaded %s tasks for %s", len(self._tasks), self._user_id)
            return

        logger.info("No stored tasks for %s, seeding samples", self._user_id)
        self._tasks = sample_tasks()
        self._save("seed")

    def _index_of(self, task_id: object) -> int | None:
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                return index
        return None

    def _reposition(self, task_id: str, category: Category, before_id: str | None) -> bool:
        if before_id == task_id:
            return False
        from_index = self._index_of(task_id)
        if from_index is None or self._tasks[from_index].category != category:
            return False

        if before_id is None:
            members = [i for i, task in enumerate(self._tasks) if task.category == category]
            last_index = members[-1]
            if last_index == from_index:
                return False
            insert_at = last_index + 1
        else:
            anchor_index = self._index_of(before_id)
            if anchor_index is None or self._tasks[anchor_index].category != category:
                return False
            insert_at = anchor_index

        # Removing the task first shifts everything after it one slot left.
        if from_index < insert_at:
            insert_at -= 1
        if insert_at == from_index:
            return False

        task = self._tasks.pop(from_index)
        self._tasks.insert(insert_at, task)
        return True

    def _commit(self, operation: str) -> None:
        self._save(operation)
        for listener in list(self._listeners):
            listener()

    def _save(self, operation: str) -> None:
        if not self._repo.save(self._user_id, list(self._tasks)):
            self._warn("save", f"could not persist after {operation}")

    def _warn(self, operation: str, message: str) -> None:
        warning = PersistenceWarning(operation, self._user_id, message)
        logger.warning("%s", warning)
        if self._on_warning is not None:
            self._on_warning(warning)


def _require_title(title: str) -> str:
    title = (title or "").strip()
    if not title:
        raise ValidationError("Task title must not be empty.")
    return title
