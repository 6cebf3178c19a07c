"""Turn a drag-and-drop outcome into one discrete store operation.

Plans are derived from the current task sequence on every call, never from
state captured when the drag started, so replaying a drop is harmless.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from eisenhower.domain.entities import TaskEntity
from eisenhower.domain.enums import Category, DropAction


@dataclass(frozen=True)
class DropPlan:
    action: DropAction
    task_id: str
    category: Category
    before_id: str | None = None

    @property
    def is_noop(self) -> bool:
        return self.action == DropAction.NONE


def _find(tasks: Sequence[TaskEntity], task_id: str | None) -> TaskEntity | None:
    if task_id is None:
        return None
    return next((task for task in tasks if task.id == task_id), None)


def plan_drop(
    tasks: Sequence[TaskEntity],
    task_id: str,
    category: Category,
    anchor_id: str | None = None,
) -> DropPlan:
    """Decide what dropping ``task_id`` onto ``category`` means.

    ``anchor_id`` is the task under the cursor at release time, or None when the
    drop landed on an empty part of the quadrant. Same-category drops reorder
    before the anchor (or to the end). Cross-category drops move the task and
    then place it before the anchor (or at the end of the target quadrant).
    """
    category = Category(category)
    dragged = _find(tasks, task_id)
    if dragged is None:
        return DropPlan(DropAction.NONE, task_id, category)

    same_category = dragged.category == category
    if anchor_id == task_id:
        if same_category:
            return DropPlan(DropAction.NONE, task_id, category)
        anchor_id = None

    anchor = _find(tasks, anchor_id)
    if anchor is not None and anchor.category != category:
        anchor = None
    before_id = anchor.id if anchor is not None else None

    action = DropAction.REORDER if same_category else DropAction.MOVE
    return DropPlan(action, task_id, category, before_id)
