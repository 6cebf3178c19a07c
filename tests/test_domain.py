from __future__ import annotations

import pytest

from eisenhower.domain.entities import TaskEntity
from eisenhower.domain.enums import Category
from eisenhower.domain.filters import TaskFilters


@pytest.mark.parametrize(
    ("urgent", "important", "expected"),
    [
        (True, True, Category.URGENT_IMPORTANT),
        (True, False, Category.URGENT_NOT_IMPORTANT),
        (False, True, Category.NOT_URGENT_IMPORTANT),
        (False, False, Category.NOT_URGENT_NOT_IMPORTANT),
    ],
)
def test_category_axes(urgent: bool, important: bool, expected: Category) -> None:
    category = Category.from_flags(urgent, important)

    assert category == expected
    assert category.is_urgent is urgent
    assert category.is_important is important


def test_categories_are_a_closed_ordered_set() -> None:
    assert [c.value for c in Category] == [
        "Urgent & Important",
        "Urgent & Not Important",
        "Not Urgent & Important",
        "Not Urgent & Not Important",
    ]


def test_new_tasks_get_unique_ids() -> None:
    ids = {TaskEntity(title="t", notes="", category=Category.URGENT_IMPORTANT).id for _ in range(50)}

    assert len(ids) == 50


def test_filters_preserve_order_and_split_completion() -> None:
    tasks = [
        TaskEntity(title="Email boss", notes="", category=Category.URGENT_IMPORTANT, id="1"),
        TaskEntity(
            title="Gym", notes="", category=Category.URGENT_IMPORTANT, completed=True, id="2"
        ),
        TaskEntity(title="Email mom", notes="", category=Category.NOT_URGENT_IMPORTANT, id="3"),
        TaskEntity(title="Read", notes="", category=Category.URGENT_IMPORTANT, id="4"),
    ]

    by_category = TaskFilters(category=Category.URGENT_IMPORTANT).apply(tasks)
    active = TaskFilters(category=Category.URGENT_IMPORTANT, completed=False).apply(tasks)
    done = TaskFilters(completed=True).apply(tasks)

    assert [t.id for t in by_category] == ["1", "2", "4"]
    assert [t.id for t in active] == ["1", "4"]
    assert [t.id for t in done] == ["2"]
