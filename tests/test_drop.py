from __future__ import annotations

from datetime import datetime

from eisenhower.domain.entities import TaskEntity
from eisenhower.domain.enums import Category, DropAction
from eisenhower.services.drop import plan_drop

X = Category.URGENT_IMPORTANT
Y = Category.NOT_URGENT_IMPORTANT


def _task(title: str, category: Category = X) -> TaskEntity:
    return TaskEntity(
        title=title, notes="", category=category, id=title, created_at=datetime(2026, 2, 1)
    )


def _ids(tasks) -> list[str]:
    return [task.id for task in tasks]


def test_plan_same_category_is_reorder() -> None:
    tasks = [_task("A"), _task("B")]

    plan = plan_drop(tasks, "B", X, "A")

    assert plan.action == DropAction.REORDER
    assert plan.before_id == "A"


def test_plan_cross_category_is_move() -> None:
    tasks = [_task("A"), _task("B", Y)]

    plan = plan_drop(tasks, "A", Y, "B")

    assert plan.action == DropAction.MOVE
    assert plan.category == Y
    assert plan.before_id == "B"


def test_plan_ignores_unknown_or_foreign_anchor() -> None:
    tasks = [_task("A"), _task("B"), _task("C", Y)]

    assert plan_drop(tasks, "A", X, "missing").before_id is None
    assert plan_drop(tasks, "A", X, "C").before_id is None


def test_plan_unknown_task_or_self_drop_is_noop() -> None:
    tasks = [_task("A"), _task("B")]

    assert plan_drop(tasks, "missing", X, "A").is_noop
    assert plan_drop(tasks, "A", X, "A").is_noop
    assert plan_drop([], "A", X).action == DropAction.NONE


def test_drop_same_category_reorders(make_store) -> None:
    store = make_store(_task("A"), _task("B"), _task("C"))

    store.drop("C", X, anchor_id="A")

    assert _ids(store.filter_by_category(X)) == ["C", "A", "B"]


def test_drop_on_empty_area_of_same_category_goes_to_end(make_store) -> None:
    store = make_store(_task("A"), _task("B"), _task("C"))

    store.drop("A", X)

    assert _ids(store.filter_by_category(X)) == ["B", "C", "A"]


def test_drop_on_other_category_task_moves_before_anchor(make_store, repo) -> None:
    store = make_store(_task("A"), _task("B", Y), _task("C", Y))

    store.drop("A", Y, anchor_id="C")

    assert _ids(store.filter_by_category(X)) == []
    assert _ids(store.filter_by_category(Y)) == ["B", "A", "C"]
    assert len(repo.saves) == 1


def test_drop_on_empty_area_of_other_category_appends(make_store) -> None:
    store = make_store(_task("A"), _task("B", Y), _task("C"))

    store.drop("A", Y)

    assert _ids(store.filter_by_category(Y)) == ["B", "A"]
    assert _ids(store.filter_by_category(X)) == ["C"]


def test_repeated_drop_is_idempotent(make_store, repo) -> None:
    store = make_store(_task("A"), _task("B", Y), _task("C", Y), _task("D"))

    store.drop("D", Y, anchor_id="B")
    once = store.tasks
    saves = len(repo.saves)

    second = store.drop("D", Y, anchor_id="B")

    assert second.action == DropAction.REORDER
    assert store.tasks == once
    assert len(repo.saves) == saves


def test_repeated_drop_on_empty_area_is_idempotent(make_store) -> None:
    store = make_store(_task("A"), _task("B", Y), _task("C"))

    store.drop("A", Y)
    once = store.tasks
    store.drop("A", Y)

    assert store.tasks == once


def test_drop_of_unknown_task_changes_nothing(make_store, repo) -> None:
    store = make_store(_task("A"))

    plan = store.drop("ghost", Y, anchor_id="A")

    assert plan.is_noop
    assert _ids(store.tasks) == ["A"]
    assert repo.saves == []


def test_preview_does_not_mutate(make_store, repo) -> None:
    store = make_store(_task("A"), _task("B", Y))
    before = store.tasks

    plan = store.preview_drop("A", Y, anchor_id="B")

    assert plan.action == DropAction.MOVE
    assert store.tasks == before
    assert repo.saves == []


def test_preview_rejects_drops_that_change_nothing(make_store) -> None:
    store = make_store(_task("A"), _task("B"), _task("C", Y))

    assert store.preview_drop("A", X, anchor_id="A").is_noop
    assert store.preview_drop("ghost", X).is_noop
    assert not store.preview_drop("B", X, anchor_id="A").is_noop
    assert not store.preview_drop("A", Y).is_noop
