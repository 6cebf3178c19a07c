from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from eisenhower.domain.entities import TaskEntity
from eisenhower.domain.enums import Category
from eisenhower.domain.errors import PersistenceError

from .models import PersonModel, TaskModel

logger = logging.getLogger(__name__)


def _to_entity(model: TaskModel) -> TaskEntity:
    return TaskEntity(
        id=model.id,
        title=model.title,
        notes=model.notes,
        category=Category(model.category),
        completed=bool(model.completed),
        created_at=model.created_at,
    )


def _to_model(task: TaskEntity, person_id: int, sort_order: int) -> TaskModel:
    return TaskModel(
        id=task.id,
        person_id=person_id,
        title=task.title,
        notes=task.notes,
        category=task.category.value,
        completed=task.completed,
        created_at=task.created_at,
        sort_order=sort_order,
    )


class SqlTaskRepository:
    """Relational storage: one ``people`` row per user, tasks ordered by sort_order."""

    def __init__(self, session_factory: sessionmaker) -> None:
        self._session_factory = session_factory

    def load(self, user_id: str) -> list[TaskEntity]:
        try:
            with self._session_factory() as session:
                stmt = (
                    select(TaskModel)
                    .join(PersonModel, TaskModel.person_id == PersonModel.id)
                    .where(PersonModel.user_id == user_id)
                    .order_by(TaskModel.sort_order.asc())
                )
                return [_to_entity(task) for task in session.scalars(stmt)]
        except (SQLAlchemyError, ValueError) as exc:
            raise PersistenceError(f"Cannot load tasks for {user_id!r}: {exc}") from exc

    def save(self, user_id: str, tasks: Sequence[TaskEntity]) -> bool:
        try:
            with self._session_factory() as session:
                person = self._get_or_create_person(session, user_id)
                session.execute(delete(TaskModel).where(TaskModel.person_id == person.id))
                session.add_all(
                    _to_model(task, person.id, index) for index, task in enumerate(tasks)
                )
                session.commit()
        except (SQLAlchemyError, ValueError):
            logger.exception("Failed to save %s tasks for %s", len(tasks), user_id)
            return False
        return True

    def list_users(self) -> list[str]:
        try:
            with self._session_factory() as session:
                stmt = select(PersonModel.user_id).order_by(PersonModel.user_id.asc())
                return list(session.scalars(stmt))
        except SQLAlchemyError:
            logger.exception("Failed to list users")
            return []

    @staticmethod
    def _get_or_create_person(session: Session, user_id: str) -> PersonModel:
        person = session.scalar(select(PersonModel).where(PersonModel.user_id == user_id))
        if person is None:
            person = PersonModel(user_id=user_id)
            session.add(person)
            session.flush()
        return person
