from __future__ import annotations

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text

from eisenhower.domain.entities import utcnow

from .db import Base


class PersonModel(Base):
    __tablename__ = "people"

    id = Column(Integer, primary_key=True)
    user_id = Column(String(200), nullable=False, unique=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)


class TaskModel(Base):
    __tablename__ = "tasks"

    id = Column(String(64), primary_key=True)
    person_id = Column(
        Integer, ForeignKey("people.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title = Column(Text, nullable=False)
    notes = Column(Text, nullable=False, default="")
    category = Column(String(32), nullable=False, index=True)
    completed = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    sort_order = Column(Integer, nullable=False, default=0)
