from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone

from .enums import Category


def utcnow() -> datetime:
    """Naive UTC timestamp; both storage backends round-trip it unchanged."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def new_task_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class TaskEntity:
    title: str
    notes: str
    category: Category
    completed: bool = False
    id: str = field(default_factory=new_task_id)
    created_at: datetime = field(default_factory=utcnow)
