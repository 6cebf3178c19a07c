from __future__ import annotations

from .entities import TaskEntity
from .enums import Category

SAMPLE_TASKS: tuple[tuple[str, str, Category], ...] = (
    ("Deadline project", "Complete the urgent project", Category.URGENT_IMPORTANT),
    ("Team meeting", "Prepare for tomorrow's meeting", Category.URGENT_IMPORTANT),
    ("Email responses", "Reply to urgent emails", Category.URGENT_NOT_IMPORTANT),
    ("Phone calls", "Return urgent calls", Category.URGENT_NOT_IMPORTANT),
    ("Strategic planning", "Plan next quarter goals", Category.NOT_URGENT_IMPORTANT),
    ("Skill development", "Learn new technology", Category.NOT_URGENT_IMPORTANT),
    ("Social media", "Check social media", Category.NOT_URGENT_NOT_IMPORTANT),
    ("Some interruptions", "Handle minor interruptions", Category.NOT_URGENT_NOT_IMPORTANT),
)


def sample_tasks() -> list[TaskEntity]:
    return [
        TaskEntity(title=title, notes=notes, category=category)
        for title, notes, category in SAMPLE_TASKS
    ]
