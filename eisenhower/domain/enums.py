from __future__ import annotations

from enum import StrEnum


class Category(StrEnum):
    URGENT_IMPORTANT = "Urgent & Important"
    URGENT_NOT_IMPORTANT = "Urgent & Not Important"
    NOT_URGENT_IMPORTANT = "Not Urgent & Important"
    NOT_URGENT_NOT_IMPORTANT = "Not Urgent & Not Important"

    @property
    def is_urgent(self) -> bool:
        return self in (Category.URGENT_IMPORTANT, Category.URGENT_NOT_IMPORTANT)

    @property
    def is_important(self) -> bool:
        return self in (Category.URGENT_IMPORTANT, Category.NOT_URGENT_IMPORTANT)

    @classmethod
    def from_flags(cls, urgent: bool, important: bool) -> Category:
        if urgent:
            return cls.URGENT_IMPORTANT if important else cls.URGENT_NOT_IMPORTANT
        return cls.NOT_URGENT_IMPORTANT if important else cls.NOT_URGENT_NOT_IMPORTANT


class DropAction(StrEnum):
    NONE = "none"
    REORDER = "reorder"
    MOVE = "move"
