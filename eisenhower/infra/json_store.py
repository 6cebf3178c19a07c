"""Per-user JSON file storage.

Each user gets ``<data_dir>/<safe-name>-<hash>.json``::

    {"version": 1, "user_id": "alice", "tasks": [{...}, ...]}

The task list keeps store order. Files are replaced atomically.
"""

from __future__ import annotations

import hashlib
import json
import logging
import os
import re
import tempfile
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path
from typing import Any

from eisenhower.domain.entities import TaskEntity
from eisenhower.domain.enums import Category
from eisenhower.domain.errors import PersistenceError

logger = logging.getLogger(__name__)

FORMAT_VERSION = 1

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


def task_to_dict(task: TaskEntity) -> dict[str, Any]:
    return {
        "id": task.id,
        "title": task.title,
        "notes": task.notes,
        "category": task.category.value,
        "completed": task.completed,
        "created_at": task.created_at.isoformat(),
    }


def task_from_dict(data: dict[str, Any]) -> TaskEntity:
    return TaskEntity(
        id=str(data["id"]),
        title=str(data["title"]),
        notes=str(data.get("notes", "")),
        category=Category(data["category"]),
        completed=bool(data.get("completed", False)),
        created_at=datetime.fromisoformat(data["created_at"]),
    )


def user_file_stem(user_id: str) -> str:
    safe = _UNSAFE_CHARS.sub("_", user_id).strip("._") or "user"
    digest = hashlib.sha1(user_id.encode("utf-8")).hexdigest()[:8]
    return f"{safe[:64]}-{digest}"


class JsonTaskRepository:
    def __init__(self, data_dir: Path | str) -> None:
        self.data_dir = Path(data_dir).expanduser()

    def path_for(self, user_id: str) -> Path:
        return self.data_dir / f"{user_file_stem(user_id)}.json"

    def load(self, user_id: str) -> list[TaskEntity]:
        path = self.path_for(user_id)
        if not path.exists():
            return []
        try:
            document = json.loads(path.read_text(encoding="utf-8"))
            # A bare list is accepted for files written before the envelope existed.
            items = document if isinstance(document, list) else document["tasks"]
            return [task_from_dict(item) for item in items]
        except (OSError, json.JSONDecodeError, KeyError, TypeError, ValueError) as exc:
            raise PersistenceError(f"Cannot read {path}: {exc}") from exc

    def save(self, user_id: str, tasks: Sequence[TaskEntity]) -> bool:
        path = self.path_for(user_id)
        document = {
            "version": FORMAT_VERSION,
            "user_id": user_id,
            "tasks": [task_to_dict(task) for task in tasks],
        }
        tmp_name = None
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.data_dir,
                prefix=f".{path.stem}.",
                suffix=".tmp",
                delete=False,
            ) as handle:
                tmp_name = handle.name
                json.dump(document, handle, ensure_ascii=False, indent=2)
            os.replace(tmp_name, path)
        except (OSError, ValueError):
            logger.exception("Failed to write %s", path)
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            return False
        return True

    def list_users(self) -> list[str]:
        users = []
        for path in sorted(self.data_dir.glob("*.json")):
            try:
                document = json.loads(path.read_text(encoding="utf-8"))
            except (OSError, json.JSONDecodeError):
                logger.warning("Skipping unreadable task file %s", path)
                continue
            if isinstance(document, dict) and document.get("user_id"):
                users.append(str(document["user_id"]))
        return sorted(users)
