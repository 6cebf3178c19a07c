from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

STORAGE_BACKENDS = ("json", "sql")


def _resolve_project_root() -> Path:
    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve().parent
    return Path(__file__).resolve().parents[1]


PROJECT_ROOT = _resolve_project_root()


def load_env() -> None:
    env_name = os.getenv("APP_ENV", "development")
    candidates = [Path.cwd(), PROJECT_ROOT]
    for base in candidates:
        env_path = base / ".env"
        if env_path.exists():
            load_dotenv(env_path)
            break

    for base in candidates:
        env_specific = base / f".env.{env_name}"
        if env_specific.exists():
            load_dotenv(env_specific, override=True)
            break


@dataclass(frozen=True)
class Settings:
    storage_backend: str = "json"
    database_url: str = ""
    data_dir: str = "data"
    default_user: str | None = None
    log_level: str = "INFO"
    log_dir: str = "logs"

    @property
    def data_path(self) -> Path:
        path = Path(self.data_dir)
        return path if path.is_absolute() else PROJECT_ROOT / path


def _default_database_url(data_dir: str) -> str:
    path = Path(data_dir)
    if not path.is_absolute():
        path = PROJECT_ROOT / path
    return f"sqlite:///{(path / 'eisenhower.db').as_posix()}"


load_env()

STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "json").strip().lower()
if STORAGE_BACKEND not in STORAGE_BACKENDS:
    raise RuntimeError(
        f"STORAGE_BACKEND must be one of {', '.join(STORAGE_BACKENDS)}, got {STORAGE_BACKEND!r}."
    )

DATA_DIR = os.getenv("DATA_DIR", "data").strip() or "data"

SETTINGS = Settings(
    storage_backend=STORAGE_BACKEND,
    database_url=os.getenv("DATABASE_URL", "").strip() or _default_database_url(DATA_DIR),
    data_dir=DATA_DIR,
    default_user=os.getenv("DEFAULT_USER", "").strip() or None,
    log_level=os.getenv("LOG_LEVEL", "INFO"),
    log_dir=os.getenv("LOG_DIR", "logs"),
)
