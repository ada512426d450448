"""
Basic settings and logging configuration for the zooplanner app.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path


def _get_project_root() -> Path:
    return Path(__file__).resolve().parents[2]


@dataclass(slots=True)
class Settings:
    """Application-level settings."""

    project_root: Path
    data_dir: Path | None = None
    db_path: Path | None = None  # None = in-memory SQLite
    log_level: str = "INFO"

    @classmethod
    def default(cls) -> "Settings":
        """Create default settings, honouring ZOOPLANNER_* environment overrides."""
        project_root = _get_project_root()

        db_path: Path | None = None
        data_dir: Path | None = None
        raw_db = os.environ.get("ZOOPLANNER_DB_PATH", "").strip()
        if raw_db:
            db_path = Path(raw_db).expanduser().resolve()
            data_dir = db_path.parent
            data_dir.mkdir(parents=True, exist_ok=True)

        log_level = os.environ.get("ZOOPLANNER_LOG_LEVEL", "INFO").strip().upper() or "INFO"
        return cls(project_root=project_root, data_dir=data_dir, db_path=db_path, log_level=log_level)


def init_logging(settings: Settings) -> None:
    """Configure basic logging to console and, with a data dir, to a log file."""
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if settings.data_dir is not None:
        handlers.append(logging.FileHandler(settings.data_dir / "zooplanner.log", encoding="utf-8"))

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        handlers=handlers,
    )

    logging.getLogger(__name__).info(
        "Logging initialized. DB at %s", settings.db_path or "<memory>"
    )
