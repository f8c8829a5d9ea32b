from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from khatam_planner.core.progress.checklist import ChecklistState

LOGGER = logging.getLogger(__name__)


class JsonChecklistStore:
    """
    File-backed checklist persistence.

    A missing or unreadable file yields an empty checklist, so a corrupt
    file never blocks planning.
    """

    def __init__(self, path: Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> ChecklistState:
        if not self._path.exists():
            return ChecklistState()

        try:
            raw: Any = json.loads(self._path.read_text(encoding="utf-8"))
            return ChecklistState.from_json_obj(raw)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError):
            LOGGER.warning(
                "Invalid checklist file; starting empty",
                extra={"path": str(self._path)},
            )
            return ChecklistState()

    def save(self, state: ChecklistState) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(
            json.dumps(state.to_json_obj(), indent=2, sort_keys=True),
            encoding="utf-8",
        )

        LOGGER.info(
            "Checklist saved",
            extra={"path": str(self._path)},
        )
