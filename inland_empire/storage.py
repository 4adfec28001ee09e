"""JSON file storage.

All persistent state lives in one flat JSON file under a configurable base
directory. There is no database; reads and writes go through plain helper
methods that load and dump JSON.

Directory layout:

    {base}/
      state.json   ← {"settings": {...}, "current_build": {...}, "active_statuses": [...]}

Loading is forgiving: a missing file yields defaults, a corrupt file or an
invalid build falls back to the default build, and unknown status ids are
dropped. Every fallback is logged as a warning.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from inland_empire.build import InvalidAllocation, default_build, validate_allocation
from inland_empire.catalog import STATUS_EFFECTS
from inland_empire.config import Settings, env_overrides, get_settings
from inland_empire.models import Build
from inland_empire.psyche import Psyche
from inland_empire.status import StatusRegistry

logger = logging.getLogger(__name__)

STATE_FILE = "state.json"


class SavedState(BaseModel):
    settings: dict[str, Any] = Field(default_factory=dict)
    current_build: Build | None = None
    active_statuses: list[str] = Field(default_factory=list)


class Storage:
    def __init__(self, base_path: Path) -> None:
        self._base = base_path
        self._base.mkdir(parents=True, exist_ok=True)

    @property
    def state_path(self) -> Path:
        return self._base / STATE_FILE

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _read_json(self, path: Path) -> Any:
        return json.loads(path.read_text())

    def _write_json(self, path: Path, data: Any) -> None:
        path.write_text(json.dumps(data, indent=2))

    @staticmethod
    def _load_build(raw: Any) -> Build | None:
        if raw is None:
            return None
        try:
            build = Build.model_validate(raw)
            validate_allocation(build.attribute_points)
        except (ValidationError, InvalidAllocation) as e:
            logger.warning("Stored build is invalid, using default: %s", e)
            return default_build()
        return build

    @staticmethod
    def _load_statuses(raw: Any) -> list[str]:
        if not isinstance(raw, list):
            return []
        known: list[str] = []
        for status_id in raw:
            if status_id in STATUS_EFFECTS:
                known.append(status_id)
            else:
                logger.warning("Dropping unknown stored status %r", status_id)
        return known

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    def load(self) -> SavedState:
        path = self.state_path
        if not path.is_file():
            return SavedState()
        try:
            data = self._read_json(path)
        except (OSError, ValueError) as e:
            logger.warning("Cannot read %s, using defaults: %s", path, e)
            return SavedState(current_build=default_build())
        if not isinstance(data, dict):
            logger.warning("Unexpected content in %s, using defaults", path)
            return SavedState(current_build=default_build())

        settings = data.get("settings")
        return SavedState(
            settings=settings if isinstance(settings, dict) else {},
            current_build=self._load_build(data.get("current_build")),
            active_statuses=self._load_statuses(data.get("active_statuses")),
        )

    def save(self, state: SavedState) -> None:
        self._write_json(self.state_path, state.model_dump(mode="json"))

    # ------------------------------------------------------------------
    # Convenience: live objects
    # ------------------------------------------------------------------

    def load_settings(self) -> Settings:
        """Stored settings merged over defaults. Invalid stored values fall back to defaults."""
        stored = self.load().settings
        try:
            return get_settings(stored)
        except ValidationError as e:
            logger.warning("Stored settings are invalid, using defaults: %s", e)
            return get_settings()

    def load_psyche(self) -> Psyche:
        state = self.load()
        return Psyche(
            build=state.current_build,
            statuses=StatusRegistry(state.active_statuses),
        )

    def save_psyche(self, psyche: Psyche, settings: Settings) -> None:
        """Persist the psyche and settings. Values supplied by the environment are not written."""
        snapshot = psyche.snapshot()
        self.save(SavedState(
            settings=settings.model_dump(exclude=set(env_overrides())),
            current_build=snapshot.current_build,
            active_statuses=snapshot.active_statuses,
        ))
