"""The character's live state: the current build plus active statuses.

One Psyche is passed explicitly through every engine call that needs state.
Both halves are mutated in place (status toggles, build replacement), so
callers must serialise passes over the same Psyche.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from pydantic import BaseModel, Field

from inland_empire.build import apply_allocation, default_build
from inland_empire.models import Build
from inland_empire.status import StatusRegistry

logger = logging.getLogger(__name__)


class PsycheSnapshot(BaseModel):
    """Serialisable form of a Psyche, as stored by the persistence layer."""

    current_build: Build | None = None
    active_statuses: list[str] = Field(default_factory=list)


class Psyche:
    def __init__(
        self,
        build: Build | None = None,
        statuses: StatusRegistry | None = None,
    ) -> None:
        self.build = build or default_build()
        self.statuses = statuses or StatusRegistry()

    def apply_allocation(self, attribute_points: Mapping[str, int]) -> Build:
        """Replace the current build. Leaves it untouched on InvalidAllocation."""
        self.build = apply_allocation(self.build, attribute_points)
        return self.build

    def effective_level(self, skill_id: str) -> int:
        return self.statuses.effective_level(skill_id, self.build)

    def effective_levels(self) -> dict[str, int]:
        return {s: self.effective_level(s) for s in self.build.skill_levels}

    def snapshot(self) -> PsycheSnapshot:
        return PsycheSnapshot(
            current_build=self.build.model_copy(deep=True),
            active_statuses=list(self.statuses.active),
        )

    @classmethod
    def from_snapshot(cls, snapshot: PsycheSnapshot) -> Psyche:
        return cls(
            build=snapshot.current_build,
            statuses=StatusRegistry(snapshot.active_statuses),
        )
