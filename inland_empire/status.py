"""Status registry: the set of currently active conditions and its modifiers.

Each active status adds +1 to every skill it boosts and -1 to every skill it
debuffs. A skill's effective level is its build level plus that net modifier,
clamped to 1..10. Statuses also shift check difficulty and can wake an
ancient voice.

detect_statuses() infers statuses from narrative text. For every keyword it
tries the second-person patterns first ("you feel X", "you are X", ...) and
finally the bare keyword, so third-person narration ("She looked exhausted.")
still matches through the bare fallback. That broad net is deliberate and
covered by tests.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from inland_empire.build import skill_level
from inland_empire.catalog import ANCIENT_VOICES, STATUS_EFFECTS
from inland_empire.models import Build

logger = logging.getLogger(__name__)

MIN_LEVEL = 1
MAX_LEVEL = 10

# {} is replaced by the keyword; the last entry is the bare-keyword fallback
DETECTION_PATTERNS: tuple[str, ...] = (
    "you feel {}",
    "you are {}",
    "you're {}",
    "your {}",
    "you seem {}",
    "you look {}",
    "feeling {}",
    "you {}",
    "{}",
)


def detect_statuses(text: str) -> set[str]:
    """Return the ids of every status whose keywords appear in the text."""
    lower = text.lower()
    detected: set[str] = set()
    for status_id, status in STATUS_EFFECTS.items():
        if any(
            pattern.format(keyword) in lower
            for keyword in status.keywords
            for pattern in DETECTION_PATTERNS
        ):
            detected.add(status_id)
    return detected


class StatusRegistry:
    """Mutable set of active status ids. Only catalog ids are ever stored."""

    def __init__(self, active: Iterable[str] = ()) -> None:
        self._active: set[str] = set()
        for status_id in active:
            self.activate(status_id)

    # ------------------------------------------------------------------
    # Membership
    # ------------------------------------------------------------------

    @property
    def active(self) -> tuple[str, ...]:
        """Active ids in catalog order."""
        return tuple(s for s in STATUS_EFFECTS if s in self._active)

    def is_active(self, status_id: str) -> bool:
        return status_id in self._active

    def activate(self, status_id: str) -> bool:
        """Add a status. Returns True only if it was newly added."""
        if status_id not in STATUS_EFFECTS:
            logger.warning("Ignoring unknown status %r", status_id)
            return False
        if status_id in self._active:
            return False
        self._active.add(status_id)
        logger.info("Status added: %s", status_id)
        return True

    def deactivate(self, status_id: str) -> bool:
        if status_id not in self._active:
            return False
        self._active.discard(status_id)
        logger.info("Status removed: %s", status_id)
        return True

    def toggle(self, status_id: str) -> bool:
        """Flip a status. Returns the new state; unknown ids stay inactive."""
        if status_id in self._active:
            self.deactivate(status_id)
            return False
        return self.activate(status_id)

    def clear(self) -> None:
        self._active.clear()

    def absorb(self, status_ids: Iterable[str]) -> list[str]:
        """Activate every given status; return the newly added ones in catalog order."""
        added = {s for s in status_ids if self.activate(s)}
        return [s for s in STATUS_EFFECTS if s in added]

    def names(self) -> list[str]:
        return [STATUS_EFFECTS[s].name for s in self.active]

    # ------------------------------------------------------------------
    # Modifiers
    # ------------------------------------------------------------------

    def modifier_for(self, skill_id: str) -> int:
        modifier = 0
        for status_id in self._active:
            status = STATUS_EFFECTS[status_id]
            if skill_id in status.boosts:
                modifier += 1
            if skill_id in status.debuffs:
                modifier -= 1
        return modifier

    def difficulty_modifier(self) -> int:
        return sum(STATUS_EFFECTS[s].difficulty_mod for s in self._active)

    def active_ancient_voices(self) -> set[str]:
        return {
            STATUS_EFFECTS[s].ancient_voice
            for s in self._active
            if STATUS_EFFECTS[s].ancient_voice in ANCIENT_VOICES
        }

    def effective_level(self, skill_id: str, build: Build) -> int:
        level = skill_level(build, skill_id) + self.modifier_for(skill_id)
        return max(MIN_LEVEL, min(MAX_LEVEL, level))

    def __contains__(self, status_id: object) -> bool:
        return status_id in self._active

    def __len__(self) -> int:
        return len(self._active)

    def __repr__(self) -> str:
        return f"StatusRegistry({list(self.active)!r})"
