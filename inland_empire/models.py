"""Core domain models.

Engine stages pass these between each other and the API returns them as-is.
Pydantic is used for validation and serialisation at every data boundary.

Build is the only long-lived one; everything else is produced fresh per
narrative pass and never mutated after construction.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field


def _now() -> datetime:
    return datetime.now(timezone.utc)


# ---------------------------------------------------------------------------
# Build
# ---------------------------------------------------------------------------

class SkillCaps(BaseModel):
    """Advisory level bounds. Reported, never enforced by the engine."""

    starting: int
    learning: int


class Build(BaseModel):
    """An attribute-point allocation and the skill levels derived from it."""

    id: str
    name: str
    attribute_points: dict[str, int]
    skill_levels: dict[str, int]
    skill_caps: dict[str, SkillCaps]
    created_at: datetime = Field(default_factory=_now)
    modified_at: datetime = Field(default_factory=_now)


# ---------------------------------------------------------------------------
# Narrative context
# ---------------------------------------------------------------------------

class NarrativeContext(BaseModel):
    """Five independent intensity axes derived from one narrative snippet."""

    model_config = ConfigDict(frozen=True)

    message: str
    emotional: float = Field(0.0, ge=0.0, le=1.0)
    danger: float = Field(0.0, ge=0.0, le=1.0)
    social: float = Field(0.0, ge=0.0, le=1.0)
    mystery: float = Field(0.0, ge=0.0, le=1.0)
    physical: float = Field(0.0, ge=0.0, le=1.0)

    @property
    def intensity(self) -> float:
        """Drives how many voices speak; mystery and physical only affect scoring."""
        return max(self.emotional, self.danger, self.social)


# ---------------------------------------------------------------------------
# Scoring and selection
# ---------------------------------------------------------------------------

class RelevanceResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    skill_id: str
    skill_name: str = ""
    score: float = Field(0.0, ge=0.0, le=1.0)
    reasons: list[str] = Field(default_factory=list)
    skill_level: int = 1  # effective level at scoring time
    attribute: str = ""


class Selection(BaseModel):
    """One voice chosen to speak this pass."""

    model_config = ConfigDict(frozen=True)

    skill_id: str
    skill_name: str
    score: float
    reasons: list[str] = Field(default_factory=list)
    skill_level: int
    attribute: str
    is_ancient: bool = False


# ---------------------------------------------------------------------------
# Checks
# ---------------------------------------------------------------------------

class CheckOutcome(BaseModel):
    """Result of one 2d6 skill check."""

    model_config = ConfigDict(frozen=True)

    dice: tuple[int, int]
    dice_total: int
    skill_level: int
    modifier: int
    total: int
    threshold: int
    difficulty: str  # tier id, e.g. "challenging"
    difficulty_name: str  # display name, e.g. "Challenging"
    success: bool
    is_boxcars: bool  # 6+6, always success
    is_snake_eyes: bool  # 1+1, always failure
    margin: int  # total - threshold; informational when a critical applies


class CheckDecision(BaseModel):
    model_config = ConfigDict(frozen=True)

    should_check: bool
    difficulty: str
    threshold: int


# ---------------------------------------------------------------------------
# Pass output (handed to the presentation layer)
# ---------------------------------------------------------------------------

class PlannedVoice(BaseModel):
    """A selection with its resolved check, before any commentary exists."""

    model_config = ConfigDict(frozen=True)

    selection: Selection
    check: CheckOutcome | None = None


class VoiceResult(BaseModel):
    skill_id: str
    skill_name: str
    signature: str
    color: str
    content: str
    score: float
    check: CheckOutcome | None = None
    is_ancient: bool = False
    success: bool = True  # False when the commentary service failed
    error: str | None = None


class PassResult(BaseModel):
    message: str
    skipped: bool = False
    context: NarrativeContext | None = None
    detected_statuses: list[str] = Field(default_factory=list)  # newly activated this pass
    voices: list[VoiceResult] = Field(default_factory=list)
