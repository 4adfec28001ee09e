"""Relevance scorer: how strongly one skill's domain matches the narrative.

Additive score, clamped to [0, 1]:

  keywords   min(matches * 0.2, 0.6) for trigger words found in the message
  attribute  one context axis per attribute:
               intellect ↔ mystery  x0.4
               psyche    ↔ emotional x0.4
               physique  ↔ danger   x0.5
               motorics  ↔ physical x0.3
  status     +0.25 per net boost, +0.1 per net debuff (modifier is negative)
  level      effective level * 0.05
  noise      uniform in [-0.1, 0.1]

Reasons are diagnostics only; they never feed back into gameplay.
"""

from __future__ import annotations

from inland_empire.catalog import get_skill
from inland_empire.models import Build, NarrativeContext, RelevanceResult
from inland_empire.rng import RandomSource, default_rng
from inland_empire.status import StatusRegistry

KEYWORD_WEIGHT = 0.2
KEYWORD_CAP = 0.6
BOOST_WEIGHT = 0.25
DEBUFF_WEIGHT = 0.1
LEVEL_WEIGHT = 0.05
NOISE = 0.1
MAX_KEYWORD_REASONS = 3

# attribute id → (context axis, weight)
ATTRIBUTE_AXES: dict[str, tuple[str, float]] = {
    "intellect": ("mystery", 0.4),
    "psyche": ("emotional", 0.4),
    "physique": ("danger", 0.5),
    "motorics": ("physical", 0.3),
}


def keyword_matches(triggers: tuple[str, ...], message: str) -> list[str]:
    lower = message.lower()
    return [kw for kw in triggers if kw.lower() in lower]


def score_skill(
    skill_id: str,
    context: NarrativeContext,
    build: Build,
    statuses: StatusRegistry,
    rng: RandomSource | None = None,
) -> RelevanceResult:
    """Score one skill against the context. Unknown skills score 0 without drawing."""
    skill = get_skill(skill_id)
    if skill is None:
        return RelevanceResult(skill_id=skill_id)
    rng = rng or default_rng()

    status_modifier = statuses.modifier_for(skill_id)
    effective_level = statuses.effective_level(skill_id, build)
    reasons: list[str] = []
    score = 0.0

    matches = keyword_matches(skill.triggers, context.message)
    if matches:
        score += min(len(matches) * KEYWORD_WEIGHT, KEYWORD_CAP)
        reasons.append(f"Keywords: {', '.join(matches[:MAX_KEYWORD_REASONS])}")

    axis, weight = ATTRIBUTE_AXES[skill.attribute]
    score += getattr(context, axis) * weight

    if status_modifier > 0:
        score += status_modifier * BOOST_WEIGHT
        reasons.append(f"Status boost: +{status_modifier}")
    elif status_modifier < 0:
        score += status_modifier * DEBUFF_WEIGHT
        reasons.append(f"Status debuff: {status_modifier}")

    score += effective_level * LEVEL_WEIGHT
    score += rng.uniform(-NOISE, NOISE)

    return RelevanceResult(
        skill_id=skill_id,
        skill_name=skill.name,
        score=max(0.0, min(1.0, score)),
        reasons=reasons,
        skill_level=effective_level,
        attribute=skill.attribute,
    )
