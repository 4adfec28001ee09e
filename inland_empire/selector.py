"""Selector: turns relevance scores into the voices that speak this pass.

  1. Ancient voices. Every voice unlocked by an active status draws once:
     0.8 to speak if one of its own keywords is in the message, else 0.4.
     Included ancient voices score 1.0 at a fixed level 6 and are never checked.
  2. Regular voices. Score all 24 skills, drop anything under 0.3, sort by score
     (stable, so ties keep catalog order). Walk the candidates, accepting each
     with probability score * 0.8 + 0.2, until ancient + regular reaches
     target + ancient count, where
       target = round(min + (max - min) * max(emotional, danger, social)).
  3. Minimum fill. While fewer than min_voices regular voices made it, force in
     the best remaining candidates.

Returned order: ancient voices, accepted regular voices, forced fills.

Draw order is fixed so a scripted RandomSource reproduces a selection exactly:
one draw per unlocked ancient voice (catalog order), one noise draw per skill
(catalog order), then one acceptance draw per candidate visited.
"""

from __future__ import annotations

import logging
import math

from inland_empire.catalog import ANCIENT_VOICES, PRIMAL, SKILLS
from inland_empire.models import Build, NarrativeContext, RelevanceResult, Selection
from inland_empire.relevance import keyword_matches, score_skill
from inland_empire.rng import RandomSource, default_rng
from inland_empire.status import StatusRegistry

logger = logging.getLogger(__name__)

RELEVANCE_THRESHOLD = 0.3
ANCIENT_KEYWORD_CHANCE = 0.8
ANCIENT_BASE_CHANCE = 0.4
ANCIENT_SCORE = 1.0
ANCIENT_LEVEL = 6
ACCEPT_SCALE = 0.8
ACCEPT_FLOOR = 0.2


def target_voice_count(context: NarrativeContext, min_voices: int, max_voices: int) -> int:
    # round half up; Python's round() would send 2.5 to 2
    return math.floor(min_voices + (max_voices - min_voices) * context.intensity + 0.5)


def _to_selection(result: RelevanceResult) -> Selection:
    return Selection(
        skill_id=result.skill_id,
        skill_name=result.skill_name,
        score=result.score,
        reasons=result.reasons,
        skill_level=result.skill_level,
        attribute=result.attribute,
    )


def select_ancient_voices(
    context: NarrativeContext,
    statuses: StatusRegistry,
    rng: RandomSource | None = None,
) -> list[Selection]:
    rng = rng or default_rng()
    unlocked = statuses.active_ancient_voices()
    speaking: list[Selection] = []
    for voice in ANCIENT_VOICES.values():
        if voice.id not in unlocked:
            continue
        chance = (
            ANCIENT_KEYWORD_CHANCE
            if keyword_matches(voice.triggers, context.message)
            else ANCIENT_BASE_CHANCE
        )
        if rng.random() < chance:
            speaking.append(Selection(
                skill_id=voice.id,
                skill_name=voice.name,
                score=ANCIENT_SCORE,
                reasons=["Ancient voice awakened by status"],
                skill_level=ANCIENT_LEVEL,
                attribute=PRIMAL,
                is_ancient=True,
            ))
    return speaking


def rank_candidates(
    context: NarrativeContext,
    build: Build,
    statuses: StatusRegistry,
    rng: RandomSource | None = None,
) -> list[RelevanceResult]:
    """Score every skill and keep those at or above the relevance threshold, best first."""
    rng = rng or default_rng()
    scored = [score_skill(skill_id, context, build, statuses, rng) for skill_id in SKILLS]
    candidates = [r for r in scored if r.score >= RELEVANCE_THRESHOLD]
    candidates.sort(key=lambda r: r.score, reverse=True)
    return candidates


def select_voices(
    context: NarrativeContext,
    build: Build,
    statuses: StatusRegistry,
    min_voices: int = 1,
    max_voices: int = 4,
    rng: RandomSource | None = None,
) -> list[Selection]:
    rng = rng or default_rng()

    ancient = select_ancient_voices(context, statuses, rng)
    candidates = rank_candidates(context, build, statuses, rng)
    target = target_voice_count(context, min_voices, max_voices)

    selected: list[Selection] = list(ancient)
    limit = target + len(ancient)
    for candidate in candidates:
        if len(selected) >= limit:
            break
        if rng.random() < candidate.score * ACCEPT_SCALE + ACCEPT_FLOOR:
            selected.append(_to_selection(candidate))

    regular = len(selected) - len(ancient)
    if regular < min_voices:
        chosen = {s.skill_id for s in selected}
        for candidate in candidates:
            if regular >= min_voices:
                break
            if candidate.skill_id in chosen:
                continue
            selected.append(_to_selection(candidate))
            chosen.add(candidate.skill_id)
            regular += 1

    logger.debug(
        "Selected %d voice(s) (target=%d, ancient=%d): %s",
        len(selected), target, len(ancient), [s.skill_id for s in selected],
    )
    return selected
