"""Check resolver: 2d6 + skill level + modifier against a threshold.

Criticals override the arithmetic:
  snake eyes (1, 1) → always failure
  boxcars    (6, 6) → always success
The margin (total - threshold) is still reported in both cases.

decide_check() runs before any roll. Voices scoring above 0.8 skip the check
70% of the time and speak unconditionally; everything else is always checked.
The threshold it proposes starts at 10, drops with relevance, rises with
emotional/danger intensity and the active statuses' difficulty modifier, and
is clamped to 6..18.
"""

from __future__ import annotations

import math

from inland_empire.catalog import (
    DEFAULT_DIFFICULTY,
    DIFFICULTIES,
    Difficulty,
    difficulty_for_threshold,
    get_difficulty,
)
from inland_empire.models import CheckDecision, CheckOutcome, NarrativeContext, Selection
from inland_empire.rng import RandomSource, default_rng

BASE_THRESHOLD = 10
MIN_THRESHOLD = 6
MAX_THRESHOLD = 18
RELEVANCE_SWING = 4
INTENSITY_SWING = 4
HIGH_RELEVANCE = 0.8
SKIP_CHANCE = 0.3


def roll_d6(rng: RandomSource | None = None) -> int:
    return (rng or default_rng()).randint(1, 6)


def resolve_difficulty(difficulty: str | int) -> tuple[Difficulty, int]:
    """Return (tier, threshold) for a tier name or an explicit threshold.

    Unknown tier names fall back to medium.
    """
    if isinstance(difficulty, str):
        tier = get_difficulty(difficulty) or DIFFICULTIES[DEFAULT_DIFFICULTY]
        return tier, tier.threshold
    return difficulty_for_threshold(difficulty), difficulty


def roll_check(
    skill_level: int,
    difficulty: str | int,
    modifier: int = 0,
    rng: RandomSource | None = None,
) -> CheckOutcome:
    rng = rng or default_rng()
    die1 = roll_d6(rng)
    die2 = roll_d6(rng)
    dice_total = die1 + die2
    total = dice_total + skill_level + modifier
    tier, threshold = resolve_difficulty(difficulty)

    is_snake_eyes = die1 == 1 and die2 == 1
    is_boxcars = die1 == 6 and die2 == 6
    if is_snake_eyes:
        success = False
    elif is_boxcars:
        success = True
    else:
        success = total >= threshold

    return CheckOutcome(
        dice=(die1, die2),
        dice_total=dice_total,
        skill_level=skill_level,
        modifier=modifier,
        total=total,
        threshold=threshold,
        difficulty=tier.id,
        difficulty_name=tier.name,
        success=success,
        is_boxcars=is_boxcars,
        is_snake_eyes=is_snake_eyes,
        margin=total - threshold,
    )


def check_threshold(score: float, context: NarrativeContext, difficulty_modifier: int = 0) -> int:
    relevance_mod = -math.floor(score * RELEVANCE_SWING)
    intensity_mod = math.floor(max(context.emotional, context.danger) * INTENSITY_SWING)
    threshold = BASE_THRESHOLD + relevance_mod + intensity_mod + difficulty_modifier
    return max(MIN_THRESHOLD, min(MAX_THRESHOLD, threshold))


def should_check(score: float, rng: RandomSource | None = None) -> bool:
    # only voices above HIGH_RELEVANCE consume a draw
    if score <= HIGH_RELEVANCE:
        return True
    return (rng or default_rng()).random() > SKIP_CHANCE


def decide_check(
    selection: Selection,
    context: NarrativeContext,
    rng: RandomSource | None = None,
    difficulty_modifier: int = 0,
) -> CheckDecision:
    threshold = check_threshold(selection.score, context, difficulty_modifier)
    return CheckDecision(
        should_check=should_check(selection.score, rng),
        difficulty=difficulty_for_threshold(threshold).id,
        threshold=threshold,
    )
