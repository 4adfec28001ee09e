"""Tests for inland_empire.dice — 2d6 checks and the check decision."""

import pytest

from inland_empire.dice import (
    check_threshold,
    decide_check,
    resolve_difficulty,
    roll_check,
    should_check,
)
from inland_empire.models import NarrativeContext, Selection
from inland_empire.rng import make_rng

CALM = NarrativeContext(message="")


def _selection(score: float, level: int = 3) -> Selection:
    return Selection(
        skill_id="logic", skill_name="Logic", score=score,
        skill_level=level, attribute="intellect",
    )


# ---------------------------------------------------------------------------
# roll_check
# ---------------------------------------------------------------------------

class TestRollCheck:
    def test_plain_success(self, scripted) -> None:
        outcome = roll_check(10, "trivial", rng=scripted(dice=[3, 4]))
        assert outcome.dice == (3, 4)
        assert outcome.dice_total == 7
        assert outcome.total == 17
        assert outcome.threshold == 6
        assert outcome.success
        assert outcome.margin == 11
        assert not outcome.is_boxcars and not outcome.is_snake_eyes

    def test_plain_failure(self, scripted) -> None:
        outcome = roll_check(1, "impossible", rng=scripted(dice=[2, 3]))
        assert not outcome.success
        assert outcome.margin == 6 - 18

    def test_snake_eyes_always_fail(self, scripted) -> None:
        outcome = roll_check(10, "trivial", rng=scripted(dice=[1, 1]))
        assert outcome.is_snake_eyes
        assert not outcome.success
        assert outcome.margin == 12 - 6

    def test_boxcars_always_succeed(self, scripted) -> None:
        outcome = roll_check(1, "impossible", rng=scripted(dice=[6, 6]))
        assert outcome.is_boxcars
        assert outcome.success
        assert outcome.margin == 13 - 18

    def test_exact_threshold_succeeds(self, scripted) -> None:
        outcome = roll_check(3, "medium", rng=scripted(dice=[3, 4]))
        assert outcome.total == 10
        assert outcome.success

    def test_modifier_added(self, scripted) -> None:
        outcome = roll_check(3, "medium", modifier=-2, rng=scripted(dice=[3, 4]))
        assert outcome.total == 8
        assert outcome.modifier == -2
        assert not outcome.success

    def test_unknown_difficulty_is_medium(self, scripted) -> None:
        outcome = roll_check(3, "absurd", rng=scripted(dice=[2, 2]))
        assert outcome.threshold == 10
        assert outcome.difficulty == "medium"
        assert outcome.difficulty_name == "Medium"

    def test_numeric_threshold(self, scripted) -> None:
        outcome = roll_check(3, 11, rng=scripted(dice=[4, 4]))
        assert outcome.threshold == 11
        assert outcome.difficulty == "challenging"
        assert outcome.success

    def test_dice_in_range(self) -> None:
        rng = make_rng(7)
        for _ in range(500):
            d1, d2 = roll_check(3, "medium", rng=rng).dice
            assert 1 <= d1 <= 6 and 1 <= d2 <= 6


class TestResolveDifficulty:
    def test_name(self) -> None:
        tier, threshold = resolve_difficulty("Legendary")
        assert (tier.id, threshold) == ("legendary", 16)

    def test_number(self) -> None:
        tier, threshold = resolve_difficulty(7)
        assert (tier.id, threshold) == ("easy", 7)


# ---------------------------------------------------------------------------
# Check decision
# ---------------------------------------------------------------------------

class TestCheckThreshold:
    def test_base(self) -> None:
        assert check_threshold(0.0, CALM) == 10

    def test_relevance_lowers(self) -> None:
        assert check_threshold(0.9, CALM) == 7

    def test_intensity_raises(self) -> None:
        ctx = NarrativeContext(message="", emotional=0.5, danger=0.75)
        assert check_threshold(0.0, ctx) == 13

    def test_status_modifier(self) -> None:
        assert check_threshold(0.5, CALM, difficulty_modifier=3) == 11

    def test_clamped(self) -> None:
        assert check_threshold(1.0, CALM, difficulty_modifier=-5) == 6
        hot = NarrativeContext(message="", emotional=1.0)
        assert check_threshold(0.0, hot, difficulty_modifier=10) == 18


class TestShouldCheck:
    def test_ordinary_voices_always_checked_without_drawing(self, scripted) -> None:
        rng = scripted(default=0.0)
        assert should_check(0.8, rng)
        assert rng.calls == 0

    def test_highly_relevant_voice_may_skip(self, scripted) -> None:
        assert should_check(0.9, scripted(draws=[0.2])) is False
        assert should_check(0.9, scripted(draws=[0.31])) is True

    def test_check_rate_near_70_percent(self) -> None:
        rng = make_rng(5)
        checked = sum(should_check(0.95, rng) for _ in range(4000))
        assert 0.65 < checked / 4000 < 0.75


class TestDecideCheck:
    def test_decision(self, scripted) -> None:
        decision = decide_check(_selection(0.5), CALM, scripted())
        assert decision.should_check
        assert decision.threshold == 8
        assert decision.difficulty == "easy"

    def test_difficulty_modifier_passed_through(self, scripted) -> None:
        decision = decide_check(_selection(0.5), CALM, scripted(), difficulty_modifier=3)
        assert decision.threshold == 11
        assert decision.difficulty == "challenging"
