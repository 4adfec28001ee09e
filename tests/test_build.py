"""Tests for inland_empire.build — allocation, derived levels and caps."""

import random

import pytest

from inland_empire.build import (
    CUSTOM_BUILD_NAME,
    DEFAULT_BUILD_NAME,
    InvalidAllocation,
    apply_allocation,
    create_build,
    default_build,
    skill_level,
    validate_allocation,
)


def _points(intellect=3, psyche=3, physique=3, motorics=3) -> dict[str, int]:
    return {"intellect": intellect, "psyche": psyche, "physique": physique, "motorics": motorics}


class TestCreateBuild:
    def test_skill_levels_equal_attribute_points(self) -> None:
        build = create_build(_points(intellect=5, psyche=2, physique=4, motorics=1))
        assert build.skill_levels["logic"] == 5
        assert build.skill_levels["empathy"] == 2
        assert build.skill_levels["shivers"] == 4
        assert build.skill_levels["composure"] == 1
        assert len(build.skill_levels) == 24

    def test_caps_derived_from_points(self) -> None:
        build = create_build(_points(intellect=5, psyche=2, physique=4, motorics=1))
        caps = build.skill_caps["logic"]
        assert (caps.starting, caps.learning) == (6, 9)
        caps = build.skill_caps["composure"]
        assert (caps.starting, caps.learning) == (2, 5)

    def test_total_not_enforced_at_creation(self) -> None:
        build = create_build(_points(intellect=6, psyche=6, physique=6, motorics=6))
        assert build.skill_levels["perception"] == 6

    def test_default_name_and_fresh_id(self) -> None:
        a = create_build(_points())
        b = create_build(_points())
        assert a.name == CUSTOM_BUILD_NAME
        assert a.id.startswith("build_")
        assert a.id != b.id

    def test_unknown_attribute_rejected(self) -> None:
        with pytest.raises(InvalidAllocation, match="Unknown"):
            create_build({**_points(), "charisma": 2})

    def test_missing_attribute_rejected(self) -> None:
        points = _points()
        del points["motorics"]
        with pytest.raises(InvalidAllocation, match="Missing"):
            create_build(points)

    def test_non_positive_points_rejected(self) -> None:
        with pytest.raises(InvalidAllocation):
            create_build(_points(psyche=0))


class TestDefaultBuild:
    def test_balanced(self) -> None:
        build = default_build()
        assert build.name == DEFAULT_BUILD_NAME
        assert set(build.skill_levels.values()) == {3}
        assert sum(build.attribute_points.values()) == 12


class TestValidateAllocation:
    def test_twelve_points_accepted(self) -> None:
        validate_allocation(_points(intellect=6, psyche=2, physique=2, motorics=2))

    def test_wrong_total_rejected(self) -> None:
        with pytest.raises(InvalidAllocation, match="Invalid attribute total: 13, must be 12"):
            validate_allocation(_points(intellect=4))


class TestApplyAllocation:
    def test_replaces_levels_and_keeps_name(self) -> None:
        current = default_build()
        new = apply_allocation(current, _points(intellect=6, psyche=2, physique=2, motorics=2))
        assert new.name == DEFAULT_BUILD_NAME
        assert new.skill_levels["logic"] == 6
        assert current.skill_levels["logic"] == 3

    def test_invalid_leaves_current_unchanged(self) -> None:
        current = default_build()
        before = current.model_dump()
        with pytest.raises(InvalidAllocation):
            apply_allocation(current, _points(intellect=5))
        assert current.model_dump() == before

    def test_without_current_uses_custom_name(self) -> None:
        assert apply_allocation(None, _points()).name == CUSTOM_BUILD_NAME


class TestSkillLevel:
    def test_known_skill(self) -> None:
        build = create_build(_points(intellect=5, psyche=3, physique=2, motorics=2))
        assert skill_level(build, "encyclopedia") == 5

    def test_unknown_skill_defaults_to_one(self) -> None:
        assert skill_level(default_build(), "astrology") == 1


class TestAllocationProperty:
    def test_only_twelve_point_totals_apply(self) -> None:
        rng = random.Random(12)
        build = default_build()
        for _ in range(300):
            points = _points(*(rng.randint(1, 6) for _ in range(4)))
            total = sum(points.values())
            if total == 12:
                build = apply_allocation(build, points)
                assert sum(build.attribute_points.values()) == 12
            else:
                previous = build
                with pytest.raises(InvalidAllocation):
                    build = apply_allocation(build, points)
                assert build is previous
