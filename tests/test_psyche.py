"""Tests for inland_empire.psyche — live state and snapshots."""

import pytest

from inland_empire.build import InvalidAllocation
from inland_empire.psyche import Psyche, PsycheSnapshot
from inland_empire.status import StatusRegistry


class TestPsyche:
    def test_defaults(self) -> None:
        psyche = Psyche()
        assert psyche.build.name == "Balanced Detective"
        assert len(psyche.statuses) == 0

    def test_effective_levels_follow_statuses(self) -> None:
        psyche = Psyche(statuses=StatusRegistry(["confident"]))
        levels = psyche.effective_levels()
        assert levels["authority"] == 4
        assert levels["empathy"] == 2
        assert levels["logic"] == 3

    def test_apply_allocation(self) -> None:
        psyche = Psyche()
        psyche.apply_allocation({"intellect": 1, "psyche": 1, "physique": 1, "motorics": 9})
        assert psyche.effective_level("perception") == 9

    def test_invalid_allocation_keeps_build(self) -> None:
        psyche = Psyche()
        before = psyche.build
        with pytest.raises(InvalidAllocation):
            psyche.apply_allocation({"intellect": 9, "psyche": 1, "physique": 1, "motorics": 9})
        assert psyche.build is before

    def test_snapshot_round_trip(self) -> None:
        psyche = Psyche(statuses=StatusRegistry(["dying", "wounded"]))
        snapshot = psyche.snapshot()
        assert snapshot.active_statuses == ["wounded", "dying"]

        restored = Psyche.from_snapshot(PsycheSnapshot.model_validate(snapshot.model_dump(mode="json")))
        assert restored.build == psyche.build
        assert restored.statuses.active == psyche.statuses.active
