"""Tests for inland_empire.storage — state.json round-trips and fallbacks."""

import json
import logging

from inland_empire.build import DEFAULT_BUILD_NAME, create_build
from inland_empire.config import Settings
from inland_empire.psyche import Psyche
from inland_empire.status import StatusRegistry
from inland_empire.storage import SavedState, Storage


def _write(storage: Storage, data) -> None:
    storage.state_path.write_text(json.dumps(data))


class TestLoad:
    def test_missing_file_gives_defaults(self, storage: Storage) -> None:
        state = storage.load()
        assert state == SavedState()
        psyche = storage.load_psyche()
        assert psyche.build.name == DEFAULT_BUILD_NAME
        assert psyche.statuses.active == ()

    def test_corrupt_file_falls_back(self, storage: Storage, caplog) -> None:
        storage.state_path.write_text("{not json")
        with caplog.at_level(logging.WARNING):
            state = storage.load()
        assert state.current_build.name == DEFAULT_BUILD_NAME
        assert "Cannot read" in caplog.text

    def test_invalid_build_total_falls_back(self, storage: Storage, caplog) -> None:
        bad = create_build({"intellect": 6, "psyche": 6, "physique": 6, "motorics": 6})
        _write(storage, {"current_build": bad.model_dump(mode="json")})
        with caplog.at_level(logging.WARNING):
            state = storage.load()
        assert state.current_build.name == DEFAULT_BUILD_NAME
        assert sum(state.current_build.attribute_points.values()) == 12
        assert "Stored build is invalid" in caplog.text

    def test_unknown_statuses_dropped(self, storage: Storage, caplog) -> None:
        _write(storage, {"active_statuses": ["wounded", "sleepy", "manic"]})
        with caplog.at_level(logging.WARNING):
            state = storage.load()
        assert state.active_statuses == ["wounded", "manic"]
        assert "sleepy" in caplog.text

    def test_invalid_stored_settings_fall_back(self, storage: Storage) -> None:
        _write(storage, {"settings": {"max_voices": 99}})
        assert storage.load_settings() == Settings()


class TestRoundTrip:
    def test_psyche_and_settings(self, storage: Storage) -> None:
        build = create_build(
            {"intellect": 6, "psyche": 2, "physique": 2, "motorics": 2}, name="Thinker",
        )
        psyche = Psyche(build=build, statuses=StatusRegistry(["paranoid", "intoxicated"]))
        settings = Settings(pov_style="third", character_name="Harry", max_voices=6)

        storage.save_psyche(psyche, settings)

        loaded = storage.load_psyche()
        assert loaded.build == build
        assert loaded.statuses.active == ("intoxicated", "paranoid")
        assert storage.load_settings() == settings

    def test_file_layout(self, storage: Storage) -> None:
        storage.save_psyche(Psyche(), Settings())
        data = json.loads(storage.state_path.read_text())
        assert set(data) == {"settings", "current_build", "active_statuses"}
        assert data["active_statuses"] == []
        assert data["current_build"]["attribute_points"]["psyche"] == 3
