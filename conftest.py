from pathlib import Path

import pytest

from inland_empire.build import default_build
from inland_empire.config import ENV_OVERRIDES, Settings
from inland_empire.psyche import Psyche
from inland_empire.storage import Storage


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep a developer's .env overrides out of every test."""
    for var in (*ENV_OVERRIDES, "DATA_DIR"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def storage(tmp_path: Path) -> Storage:
    return Storage(tmp_path / "data")


@pytest.fixture
def psyche() -> Psyche:
    return Psyche(build=default_build())


@pytest.fixture
def settings() -> Settings:
    return Settings()
