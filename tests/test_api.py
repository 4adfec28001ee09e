"""HTTP API tests through FastAPI's TestClient with an in-memory LLM."""

from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from inland_empire.app import create_app
from inland_empire.llm import EchoLLM, HttpLLM
from inland_empire.models import PassResult


@pytest.fixture
def data_dir(tmp_path):
    return tmp_path / "data"


@pytest.fixture
def client(data_dir) -> TestClient:
    return TestClient(create_app(data_dir=data_dir, llm=EchoLLM()))


def _points(intellect=3, psyche=3, physique=3, motorics=3) -> dict[str, int]:
    return {"intellect": intellect, "psyche": psyche, "physique": physique, "motorics": motorics}


# ── Settings ─────────────────────────────────────────────


class TestSettings:
    def test_health(self, client: TestClient) -> None:
        assert client.get("/api/health").json() == {"status": "ok"}

    def test_get_defaults(self, client: TestClient) -> None:
        body = client.get("/api/settings").json()
        assert body["max_voices"] == 4
        assert body["pov_style"] == "second"

    def test_patch_merges_and_persists(self, client: TestClient, data_dir) -> None:
        resp = client.patch("/api/settings", json={"pov_style": "first", "min_voices": 2})
        assert resp.status_code == 200
        assert resp.json()["pov_style"] == "first"

        reopened = TestClient(create_app(data_dir=data_dir))
        body = reopened.get("/api/settings").json()
        assert (body["pov_style"], body["min_voices"]) == ("first", 2)

    def test_patch_invalid_is_422_and_unchanged(self, client: TestClient) -> None:
        resp = client.patch("/api/settings", json={"max_voices": 50})
        assert resp.status_code == 422
        assert client.get("/api/settings").json()["max_voices"] == 4


# ── Catalog and psyche ───────────────────────────────────


class TestPsyche:
    def test_catalog(self, client: TestClient) -> None:
        body = client.get("/api/catalog").json()
        assert len(body["skills"]) == 24
        assert len(body["status_effects"]) == 13
        assert [d["threshold"] for d in body["difficulties"]] == [6, 8, 10, 12, 14, 16, 18]

    def test_default_psyche(self, client: TestClient) -> None:
        body = client.get("/api/psyche").json()
        assert body["build"]["name"] == "Balanced Detective"
        assert body["effective_levels"]["logic"] == 3
        assert body["active_statuses"] == []
        assert body["difficulty_modifier"] == 0

    def test_put_build(self, client: TestClient) -> None:
        resp = client.put("/api/build", json={"attribute_points": _points(intellect=6, psyche=2, physique=2, motorics=2)})
        assert resp.status_code == 200
        body = resp.json()
        assert body["build"]["skill_levels"]["logic"] == 6
        assert body["build"]["skill_caps"]["logic"] == {"starting": 7, "learning": 10}
        assert body["build"]["name"] == "Balanced Detective"

    def test_put_build_with_name(self, client: TestClient) -> None:
        body = client.put("/api/build", json={"attribute_points": _points(), "name": "Cop"}).json()
        assert body["build"]["name"] == "Cop"

    def test_put_build_invalid_total(self, client: TestClient) -> None:
        resp = client.put("/api/build", json={"attribute_points": _points(intellect=5)})
        assert resp.status_code == 400
        assert "must be 12" in resp.json()["detail"]
        assert client.get("/api/psyche").json()["effective_levels"]["logic"] == 3

    def test_toggle_status(self, client: TestClient) -> None:
        body = client.post("/api/statuses/wounded/toggle").json()
        assert body["active"] is True
        assert body["active_statuses"] == ["wounded"]
        assert body["effective_levels"]["pain_threshold"] == 4
        assert body["difficulty_modifier"] == 2

        body = client.post("/api/statuses/wounded/toggle").json()
        assert body["active"] is False
        assert body["active_statuses"] == []

    def test_toggle_unknown_status(self, client: TestClient) -> None:
        assert client.post("/api/statuses/sleepy/toggle").status_code == 404

    def test_awakened_ancient_voices(self, client: TestClient) -> None:
        client.post("/api/statuses/grieving/toggle")
        assert client.get("/api/psyche").json()["ancient_voices"] == ["limbic_system"]

    def test_clear_statuses(self, client: TestClient) -> None:
        client.post("/api/statuses/manic/toggle")
        client.post("/api/statuses/paranoid/toggle")
        assert client.delete("/api/statuses").json()["active_statuses"] == []

    def test_statuses_persist(self, client: TestClient, data_dir) -> None:
        client.post("/api/statuses/terrified/toggle")
        reopened = TestClient(create_app(data_dir=data_dir))
        assert reopened.get("/api/psyche").json()["active_statuses"] == ["terrified"]

    def test_detect_does_not_change_state(self, client: TestClient) -> None:
        body = client.post("/api/detect", json={"message": "You are starving and scared."}).json()
        assert body["statuses"] == ["starving", "terrified"]
        assert client.get("/api/psyche").json()["active_statuses"] == []


# ── Voices and checks ────────────────────────────────────


class TestVoices:
    def test_short_message_skipped(self, client: TestClient) -> None:
        body = client.post("/api/voices", json={"message": "hi"}).json()
        assert body["skipped"] is True
        assert body["voices"] == []

    def test_pass_returns_voices(self, client: TestClient) -> None:
        body = client.post(
            "/api/voices",
            json={"message": "Blood on the floor!! A knife, a hidden clue, and the cold wind."},
        ).json()
        assert body["skipped"] is False
        assert body["context"]["danger"] > 0
        for voice in body["voices"]:
            assert voice["content"].startswith("Scene:")

    def test_pass_persists_detected_statuses(self, client: TestClient, data_dir) -> None:
        body = client.post(
            "/api/voices", json={"message": "You feel exhausted after the long night."},
        ).json()
        assert body["detected_statuses"] == ["exhausted"]
        reopened = TestClient(create_app(data_dir=data_dir))
        assert reopened.get("/api/psyche").json()["active_statuses"] == ["exhausted"]

    def test_pass_survives_backend_crash(self, data_dir) -> None:
        llm = AsyncMock(side_effect=ConnectionError("socket closed"))
        client = TestClient(create_app(data_dir=data_dir, llm=llm))
        resp = client.post("/api/voices", json={"message": "You feel exhausted after the long night."})
        assert resp.status_code == 200
        body = resp.json()
        assert body["detected_statuses"] == ["exhausted"]
        assert all(v["content"] == "*static*" for v in body["voices"])
        reopened = TestClient(create_app(data_dir=data_dir))
        assert reopened.get("/api/psyche").json()["active_statuses"] == ["exhausted"]

    def test_pass_uses_settings_llm_when_none_injected(self, data_dir) -> None:
        client = TestClient(create_app(data_dir=data_dir))
        with patch("inland_empire.routes.voices.run_pass", AsyncMock(return_value=PassResult(message="x"))) as run:
            client.post("/api/voices", json={"message": "A long enough message."})
        assert isinstance(run.await_args.kwargs["llm"], HttpLLM)

    def test_check(self, client: TestClient) -> None:
        body = client.post("/api/check", json={"skill_id": "logic", "difficulty": "trivial"}).json()
        assert body["skill_level"] == 3
        assert body["threshold"] == 6
        assert 2 <= body["dice_total"] <= 12

    def test_check_numeric_difficulty(self, client: TestClient) -> None:
        body = client.post("/api/check", json={"skill_id": "logic", "difficulty": 11, "skill_level": 7}).json()
        assert body["threshold"] == 11
        assert body["difficulty"] == "challenging"
        assert body["skill_level"] == 7

    def test_check_numeric_string_difficulty(self, client: TestClient) -> None:
        body = client.post("/api/check", json={"skill_id": "logic", "difficulty": "14"}).json()
        assert body["threshold"] == 14
        assert body["difficulty"] == "heroic"

    def test_check_unknown_skill(self, client: TestClient) -> None:
        assert client.post("/api/check", json={"skill_id": "astrology"}).status_code == 404
