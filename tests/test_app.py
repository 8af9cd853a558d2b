from app import create_app
from tests.fakes import FakeGenerator


def test_index(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert b"/api/agents" in resp.data


def test_agents_success(client, fake_generator, intake):
    resp = client.post("/api/agents", json=intake)
    assert resp.status_code == 200
    data = resp.get_json()
    assert set(data) == {"herbalist", "educator", "marketer", "community", "herb_matches", "knowledge_edges"}
    assert data["marketer"] == "marketer says hello"

    match = next(m for m in data["herb_matches"] if m["id"] == "ashwagandha")
    assert match["latin_name"] == "Withania somnifera"
    assert match["contraindicated"] is True
    assert match["traditions"] == ["Ayurvedic"]
    assert set(match) >= {"score", "actions", "uses", "cautions", "pairings", "matched_keywords"}
    for edge in data["knowledge_edges"]:
        assert set(edge) == {"source", "target", "label"}

    assert len(fake_generator.calls) == 4
    _, subs = fake_generator.calls[0]
    assert subs["highlight_count"] == 4
    assert subs["key_dates"] == "No specific launch dates provided"


def test_agents_rejects_invalid_payload(client, fake_generator, intake):
    del intake["symptoms"]
    resp = client.post("/api/agents", json=intake)
    assert resp.status_code == 400
    data = resp.get_json()
    assert data["error"] == "Invalid request payload"
    assert any(issue["loc"] == ["symptoms"] for issue in data["issues"])
    assert fake_generator.calls == []


def test_agents_rejects_non_json(client):
    resp = client.post("/api/agents", data="not json", content_type="text/plain")
    assert resp.status_code == 400


def test_agents_provider_failure(intake):
    client = create_app(generator=FakeGenerator(fail_on="marketer")).test_client()
    resp = client.post("/api/agents", json=intake)
    assert resp.status_code == 500
    assert resp.get_json() == {"error": "Failed to run multi-agent ecosystem"}


def test_agents_requires_api_key(monkeypatch, intake):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    client = create_app().test_client()
    resp = client.post("/api/agents", json=intake)
    assert resp.status_code == 500
    assert "OPENAI_API_KEY" in resp.get_json()["error"]
