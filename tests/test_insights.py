import pytest

from app.core.exceptions import InsightGenerationError
from app.services.insight_client import get_insight_client
from app.services.simulation import parse_projection
from main import app
from tests.conftest import FakeInsightClient, YESTERDAY


def log_sleep(client, headers, hours, day=None):
    payload = {"domain": "Physical Health", "sleep_hours": hours}
    if day:
        payload["date"] = day.isoformat()
    assert client.post("/habits", json=payload, headers=headers).status_code == 201


def test_generate_stores_projection(client, auth_headers, insight_client):
    log_sleep(client, auth_headers, 6, YESTERDAY)
    log_sleep(client, auth_headers, 8)

    response = client.post("/insights", json={"domain": "Physical Health"}, headers=auth_headers)
    assert response.status_code == 201, response.text
    body = response.json()

    projection = body["projection"]
    assert body["domain"] == "Physical Health"
    assert body["timeline"] == "30days"
    assert projection["trend"] == "improving"
    assert projection["future_outcome"] == "More energy in a month."
    assert len(projection["suggestions"]) == 3
    # Overridden with the number of logs actually sent.
    assert projection["data_points"] == 2
    assert projection["generated_by"]
    assert projection["last_updated"]

    prompt = insight_client.prompts[0]
    assert "Domain: Physical Health" in prompt
    assert YESTERDAY.isoformat() in prompt

    stored = client.get("/insights", headers=auth_headers).json()
    assert [item["id"] for item in stored] == [body["id"]]


def test_generate_without_logs(client, auth_headers, insight_client):
    response = client.post("/insights", json={"domain": "Finance"}, headers=auth_headers)
    assert response.status_code == 422
    assert insight_client.prompts == []


@pytest.mark.parametrize(
    "fake",
    [
        FakeInsightClient(error="The insight service timed out, please try again later"),
        FakeInsightClient(reply="Sorry, I cannot help with that."),
        FakeInsightClient(reply='{"trend": "sideways", "prediction": "x", "futureOutcome": "y"}'),
    ],
)
def test_failures_store_nothing(client, auth_headers, fake):
    app.dependency_overrides[get_insight_client] = lambda: fake
    log_sleep(client, auth_headers, 8)

    response = client.post("/insights", json={"domain": "Physical Health"}, headers=auth_headers)
    assert response.status_code == 502
    assert response.json()["detail"]
    assert client.get("/insights", headers=auth_headers).json() == []


def test_delete_and_clear(client, auth_headers, insight_client):
    log_sleep(client, auth_headers, 8)
    first = client.post("/insights", json={"domain": "Physical Health"}, headers=auth_headers).json()
    client.post("/insights", json={"domain": "Physical Health"}, headers=auth_headers)
    client.post("/insights", json={"domain": "Physical Health"}, headers=auth_headers)

    assert client.delete(f"/insights/{first['id']}", headers=auth_headers).status_code == 200
    assert client.delete(f"/insights/{first['id']}", headers=auth_headers).status_code == 404
    assert len(client.get("/insights", headers=auth_headers).json()) == 2

    response = client.delete("/insights", headers=auth_headers)
    assert response.json()["message"] == "Deleted 2 insights"
    assert client.get("/insights", headers=auth_headers).json() == []


def test_parse_projection_strips_fences():
    projection = parse_projection(
        '```\n{"trend": "STABLE", "prediction": "p", "futureOutcome": "f", "suggestions": []}\n```'
    )
    assert projection.trend == "stable"
    assert projection.future_outcome == "f"


def test_parse_projection_rejects_arrays():
    with pytest.raises(InsightGenerationError):
        parse_projection("[1, 2, 3]")
