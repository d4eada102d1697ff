import os

# Must be set before the app (and its engine) is imported.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["OPENROUTER_API_KEY"] = "test-key"
os.environ["LOG_LEVEL"] = "WARNING"

from datetime import date, timedelta

import pytest
from fastapi.testclient import TestClient

from app.core.config import Base, SessionLocal, engine
from app.core.exceptions import InsightGenerationError
from app.services import habit_log as habit_log_service_module
from app.services.insight_client import get_insight_client
from main import app

RATINGS = {
    "Physical Health": 5,
    "Mental Health": 5,
    "Career/Education": 5,
    "Relationships": 5,
    "Finance": 5,
    "Hobbies": 5,
}

TODAY = date.today()
YESTERDAY = TODAY - timedelta(days=1)


class FakeInsightClient:
    """Records prompts and replies with a canned string, or fails."""

    def __init__(self, reply=None, error=None):
        self.reply = reply
        self.error = error
        self.prompts = []

    def complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise InsightGenerationError(self.error)
        return self.reply


@pytest.fixture(autouse=True)
def _database():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


class Clock:
    """Stands in for the server's calendar day."""

    def __init__(self, today):
        self.today = today

    def advance(self, days=1):
        self.today += timedelta(days=days)


@pytest.fixture
def clock(monkeypatch):
    frozen = Clock(TODAY)
    monkeypatch.setattr(habit_log_service_module, "current_date", lambda: frozen.today)
    return frozen


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def insight_client():
    fake = FakeInsightClient(
        reply=(
            "```json\n"
            '{"trend": "Improving", "prediction": "Sleep is settling in.", '
            '"futureOutcome": "More energy in a month.", '
            '"suggestions": ["Keep a bedtime", "Walk daily", "Eat earlier"], '
            '"dataPoints": 99}\n'
            "```"
        )
    )
    app.dependency_overrides[get_insight_client] = lambda: fake
    return fake


def register(client, email="ada@futureyou.app", name="Ada", password="secret123", ratings=None):
    response = client.post(
        "/auth/register",
        json={"name": name, "email": email, "password": password, "ratings": ratings or RATINGS},
    )
    assert response.status_code == 201, response.text
    return response.json()


def login_headers(client, email="ada@futureyou.app", password="secret123"):
    response = client.post("/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture
def auth_headers(client):
    register(client)
    return login_headers(client)
