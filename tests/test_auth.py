from tests.conftest import RATINGS, login_headers, register


def test_register_seeds_points_from_assessment(client):
    ratings = dict(RATINGS, **{"Finance": 10, "Hobbies": 8})
    user = register(client, ratings=ratings)

    # (5 * 4 + 10 + 8) * 10
    assert user["points"] == 380
    assert user["level"] == 4
    assert user["rank"] == "Novice"
    assert user["current_streak"] == 0
    assert user["longest_streak"] == 0
    assert "password_hash" not in user


def test_register_duplicate_email(client):
    register(client)
    response = client.post(
        "/auth/register",
        json={"name": "Other", "email": "ADA@futureyou.app", "password": "secret123", "ratings": RATINGS},
    )
    assert response.status_code == 409


def test_register_requires_every_domain(client):
    ratings = dict(RATINGS)
    del ratings["Hobbies"]
    response = client.post(
        "/auth/register",
        json={"name": "Ada", "email": "ada@futureyou.app", "password": "secret123", "ratings": ratings},
    )
    assert response.status_code == 422


def test_register_rejects_out_of_range_rating(client):
    response = client.post(
        "/auth/register",
        json={
            "name": "Ada",
            "email": "ada@futureyou.app",
            "password": "secret123",
            "ratings": dict(RATINGS, Finance=11),
        },
    )
    assert response.status_code == 422


def test_login_and_me(client):
    register(client)
    headers = login_headers(client)

    response = client.get("/auth/me", headers=headers)
    assert response.status_code == 200
    assert response.json()["email"] == "ada@futureyou.app"


def test_login_wrong_password(client):
    register(client)
    response = client.post("/auth/login", json={"email": "ada@futureyou.app", "password": "nope123"})
    assert response.status_code == 401


def test_refresh_issues_new_pair(client):
    register(client)
    tokens = client.post(
        "/auth/login", json={"email": "ada@futureyou.app", "password": "secret123"}
    ).json()

    response = client.post("/auth/refresh", json={"refresh_token": tokens["refresh_token"]})
    assert response.status_code == 200
    assert response.json()["user"]["name"] == "Ada"

    # An access token is not a refresh token.
    response = client.post("/auth/refresh", json={"refresh_token": tokens["access_token"]})
    assert response.status_code == 401


def test_me_requires_token(client):
    assert client.get("/auth/me").status_code in (401, 403)
    response = client.get("/auth/me", headers={"Authorization": "Bearer garbage"})
    assert response.status_code == 401


def test_level_progress(client, auth_headers):
    response = client.get("/auth/me/progress", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == {
        "level": 4,
        "points_into_level": 0,
        "points_per_level": 100,
        "points_to_next_level": 100,
        "percentage": 0.0,
    }
