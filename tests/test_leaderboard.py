from tests.conftest import RATINGS, login_headers, register


def test_ordered_by_points_with_current_user_flag(client):
    register(client, email="ada@futureyou.app", name="Ada")
    register(client, email="bob@futureyou.app", name="Bob", ratings=dict(RATINGS, Finance=10))
    register(client, email="cy@futureyou.app", name="Cy")
    headers = login_headers(client, email="cy@futureyou.app")

    response = client.get("/leaderboard", headers=headers)
    assert response.status_code == 200
    board = response.json()

    assert [entry["name"] for entry in board] == ["Bob", "Ada", "Cy"]
    assert [entry["position"] for entry in board] == [1, 2, 3]
    assert board[0]["points"] == 350
    assert [entry["is_current_user"] for entry in board] == [False, False, True]


def test_limit(client):
    for index in range(3):
        register(client, email=f"user{index}@futureyou.app", name=f"User {index}")
    headers = login_headers(client, email="user0@futureyou.app")

    board = client.get("/leaderboard", params={"limit": 2}, headers=headers).json()
    assert len(board) == 2
    assert client.get("/leaderboard", params={"limit": 0}, headers=headers).status_code == 422
