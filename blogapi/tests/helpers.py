from __future__ import annotations

from flask.testing import FlaskClient


def create_user(
    client: FlaskClient, nickname: str, email: str, password: str = "password"
) -> dict:
    response = client.post(
        "/users", json={"nickname": nickname, "email": email, "password": password}
    )
    assert response.status_code == 201, response.get_json()
    return response.get_json()


def sign_in(client: FlaskClient, email: str, password: str = "password") -> str:
    response = client.post("/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.get_json()
    return response.get_json()["token"]


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
