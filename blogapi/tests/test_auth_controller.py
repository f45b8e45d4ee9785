from __future__ import annotations

import pytest
from flask.testing import FlaskClient
from prometheus_client import REGISTRY

from blogapi.app import get_container


def test_home(client: FlaskClient) -> None:
    response = client.get("/")

    assert response.status_code == 200
    assert response.get_json() == {"message": "Welcome To This Awesome API"}


def test_login_returns_token_for_identity(
    app, client: FlaskClient, seeded_users: list[dict]
) -> None:
    response = client.post("/login", json={"email": "steven@gmail.com", "password": "password"})

    assert response.status_code == 200
    token = response.get_json()["token"]
    with app.app_context():
        assert get_container().token_service.validate(token) == seeded_users[0]["id"]


def test_login_trims_email(client: FlaskClient, seeded_users: list[dict]) -> None:
    response = client.post(
        "/login", json={"email": "  kenny@gmail.com ", "password": "password"}
    )

    assert response.status_code == 200


@pytest.mark.parametrize(
    ("payload", "message"),
    [
        ({"email": "steven@gmail.com", "password": "wrong password"}, "Incorrect Details"),
        ({"email": "nobody@gmail.com", "password": "password"}, "Incorrect Details"),
        ({"email": "steven@gmail.com", "password": ""}, "Required Password"),
        ({"email": "", "password": "password"}, "Required Email"),
        ({"email": "stevengmail.com", "password": "password"}, "Invalid Email"),
        ({}, "Required Password"),
    ],
)
def test_login_rejections(
    client: FlaskClient, seeded_users: list[dict], payload: dict[str, str], message: str
) -> None:
    response = client.post("/login", json=payload)

    assert response.status_code == 422
    assert response.get_json() == {"error": message}
    assert "token" not in response.get_json()


def test_unknown_route_is_plain_404(client: FlaskClient) -> None:
    response = client.get("/nowhere")

    assert response.status_code == 404


def test_security_headers(client: FlaskClient) -> None:
    response = client.get("/")

    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"


def test_metrics_count_matched_routes(client: FlaskClient) -> None:
    client.get("/")

    response = client.get("/metrics")

    assert response.status_code == 200
    assert response.mimetype == "text/plain"
    assert b"blogapi_requests_total" in response.data
    counted = REGISTRY.get_sample_value(
        "blogapi_requests_total", {"method": "GET", "endpoint": "/", "status": "200"}
    )
    assert counted is not None and counted >= 1


def test_request_id_is_echoed(client: FlaskClient) -> None:
    response = client.get("/", headers={"X-Request-ID": "req-123"})

    assert response.headers["X-Request-ID"] == "req-123"


def test_request_id_is_generated_when_absent(client: FlaskClient) -> None:
    first = client.get("/").headers["X-Request-ID"]
    second = client.get("/").headers["X-Request-ID"]

    assert first and second and first != second


def test_signing_key_stays_out_of_flask_config(app) -> None:
    assert app.config.get("SECRET_KEY") is None
