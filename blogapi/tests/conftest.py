from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

from blogapi.app import create_app, get_container
from blogapi.shared.config import AppConfig, DatabaseConfig
from blogapi.tests.helpers import bearer, create_user, sign_in

TEST_SECRET = "test-signing-key-that-is-long-enough-for-hs256"


@pytest.fixture()
def config(tmp_path: Path) -> AppConfig:
    return AppConfig(
        APP_ENV="testing",
        SECRET_KEY=TEST_SECRET,
        LOG_LEVEL="WARNING",
        database=DatabaseConfig(DATABASE_URL=f"sqlite:///{tmp_path / 'blogapi.db'}"),
    )


@pytest.fixture()
def app(config: AppConfig) -> Iterator[Flask]:
    flask_app = create_app(config)
    yield flask_app
    with flask_app.app_context():
        get_container().database.dispose()


@pytest.fixture()
def client(app: Flask) -> Iterator[FlaskClient]:
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture()
def seeded_users(client: FlaskClient) -> list[dict]:
    return [
        create_user(client, "Steven victor", "steven@gmail.com"),
        create_user(client, "Kenny Morris", "kenny@gmail.com"),
    ]


@pytest.fixture()
def seeded_posts(client: FlaskClient, seeded_users: list[dict]) -> list[dict]:
    posts = []
    for index, user in enumerate(seeded_users, start=1):
        token = sign_in(client, user["email"])
        response = client.post(
            "/posts",
            json={
                "title": f"Title {index}",
                "content": f"Hello world {index}",
                "author_id": user["id"],
            },
            headers=bearer(token),
        )
        assert response.status_code == 201, response.get_json()
        posts.append(response.get_json())
    return posts
