from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from compounding.app import create_app
from compounding.config import Settings


@pytest.fixture()
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture()
def client(settings: Settings) -> FlaskClient:
    app = create_app(settings)
    app.config["TESTING"] = True
    with app.test_client() as test_client:
        yield test_client
