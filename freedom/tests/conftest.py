from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from freedom.app import create_app
from freedom.config import Settings

FIXED_YEAR = 2024


@pytest.fixture()
def client() -> FlaskClient:
    flask_app = create_app(Settings(), clock=lambda: FIXED_YEAR)
    with flask_app.test_client() as test_client:
        yield test_client
