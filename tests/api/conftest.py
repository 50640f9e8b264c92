"""
API test fixtures: a fresh app per test with dependency overrides cleared.
"""

import pytest
from fastapi.testclient import TestClient

from agrideck.api.main import create_app


@pytest.fixture
def client():
    app = create_app()
    yield TestClient(app)
    app.dependency_overrides.clear()
