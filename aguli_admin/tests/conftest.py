import pytest
from unittest.mock import MagicMock
from fastapi.testclient import TestClient

from aguli_admin.main import app
from aguli_admin.security.auth import create_access_token, user_backend
from aguli_admin.services.backend import BackendClient
from aguli_admin.tests.helpers import make_png

@pytest.fixture
def png_bytes():
    return make_png()

@pytest.fixture
def auth_headers():
    token = create_access_token({"sub": "admin-1", "email": "admin@aguli.tv", "name": "Admin", "backend_token": "backend-tok"})
    return {"Authorization": f"Bearer {token}"}

@pytest.fixture
def backend():
    fake = MagicMock(spec=BackendClient)
    fake.api_key = "saas-key"
    app.dependency_overrides[user_backend] = lambda: fake
    yield fake
    app.dependency_overrides.pop(user_backend, None)

@pytest.fixture
def client():
    return TestClient(app)
