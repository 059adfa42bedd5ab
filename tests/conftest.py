import pytest
from fastapi.testclient import TestClient

from main import create_app
from storage import MemorySavedFundStore, MemoryUserStore
from utils import Settings, TokenService, make_password_context

TEST_SECRET = "test-secret-key-that-is-long-enough-for-hs256"


@pytest.fixture
def settings():
    # Minimum bcrypt cost keeps the suite fast; production default is 10
    return Settings(jwt_secret=TEST_SECRET, bcrypt_rounds=4)


@pytest.fixture
def pwd_context():
    return make_password_context(4)


@pytest.fixture
def user_store(pwd_context):
    return MemoryUserStore(pwd_context)


@pytest.fixture
def saved_fund_store():
    return MemorySavedFundStore()


@pytest.fixture
def token_service():
    return TokenService(TEST_SECRET)


@pytest.fixture
def app(settings, user_store, saved_fund_store):
    return create_app(settings, user_store=user_store, saved_fund_store=saved_fund_store)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def register(client):
    """Register a user through the API and return the response body."""

    def _register(email="a@x.com", password="secret1", name="Alice"):
        response = client.post("/api/auth/register", json={"email": email, "password": password, "name": name})
        assert response.status_code == 200, response.text
        return response.json()

    return _register


@pytest.fixture
def auth_headers(register):
    body = register()
    return {"Authorization": f"Bearer {body['token']}"}
