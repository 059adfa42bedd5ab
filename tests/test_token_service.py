import time
from datetime import timedelta

import jwt
import pytest

from tests.conftest import TEST_SECRET
from utils import InvalidTokenError, TokenService


def test_issue_then_verify(token_service):
    token = token_service.issue(7, "a@x.com")
    identity = token_service.verify(token)
    assert identity.user_id == 7
    assert identity.email == "a@x.com"


def test_payload_shape(token_service):
    payload = jwt.decode(token_service.issue(7, "a@x.com"), TEST_SECRET, algorithms=["HS256"])
    assert set(payload) == {"id", "email", "exp"}


def test_default_expiry_is_one_week(token_service):
    payload = jwt.decode(token_service.issue(7, "a@x.com"), TEST_SECRET, algorithms=["HS256"])
    assert abs(payload["exp"] - time.time() - 7 * 24 * 3600) <= 5


def test_expired_token_rejected(token_service):
    token = token_service.issue(7, "a@x.com", expires_delta=timedelta(minutes=-1))
    with pytest.raises(InvalidTokenError):
        token_service.verify(token)


def test_wrong_secret_rejected(token_service):
    token = TokenService("some-other-secret-of-sufficient-length").issue(7, "a@x.com")
    with pytest.raises(InvalidTokenError):
        token_service.verify(token)


def test_token_without_expiry_rejected(token_service):
    token = jwt.encode({"id": 7, "email": "a@x.com"}, TEST_SECRET, algorithm="HS256")
    with pytest.raises(InvalidTokenError):
        token_service.verify(token)


@pytest.mark.parametrize("payload", [{"email": "a@x.com"}, {"id": "7", "email": "a@x.com"}, {"id": 7}])
def test_malformed_payload_rejected(token_service, payload):
    token = jwt.encode(dict(payload, exp=9999999999), TEST_SECRET, algorithm="HS256")
    with pytest.raises(InvalidTokenError):
        token_service.verify(token)


def test_empty_secret_refused():
    with pytest.raises(ValueError):
        TokenService("")
