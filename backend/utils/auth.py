import logging
from datetime import datetime, timedelta, timezone
from typing import NamedTuple, Optional

import jwt
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from passlib.context import CryptContext

from .config import ACCESS_TOKEN_EXPIRE_MINUTES, BCRYPT_ROUNDS
from .errors import InvalidTokenError, MissingTokenError

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"

# auto_error=False so a missing header (401) and a bad token (403) stay distinct
security = HTTPBearer(auto_error=False)


def make_password_context(rounds: int = BCRYPT_ROUNDS) -> CryptContext:
    """Build the bcrypt context used to hash and verify passwords."""
    return CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)


pwd_context = make_password_context()


def verify_password(plain_password, hashed_password, context: Optional[CryptContext] = None):
    """Verify a plain password against a hashed password."""
    context = context or pwd_context
    try:
        return context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        # Unrecognised or corrupt hash: treat as a mismatch
        return False


def get_password_hash(password, context: Optional[CryptContext] = None):
    """Hash a password for storing."""
    return (context or pwd_context).hash(password)


class TokenIdentity(NamedTuple):
    user_id: int
    email: str


class TokenService:
    """Issues and verifies the HS256 bearer tokens handed out at login."""

    def __init__(self, secret_key: str, expire_minutes: int = ACCESS_TOKEN_EXPIRE_MINUTES, algorithm: str = ALGORITHM):
        if not secret_key:
            raise ValueError("secret_key is required")
        self._secret_key = secret_key
        self.expire_minutes = expire_minutes
        self.algorithm = algorithm

    def issue(self, user_id: int, email: str, expires_delta: Optional[timedelta] = None) -> str:
        """Create a signed token for `user_id` that expires after the configured window."""
        if expires_delta is None:
            expires_delta = timedelta(minutes=self.expire_minutes)
        expire = datetime.now(timezone.utc) + expires_delta
        to_encode = {"id": user_id, "email": email, "exp": expire}
        return jwt.encode(to_encode, self._secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenIdentity:
        """
        Decode `token` and return the identity it carries.

        Signature failures, expiry and malformed payloads all raise the same
        InvalidTokenError.
        """
        try:
            payload = jwt.decode(token, self._secret_key, algorithms=[self.algorithm], options={"require": ["exp"]})
        except jwt.PyJWTError as e:
            logger.info("Token rejected: %s", type(e).__name__)
            raise InvalidTokenError()

        user_id = payload.get("id")
        email = payload.get("email")
        if not isinstance(user_id, int) or isinstance(user_id, bool) or not isinstance(email, str):
            logger.info("Token rejected: malformed payload")
            raise InvalidTokenError()
        return TokenIdentity(user_id=user_id, email=email)


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def get_current_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    tokens: TokenService = Depends(get_token_service),
) -> TokenIdentity:
    """
    Resolve the bearer token to the caller's identity.

    The user record is not looked up here; a valid token is trusted until it
    expires.
    """
    if credentials is None or not credentials.credentials:
        raise MissingTokenError()
    return tokens.verify(credentials.credentials)
