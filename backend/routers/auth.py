import logging

from fastapi import APIRouter, Depends

from schemas import AuthResponse, UserLogin, UserOut, UserRegister
from storage import UserStore
from utils import (
    InvalidCredentialsError,
    TokenIdentity,
    TokenService,
    UserNotFoundError,
    get_current_identity,
    get_token_service,
    get_user_store,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


def _auth_response(user, tokens: TokenService) -> AuthResponse:
    return AuthResponse(user=UserOut.model_validate(user), token=tokens.issue(user.id, user.email))


@router.post("/register", response_model=AuthResponse)
def register(
    user: UserRegister,
    users: UserStore = Depends(get_user_store),
    tokens: TokenService = Depends(get_token_service),
):
    new_user = users.create(user.email, user.password, user.name)
    logger.info("Registered user id=%s", new_user.id)
    return _auth_response(new_user, tokens)


@router.post("/login", response_model=AuthResponse)
def login(
    user: UserLogin,
    users: UserStore = Depends(get_user_store),
    tokens: TokenService = Depends(get_token_service),
):
    db_user = users.find_by_email(user.email)
    if db_user is None:
        users.dummy_verify()
        logger.info("Login failed")
        raise InvalidCredentialsError()
    if not users.verify_password(user.password, db_user.password_hash):
        logger.info("Login failed")
        raise InvalidCredentialsError()

    logger.info("User id=%s logged in", db_user.id)
    return _auth_response(db_user, tokens)


@router.get("/me", response_model=UserOut)
def get_current_user(
    identity: TokenIdentity = Depends(get_current_identity),
    users: UserStore = Depends(get_user_store),
):
    db_user = users.find_by_id(identity.user_id)
    if db_user is None:
        raise UserNotFoundError()
    return UserOut.model_validate(db_user)
