from .errors import (
    FundWatchError,
    DuplicateEmailError,
    InvalidCredentialsError,
    MissingTokenError,
    InvalidTokenError,
    UserNotFoundError,
    AlreadySavedError,
    SavedFundNotFoundError,
)
from .config import Settings, ConfigError, load_dotenv
from .log import configure_logging
from .auth import (
    TokenService,
    TokenIdentity,
    make_password_context,
    verify_password,
    get_password_hash,
    get_current_identity,
    get_token_service,
    security,
)
from .database import create_db_engine, create_session_factory, init_db, get_user_store, get_saved_fund_store
from .error_handlers import register_error_handlers

__all__ = [
    # Errors
    "FundWatchError",
    "DuplicateEmailError",
    "InvalidCredentialsError",
    "MissingTokenError",
    "InvalidTokenError",
    "UserNotFoundError",
    "AlreadySavedError",
    "SavedFundNotFoundError",
    "register_error_handlers",
    # Config
    "Settings",
    "ConfigError",
    "load_dotenv",
    "configure_logging",
    # Auth
    "TokenService",
    "TokenIdentity",
    "make_password_context",
    "verify_password",
    "get_password_hash",
    "get_current_identity",
    "get_token_service",
    "security",
    # Database
    "create_db_engine",
    "create_session_factory",
    "init_db",
    "get_user_store",
    "get_saved_fund_store",
]
