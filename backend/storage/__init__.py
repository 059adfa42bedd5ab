import logging

from utils.auth import make_password_context
from utils.database import create_db_engine, create_session_factory, init_db
from .base import SavedFund, SavedFundStore, User, UserStore
from .memory import MemorySavedFundStore, MemoryUserStore
from .sql import SqlSavedFundStore, SqlUserStore

logger = logging.getLogger(__name__)


def build_stores(settings):
    """Pick the store implementation from settings: SQL when DATABASE_URL is set, memory otherwise."""
    context = make_password_context(settings.bcrypt_rounds)
    if settings.database_url:
        engine = create_db_engine(settings.database_url)
        init_db(engine)
        session_factory = create_session_factory(engine)
        logger.info("Using SQL storage (%s)", engine.url.render_as_string(hide_password=True))
        return SqlUserStore(session_factory, context), SqlSavedFundStore(session_factory)
    logger.info("Using in-memory storage; data is lost on restart")
    return MemoryUserStore(context), MemorySavedFundStore()


__all__ = [
    "User",
    "SavedFund",
    "UserStore",
    "SavedFundStore",
    "MemoryUserStore",
    "MemorySavedFundStore",
    "SqlUserStore",
    "SqlSavedFundStore",
    "build_stores",
]
