import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from routers import auth_router, saved_funds_router
from storage import build_stores
from utils import Settings, TokenService, configure_logging, register_error_handlers

logger = logging.getLogger(__name__)


def create_app(settings: Settings = None, user_store=None, saved_fund_store=None) -> FastAPI:
    """
    Build the API application.

    Stores are created per app (never module-global) so each test, or each
    worker process, gets its own. Without explicit settings they are read from
    the environment, which fails fast when JWT_SECRET is missing.
    """
    if settings is None:
        settings = Settings.from_env()
    configure_logging(settings.log_level)

    if user_store is None or saved_fund_store is None:
        default_users, default_funds = build_stores(settings)
        if user_store is None:
            user_store = default_users
        if saved_fund_store is None:
            saved_fund_store = default_funds

    app = FastAPI(title="Fund Watchlist API")
    app.state.settings = settings
    app.state.user_store = user_store
    app.state.saved_fund_store = saved_fund_store
    app.state.token_service = TokenService(settings.jwt_secret, settings.access_token_expire_minutes)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    app.include_router(auth_router, prefix=settings.api_prefix)
    app.include_router(saved_funds_router, prefix=settings.api_prefix)

    logger.info("Fund Watchlist API ready under %s", settings.api_prefix or "/")
    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:create_app",
        factory=True,
        host=os.environ.get("HOST", "127.0.0.1"),
        port=int(os.environ.get("PORT", "8000")),
    )
