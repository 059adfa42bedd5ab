from .auth import router as auth_router
from .saved_funds import router as saved_funds_router

__all__ = [
    "auth_router",
    "saved_funds_router",
]
