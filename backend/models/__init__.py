from .base import Base
from .user import UserModel
from .saved_fund import SavedFundModel

__all__ = [
    "Base",
    "UserModel",
    "SavedFundModel",
]
