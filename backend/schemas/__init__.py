from .user import UserRegister, UserLogin, UserOut, AuthResponse
from .saved_fund import SavedFundCreate, SavedFund, SavedFundCheck, MessageResponse

__all__ = [
    "UserRegister",
    "UserLogin",
    "UserOut",
    "AuthResponse",
    "SavedFundCreate",
    "SavedFund",
    "SavedFundCheck",
    "MessageResponse",
]
