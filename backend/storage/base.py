"""
Storage interfaces for users and saved funds.

Routers only ever see these abstract classes; `memory` and `sql` provide the
two implementations. Both uniqueness rules (one user per email, one saved entry
per user and fund) are enforced inside `create` / `save` as a single atomic
step, never as a separate lookup followed by an insert.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from passlib.context import CryptContext

from utils.auth import pwd_context as default_pwd_context, verify_password


@dataclass(frozen=True)
class User:
    id: int
    email: str
    name: str
    password_hash: str
    created_at: datetime


@dataclass(frozen=True)
class SavedFund:
    id: int
    user_id: int
    fund_id: str
    fund_name: str
    fund_category: Optional[str]
    nav: Optional[str]
    saved_at: datetime


class UserStore(ABC):
    def __init__(self, pwd_context: Optional[CryptContext] = None):
        self.pwd_context = pwd_context or default_pwd_context

    @abstractmethod
    def find_by_id(self, user_id: int) -> Optional[User]:
        ...

    @abstractmethod
    def find_by_email(self, email: str) -> Optional[User]:
        """Exact match on the stored email."""

    @abstractmethod
    def create(self, email: str, password: str, name: str) -> User:
        """Hash `password` and store a new user. Raises DuplicateEmailError."""

    def verify_password(self, plain_password: str, password_hash: str) -> bool:
        return verify_password(plain_password, password_hash, self.pwd_context)

    def dummy_verify(self) -> None:
        """Spend one hash verification so unknown emails cost as much as wrong passwords."""
        self.pwd_context.dummy_verify()


class SavedFundStore(ABC):
    @abstractmethod
    def list_by_user(self, user_id: int) -> List[SavedFund]:
        ...

    @abstractmethod
    def is_saved(self, user_id: int, fund_id: str) -> bool:
        ...

    @abstractmethod
    def save(
        self,
        user_id: int,
        fund_id: str,
        fund_name: str,
        fund_category: Optional[str] = None,
        nav: Optional[str] = None,
    ) -> SavedFund:
        """Insert a new entry. Raises AlreadySavedError if (user_id, fund_id) exists."""

    @abstractmethod
    def remove(self, user_id: int, fund_id: str) -> bool:
        """Delete the matching entry; False when there was nothing to delete."""
