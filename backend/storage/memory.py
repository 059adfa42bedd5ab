import logging
import threading
from datetime import datetime, timezone
from itertools import count
from typing import Dict, List, Optional, Tuple

from utils.auth import get_password_hash
from utils.errors import AlreadySavedError, DuplicateEmailError
from .base import SavedFund, SavedFundStore, User, UserStore

logger = logging.getLogger(__name__)


class MemoryUserStore(UserStore):
    """Users kept in a dict, ids handed out from 1 upwards."""

    def __init__(self, pwd_context=None):
        super().__init__(pwd_context)
        self._lock = threading.Lock()
        self._users: Dict[int, User] = {}
        self._ids_by_email: Dict[str, int] = {}
        self._next_id = count(1)

    def find_by_id(self, user_id):
        return self._users.get(user_id)

    def find_by_email(self, email):
        user_id = self._ids_by_email.get(email)
        return self._users.get(user_id) if user_id is not None else None

    def create(self, email, password, name):
        # Hash outside the lock, bcrypt is deliberately slow
        password_hash = get_password_hash(password, self.pwd_context)
        with self._lock:
            if email in self._ids_by_email:
                raise DuplicateEmailError()
            user = User(
                id=next(self._next_id),
                email=email,
                name=name,
                password_hash=password_hash,
                created_at=datetime.now(timezone.utc),
            )
            self._users[user.id] = user
            self._ids_by_email[email] = user.id
        return user

    def __len__(self):
        return len(self._users)


class MemorySavedFundStore(SavedFundStore):
    """Saved funds indexed both by id and by (user_id, fund_id)."""

    def __init__(self):
        self._lock = threading.Lock()
        self._funds: Dict[int, SavedFund] = {}
        self._ids_by_key: Dict[Tuple[int, str], int] = {}
        self._next_id = count(1)

    def list_by_user(self, user_id) -> List[SavedFund]:
        with self._lock:
            return [f for f in self._funds.values() if f.user_id == user_id]

    def is_saved(self, user_id, fund_id):
        return (user_id, fund_id) in self._ids_by_key

    def save(self, user_id, fund_id, fund_name, fund_category: Optional[str] = None, nav: Optional[str] = None):
        key = (user_id, fund_id)
        with self._lock:
            if key in self._ids_by_key:
                raise AlreadySavedError(user_id, fund_id)
            saved = SavedFund(
                id=next(self._next_id),
                user_id=user_id,
                fund_id=fund_id,
                fund_name=fund_name,
                fund_category=fund_category or None,
                nav=nav or None,
                saved_at=datetime.now(timezone.utc),
            )
            self._funds[saved.id] = saved
            self._ids_by_key[key] = saved.id
        return saved

    def remove(self, user_id, fund_id):
        with self._lock:
            saved_id = self._ids_by_key.pop((user_id, fund_id), None)
            if saved_id is None:
                return False
            del self._funds[saved_id]
        return True

    def __len__(self):
        return len(self._funds)
