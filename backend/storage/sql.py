"""
SQLAlchemy-backed stores.

Uniqueness lives in the schema (unique email, unique (user_id, fund_id)), so a
concurrent duplicate shows up as an IntegrityError on commit and is reported
with the same domain error the in-memory stores raise.
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import sessionmaker

from models import SavedFundModel, UserModel
from utils.auth import get_password_hash
from utils.errors import AlreadySavedError, DuplicateEmailError
from .base import SavedFund, SavedFundStore, User, UserStore

logger = logging.getLogger(__name__)


def _as_utc(value: datetime) -> datetime:
    # SQLite drops the offset on the way back; stored values are always UTC
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _to_user(row: UserModel) -> User:
    return User(
        id=row.id,
        email=row.email,
        name=row.name,
        password_hash=row.hashed_password,
        created_at=_as_utc(row.created_at),
    )


def _to_saved_fund(row: SavedFundModel) -> SavedFund:
    return SavedFund(
        id=row.id,
        user_id=row.user_id,
        fund_id=row.fund_id,
        fund_name=row.fund_name,
        fund_category=row.fund_category,
        nav=row.nav,
        saved_at=_as_utc(row.saved_at),
    )


class SqlUserStore(UserStore):
    def __init__(self, session_factory: sessionmaker, pwd_context=None):
        super().__init__(pwd_context)
        self._session_factory = session_factory

    def find_by_id(self, user_id) -> Optional[User]:
        with self._session_factory() as db:
            row = db.get(UserModel, user_id)
            return _to_user(row) if row else None

    def find_by_email(self, email) -> Optional[User]:
        with self._session_factory() as db:
            row = db.execute(select(UserModel).where(UserModel.email == email)).scalar_one_or_none()
            return _to_user(row) if row else None

    def create(self, email, password, name) -> User:
        new_user = UserModel(email=email, name=name, hashed_password=get_password_hash(password, self.pwd_context))
        with self._session_factory() as db:
            db.add(new_user)
            try:
                db.commit()
            except IntegrityError:
                db.rollback()
                if self.find_by_email(email) is None:
                    raise
                raise DuplicateEmailError()
            db.refresh(new_user)
            return _to_user(new_user)


class SqlSavedFundStore(SavedFundStore):
    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def list_by_user(self, user_id) -> List[SavedFund]:
        with self._session_factory() as db:
            rows = db.execute(
                select(SavedFundModel).where(SavedFundModel.user_id == user_id).order_by(SavedFundModel.id)
            ).scalars().all()
            return [_to_saved_fund(row) for row in rows]

    def is_saved(self, user_id, fund_id) -> bool:
        with self._session_factory() as db:
            found = db.execute(
                select(SavedFundModel.id).where(
                    SavedFundModel.user_id == user_id,
                    SavedFundModel.fund_id == fund_id,
                )
            ).first()
            return found is not None

    def save(self, user_id, fund_id, fund_name, fund_category=None, nav=None) -> SavedFund:
        row = SavedFundModel(
            user_id=user_id,
            fund_id=fund_id,
            fund_name=fund_name,
            fund_category=fund_category or None,
            nav=nav or None,
        )
        with self._session_factory() as db:
            db.add(row)
            try:
                db.commit()
            except IntegrityError:
                db.rollback()
                # Only the unique (user_id, fund_id) pair means "already saved"; a
                # foreign-key failure for a vanished user propagates as is
                if not self.is_saved(user_id, fund_id):
                    raise
                raise AlreadySavedError(user_id, fund_id)
            db.refresh(row)
            return _to_saved_fund(row)

    def remove(self, user_id, fund_id) -> bool:
        with self._session_factory() as db:
            result = db.execute(
                delete(SavedFundModel).where(
                    SavedFundModel.user_id == user_id,
                    SavedFundModel.fund_id == fund_id,
                )
            )
            db.commit()
            return result.rowcount > 0
