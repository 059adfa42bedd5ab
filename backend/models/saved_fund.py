from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship
from .base import Base
from .user import _utcnow


class SavedFundModel(Base):
    __tablename__ = "saved_funds"
    # One row per (user, fund); the constraint makes concurrent saves race-free
    __table_args__ = (
        UniqueConstraint("user_id", "fund_id", name="uq_saved_funds_user_fund"),
        {"sqlite_autoincrement": True},
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    fund_id = Column(String, nullable=False)
    fund_name = Column(String, nullable=False)
    fund_category = Column(String, nullable=True)
    nav = Column(String, nullable=True)  # informational snapshot, never used for arithmetic
    saved_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)

    user = relationship("UserModel", back_populates="saved_funds")
