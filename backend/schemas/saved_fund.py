from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class SavedFundCreate(CamelModel):
    fund_id: str
    fund_name: str
    fund_category: Optional[str] = None
    nav: Optional[str] = None

    @field_validator("fund_id", mode="before")
    @classmethod
    def fund_id_present(cls, v):
        # scheme codes sometimes arrive as numbers
        if isinstance(v, int) and not isinstance(v, bool):
            v = str(v)
        if not isinstance(v, str) or not v.strip():
            raise ValueError("Fund ID is required")
        return v.strip()

    @field_validator("fund_name")
    @classmethod
    def fund_name_present(cls, v):
        if not v.strip():
            raise ValueError("Fund name is required")
        return v.strip()

    @field_validator("nav", mode="before")
    @classmethod
    def nav_as_text(cls, v):
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("fund_category", "nav")
    @classmethod
    def empty_to_none(cls, v):
        if v is not None and not v.strip():
            return None
        return v


class SavedFund(CamelModel):
    id: int
    user_id: int
    fund_id: str
    fund_name: str
    fund_category: Optional[str] = None
    nav: Optional[str] = None
    saved_at: datetime


class SavedFundCheck(CamelModel):
    is_saved: bool


class MessageResponse(BaseModel):
    message: str
