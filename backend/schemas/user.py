from typing import Optional

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

MIN_PASSWORD_LENGTH = 6


def _check_email(v: str) -> str:
    # Returns the address as sent; emails are matched case-sensitively
    if v != v.strip():
        raise ValueError("Invalid email format")
    try:
        validate_email(v, check_deliverability=False)
    except EmailNotValidError:
        raise ValueError("Invalid email format")
    return v


class UserRegister(BaseModel):
    email: str
    password: str
    name: str
    # Usually checked by the client already; enforced here when sent
    confirm_password: Optional[str] = Field(default=None, alias="confirmPassword")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("email")
    @classmethod
    def email_format(cls, v):
        return _check_email(v)

    @field_validator("password")
    @classmethod
    def password_length(cls, v):
        if len(v) < MIN_PASSWORD_LENGTH:
            raise ValueError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
        return v

    @field_validator("name")
    @classmethod
    def name_present(cls, v):
        if not v.strip():
            raise ValueError("Name is required")
        return v.strip()

    @model_validator(mode="after")
    def passwords_match(self):
        if self.confirm_password is not None and self.confirm_password != self.password:
            raise ValueError("Passwords don't match")
        return self


class UserLogin(BaseModel):
    email: str
    password: str

    @field_validator("email")
    @classmethod
    def email_format(cls, v):
        return _check_email(v)

    @field_validator("password")
    @classmethod
    def password_present(cls, v):
        if not v:
            raise ValueError("Password is required")
        return v


class UserOut(BaseModel):
    id: int
    email: str
    name: str

    model_config = ConfigDict(from_attributes=True)


class AuthResponse(BaseModel):
    user: UserOut
    token: str
