# user.py
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from jobly.utils.password_hash import MAX_PASSWORD_BYTES


def _validate_email_like(v: str) -> str:
    value = (v or "").strip()
    if "@" not in value:
        raise ValueError("email must contain '@'")
    left, right = value.split("@", 1)
    if not left or not right:
        raise ValueError("email must have text before and after '@'")
    return value


def _password_from_number(v):
    # Older clients send numeric passwords (`"password": 123`); keep their text form.
    if isinstance(v, (int, float)) and not isinstance(v, bool):
        return str(v)
    return v


def _password_within_bcrypt_limit(v: Optional[str]) -> Optional[str]:
    if v is not None and len(v.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValueError(f"password must be at most {MAX_PASSWORD_BYTES} bytes")
    return v


class UserBase(BaseModel):
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    email: str = Field(max_length=255)
    photo_url: Optional[str] = None

    @field_validator("email")
    @classmethod
    def _validate_email(cls, v: str) -> str:
        return _validate_email_like(v)


class UserCreate(UserBase):
    username: str = Field(min_length=1, max_length=25)
    password: str = Field(min_length=1)
    # Only honoured when the request is made with an admin token.
    is_admin: bool = False

    @field_validator("password", mode="before")
    @classmethod
    def _coerce_password(cls, v):
        return _password_from_number(v)

    @field_validator("password")
    @classmethod
    def _check_password_bytes(cls, v: str) -> str:
        return _password_within_bcrypt_limit(v)


class UserLogin(BaseModel):
    username: str = Field(min_length=1, max_length=25)
    password: str = Field(min_length=1)

    @field_validator("password", mode="before")
    @classmethod
    def _coerce_password(cls, v):
        return _password_from_number(v)


class UserRead(UserBase):
    username: str
    is_admin: bool = False

    model_config = ConfigDict(from_attributes=True)


class UserUpdate(BaseModel):
    password: Optional[str] = Field(default=None, min_length=1)
    first_name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    email: Optional[str] = Field(default=None, max_length=255)
    photo_url: Optional[str] = None
    is_admin: Optional[bool] = None

    @field_validator("password", "first_name", "last_name", "email", "is_admin")
    @classmethod
    def _reject_null(cls, v):
        # Only runs for explicitly supplied values; these columns are NOT NULL.
        if v is None:
            raise ValueError("field may not be null")
        return v

    @field_validator("password", mode="before")
    @classmethod
    def _coerce_password(cls, v):
        return _password_from_number(v)

    @field_validator("password")
    @classmethod
    def _check_password_bytes(cls, v: str) -> str:
        return _password_within_bcrypt_limit(v)

    @field_validator("email")
    @classmethod
    def _validate_email(cls, v: str) -> str:
        return _validate_email_like(v)


class UserResponse(BaseModel):
    user: UserRead


class UserListResponse(BaseModel):
    users: list[UserRead]


class TokenResponse(BaseModel):
    token: str


class TokenData(BaseModel):
    username: str
    is_admin: bool = False


class MessageResponse(BaseModel):
    message: str
