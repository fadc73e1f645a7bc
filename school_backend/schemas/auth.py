from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, StrictBool

from ..models.enums import UserRole
from .base import SchemaModel, Text


class TokenData(BaseModel):
    username: Optional[str] = None
    role: Optional[str] = None
    jti: Optional[str] = None
    expires_at: Optional[datetime] = None


class UserBase(SchemaModel):
    username: Text
    full_name: Text
    email: EmailStr
    profile_image: Optional[str] = None


class UserCreate(UserBase):
    password: Text
    role: UserRole = UserRole.ADMIN
    is_active: StrictBool = True


class ProfileUpdate(SchemaModel):
    full_name: Text = None
    email: EmailStr = None
    profile_image: Optional[str] = None
    password: Text = None


class UserOut(UserBase):
    id: int
    role: UserRole
    is_active: bool
    created_at: datetime


class LoginRequest(SchemaModel):
    username: Text
    password: Text


class OAuth2Token(BaseModel):
    """Password-flow reply; OAuth2 clients expect these exact snake_case keys."""

    access_token: str
    token_type: str = "bearer"


class Token(SchemaModel):
    access_token: str
    token_type: str = "bearer"
    user: UserOut
