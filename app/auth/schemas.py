from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from app.core.enums import UserType


class LoginRequest(BaseModel):
    """identifier is the enrollment number for students, the employee id otherwise."""

    identifier: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
    user_type: UserType


class UserInfo(BaseModel):
    id: str
    name: str
    email: str
    user_type: UserType


class LoginResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserInfo
    dashboard: str  # where the client lands for this role
    issued_at: datetime


class MeResponse(BaseModel):
    user: UserInfo
    dashboard: str


class CurrentUser(BaseModel):
    """Lightweight representation of the authenticated user for role checks."""

    id: str
    user_type: UserType
    name: Optional[str] = None
