from pydantic import EmailStr, Field
from typing import Optional, List
from datetime import datetime

from shared.schemas import CamelModel
from services.user_management.models.users import UserRole, UserStatus

class UserCreate(CamelModel):
    name: str
    email: EmailStr
    password: str = Field(..., min_length=6)
    role: UserRole = UserRole.STUDENT
    status: UserStatus = UserStatus.ACTIVE
    subscribed_courses: List[str] = []

class UserUpdate(CamelModel):
    name: Optional[str] = None
    password: Optional[str] = Field(None, min_length=6)
    role: Optional[UserRole] = None
    status: Optional[UserStatus] = None
    subscribed_courses: Optional[List[str]] = None

class UserOut(CamelModel):
    id: str
    name: str
    email: str
    role: UserRole
    status: UserStatus
    subscribed_courses: List[str]
    created_at: datetime

class UserLoginRequest(CamelModel):
    email: EmailStr
    password: str

class UserLoginResponse(CamelModel):
    user: UserOut
    token: str

class CurrentUserResponse(CamelModel):
    user: UserOut
