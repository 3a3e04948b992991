# services/user_management/models/users.py
from sqlalchemy import Column, String, Enum, JSON, Index
from shared.db import Base, TimestampMixin
import enum
import uuid

class UserRole(str, enum.Enum):
    STUDENT = "student"
    ADMIN = "admin"

class UserStatus(str, enum.Enum):
    ACTIVE = "active"
    SUSPENDED = "suspended"

class User(TimestampMixin, Base):
    __tablename__ = "users"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    role = Column(Enum(UserRole), nullable=False, default=UserRole.STUDENT)
    status = Column(Enum(UserStatus), nullable=False, default=UserStatus.ACTIVE)
    subscribed_courses = Column(JSON, nullable=False, default=list)

    __table_args__ = (
        Index('idx_user_role', 'role'),
        Index('idx_user_status', 'status'),
    )
