# services/user_management/controllers/user_service.py
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from services.user_management.models.users import User, UserRole, UserStatus
from services.user_management.schemas.users import UserCreate, UserOut, UserUpdate
from shared.auth import get_current_admin_user, get_password_hash
from shared.db import get_db
from shared.errors import ConflictError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["Users"])


# --- LIST USERS ---
@router.get("", response_model=List[UserOut])
async def list_users(
    role: Optional[UserRole] = None,
    status_filter: Optional[UserStatus] = Query(None, alias="status"),
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(get_current_admin_user)
):
    stmt = select(User).order_by(User.created_at.desc())
    if role:
        stmt = stmt.where(User.role == role)
    if status_filter:
        stmt = stmt.where(User.status == status_filter)
    result = await db.execute(stmt)
    return result.scalars().all()


# --- CREATE USER ---
@router.post("", response_model=UserOut, status_code=status.HTTP_201_CREATED)
async def create_user(
    payload: UserCreate,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(get_current_admin_user)
):
    if not payload.name.strip():
        raise ValidationError("Name is required")

    email = payload.email.lower()
    existing = await db.execute(select(User).where(User.email == email))
    if existing.scalars().first():
        raise ConflictError("User with this email already exists")

    new_user = User(
        name=payload.name.strip(),
        email=email,
        hashed_password=get_password_hash(payload.password),
        role=payload.role,
        status=payload.status,
        subscribed_courses=payload.subscribed_courses
    )

    db.add(new_user)
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise ConflictError("User with this email already exists")

    await db.refresh(new_user)
    logger.info("Admin %s created %s account %s", admin.email, new_user.role.value, new_user.email)
    return new_user


# --- UPDATE USER (role, status, subscriptions) ---
@router.put("/{user_id}", response_model=UserOut)
async def update_user(
    user_id: str,
    payload: UserUpdate,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(get_current_admin_user)
):
    user = await db.get(User, user_id)
    if not user:
        raise NotFoundError("User not found")

    changes = payload.model_dump(exclude_unset=True)
    if "name" in changes:
        if not (changes["name"] or "").strip():
            raise ValidationError("Name is required")
        user.name = changes["name"].strip()
    if changes.get("password"):
        user.hashed_password = get_password_hash(changes["password"])
    if changes.get("role"):
        user.role = changes["role"]
    if changes.get("status"):
        user.status = changes["status"]
    if changes.get("subscribed_courses") is not None:
        user.subscribed_courses = changes["subscribed_courses"]

    await db.commit()
    await db.refresh(user)
    logger.info("Admin %s updated account %s", admin.email, user.email)
    return user
