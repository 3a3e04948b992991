# services/content_management/controllers/premium_content_service.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from services.content_management.models.courses import Course
from services.content_management.models.premium_content import PremiumContent
from services.content_management.schemas.premium_content import (
    PremiumContentCreate,
    PremiumContentUpdate,
    PremiumContentOut
)
from shared.crud import require_text, apply_changes
from services.user_management.models.users import User
from shared.auth import get_optional_user, get_current_admin_user, is_admin
from shared.db import get_db
from shared.errors import NotFoundError, ValidationError
from shared.schemas import ActionOut

router = APIRouter(prefix="/premium-content", tags=["Premium Content"])


# --- LIST PREMIUM CONTENT OF A COURSE ---
@router.get("", response_model=List[PremiumContentOut])
async def list_premium_content(
    course_id: Optional[str] = Query(None, alias="courseId"),
    include_all: bool = Query(False, alias="all"),
    db: AsyncSession = Depends(get_db),
    current_user: Optional[User] = Depends(get_optional_user)
):
    if not course_id:
        raise ValidationError("courseId is required")

    stmt = select(PremiumContent).where(PremiumContent.course_id == course_id)
    if not (include_all and is_admin(current_user)):
        stmt = stmt.where(PremiumContent.is_active == True)

    result = await db.execute(stmt)
    return result.scalars().all()


# --- GET PREMIUM CONTENT ---
@router.get("/{premium_id}", response_model=PremiumContentOut)
async def get_premium_content(premium_id: str, db: AsyncSession = Depends(get_db)):
    premium = await db.get(PremiumContent, premium_id)
    if not premium:
        raise NotFoundError("Premium content not found")
    return premium


# --- ADD PREMIUM CONTENT ---
@router.post("", response_model=PremiumContentOut, status_code=status.HTTP_201_CREATED)
async def create_premium_content(
    payload: PremiumContentCreate,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(get_current_admin_user)
):
    course_id = require_text(payload.course_id, "courseId")
    title = require_text(payload.title, "Title")

    if not await db.get(Course, course_id):
        raise NotFoundError("Course not found")

    premium = PremiumContent(
        course_id=course_id,
        title=title,
        description=payload.description,
        price=payload.price,
        features=payload.features.model_dump(),
        is_active=payload.is_active
    )
    db.add(premium)
    await db.commit()
    await db.refresh(premium)
    return premium


# --- UPDATE PREMIUM CONTENT ---
@router.put("/{premium_id}", response_model=PremiumContentOut)
async def update_premium_content(
    premium_id: str,
    payload: PremiumContentUpdate,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(get_current_admin_user)
):
    premium = await db.get(PremiumContent, premium_id)
    if not premium:
        raise NotFoundError("Premium content not found")

    changes = payload.model_dump(exclude_unset=True)
    if "title" in changes:
        premium.title = require_text(changes.pop("title"), "Title")
    if changes.get("features") is not None:
        # model_dump already turned the nested model into a plain dict
        premium.features = changes.pop("features")

    apply_changes(premium, changes)
    await db.commit()
    await db.refresh(premium)
    return premium


# --- DELETE PREMIUM CONTENT ---
@router.delete("/{premium_id}", response_model=ActionOut)
async def delete_premium_content(
    premium_id: str,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(get_current_admin_user)
):
    premium = await db.get(PremiumContent, premium_id)
    if not premium:
        raise NotFoundError("Premium content not found")

    await db.delete(premium)
    await db.commit()
    return {"message": "Premium content deleted"}
