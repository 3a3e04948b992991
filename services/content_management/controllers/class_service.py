# services/content_management/controllers/class_service.py
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from services.content_management.models.classes import AcademyClass
from services.content_management.schemas.classes import ClassCreate, ClassUpdate, ClassOut
from services.content_management.controllers.common import derive_slug, commit_or_conflict
from shared.crud import require_text, apply_changes
from services.user_management.models.users import User
from shared.auth import get_optional_user, get_current_admin_user, is_admin
from shared.db import get_db
from shared.errors import ConflictError, NotFoundError
from shared.schemas import ActionOut

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/classes", tags=["Classes"])

DUPLICATE_CLASS = "A class with this name already exists"


# --- LIST CLASSES ---
@router.get("", response_model=List[ClassOut])
async def list_classes(
    include_all: bool = Query(False, alias="all"),
    db: AsyncSession = Depends(get_db),
    current_user: Optional[User] = Depends(get_optional_user)
):
    stmt = select(AcademyClass).order_by(AcademyClass.order)
    if not (include_all and is_admin(current_user)):
        stmt = stmt.where(AcademyClass.is_active == True)
    result = await db.execute(stmt)
    return result.scalars().all()


# --- GET CLASS ---
@router.get("/{class_id}", response_model=ClassOut)
async def get_class(class_id: str, db: AsyncSession = Depends(get_db)):
    academy_class = await db.get(AcademyClass, class_id)
    if not academy_class:
        raise NotFoundError("Class not found")
    return academy_class


# --- ADD CLASS ---
@router.post("", response_model=ClassOut, status_code=status.HTTP_201_CREATED)
async def create_class(
    payload: ClassCreate,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(get_current_admin_user)
):
    name = require_text(payload.name)
    slug = derive_slug(name)

    # Fast path; the unique index on slug is the real guard
    existing = await db.execute(select(AcademyClass).where(AcademyClass.slug == slug))
    if existing.scalars().first():
        raise ConflictError(DUPLICATE_CLASS)

    new_class = AcademyClass(
        name=name,
        slug=slug,
        description=payload.description,
        icon=payload.icon or "📚",
        order=payload.order,
        is_active=payload.is_active
    )
    db.add(new_class)
    await commit_or_conflict(db, DUPLICATE_CLASS)
    await db.refresh(new_class)
    return new_class


# --- UPDATE CLASS ---
@router.put("/{class_id}", response_model=ClassOut)
async def update_class(
    class_id: str,
    payload: ClassUpdate,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(get_current_admin_user)
):
    academy_class = await db.get(AcademyClass, class_id)
    if not academy_class:
        raise NotFoundError("Class not found")

    changes = payload.model_dump(exclude_unset=True)
    if "name" in changes:
        name = require_text(changes.pop("name"))
        slug = derive_slug(name)
        clash = await db.execute(
            select(AcademyClass).where(
                AcademyClass.slug == slug,
                AcademyClass.id != class_id
            )
        )
        if clash.scalars().first():
            raise ConflictError(DUPLICATE_CLASS)
        academy_class.name = name
        academy_class.slug = slug

    apply_changes(academy_class, changes)
    await commit_or_conflict(db, DUPLICATE_CLASS)
    await db.refresh(academy_class)
    return academy_class


# --- DELETE CLASS ---
@router.delete("/{class_id}", response_model=ActionOut)
async def delete_class(
    class_id: str,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(get_current_admin_user)
):
    academy_class = await db.get(AcademyClass, class_id)
    if not academy_class:
        raise NotFoundError("Class not found")

    # Courses are not cascaded; they drop out of the public catalog instead
    await db.delete(academy_class)
    await db.commit()
    logger.info("Class %s (%s) deleted by %s", class_id, academy_class.slug, admin.email)
    return {"message": "Class deleted"}
