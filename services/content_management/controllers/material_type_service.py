# services/content_management/controllers/material_type_service.py
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from services.content_management.models.courses import Course
from services.content_management.models.materials import MaterialType, Material
from services.content_management.schemas.materials import (
    MaterialTypeCreate,
    MaterialTypeUpdate,
    MaterialTypeOut
)
from services.content_management.controllers.common import derive_slug, commit_or_conflict
from shared.crud import require_text, apply_changes
from services.user_management.models.users import User
from shared.auth import get_optional_user, get_current_admin_user, is_admin
from shared.db import get_db
from shared.errors import ConflictError, NotFoundError, ValidationError
from shared.schemas import ActionOut

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/material-types", tags=["Material Types"])

DUPLICATE_MATERIAL_TYPE = "This material type already exists for this course"


async def _ensure_slug_free(db: AsyncSession, course_id: str, slug: str, exclude_id: Optional[str] = None):
    stmt = select(MaterialType).where(MaterialType.course_id == course_id, MaterialType.slug == slug)
    if exclude_id:
        stmt = stmt.where(MaterialType.id != exclude_id)
    result = await db.execute(stmt)
    if result.scalars().first():
        raise ConflictError(DUPLICATE_MATERIAL_TYPE)


# --- LIST MATERIAL TYPES OF A COURSE ---
@router.get("", response_model=List[MaterialTypeOut])
async def list_material_types(
    course_id: Optional[str] = Query(None, alias="courseId"),
    include_all: bool = Query(False, alias="all"),
    db: AsyncSession = Depends(get_db),
    current_user: Optional[User] = Depends(get_optional_user)
):
    if not course_id:
        raise ValidationError("courseId is required")

    stmt = (
        select(MaterialType)
        .where(MaterialType.course_id == course_id)
        .order_by(MaterialType.order)
    )
    if not (include_all and is_admin(current_user)):
        stmt = stmt.where(MaterialType.is_active == True)

    result = await db.execute(stmt)
    return result.scalars().all()


# --- GET MATERIAL TYPE ---
@router.get("/{material_type_id}", response_model=MaterialTypeOut)
async def get_material_type(material_type_id: str, db: AsyncSession = Depends(get_db)):
    material_type = await db.get(MaterialType, material_type_id)
    if not material_type:
        raise NotFoundError("Material type not found")
    return material_type


# --- ADD MATERIAL TYPE ---
@router.post("", response_model=MaterialTypeOut, status_code=status.HTTP_201_CREATED)
async def create_material_type(
    payload: MaterialTypeCreate,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(get_current_admin_user)
):
    course_id = require_text(payload.course_id, "courseId")
    name = require_text(payload.name)
    slug = derive_slug(name)

    if not await db.get(Course, course_id):
        raise NotFoundError("Course not found")
    await _ensure_slug_free(db, course_id, slug)

    material_type = MaterialType(
        course_id=course_id,
        name=name,
        slug=slug,
        icon=payload.icon or "📄",
        order=payload.order,
        is_active=payload.is_active
    )
    db.add(material_type)
    await commit_or_conflict(db, DUPLICATE_MATERIAL_TYPE)
    await db.refresh(material_type)
    return material_type


# --- UPDATE MATERIAL TYPE ---
@router.put("/{material_type_id}", response_model=MaterialTypeOut)
async def update_material_type(
    material_type_id: str,
    payload: MaterialTypeUpdate,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(get_current_admin_user)
):
    material_type = await db.get(MaterialType, material_type_id)
    if not material_type:
        raise NotFoundError("Material type not found")

    changes = payload.model_dump(exclude_unset=True)
    if "name" in changes:
        name = require_text(changes.pop("name"))
        slug = derive_slug(name)
        await _ensure_slug_free(db, material_type.course_id, slug, exclude_id=material_type_id)
        material_type.name = name
        material_type.slug = slug

    apply_changes(material_type, changes)
    await commit_or_conflict(db, DUPLICATE_MATERIAL_TYPE)
    await db.refresh(material_type)
    return material_type


# --- DELETE MATERIAL TYPE (cascade to materials) ---
@router.delete("/{material_type_id}", response_model=ActionOut)
async def delete_material_type(
    material_type_id: str,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(get_current_admin_user)
):
    material_type = await db.get(MaterialType, material_type_id)
    if not material_type:
        raise NotFoundError("Material type not found")

    try:
        materials = await db.execute(delete(Material).where(Material.material_type_id == material_type_id))
        await db.delete(material_type)
        await db.commit()
    except Exception:
        await db.rollback()
        logger.exception("Cascade delete of material type %s rolled back", material_type_id)
        raise

    logger.info("Material type %s deleted with %d materials", material_type_id, materials.rowcount)
    return {"message": "Material type and materials deleted"}
