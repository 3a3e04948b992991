# services/content_management/controllers/material_service.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from services.content_management.models.materials import MaterialType, Material
from services.content_management.schemas.materials import MaterialCreate, MaterialUpdate, MaterialOut
from shared.crud import require_text, apply_changes
from services.user_management.models.users import User
from shared.auth import get_optional_user, get_current_admin_user, is_admin
from shared.db import get_db
from shared.errors import NotFoundError, ValidationError
from shared.schemas import ActionOut

router = APIRouter(prefix="/materials", tags=["Materials"])


# --- LIST MATERIALS (by material type or course) ---
@router.get("", response_model=List[MaterialOut])
async def list_materials(
    material_type_id: Optional[str] = Query(None, alias="materialTypeId"),
    course_id: Optional[str] = Query(None, alias="courseId"),
    include_all: bool = Query(False, alias="all"),
    db: AsyncSession = Depends(get_db),
    current_user: Optional[User] = Depends(get_optional_user)
):
    if not material_type_id and not course_id:
        raise ValidationError("materialTypeId or courseId is required")

    stmt = select(Material).order_by(Material.order)
    if material_type_id:
        stmt = stmt.where(Material.material_type_id == material_type_id)
    if course_id:
        stmt = stmt.where(Material.course_id == course_id)
    if not (include_all and is_admin(current_user)):
        stmt = stmt.where(Material.is_active == True)

    result = await db.execute(stmt)
    return result.scalars().all()


# --- GET MATERIAL ---
@router.get("/{material_id}", response_model=MaterialOut)
async def get_material(material_id: str, db: AsyncSession = Depends(get_db)):
    material = await db.get(Material, material_id)
    if not material:
        raise NotFoundError("Material not found")
    return material


# --- ADD MATERIAL ---
@router.post("", response_model=MaterialOut, status_code=status.HTTP_201_CREATED)
async def create_material(
    payload: MaterialCreate,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(get_current_admin_user)
):
    material_type_id = require_text(payload.material_type_id, "materialTypeId")
    course_id = require_text(payload.course_id, "courseId")
    title = require_text(payload.title, "Title")

    material_type = await db.get(MaterialType, material_type_id)
    if not material_type:
        raise NotFoundError("Material type not found")
    if material_type.course_id != course_id:
        raise ValidationError("Material type does not belong to this course")

    material = Material(
        material_type_id=material_type_id,
        course_id=course_id,
        title=title,
        description=payload.description,
        file_url=payload.file_url,
        file_public_id=payload.file_public_id,
        file_type=payload.file_type,
        file_name=payload.file_name,
        order=payload.order,
        is_active=payload.is_active
    )
    db.add(material)
    await db.commit()
    await db.refresh(material)
    return material


# --- UPDATE MATERIAL ---
@router.put("/{material_id}", response_model=MaterialOut)
async def update_material(
    material_id: str,
    payload: MaterialUpdate,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(get_current_admin_user)
):
    material = await db.get(Material, material_id)
    if not material:
        raise NotFoundError("Material not found")

    changes = payload.model_dump(exclude_unset=True)
    if "title" in changes:
        material.title = require_text(changes.pop("title"), "Title")

    new_type_id = changes.pop("material_type_id", None)
    if new_type_id and new_type_id != material.material_type_id:
        material_type = await db.get(MaterialType, new_type_id)
        if not material_type:
            raise NotFoundError("Material type not found")
        # course_id always mirrors the material type's course
        material.material_type_id = material_type.id
        material.course_id = material_type.course_id

    apply_changes(material, changes)
    await db.commit()
    await db.refresh(material)
    return material


# --- DELETE MATERIAL ---
@router.delete("/{material_id}", response_model=ActionOut)
async def delete_material(
    material_id: str,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(get_current_admin_user)
):
    material = await db.get(Material, material_id)
    if not material:
        raise NotFoundError("Material not found")

    await db.delete(material)
    await db.commit()
    return {"message": "Material deleted"}
