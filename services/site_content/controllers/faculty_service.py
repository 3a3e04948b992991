# services/site_content/controllers/faculty_service.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from services.site_content.models.faculty import Faculty
from services.site_content.schemas.faculty import FacultyCreate, FacultyUpdate, FacultyOut
from shared.crud import require_text, apply_changes
from services.user_management.models.users import User
from shared.auth import get_optional_user, get_current_admin_user, is_admin
from shared.db import get_db
from shared.errors import NotFoundError
from shared.schemas import ActionOut

router = APIRouter(prefix="/faculty", tags=["Faculty"])


@router.get("", response_model=List[FacultyOut])
async def list_faculty(
    include_all: bool = Query(False, alias="all"),
    db: AsyncSession = Depends(get_db),
    current_user: Optional[User] = Depends(get_optional_user)
):
    stmt = select(Faculty).order_by(Faculty.order)
    if not (include_all and is_admin(current_user)):
        stmt = stmt.where(Faculty.is_active == True)
    result = await db.execute(stmt)
    return result.scalars().all()


@router.get("/{member_id}", response_model=FacultyOut)
async def get_faculty_member(member_id: str, db: AsyncSession = Depends(get_db)):
    member = await db.get(Faculty, member_id)
    if not member:
        raise NotFoundError("Faculty member not found")
    return member


@router.post("", response_model=FacultyOut, status_code=status.HTTP_201_CREATED)
async def create_faculty_member(
    payload: FacultyCreate,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(get_current_admin_user)
):
    member = Faculty(
        name=require_text(payload.name),
        designation=require_text(payload.designation, "Designation"),
        experience=payload.experience,
        bio=payload.bio,
        image=payload.image,
        image_public_id=payload.image_public_id,
        subjects=[s.strip() for s in payload.subjects if s.strip()],
        order=payload.order,
        is_active=payload.is_active
    )
    db.add(member)
    await db.commit()
    await db.refresh(member)
    return member


@router.put("/{member_id}", response_model=FacultyOut)
async def update_faculty_member(
    member_id: str,
    payload: FacultyUpdate,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(get_current_admin_user)
):
    member = await db.get(Faculty, member_id)
    if not member:
        raise NotFoundError("Faculty member not found")

    changes = payload.model_dump(exclude_unset=True)
    if "name" in changes:
        changes["name"] = require_text(changes["name"])
    if "designation" in changes:
        changes["designation"] = require_text(changes["designation"], "Designation")
    if changes.get("subjects") is not None:
        changes["subjects"] = [s.strip() for s in changes["subjects"] if s.strip()]

    apply_changes(member, changes)
    await db.commit()
    await db.refresh(member)
    return member


@router.delete("/{member_id}", response_model=ActionOut)
async def delete_faculty_member(
    member_id: str,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(get_current_admin_user)
):
    member = await db.get(Faculty, member_id)
    if not member:
        raise NotFoundError("Faculty member not found")

    await db.delete(member)
    await db.commit()
    return {"message": "Faculty member deleted"}
