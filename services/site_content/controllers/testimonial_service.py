# services/site_content/controllers/testimonial_service.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from services.site_content.models.testimonials import Testimonial
from services.site_content.schemas.testimonials import TestimonialCreate, TestimonialUpdate, TestimonialOut
from shared.crud import require_text, apply_changes
from services.user_management.models.users import User
from shared.auth import get_optional_user, get_current_admin_user, is_admin
from shared.db import get_db
from shared.errors import NotFoundError
from shared.schemas import ActionOut

router = APIRouter(prefix="/testimonials", tags=["Testimonials"])


@router.get("", response_model=List[TestimonialOut])
async def list_testimonials(
    include_all: bool = Query(False, alias="all"),
    db: AsyncSession = Depends(get_db),
    current_user: Optional[User] = Depends(get_optional_user)
):
    stmt = select(Testimonial).order_by(Testimonial.order, Testimonial.created_at.desc())
    if not (include_all and is_admin(current_user)):
        stmt = stmt.where(Testimonial.is_active == True)
    result = await db.execute(stmt)
    return result.scalars().all()


@router.get("/{testimonial_id}", response_model=TestimonialOut)
async def get_testimonial(testimonial_id: str, db: AsyncSession = Depends(get_db)):
    testimonial = await db.get(Testimonial, testimonial_id)
    if not testimonial:
        raise NotFoundError("Testimonial not found")
    return testimonial


@router.post("", response_model=TestimonialOut, status_code=status.HTTP_201_CREATED)
async def create_testimonial(
    payload: TestimonialCreate,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(get_current_admin_user)
):
    testimonial = Testimonial(
        name=require_text(payload.name),
        role=require_text(payload.role, "Role"),
        text=require_text(payload.text, "Text"),
        rating=payload.rating,
        image=payload.image,
        order=payload.order,
        is_active=payload.is_active
    )
    db.add(testimonial)
    await db.commit()
    await db.refresh(testimonial)
    return testimonial


@router.put("/{testimonial_id}", response_model=TestimonialOut)
async def update_testimonial(
    testimonial_id: str,
    payload: TestimonialUpdate,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(get_current_admin_user)
):
    testimonial = await db.get(Testimonial, testimonial_id)
    if not testimonial:
        raise NotFoundError("Testimonial not found")

    changes = payload.model_dump(exclude_unset=True)
    for field, label in (("name", "Name"), ("role", "Role"), ("text", "Text")):
        if field in changes:
            changes[field] = require_text(changes[field], label)

    apply_changes(testimonial, changes)
    await db.commit()
    await db.refresh(testimonial)
    return testimonial


@router.delete("/{testimonial_id}", response_model=ActionOut)
async def delete_testimonial(
    testimonial_id: str,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(get_current_admin_user)
):
    testimonial = await db.get(Testimonial, testimonial_id)
    if not testimonial:
        raise NotFoundError("Testimonial not found")

    await db.delete(testimonial)
    await db.commit()
    return {"message": "Testimonial deleted"}
