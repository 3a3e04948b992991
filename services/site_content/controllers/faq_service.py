# services/site_content/controllers/faq_service.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from services.site_content.models.faqs import FAQ
from services.site_content.schemas.faqs import FAQCreate, FAQUpdate, FAQOut
from shared.crud import require_text, apply_changes
from services.user_management.models.users import User
from shared.auth import get_optional_user, get_current_admin_user, is_admin
from shared.db import get_db
from shared.errors import NotFoundError
from shared.schemas import ActionOut

router = APIRouter(prefix="/faqs", tags=["FAQs"])


async def _get_faq_or_404(db: AsyncSession, faq_id: str) -> FAQ:
    faq = await db.get(FAQ, faq_id)
    if not faq:
        raise NotFoundError("FAQ not found")
    return faq


@router.get("", response_model=List[FAQOut])
async def list_faqs(
    category: Optional[str] = None,
    include_all: bool = Query(False, alias="all"),
    db: AsyncSession = Depends(get_db),
    current_user: Optional[User] = Depends(get_optional_user)
):
    stmt = select(FAQ).order_by(FAQ.order, FAQ.created_at.desc())
    if category:
        stmt = stmt.where(FAQ.category == category)
    if not (include_all and is_admin(current_user)):
        stmt = stmt.where(FAQ.is_active == True)
    result = await db.execute(stmt)
    return result.scalars().all()


@router.get("/{faq_id}", response_model=FAQOut)
async def get_faq(faq_id: str, db: AsyncSession = Depends(get_db)):
    return await _get_faq_or_404(db, faq_id)


@router.post("", response_model=FAQOut, status_code=status.HTTP_201_CREATED)
async def create_faq(
    payload: FAQCreate,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(get_current_admin_user)
):
    faq = FAQ(
        question=require_text(payload.question, "Question"),
        answer=require_text(payload.answer, "Answer"),
        category=payload.category.strip() or "General",
        order=payload.order,
        is_active=payload.is_active
    )
    db.add(faq)
    await db.commit()
    await db.refresh(faq)
    return faq


@router.put("/{faq_id}", response_model=FAQOut)
async def update_faq(
    faq_id: str,
    payload: FAQUpdate,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(get_current_admin_user)
):
    faq = await _get_faq_or_404(db, faq_id)
    changes = payload.model_dump(exclude_unset=True)
    if "question" in changes:
        changes["question"] = require_text(changes["question"], "Question")
    if "answer" in changes:
        changes["answer"] = require_text(changes["answer"], "Answer")

    apply_changes(faq, changes)
    await db.commit()
    await db.refresh(faq)
    return faq


@router.delete("/{faq_id}", response_model=ActionOut)
async def delete_faq(
    faq_id: str,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(get_current_admin_user)
):
    faq = await _get_faq_or_404(db, faq_id)
    await db.delete(faq)
    await db.commit()
    return {"message": "FAQ deleted"}
