# services/engagement/controllers/message_service.py
import logging
from typing import List, Optional

from fastapi import APIRouter, BackgroundTasks, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from services.engagement.models.messages import Message, MessageStatus
from services.engagement.schemas.messages import (
    MessageCreate,
    MessageUpdate,
    MessageOut,
    MessageCreatedOut
)
from services.user_management.models.users import User
from shared import mail
from shared.auth import get_current_admin_user
from shared.db import get_db
from shared.errors import NotFoundError, ValidationError
from shared.schemas import ActionOut

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/messages", tags=["Messages"])

# Explicit status changes an admin may make; nothing leads back to unread
ALLOWED_STATUS_CHANGES = {
    MessageStatus.UNREAD: {MessageStatus.READ, MessageStatus.REPLIED},
    MessageStatus.READ: {MessageStatus.READ, MessageStatus.REPLIED},
    MessageStatus.REPLIED: {MessageStatus.REPLIED},
}


async def _get_message_or_404(db: AsyncSession, message_id: str) -> Message:
    message = await db.get(Message, message_id)
    if not message:
        raise NotFoundError("Message not found")
    return message


# --- SEND MESSAGE (public contact form) ---
@router.post("", response_model=MessageCreatedOut, status_code=status.HTTP_201_CREATED)
async def create_message(payload: MessageCreate, db: AsyncSession = Depends(get_db)):
    name, subject, body = payload.name.strip(), payload.subject.strip(), payload.message.strip()
    if not name or not subject or not body:
        raise ValidationError("Name, email, subject, and message are required")

    message = Message(
        name=name,
        email=str(payload.email).strip().lower(),
        phone=payload.phone.strip(),
        subject=subject,
        message=body,
        status=MessageStatus.UNREAD
    )
    db.add(message)
    await db.commit()
    return {"message": "Message sent successfully", "id": message.id}


# --- LIST MESSAGES (newest first) ---
@router.get("", response_model=List[MessageOut])
async def list_messages(
    status_filter: Optional[MessageStatus] = Query(None, alias="status"),
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(get_current_admin_user)
):
    stmt = select(Message).order_by(Message.created_at.desc())
    if status_filter:
        stmt = stmt.where(Message.status == status_filter)
    result = await db.execute(stmt)
    return result.scalars().all()


# --- OPEN MESSAGE (marks unread as read) ---
@router.get("/{message_id}", response_model=MessageOut)
async def get_message(
    message_id: str,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(get_current_admin_user)
):
    message = await _get_message_or_404(db, message_id)
    if message.status == MessageStatus.UNREAD:
        message.status = MessageStatus.READ
        await db.commit()
        await db.refresh(message)
    return message


# --- UPDATE STATUS / REPLY ---
@router.put("/{message_id}", response_model=MessageOut)
async def update_message(
    message_id: str,
    payload: MessageUpdate,
    background_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(get_current_admin_user)
):
    message = await _get_message_or_404(db, message_id)
    reply = (payload.admin_reply or "").strip()

    if reply:
        message.admin_reply = reply
        message.status = MessageStatus.REPLIED
    elif payload.status is not None:
        if payload.status not in ALLOWED_STATUS_CHANGES[message.status]:
            raise ValidationError(
                f"Cannot change message status from {message.status.value} to {payload.status.value}"
            )
        message.status = payload.status

    await db.commit()
    await db.refresh(message)

    if reply:
        # Runs after the response; a mail failure never undoes the status change
        background_tasks.add_task(
            mail.send_message_reply,
            message.email,
            message.name,
            message.subject,
            message.message,
            reply
        )
    return message


# --- DELETE MESSAGE ---
@router.delete("/{message_id}", response_model=ActionOut)
async def delete_message(
    message_id: str,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(get_current_admin_user)
):
    message = await _get_message_or_404(db, message_id)
    await db.delete(message)
    await db.commit()
    return {"message": "Message deleted"}
