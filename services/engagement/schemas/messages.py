# services/engagement/schemas/messages.py
from typing import Optional
from datetime import datetime
from pydantic import EmailStr

from shared.schemas import CamelModel
from services.engagement.models.messages import MessageStatus

class MessageCreate(CamelModel):
    name: str
    email: EmailStr
    phone: str = ""
    subject: str
    message: str

class MessageUpdate(CamelModel):
    status: Optional[MessageStatus] = None
    admin_reply: Optional[str] = None

class MessageOut(CamelModel):
    id: str
    name: str
    email: str
    phone: str
    subject: str
    message: str
    status: MessageStatus
    admin_reply: str
    created_at: datetime
    updated_at: Optional[datetime] = None

class MessageCreatedOut(CamelModel):
    message: str
    id: str
