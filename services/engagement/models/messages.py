# services/engagement/models/messages.py
from sqlalchemy import Column, String, Text, Enum, Index
from shared.db import Base, TimestampMixin
import enum
import uuid

class MessageStatus(str, enum.Enum):
    UNREAD = "unread"
    READ = "read"
    REPLIED = "replied"

class Message(TimestampMixin, Base):
    __tablename__ = "messages"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False)
    phone = Column(String(40), nullable=False, default="")
    subject = Column(String(200), nullable=False)
    message = Column(Text, nullable=False)
    status = Column(Enum(MessageStatus), nullable=False, default=MessageStatus.UNREAD)
    admin_reply = Column(Text, nullable=False, default="")

    __table_args__ = (
        Index('idx_message_status', 'status'),
        Index('idx_message_created', 'created_at'),
    )
