# services/site_content/models/faqs.py
from sqlalchemy import Column, String, Text, Integer, Boolean, Index
from shared.db import Base, TimestampMixin
import uuid

class FAQ(TimestampMixin, Base):
    __tablename__ = "faqs"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    question = Column(String(300), nullable=False)
    answer = Column(Text, nullable=False)
    category = Column(String(60), nullable=False, default="General")
    order = Column(Integer, nullable=False, default=0)
    is_active = Column(Boolean, nullable=False, default=True)

    __table_args__ = (
        Index('idx_faq_active_order', 'is_active', 'order'),
        Index('idx_faq_category', 'category'),
    )
