# services/content_management/models/premium_content.py
from sqlalchemy import Column, String, Text, Float, Boolean, JSON, ForeignKey, CheckConstraint, Index
from shared.db import Base, TimestampMixin
import uuid

def default_features():
    return {
        "video_count": 0,
        "past_paper_count": 0,
        "quiz_count": 0,
        "notes_count": 0,
        "other_features": [],
    }

class PremiumContent(TimestampMixin, Base):
    __tablename__ = "premium_content"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    course_id = Column(String, ForeignKey("courses.id"), nullable=False)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False, default="")
    price = Column(Float, nullable=False)
    features = Column(JSON, nullable=False, default=default_features)
    is_active = Column(Boolean, nullable=False, default=True)

    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_premium_content_price"),
        Index("ix_premium_content_course", "course_id"),
        Index("ix_premium_content_active", "is_active"),
    )
