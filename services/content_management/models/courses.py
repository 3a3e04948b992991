# services/content_management/models/courses.py
from sqlalchemy import Column, String, Text, Integer, Boolean, JSON, UniqueConstraint, Index
from shared.db import Base, TimestampMixin
import uuid

class Course(TimestampMixin, Base):
    __tablename__ = "courses"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    # Plain reference: a deleted class leaves its courses (and this id) in place
    class_id = Column(String, nullable=False)
    name = Column(String(160), nullable=False)
    slug = Column(String(180), nullable=False)
    description = Column(Text, nullable=False, default="")
    thumbnail = Column(String, nullable=False, default="")
    thumbnail_public_id = Column(String, nullable=False, default="")
    icon = Column(String(32), nullable=False, default="📚")
    tags = Column(JSON, nullable=False, default=list)
    instructor = Column(String(120), nullable=False, default="")
    order = Column(Integer, nullable=False, default=0)
    is_active = Column(Boolean, nullable=False, default=True)

    __table_args__ = (
        UniqueConstraint("class_id", "slug", name="uq_course_class_slug"),
        Index("ix_course_class_order", "class_id", "order"),
        Index("ix_course_active", "is_active"),
    )
