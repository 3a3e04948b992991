# services/content_management/models/classes.py
from sqlalchemy import Column, String, Text, Integer, Boolean, Index
from shared.db import Base, TimestampMixin
import uuid

class AcademyClass(TimestampMixin, Base):
    __tablename__ = "classes"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(120), nullable=False)
    slug = Column(String(140), nullable=False, unique=True)   # E.g., "a-level", "igcse"
    description = Column(Text, nullable=False, default="")
    icon = Column(String(32), nullable=False, default="📚")
    order = Column(Integer, nullable=False, default=0)
    is_active = Column(Boolean, nullable=False, default=True)

    __table_args__ = (
        Index("ix_class_active_order", "is_active", "order"),
    )
