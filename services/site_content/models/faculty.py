# services/site_content/models/faculty.py
from sqlalchemy import Column, String, Text, Integer, Boolean, JSON, Index
from shared.db import Base, TimestampMixin
import uuid

class Faculty(TimestampMixin, Base):
    __tablename__ = "faculty"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(100), nullable=False)
    designation = Column(String(120), nullable=False)
    experience = Column(String(60), nullable=False, default="")
    bio = Column(Text, nullable=False, default="")
    image = Column(String, nullable=False, default="")
    image_public_id = Column(String, nullable=False, default="")
    subjects = Column(JSON, nullable=False, default=list)
    order = Column(Integer, nullable=False, default=0)
    is_active = Column(Boolean, nullable=False, default=True)

    __table_args__ = (
        Index('idx_faculty_active_order', 'is_active', 'order'),
    )
