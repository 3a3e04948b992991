# services/site_content/models/testimonials.py
from sqlalchemy import Column, String, Text, Integer, Boolean, Index, CheckConstraint
from shared.db import Base, TimestampMixin
import uuid

class Testimonial(TimestampMixin, Base):
    __tablename__ = "testimonials"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(100), nullable=False)
    role = Column(String(100), nullable=False)   # E.g., "A-Level Student, 2024"
    text = Column(Text, nullable=False)
    rating = Column(Integer, nullable=False, default=5)
    image = Column(String, nullable=True)
    order = Column(Integer, nullable=False, default=0)
    is_active = Column(Boolean, nullable=False, default=True)

    __table_args__ = (
        CheckConstraint('rating BETWEEN 1 AND 5', name='ck_testimonial_rating'),
        Index('idx_testimonial_active_order', 'is_active', 'order'),
    )
