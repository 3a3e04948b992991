# services/content_management/models/materials.py
from sqlalchemy import Column, String, Text, Integer, Boolean, ForeignKey, UniqueConstraint, Index
from shared.db import Base, TimestampMixin
import uuid

# Grouping of materials inside a course, e.g. "Notes", "Past Papers"
class MaterialType(TimestampMixin, Base):
    __tablename__ = "material_types"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    course_id = Column(String, ForeignKey("courses.id"), nullable=False)
    name = Column(String(120), nullable=False)
    slug = Column(String(140), nullable=False)
    icon = Column(String(32), nullable=False, default="📄")
    order = Column(Integer, nullable=False, default=0)
    is_active = Column(Boolean, nullable=False, default=True)

    __table_args__ = (
        UniqueConstraint("course_id", "slug", name="uq_material_type_course_slug"),
        Index("ix_material_type_course_order", "course_id", "order"),
    )


# Single downloadable/viewable file; course_id mirrors the material type's course
class Material(TimestampMixin, Base):
    __tablename__ = "materials"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    material_type_id = Column(String, ForeignKey("material_types.id"), nullable=False)
    course_id = Column(String, ForeignKey("courses.id"), nullable=False)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False, default="")
    file_url = Column(String, nullable=False, default="")
    file_public_id = Column(String, nullable=False, default="")
    file_type = Column(String(50), nullable=False, default="")
    file_name = Column(String(255), nullable=False, default="")
    order = Column(Integer, nullable=False, default=0)
    is_active = Column(Boolean, nullable=False, default=True)

    __table_args__ = (
        Index("ix_material_type_order", "material_type_id", "order"),
        Index("ix_material_course", "course_id"),
    )
