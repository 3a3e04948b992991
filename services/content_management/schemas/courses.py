# services/content_management/schemas/courses.py
from typing import Optional, List
from datetime import datetime

from shared.schemas import CamelModel
from services.content_management.schemas.classes import ClassSummary
from services.content_management.schemas.materials import MaterialTypeOut, MaterialOut
from services.content_management.schemas.premium_content import PremiumContentOut

class CourseCreate(CamelModel):
    class_id: str
    name: str
    description: str = ""
    thumbnail: str = ""
    thumbnail_public_id: str = ""
    icon: str = "📚"
    tags: List[str] = []
    instructor: str = ""
    order: int = 0
    is_active: bool = True

class CourseUpdate(CamelModel):
    class_id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    thumbnail: Optional[str] = None
    thumbnail_public_id: Optional[str] = None
    icon: Optional[str] = None
    tags: Optional[List[str]] = None
    instructor: Optional[str] = None
    order: Optional[int] = None
    is_active: Optional[bool] = None

class CourseOut(CamelModel):
    id: str
    class_id: str
    name: str
    slug: str
    description: str
    thumbnail: str
    thumbnail_public_id: str
    icon: str
    tags: List[str]
    instructor: str
    order: int
    is_active: bool
    created_at: datetime
    updated_at: Optional[datetime] = None
    academy_class: Optional[ClassSummary] = None   # None once the class is deleted

class CourseWithMaterialsOut(CamelModel):
    course: CourseOut
    material_types: List[MaterialTypeOut]
    materials: List[MaterialOut]
    premium_content: List[PremiumContentOut]
