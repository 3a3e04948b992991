# services/content_management/schemas/materials.py
from typing import Optional
from datetime import datetime

from shared.schemas import CamelModel

# --- Material types ---
class MaterialTypeCreate(CamelModel):
    course_id: str
    name: str
    icon: str = "📄"
    order: int = 0
    is_active: bool = True

class MaterialTypeUpdate(CamelModel):
    name: Optional[str] = None
    icon: Optional[str] = None
    order: Optional[int] = None
    is_active: Optional[bool] = None

class MaterialTypeOut(CamelModel):
    id: str
    course_id: str
    name: str
    slug: str
    icon: str
    order: int
    is_active: bool
    created_at: datetime
    updated_at: Optional[datetime] = None


# --- Materials ---
class MaterialCreate(CamelModel):
    material_type_id: str
    course_id: str
    title: str
    description: str = ""
    file_url: str = ""
    file_public_id: str = ""
    file_type: str = ""
    file_name: str = ""
    order: int = 0
    is_active: bool = True

class MaterialUpdate(CamelModel):
    material_type_id: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    file_url: Optional[str] = None
    file_public_id: Optional[str] = None
    file_type: Optional[str] = None
    file_name: Optional[str] = None
    order: Optional[int] = None
    is_active: Optional[bool] = None

class MaterialOut(CamelModel):
    id: str
    material_type_id: str
    course_id: str
    title: str
    description: str
    file_url: str
    file_public_id: str
    file_type: str
    file_name: str
    order: int
    is_active: bool
    created_at: datetime
    updated_at: Optional[datetime] = None
