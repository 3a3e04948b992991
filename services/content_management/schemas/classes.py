# services/content_management/schemas/classes.py
from typing import Optional
from datetime import datetime

from shared.schemas import CamelModel

class ClassCreate(CamelModel):
    name: str
    description: str = ""
    icon: str = "📚"
    order: int = 0
    is_active: bool = True

class ClassUpdate(CamelModel):
    name: Optional[str] = None
    description: Optional[str] = None
    icon: Optional[str] = None
    order: Optional[int] = None
    is_active: Optional[bool] = None

class ClassOut(CamelModel):
    id: str
    name: str
    slug: str
    description: str
    icon: str
    order: int
    is_active: bool
    created_at: datetime
    updated_at: Optional[datetime] = None

class ClassSummary(CamelModel):
    id: str
    name: str
    slug: str
    icon: str
