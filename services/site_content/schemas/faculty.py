# services/site_content/schemas/faculty.py
from typing import Optional, List
from datetime import datetime

from shared.schemas import CamelModel

class FacultyCreate(CamelModel):
    name: str
    designation: str
    experience: str = ""
    bio: str = ""
    image: str = ""
    image_public_id: str = ""
    subjects: List[str] = []
    order: int = 0
    is_active: bool = True

class FacultyUpdate(CamelModel):
    name: Optional[str] = None
    designation: Optional[str] = None
    experience: Optional[str] = None
    bio: Optional[str] = None
    image: Optional[str] = None
    image_public_id: Optional[str] = None
    subjects: Optional[List[str]] = None
    order: Optional[int] = None
    is_active: Optional[bool] = None

class FacultyOut(CamelModel):
    id: str
    name: str
    designation: str
    experience: str
    bio: str
    image: str
    image_public_id: str
    subjects: List[str]
    order: int
    is_active: bool
    created_at: datetime
    updated_at: Optional[datetime] = None
