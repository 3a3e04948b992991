# services/site_content/schemas/testimonials.py
from typing import Optional
from datetime import datetime
from pydantic import Field

from shared.schemas import CamelModel

class TestimonialCreate(CamelModel):
    name: str
    role: str
    text: str
    rating: int = Field(5, ge=1, le=5)
    image: Optional[str] = None
    order: int = 0
    is_active: bool = True

class TestimonialUpdate(CamelModel):
    name: Optional[str] = None
    role: Optional[str] = None
    text: Optional[str] = None
    rating: Optional[int] = Field(None, ge=1, le=5)
    image: Optional[str] = None
    order: Optional[int] = None
    is_active: Optional[bool] = None

class TestimonialOut(CamelModel):
    id: str
    name: str
    role: str
    text: str
    rating: int
    image: Optional[str] = None
    order: int
    is_active: bool
    created_at: datetime
    updated_at: Optional[datetime] = None
