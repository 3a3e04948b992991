# services/site_content/schemas/faqs.py
from typing import Optional
from datetime import datetime

from shared.schemas import CamelModel

class FAQCreate(CamelModel):
    question: str
    answer: str
    category: str = "General"
    order: int = 0
    is_active: bool = True

class FAQUpdate(CamelModel):
    question: Optional[str] = None
    answer: Optional[str] = None
    category: Optional[str] = None
    order: Optional[int] = None
    is_active: Optional[bool] = None

class FAQOut(CamelModel):
    id: str
    question: str
    answer: str
    category: str
    order: int
    is_active: bool
    created_at: datetime
    updated_at: Optional[datetime] = None
