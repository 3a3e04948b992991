# services/content_management/schemas/premium_content.py
from typing import Optional, List
from datetime import datetime
from pydantic import Field

from shared.schemas import CamelModel

class PremiumFeatures(CamelModel):
    video_count: int = Field(0, ge=0)
    past_paper_count: int = Field(0, ge=0)
    quiz_count: int = Field(0, ge=0)
    notes_count: int = Field(0, ge=0)
    other_features: List[str] = []

class PremiumContentCreate(CamelModel):
    course_id: str
    title: str
    description: str = ""
    price: float = Field(..., ge=0)
    features: PremiumFeatures = PremiumFeatures()
    is_active: bool = True

class PremiumContentUpdate(CamelModel):
    title: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    features: Optional[PremiumFeatures] = None
    is_active: Optional[bool] = None

class PremiumContentOut(CamelModel):
    id: str
    course_id: str
    title: str
    description: str
    price: float
    features: PremiumFeatures
    is_active: bool
    created_at: datetime
    updated_at: Optional[datetime] = None
