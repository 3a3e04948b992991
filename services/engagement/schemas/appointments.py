# services/engagement/schemas/appointments.py
from typing import Optional, List
from datetime import datetime
from pydantic import EmailStr, Field

from shared.schemas import CamelModel
from services.engagement.models.appointments import AppointmentStatus

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"

class AppointmentCreate(CamelModel):
    student_name: str
    email: EmailStr
    phone: str
    class_type: str
    subject: str = ""
    date: str = Field(..., pattern=DATE_PATTERN)
    time: str
    notes: str = ""

class AppointmentUpdate(CamelModel):
    student_name: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    class_type: Optional[str] = None
    subject: Optional[str] = None
    date: Optional[str] = Field(None, pattern=DATE_PATTERN)
    time: Optional[str] = None
    notes: Optional[str] = None
    status: Optional[AppointmentStatus] = None

class AppointmentOut(CamelModel):
    id: str
    user_id: Optional[str] = None
    student_name: str
    email: str
    phone: str
    class_type: str
    subject: str
    date: str
    time: str
    notes: str
    status: AppointmentStatus
    created_at: datetime
    updated_at: Optional[datetime] = None

class Pagination(CamelModel):
    page: int
    limit: int
    total: int
    pages: int

class AppointmentPage(CamelModel):
    appointments: List[AppointmentOut]
    pagination: Pagination
