# services/site_settings/schemas/stats.py
from typing import List

from shared.schemas import CamelModel
from services.engagement.schemas.messages import MessageOut
from services.engagement.schemas.appointments import AppointmentOut

class AdminStatsOut(CamelModel):
    total_classes: int
    total_courses: int
    total_materials: int
    unread_messages: int
    pending_appointments: int
    recent_messages: List[MessageOut]
    upcoming_appointments: List[AppointmentOut]

class PublicStatsOut(CamelModel):
    years: str
    students: str
    rate: str
    subjects: str
