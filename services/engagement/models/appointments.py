# services/engagement/models/appointments.py
from sqlalchemy import Column, String, Text, Enum, ForeignKey, Index
from shared.db import Base, TimestampMixin
import enum
import uuid

class AppointmentStatus(str, enum.Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    COMPLETED = "completed"

class Appointment(TimestampMixin, Base):
    __tablename__ = "appointments"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)   # None for guest bookings
    student_name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False)
    phone = Column(String(40), nullable=False)
    class_type = Column(String(60), nullable=False)   # E.g., "online", "physical"
    subject = Column(String(120), nullable=False, default="")
    date = Column(String(10), nullable=False)   # YYYY-MM-DD
    time = Column(String(20), nullable=False)   # E.g., "10:00 AM"
    notes = Column(Text, nullable=False, default="")
    status = Column(Enum(AppointmentStatus), nullable=False, default=AppointmentStatus.PENDING)

    __table_args__ = (
        Index('idx_appointment_status_date', 'status', 'date'),
        Index('idx_appointment_user', 'user_id'),
        Index('idx_appointment_created', 'created_at'),
    )
