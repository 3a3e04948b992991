# services/engagement/controllers/appointment_service.py
import math
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from services.engagement.models.appointments import Appointment, AppointmentStatus
from services.engagement.schemas.appointments import (
    AppointmentCreate,
    AppointmentUpdate,
    AppointmentOut,
    AppointmentPage
)
from services.user_management.models.users import User
from shared.auth import get_optional_user, get_current_user, get_current_admin_user, is_admin
from shared.db import get_db
from shared.errors import NotFoundError, ValidationError
from shared.schemas import ActionOut

router = APIRouter(prefix="/appointments", tags=["Appointments"])

ALLOWED_TRANSITIONS = {
    AppointmentStatus.PENDING: {AppointmentStatus.CONFIRMED, AppointmentStatus.CANCELLED},
    AppointmentStatus.CONFIRMED: {AppointmentStatus.COMPLETED},
    AppointmentStatus.CANCELLED: set(),
    AppointmentStatus.COMPLETED: set(),
}

REQUIRED_FIELDS = ("student_name", "phone", "class_type", "time")


def check_transition(current: AppointmentStatus, target: AppointmentStatus):
    """Reject any admin status change outside the booking lifecycle.

    Re-sending the current status is accepted as a no-op.
    """
    if target == current:
        return
    if target not in ALLOWED_TRANSITIONS[current]:
        raise ValidationError(f"Cannot change appointment status from {current.value} to {target.value}")


# --- BOOK APPOINTMENT (guest or logged in) ---
@router.post("", response_model=AppointmentOut, status_code=status.HTTP_201_CREATED)
async def create_appointment(
    payload: AppointmentCreate,
    db: AsyncSession = Depends(get_db),
    current_user: Optional[User] = Depends(get_optional_user)
):
    data = payload.model_dump()
    for field in REQUIRED_FIELDS:
        data[field] = data[field].strip()
        if not data[field]:
            raise ValidationError("All required fields must be provided")

    appointment = Appointment(
        user_id=current_user.id if current_user else None,
        student_name=data["student_name"],
        email=str(payload.email).lower(),
        phone=data["phone"],
        class_type=data["class_type"],
        subject=data["subject"],
        date=data["date"],
        time=data["time"],
        notes=data["notes"],
        status=AppointmentStatus.PENDING
    )
    db.add(appointment)
    await db.commit()
    await db.refresh(appointment)
    return appointment


# --- LIST APPOINTMENTS (admin: all, others: own) ---
@router.get("", response_model=AppointmentPage)
async def list_appointments(
    status_filter: Optional[str] = Query(None, alias="status"),
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    filters = []
    if not is_admin(current_user):
        filters.append(Appointment.user_id == current_user.id)
    if status_filter and status_filter != "all":
        try:
            filters.append(Appointment.status == AppointmentStatus(status_filter))
        except ValueError:
            raise ValidationError(f"Unknown appointment status: {status_filter}")

    total = (await db.execute(select(func.count(Appointment.id)).where(*filters))).scalar_one()
    result = await db.execute(
        select(Appointment)
        .where(*filters)
        .order_by(Appointment.created_at.desc())
        .offset((page - 1) * limit)
        .limit(limit)
    )

    return {
        "appointments": [AppointmentOut.model_validate(a) for a in result.scalars().all()],
        "pagination": {
            "page": page,
            "limit": limit,
            "total": total,
            "pages": math.ceil(total / limit)
        }
    }


# --- UPDATE APPOINTMENT ---
@router.put("/{appointment_id}", response_model=AppointmentOut)
async def update_appointment(
    appointment_id: str,
    payload: AppointmentUpdate,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(get_current_admin_user)
):
    appointment = await db.get(Appointment, appointment_id)
    if not appointment:
        raise NotFoundError("Appointment not found")

    changes = payload.model_dump(exclude_unset=True)
    new_status = changes.pop("status", None)
    if new_status is not None:
        check_transition(appointment.status, new_status)
        appointment.status = new_status

    for field, value in changes.items():
        if value is not None:
            setattr(appointment, field, str(value) if field == "email" else value)

    await db.commit()
    await db.refresh(appointment)
    return appointment


# --- DELETE APPOINTMENT ---
@router.delete("/{appointment_id}", response_model=ActionOut)
async def delete_appointment(
    appointment_id: str,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(get_current_admin_user)
):
    appointment = await db.get(Appointment, appointment_id)
    if not appointment:
        raise NotFoundError("Appointment not found")

    await db.delete(appointment)
    await db.commit()
    return {"message": "Appointment deleted"}
