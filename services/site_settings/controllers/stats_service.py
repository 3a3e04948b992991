# services/site_settings/controllers/stats_service.py
from fastapi import APIRouter, Depends
from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from services.content_management.models.classes import AcademyClass
from services.content_management.models.courses import Course
from services.content_management.models.materials import Material
from services.engagement.models.messages import Message, MessageStatus
from services.engagement.models.appointments import Appointment, AppointmentStatus
from services.engagement.schemas.messages import MessageOut
from services.engagement.schemas.appointments import AppointmentOut
from services.site_settings.models.settings import Setting
from services.site_settings.schemas.stats import AdminStatsOut, PublicStatsOut
from services.user_management.models.users import User
from shared.auth import get_current_admin_user
from shared.db import get_db

router = APIRouter(tags=["Stats"])

RECENT_LIMIT = 5

# Marketing figures shown on the home page until an admin sets them
PUBLIC_STAT_DEFAULTS = {
    "yearsOfExcellence": "30+",
    "studentsTaught": "15K+",
    "successRate": "95%",
}


async def _count(db: AsyncSession, stmt) -> int:
    return (await db.execute(stmt)).scalar_one()


# --- ADMIN DASHBOARD ---
@router.get("/admin/stats", response_model=AdminStatsOut)
async def admin_stats(
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(get_current_admin_user)
):
    recent_messages = await db.execute(
        select(Message).order_by(Message.created_at.desc()).limit(RECENT_LIMIT)
    )
    upcoming = await db.execute(
        select(Appointment)
        .where(Appointment.status.in_([AppointmentStatus.PENDING, AppointmentStatus.CONFIRMED]))
        .order_by(Appointment.date)
        .limit(RECENT_LIMIT)
    )

    return AdminStatsOut(
        total_classes=await _count(db, select(func.count(AcademyClass.id)).where(AcademyClass.is_active == True)),
        total_courses=await _count(db, select(func.count(Course.id)).where(Course.is_active == True)),
        total_materials=await _count(db, select(func.count(Material.id)).where(Material.is_active == True)),
        unread_messages=await _count(db, select(func.count(Message.id)).where(Message.status == MessageStatus.UNREAD)),
        pending_appointments=await _count(
            db, select(func.count(Appointment.id)).where(Appointment.status == AppointmentStatus.PENDING)
        ),
        recent_messages=[MessageOut.model_validate(m) for m in recent_messages.scalars().all()],
        upcoming_appointments=[AppointmentOut.model_validate(a) for a in upcoming.scalars().all()],
    )


# --- PUBLIC HOME PAGE FIGURES ---
@router.get("/public/stats", response_model=PublicStatsOut)
async def public_stats(db: AsyncSession = Depends(get_db)):
    subjects = await _count(db, select(func.count(Course.id)).where(Course.is_active == True))
    result = await db.execute(select(Setting).where(Setting.key.in_(list(PUBLIC_STAT_DEFAULTS))))
    stored = {setting.key: setting.value for setting in result.scalars().all()}

    def figure(key):
        value = stored.get(key)
        return str(value) if value not in (None, "") else PUBLIC_STAT_DEFAULTS[key]

    return PublicStatsOut(
        years=figure("yearsOfExcellence"),
        students=figure("studentsTaught"),
        rate=figure("successRate"),
        subjects=str(subjects),
    )
