# services/site_settings/controllers/settings_service.py
import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from services.site_settings.models.settings import Setting
from services.site_settings.schemas.settings import SettingsOut, validate_settings, visible_settings
from services.user_management.models.users import User
from shared.auth import get_optional_user, get_current_admin_user, is_admin
from shared.db import get_db
from shared.errors import ValidationError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/settings", tags=["Settings"])


async def load_settings(db: AsyncSession) -> Dict[str, Any]:
    result = await db.execute(select(Setting))
    return {setting.key: setting.value for setting in result.scalars().all()}


# --- READ SETTINGS (public keys only unless admin) ---
@router.get("", response_model=SettingsOut)
async def get_settings(
    db: AsyncSession = Depends(get_db),
    current_user: Optional[User] = Depends(get_optional_user)
):
    values = await load_settings(db)
    return {"settings": visible_settings(values, is_admin(current_user))}


# --- WRITE SETTINGS ---
@router.put("", response_model=SettingsOut)
async def update_settings(
    payload: Dict[str, Any] = Body(...),
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(get_current_admin_user)
):
    values, problems = validate_settings(payload)
    if problems:
        raise ValidationError("; ".join(problems))

    # Each key is its own upsert and commit
    for key, value in values.items():
        setting = await db.get(Setting, key)
        if setting:
            setting.value = value
        else:
            db.add(Setting(key=key, value=value))
        await db.commit()

    logger.info("Admin %s updated settings: %s", admin.id, ", ".join(sorted(values)))
    return {"settings": await load_settings(db)}
