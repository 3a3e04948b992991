# services/media/controllers/upload_service.py
import logging
import re
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile

from services.user_management.models.users import User
from shared import media
from shared.auth import get_current_user
from shared.errors import ValidationError
from shared.schemas import CamelModel

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/upload", tags=["Upload"])

FOLDER_PATTERN = re.compile(r"^[A-Za-z0-9_-]+(/[A-Za-z0-9_-]+)*$")


class UploadOut(CamelModel):
    url: str
    public_id: str
    resource_type: str
    file_name: str
    message: str = "File uploaded successfully"


@router.post("", response_model=UploadOut)
async def upload(
    file: Optional[UploadFile] = File(None),
    folder: str = Form("general"),
    current_user: User = Depends(get_current_user)
):
    if file is None or not file.filename:
        raise ValidationError("No file provided")
    folder = folder.strip().strip("/") or "general"
    if not FOLDER_PATTERN.match(folder):
        raise ValidationError("Invalid folder name")

    logger.info("User %s uploading %s (%s) to %s", current_user.id, file.filename, file.content_type, folder)
    result = await media.upload_file(file.file, file.filename, file.content_type, folder)
    return result
