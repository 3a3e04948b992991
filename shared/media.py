# shared/media.py
import logging
import os
import re
import time
from typing import BinaryIO, Optional

import cloudinary
import cloudinary.uploader
from dotenv import load_dotenv
from starlette.concurrency import run_in_threadpool

from shared.errors import DependencyError

load_dotenv()

logger = logging.getLogger(__name__)

ROOT_FOLDER = os.getenv("CLOUDINARY_ROOT_FOLDER", "shacademy")

cloudinary.config(
    cloud_name=os.getenv("CLOUDINARY_CLOUD_NAME"),
    api_key=os.getenv("CLOUDINARY_API_KEY"),
    api_secret=os.getenv("CLOUDINARY_API_SECRET"),
    secure=True,
)


def resource_type_for(content_type: Optional[str]) -> str:
    content_type = content_type or ""
    if content_type.startswith("image/"):
        return "image"
    if content_type.startswith("video/"):
        return "video"
    # PDFs, slides, documents
    return "raw"


def build_public_id(filename: str, resource_type: str) -> str:
    stem, dot, extension = filename.rpartition(".")
    if not dot or not stem:
        stem, extension = filename, ""
    clean = re.sub(r"[^a-zA-Z0-9_-]", "_", stem)
    public_id = f"{clean}_{int(time.time() * 1000)}"
    # raw files keep their extension so the hosted URL does too
    if resource_type == "raw" and extension:
        public_id = f"{public_id}.{extension}"
    return public_id


def _upload(file: BinaryIO, folder: str, resource_type: str, public_id: str) -> dict:
    return cloudinary.uploader.upload(
        file,
        folder=f"{ROOT_FOLDER}/{folder}",
        resource_type=resource_type,
        public_id=public_id,
        use_filename=True,
        unique_filename=False,
    )


async def upload_file(file: BinaryIO, filename: str, content_type: Optional[str], folder: str = "general") -> dict:
    resource_type = resource_type_for(content_type)
    public_id = build_public_id(filename, resource_type)
    try:
        result = await run_in_threadpool(_upload, file, folder, resource_type, public_id)
    except Exception as exc:
        logger.exception("Upload of %s to media host failed", filename)
        raise DependencyError("Upload failed") from exc

    return {
        "url": result["secure_url"],
        "public_id": result["public_id"],
        "resource_type": result.get("resource_type", resource_type),
        "file_name": filename,
    }
