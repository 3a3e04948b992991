# services/content_management/controllers/common.py
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from shared.errors import ConflictError, ValidationError
from shared.slugs import slugify


def derive_slug(name: str) -> str:
    slug = slugify(name)
    if not slug.strip("-"):
        raise ValidationError("Name must contain at least one letter or digit")
    return slug


async def commit_or_conflict(db: AsyncSession, detail: str):
    """Commit, turning a unique-constraint rejection into a 409."""
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise ConflictError(detail)
