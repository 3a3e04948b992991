# services/content_management/controllers/course_service.py
import logging
from typing import List, Optional, Union

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from services.content_management.models.classes import AcademyClass
from services.content_management.models.courses import Course
from services.content_management.models.materials import MaterialType, Material
from services.content_management.models.premium_content import PremiumContent
from services.content_management.schemas.courses import (
    CourseCreate,
    CourseUpdate,
    CourseOut,
    CourseWithMaterialsOut
)
from services.content_management.schemas.classes import ClassSummary
from services.content_management.schemas.materials import MaterialTypeOut, MaterialOut
from services.content_management.schemas.premium_content import PremiumContentOut
from services.content_management.controllers.common import derive_slug, commit_or_conflict
from shared.crud import require_text, apply_changes
from services.user_management.models.users import User
from shared.auth import get_optional_user, get_current_admin_user, is_admin
from shared.db import get_db
from shared.errors import ConflictError, NotFoundError
from shared.schemas import ActionOut

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/courses", tags=["Courses"])

DUPLICATE_COURSE = "A course with this name already exists in this class"


async def _ensure_class_exists(db: AsyncSession, class_id: str):
    if not await db.get(AcademyClass, class_id):
        raise NotFoundError("Class not found")


async def _ensure_slug_free(db: AsyncSession, class_id: str, slug: str, exclude_id: Optional[str] = None):
    stmt = select(Course).where(Course.class_id == class_id, Course.slug == slug)
    if exclude_id:
        stmt = stmt.where(Course.id != exclude_id)
    result = await db.execute(stmt)
    if result.scalars().first():
        raise ConflictError(DUPLICATE_COURSE)


def course_out(course: Course, academy_class: Optional[AcademyClass]) -> CourseOut:
    out = CourseOut.model_validate(course)
    if academy_class is not None:
        out.academy_class = ClassSummary.model_validate(academy_class)
    return out


async def _course_with_class(db: AsyncSession, course: Course) -> CourseOut:
    return course_out(course, await db.get(AcademyClass, course.class_id))


# --- LIST COURSES ---
@router.get("", response_model=List[CourseOut])
async def list_courses(
    class_id: Optional[str] = Query(None, alias="classId"),
    include_all: bool = Query(False, alias="all"),
    db: AsyncSession = Depends(get_db),
    current_user: Optional[User] = Depends(get_optional_user)
):
    stmt = (
        select(Course, AcademyClass)
        .outerjoin(AcademyClass, AcademyClass.id == Course.class_id)
        .order_by(Course.order)
    )
    if class_id:
        stmt = stmt.where(Course.class_id == class_id)

    # "all" is only honoured for admins
    if not (include_all and is_admin(current_user)):
        # Requiring an active class drops courses whose class was deleted or deactivated
        stmt = stmt.where(Course.is_active == True, AcademyClass.is_active == True)

    result = await db.execute(stmt)
    return [course_out(course, academy_class) for course, academy_class in result.all()]


# --- GET COURSE (optionally with its materials) ---
@router.get("/{course_id}", response_model=Union[CourseWithMaterialsOut, CourseOut])
async def get_course(
    course_id: str,
    with_materials: bool = Query(False, alias="withMaterials"),
    db: AsyncSession = Depends(get_db)
):
    course = await db.get(Course, course_id)
    if not course:
        raise NotFoundError("Course not found")

    if not with_materials:
        return await _course_with_class(db, course)

    material_types = await db.execute(
        select(MaterialType)
        .where(MaterialType.course_id == course_id, MaterialType.is_active == True)
        .order_by(MaterialType.order)
    )
    materials = await db.execute(
        select(Material)
        .where(Material.course_id == course_id, Material.is_active == True)
        .order_by(Material.order)
    )
    premium_content = await db.execute(
        select(PremiumContent)
        .where(PremiumContent.course_id == course_id, PremiumContent.is_active == True)
    )

    return CourseWithMaterialsOut(
        course=await _course_with_class(db, course),
        material_types=[MaterialTypeOut.model_validate(m) for m in material_types.scalars().all()],
        materials=[MaterialOut.model_validate(m) for m in materials.scalars().all()],
        premium_content=[PremiumContentOut.model_validate(p) for p in premium_content.scalars().all()],
    )


# --- ADD COURSE ---
@router.post("", response_model=CourseOut, status_code=status.HTTP_201_CREATED)
async def create_course(
    payload: CourseCreate,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(get_current_admin_user)
):
    class_id = require_text(payload.class_id, "classId")
    name = require_text(payload.name)
    slug = derive_slug(name)

    await _ensure_class_exists(db, class_id)
    await _ensure_slug_free(db, class_id, slug)

    course = Course(
        class_id=class_id,
        name=name,
        slug=slug,
        description=payload.description,
        thumbnail=payload.thumbnail,
        thumbnail_public_id=payload.thumbnail_public_id,
        icon=payload.icon or "📚",
        tags=payload.tags,
        instructor=payload.instructor,
        order=payload.order,
        is_active=payload.is_active
    )
    db.add(course)
    await commit_or_conflict(db, DUPLICATE_COURSE)
    await db.refresh(course)
    return await _course_with_class(db, course)


# --- UPDATE COURSE ---
@router.put("/{course_id}", response_model=CourseOut)
async def update_course(
    course_id: str,
    payload: CourseUpdate,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(get_current_admin_user)
):
    course = await db.get(Course, course_id)
    if not course:
        raise NotFoundError("Course not found")

    changes = payload.model_dump(exclude_unset=True)
    target_class_id = course.class_id
    target_slug = course.slug

    if changes.get("class_id"):
        target_class_id = changes.pop("class_id")
        if target_class_id != course.class_id:
            await _ensure_class_exists(db, target_class_id)
    else:
        changes.pop("class_id", None)

    if "name" in changes:
        name = require_text(changes.pop("name"))
        target_slug = derive_slug(name)
        course.name = name

    if target_class_id != course.class_id or target_slug != course.slug:
        await _ensure_slug_free(db, target_class_id, target_slug, exclude_id=course_id)
    course.class_id = target_class_id
    course.slug = target_slug

    apply_changes(course, changes)
    await commit_or_conflict(db, DUPLICATE_COURSE)
    await db.refresh(course)
    return await _course_with_class(db, course)


# --- DELETE COURSE (cascade) ---
@router.delete("/{course_id}", response_model=ActionOut)
async def delete_course(
    course_id: str,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(get_current_admin_user)
):
    course = await db.get(Course, course_id)
    if not course:
        raise NotFoundError("Course not found")

    # One transaction: either every child and the course go, or nothing does
    try:
        materials = await db.execute(delete(Material).where(Material.course_id == course_id))
        material_types = await db.execute(delete(MaterialType).where(MaterialType.course_id == course_id))
        premium_content = await db.execute(delete(PremiumContent).where(PremiumContent.course_id == course_id))
        await db.delete(course)
        await db.commit()
    except Exception:
        await db.rollback()
        logger.exception("Cascade delete of course %s rolled back", course_id)
        raise

    logger.info(
        "Course %s deleted with %d materials, %d material types, %d premium items",
        course_id, materials.rowcount, material_types.rowcount, premium_content.rowcount
    )
    return {"message": "Course and related data deleted"}
