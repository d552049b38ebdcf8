from fastapi import (
    APIRouter,
    Depends,
    File,
    Form,
    Query,
    UploadFile,
)
from typing import Optional
from minio import Minio
from sqlalchemy import select, update, delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError
from pydantic import ValidationError as PydanticValidationError

from app.core.errors import InternalError, NotFound, ValidationError
from app.core.logging import get_logger
from app.schemas import (
    SCourseCreate,
    SCourseUpdate,
    SCourseEnvelope,
    SCourseListResponse,
    SMessageResponse,
    format_validation_errors,
)
from app.db import get_async_db_session, Course, User
from app.dependencies import (
    get_current_user_admin,
    get_minio_client,
    get_course_update_payload,
    CourseUpdatePayload,
)
from app.policies import CoursePolicy
from app.helpers import obj_exist_check, file_utils

router = APIRouter(prefix="/courses", tags=["Course"])

logger = get_logger(__name__)


@router.post("/", response_model=SCourseEnvelope)
async def create_course(
    title: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    price: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
    db: AsyncSession = Depends(get_async_db_session),
    current_user: User = Depends(get_current_user_admin),
    minio_client: Minio = Depends(get_minio_client),
):
    admin_id = current_user.id

    if not title or not description or not price:
        raise ValidationError("All fields are required")

    try:
        course_data = SCourseCreate(
            title=title, description=description, price=price
        )
    except PydanticValidationError as e:
        raise ValidationError(format_validation_errors(e))

    if image is None:
        raise ValidationError("No file uploaded")

    file_utils.validate_image(image)

    object_name, url = file_utils.upload_image(
        minio_client, image, admin_id
    )

    try:
        new_course = Course(
            **course_data.model_dump(),
            image_public_id=object_name,
            image_url=url,
            creator_id=admin_id,
        )
        db.add(new_course)
        await db.commit()
        await db.refresh(new_course)

    except SQLAlchemyError as e:
        await db.rollback()
        file_utils.remove_image(minio_client, object_name)
        logger.exception("Error creating course", extra={"user_id": admin_id})
        raise InternalError("Error creating course") from e

    logger.info(
        "Course created",
        extra={"user_id": admin_id, "course_id": new_course.id},
    )

    return {"message": "Course created successfully", "course": new_course}


@router.put("/{course_id}", response_model=SCourseEnvelope)
async def update_course(
    course_id: int,
    current_user: User = Depends(get_current_user_admin),
    payload: CourseUpdatePayload = Depends(get_course_update_payload),
    db: AsyncSession = Depends(get_async_db_session),
    minio_client: Minio = Depends(get_minio_client),
):
    admin_id = current_user.id
    course = await obj_exist_check.owned_course_exists(
        course_id, current_user, db
    )

    if payload.error:
        raise ValidationError(payload.error)

    try:
        update_data = SCourseUpdate(**payload.values)
    except PydanticValidationError as e:
        raise ValidationError(format_validation_errors(e))

    update_values = update_data.model_dump(exclude_unset=True, exclude_none=True)

    replaced_image = None
    new_image = None
    if payload.image is not None:
        file_utils.validate_image(
            payload.image, "Invalid file format. Only PNG and JPG are allowed"
        )
        new_image, url = file_utils.upload_image(
            minio_client, payload.image, admin_id
        )
        replaced_image = course.image_public_id
        update_values.update(image_public_id=new_image, image_url=url)

    try:
        if update_values:
            result = await db.execute(
                update(Course)
                .where(
                    Course.id == course.id,
                    CoursePolicy.build_owner_condition(current_user),
                )
                .values(**update_values)
            )
            if result.rowcount == 0:
                await db.rollback()
                if new_image:
                    file_utils.remove_image(minio_client, new_image)
                raise NotFound("Course not found")

        await db.commit()
        await db.refresh(course)

    except SQLAlchemyError as e:
        await db.rollback()
        if new_image:
            file_utils.remove_image(minio_client, new_image)
        logger.exception(
            "Error in course updating",
            extra={"user_id": admin_id, "course_id": course_id},
        )
        raise InternalError("Error in course updating") from e

    if replaced_image:
        file_utils.remove_image(minio_client, replaced_image)

    logger.info(
        "Course updated",
        extra={"user_id": admin_id, "course_id": course_id},
    )

    return {"message": "Course updated successfully", "course": course}


@router.delete("/{course_id}", response_model=SMessageResponse)
async def delete_course(
    course_id: int,
    db: AsyncSession = Depends(get_async_db_session),
    current_user: User = Depends(get_current_user_admin),
    minio_client: Minio = Depends(get_minio_client),
):
    admin_id = current_user.id
    course = await obj_exist_check.owned_course_exists(
        course_id, current_user, db
    )
    image_public_id = course.image_public_id

    try:
        result = await db.execute(
            delete(Course).where(
                Course.id == course.id,
                CoursePolicy.build_owner_condition(current_user),
            )
        )
        if result.rowcount == 0:
            await db.rollback()
            raise NotFound("Course not found")

        await db.commit()

    except SQLAlchemyError as e:
        await db.rollback()
        logger.exception(
            "Error in course deleting",
            extra={"user_id": admin_id, "course_id": course_id},
        )
        raise InternalError("Error in course deleting") from e

    file_utils.remove_image(minio_client, image_public_id)

    logger.info(
        "Course deleted",
        extra={"user_id": admin_id, "course_id": course_id},
    )

    return {"message": "Course deleted successfully"}


@router.get("/", response_model=SCourseListResponse)
async def get_courses(
    db: AsyncSession = Depends(get_async_db_session),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
):
    try:
        result = await db.execute(
            select(Course)
            .order_by(Course.created_at.desc(), Course.id.desc())
            .offset(skip)
            .limit(limit)
        )

        return {"courses": result.scalars().all()}

    except SQLAlchemyError as e:
        await db.rollback()
        logger.exception("Error in getting courses")
        raise InternalError("Error in getting courses") from e


@router.get("/{course_id}", response_model=SCourseEnvelope)
async def get_course(
    course_id: int,
    db: AsyncSession = Depends(get_async_db_session),
):
    try:
        course = await obj_exist_check.course_exists(course_id, db)

    except SQLAlchemyError as e:
        await db.rollback()
        logger.exception(
            "Error in getting course details", extra={"course_id": course_id}
        )
        raise InternalError("Error in getting course details") from e

    return {"course": course}
