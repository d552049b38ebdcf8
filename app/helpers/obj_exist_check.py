from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import NotFound
from app.db import Course, User
from app.policies import CoursePolicy


async def course_exists(
        course_id: int,
        db: AsyncSession
) -> Course:
    course = await db.scalar(
        select(Course).where(
            Course.id == course_id
        )
    )

    if course is None:
        raise NotFound("Course not found")

    return course


async def owned_course_exists(
        course_id: int,
        admin: User,
        db: AsyncSession
) -> Course:
    """Курс, созданный этим админом.

    Чужой курс неотличим от отсутствующего: оба дают 404.
    """
    course = await db.scalar(
        select(Course).where(
            Course.id == course_id,
            CoursePolicy.build_owner_condition(admin)
        )
    )

    if course is None:
        raise NotFound("Course not found")

    return course
