from .base import (
    Base,
    get_async_db_session,
    async_session_maker,
)
from .user import User, UserRole
from .course import Course
from .course_purchase import CoursePurchase
