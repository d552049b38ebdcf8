from fastapi import APIRouter

from .course import router as course_router
from .payments import router as payments_router

v1_router = APIRouter(prefix="/api/v1")

v1_router.include_router(course_router)
v1_router.include_router(payments_router)
