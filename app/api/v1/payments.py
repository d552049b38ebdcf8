from fastapi import Depends, APIRouter, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import InternalError
from app.core.logging import get_logger
from app.db import get_async_db_session, User
from app.dependencies import get_current_user, get_payment_gateway
from app.helpers import payments
from app.helpers.payment_gateway import StripePaymentGateway
from app.schemas import SCoursePurchaseResponse

router = APIRouter(prefix="/courses", tags=["Payments"])

logger = get_logger(__name__)


@router.post(
    "/{course_id}/buy",
    response_model=SCoursePurchaseResponse,
    status_code=status.HTTP_201_CREATED,
)
async def buy_course(
    course_id: int,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_db_session),
    gateway: StripePaymentGateway = Depends(get_payment_gateway),
):
    user_id = user.id
    try:
        course, intent = await payments.initiate_purchase(
            db, gateway, user, course_id
        )
    except SQLAlchemyError as e:
        await db.rollback()
        logger.exception(
            "Error in course buying",
            extra={"user_id": user_id, "course_id": course_id},
        )
        raise InternalError("Error in course buying") from e

    return {
        "message": "Course purchase initiated",
        "course": course,
        "client_secret": intent.client_secret,
    }
