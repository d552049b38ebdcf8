from fastapi.concurrency import run_in_threadpool
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core import settings
from app.core.errors import Conflict
from app.core.logging import get_logger
from app.db import Course, CoursePurchase, User
from app.helpers import obj_exist_check
from app.helpers.payment_gateway import StripePaymentGateway
from app.schemas import SPaymentIntent

logger = get_logger(__name__)


class PurchaseRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def reserve(self, user_id: int, course_id: int) -> CoursePurchase:
        """Вставляет покупку в текущую транзакцию.

        Уникальный индекс (user_id, course_id) отсекает повторную покупку,
        в том числе при параллельных запросах.
        """
        purchase = CoursePurchase(user_id=user_id, course_id=course_id)
        self.db.add(purchase)

        try:
            await self.db.flush()
        except IntegrityError as e:
            await self.db.rollback()
            raise Conflict("User has already purchased this course") from e

        return purchase


async def initiate_purchase(
    db: AsyncSession,
    gateway: StripePaymentGateway,
    user: User,
    course_id: int,
) -> tuple[Course, SPaymentIntent]:
    course = await obj_exist_check.course_exists(course_id, db)

    repo = PurchaseRepository(db)
    purchase = await repo.reserve(user.id, course.id)

    try:
        intent = await run_in_threadpool(
            gateway.create_payment_intent,
            amount=course.price,
            currency=settings.PAYMENT_CURRENCY,
            metadata={
                "user_id": str(user.id),
                "course_id": str(course.id),
                "purchase_id": str(purchase.id),
            },
        )
    except Exception:
        await db.rollback()
        raise

    purchase.payment_intent_id = intent.id
    await db.commit()

    logger.info(
        "Course purchase initiated",
        extra={
            "user_id": user.id,
            "course_id": course.id,
            "purchase_id": purchase.id,
            "payment_intent_id": intent.id,
        },
    )

    return course, intent
