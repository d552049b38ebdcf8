from datetime import datetime, timezone

from sqlalchemy import Integer, String, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import mapped_column, Mapped, relationship
from sqlalchemy.sql import func

from .base import Base


class CoursePurchase(Base):
    __tablename__ = "course_purchases"
    __table_args__ = (
        UniqueConstraint("user_id", "course_id", name="uq_course_purchase_user_course"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)

    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False)

    # purchases outlive their course
    course_id: Mapped[int | None] = mapped_column(
        ForeignKey("courses.id", ondelete="SET NULL"), nullable=True
    )

    payment_intent_id: Mapped[str | None] = mapped_column(
        String(255), nullable=True, unique=True
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        server_default=func.now(),
        nullable=False,
    )

    user = relationship(
        "User", foreign_keys=[user_id], back_populates="purchases"
    )

    course = relationship("Course", foreign_keys=[course_id])

    def __repr__(self):
        return f"<CoursePurchase(user_id={self.user_id}, course_id={self.course_id})>"
