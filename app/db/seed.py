import asyncio
from sqlalchemy import select

from app.auth import create_access_token
from app.core.logging import get_logger
from app.db.base import Base, engine, async_session_maker
from app.db.user import User, UserRole

logger = get_logger(__name__)


async def create_tables():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Tables created successfully.")


async def seed_admin_user(session) -> User:
    admin_email = "admin@example.com"

    existing_admin = await session.execute(
        select(User).where(User.email == admin_email)
    )
    admin_user = existing_admin.scalars().first()
    if admin_user:
        logger.info("Admin user already exists.")
        return admin_user

    admin_user = User(
        username="admin",
        email=admin_email,
        role=UserRole.admin,
        is_active=True,
    )
    session.add(admin_user)
    await session.commit()
    await session.refresh(admin_user)
    logger.info(f"Admin user '{admin_user.username}' created successfully.")
    return admin_user


async def main():
    await create_tables()
    async with async_session_maker() as session:
        admin_user = await seed_admin_user(session)
        token = create_access_token({"sub": str(admin_user.id)})
    print(f"users_access_token={token}")


if __name__ == "__main__":
    asyncio.run(main())
