from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from app.core.settings import SQLALCHEMY_DATABASE_URL, SQLALCHEMY_ECHO


engine = create_async_engine(SQLALCHEMY_DATABASE_URL, echo=SQLALCHEMY_ECHO)

async_session_maker = async_sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False
)


class Base(DeclarativeBase):
    pass


async def get_async_db_session():
    async with async_session_maker() as session:
        yield session
