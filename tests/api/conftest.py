import threading

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import (
    create_async_engine,
    AsyncSession,
    async_sessionmaker,
)
from sqlalchemy.pool import StaticPool

from app.db.base import Base
from app.db.user import User, UserRole
from app.db.course import Course
from app.db.course_purchase import CoursePurchase
from app.core.errors import UpstreamFailure
from app.schemas import SPaymentIntent

from app.app import app
from app.db import get_async_db_session
from app.dependencies import (
    get_current_user,
    get_minio_client,
    get_payment_gateway,
)

DATABASE_URL = "sqlite+aiosqlite:///:memory:"


class FakeMinio:
    def __init__(self):
        self.uploaded: dict[str, dict] = {}
        self.removed: list[str] = []
        self.fail_upload = False

    def put_object(self, bucket_name, object_name, data, length, content_type=None):
        if self.fail_upload:
            raise RuntimeError("storage unavailable")
        self.uploaded[object_name] = {
            "bucket": bucket_name,
            "content_type": content_type,
            "length": length,
            "data": data.read(),
        }

    def remove_object(self, bucket_name, object_name):
        self.removed.append(object_name)


class FakePaymentGateway:
    def __init__(self):
        self.calls: list[dict] = []
        self.threads: list[int] = []
        self.fail = False

    def create_payment_intent(self, amount, currency, metadata=None):
        self.threads.append(threading.get_ident())
        if self.fail:
            raise UpstreamFailure("Error in course buying", status_code=500)
        self.calls.append(
            {"amount": amount, "currency": currency, "metadata": metadata}
        )
        n = len(self.calls)
        return SPaymentIntent(
            id=f"pi_test_{n}",
            amount=amount,
            currency=currency,
            client_secret=f"pi_test_{n}_secret_{n}",
        )


@pytest_asyncio.fixture
async def async_engine():
    engine = create_async_engine(
        DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def test_db(async_engine):
    async_session = async_sessionmaker(
        async_engine, class_=AsyncSession, expire_on_commit=False
    )
    async with async_session() as session:
        yield session


async def _add(db: AsyncSession, obj):
    db.add(obj)
    await db.commit()
    await db.refresh(obj)
    return obj


@pytest_asyncio.fixture
async def test_user(test_db: AsyncSession) -> User:
    return await _add(
        test_db,
        User(
            username="testuser",
            email="testuser@example.com",
            role=UserRole.student,
            is_active=True,
        ),
    )


@pytest_asyncio.fixture
async def test_another_user(test_db: AsyncSession) -> User:
    return await _add(
        test_db,
        User(
            username="anotheruser",
            email="anotheruser@example.com",
            role=UserRole.student,
            is_active=True,
        ),
    )


@pytest_asyncio.fixture
async def test_admin_user(test_db: AsyncSession) -> User:
    return await _add(
        test_db,
        User(
            username="admin",
            email="admin@example.com",
            role=UserRole.admin,
            is_active=True,
        ),
    )


@pytest_asyncio.fixture
async def test_another_admin_user(test_db: AsyncSession) -> User:
    return await _add(
        test_db,
        User(
            username="another_admin",
            email="another_admin@example.com",
            role=UserRole.admin,
            is_active=True,
        ),
    )


@pytest_asyncio.fixture
async def test_course(test_db: AsyncSession, test_admin_user: User) -> Course:
    return await _add(
        test_db,
        Course(
            title="Test Course",
            description="Test Description",
            price=5000,
            image_public_id="courses/user_1/cover.png",
            image_url="http://localhost:9000/course-images/courses/user_1/cover.png",
            creator_id=test_admin_user.id,
        ),
    )


@pytest_asyncio.fixture
async def test_course_purchase(
    test_db: AsyncSession, test_user: User, test_course: Course
) -> CoursePurchase:
    return await _add(
        test_db,
        CoursePurchase(
            user_id=test_user.id,
            course_id=test_course.id,
            payment_intent_id="pi_existing",
        ),
    )


@pytest.fixture(autouse=True)
def override_db_session(test_db: AsyncSession):
    app.dependency_overrides[get_async_db_session] = lambda: test_db
    yield
    app.dependency_overrides.pop(get_async_db_session, None)


@pytest.fixture(autouse=True)
def minio_client():
    client = FakeMinio()
    app.dependency_overrides[get_minio_client] = lambda: client
    yield client
    app.dependency_overrides.pop(get_minio_client, None)


@pytest.fixture(autouse=True)
def payment_gateway():
    gateway = FakePaymentGateway()
    app.dependency_overrides[get_payment_gateway] = lambda: gateway
    yield gateway
    app.dependency_overrides.pop(get_payment_gateway, None)


def _override_current_user(user: User):
    async def _override_user():
        return user

    app.dependency_overrides[get_current_user] = _override_user


@pytest.fixture
def override_get_current_user_student(test_user: User):
    _override_current_user(test_user)
    yield
    app.dependency_overrides.pop(get_current_user, None)


@pytest.fixture
def override_get_current_user_admin(test_admin_user: User):
    _override_current_user(test_admin_user)
    yield
    app.dependency_overrides.pop(get_current_user, None)


@pytest.fixture
def override_get_current_user_another_admin(test_another_admin_user: User):
    _override_current_user(test_another_admin_user)
    yield
    app.dependency_overrides.pop(get_current_user, None)
