"""
Test configuration and fixtures for the brokerage site API.
Provides an in-memory database per test, an HTTP client, factories and an admin session.
"""

import os
import tempfile

# Configure the application before it is imported
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["ENVIRONMENT"] = "testing"
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="brokerage-uploads-")
os.environ["SESSION_SECRET_KEY"] = "test-session-secret-key-with-enough-length"

import io
import uuid
from typing import AsyncGenerator, Optional

import pytest
from httpx import ASGITransport, AsyncClient
from PIL import Image
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import brokerage.models  # noqa: F401
from brokerage.database import Base, get_db
from brokerage.main import app
from brokerage.models.admin_user import AdminRole, AdminUser
from brokerage.models.inquiry import Inquiry, InquiryStatus
from brokerage.models.media import MediaType, PropertyMedia
from brokerage.models.property import Property, PropertyStatus, PropertyType
from brokerage.models.team_member import TeamMember
from brokerage.repositories.admin_user import AdminUserRepository
from brokerage.repositories.inquiry import InquiryRepository
from brokerage.repositories.media import MediaRepository
from brokerage.repositories.property import PropertyRepository
from brokerage.repositories.team_member import TeamMemberRepository

ADMIN_PASSWORD = "adminpassword123"


@pytest.fixture
async def db_engine():
    """Fresh in-memory SQLite database for each test."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def db_session(db_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    session_factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client bound to the app with the test session injected."""
    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as http_client:
        yield http_client
    app.dependency_overrides.clear()


# Repository fixtures
@pytest.fixture
def property_repository(db_session: AsyncSession) -> PropertyRepository:
    return PropertyRepository(db_session)


@pytest.fixture
def media_repository(db_session: AsyncSession) -> MediaRepository:
    return MediaRepository(db_session)


@pytest.fixture
def inquiry_repository(db_session: AsyncSession) -> InquiryRepository:
    return InquiryRepository(db_session)


@pytest.fixture
def admin_repository(db_session: AsyncSession) -> AdminUserRepository:
    return AdminUserRepository(db_session)


@pytest.fixture
def team_repository(db_session: AsyncSession) -> TeamMemberRepository:
    return TeamMemberRepository(db_session)


# Test data factories
class PropertyFactory:
    """Factory for creating test listings."""

    @staticmethod
    def create_property_data(
        title: str = "Modern Family House",
        price: int = 45_000_000,
        property_type: PropertyType = PropertyType.HOUSE,
        status: PropertyStatus = PropertyStatus.FOR_SALE,
        city: str = "Islamabad",
        location: str = "F-11/1",
        area: int = 2250,
        bedrooms: Optional[int] = 4,
        bathrooms: Optional[int] = 3,
        featured: bool = False,
        **overrides
    ) -> dict:
        data = {
            "title": title,
            "description": "Spacious corner house close to the markaz with a private lawn.",
            "price": price,
            "property_type": property_type,
            "status": status,
            "location": location,
            "city": city,
            "area": area,
            "bedrooms": bedrooms,
            "bathrooms": bathrooms,
            "image": "https://images.example.com/house.jpg",
            "featured": featured,
            "amenities": ["Parking", "Garden"],
        }
        data.update(overrides)
        return data

    @staticmethod
    def create_payload(**overrides) -> dict:
        """JSON body for the admin create endpoint."""
        data = PropertyFactory.create_property_data(**overrides)
        data["property_type"] = data["property_type"].value
        data["status"] = data["status"].value
        return data

    @staticmethod
    async def create_property(property_repo: PropertyRepository, **overrides) -> Property:
        return await property_repo.create_property(PropertyFactory.create_property_data(**overrides))


class MediaFactory:
    @staticmethod
    async def create_media(
        media_repo: MediaRepository,
        property_id: uuid.UUID,
        sort_order: int = 0,
        media_type: MediaType = MediaType.IMAGE,
        is_featured: bool = False,
        url: Optional[str] = None
    ) -> PropertyMedia:
        return await media_repo.create({
            "property_id": property_id,
            "media_type": media_type,
            "url": url or f"https://images.example.com/{uuid.uuid4().hex}.jpg",
            "tags": [],
            "is_featured": is_featured,
            "sort_order": sort_order,
        })


class AdminFactory:
    @staticmethod
    async def create_admin(
        admin_repo: AdminUserRepository,
        email: Optional[str] = None,
        password: str = ADMIN_PASSWORD,
        name: str = "Test Admin",
        role: AdminRole = AdminRole.ADMIN,
        is_active: bool = True
    ) -> AdminUser:
        admin = await admin_repo.create_admin({
            "email": email or f"admin{uuid.uuid4().hex[:8]}@example.com",
            "password": password,
            "name": name,
            "role": role,
        })
        if not is_active:
            admin = await admin_repo.update(admin.id, {"is_active": False})
        return admin


class TeamFactory:
    @staticmethod
    def create_member_data(name: str = "Shahzad Ahmad", **overrides) -> dict:
        data = {
            "name": name,
            "role": "Director of Sales",
            "email": f"{name.split()[0].lower()}@example.com",
            "phone": "+92 300 1111111",
            "whatsapp": "923001111111",
            "is_active": True,
        }
        data.update(overrides)
        return data

    @staticmethod
    async def create_member(team_repo: TeamMemberRepository, sort_order: int = 0, **overrides) -> TeamMember:
        return await team_repo.create({**TeamFactory.create_member_data(**overrides), "sort_order": sort_order})


class InquiryFactory:
    @staticmethod
    async def create_inquiry(
        inquiry_repo: InquiryRepository,
        status: InquiryStatus = InquiryStatus.NEW,
        **overrides
    ) -> Inquiry:
        data = {
            "name": "Ayesha Khan",
            "email": "ayesha@example.com",
            "phone": "+92 300 1234567",
            "service": "sales",
            "message": "I would like to schedule a visit this weekend.",
            "status": status,
        }
        data.update(overrides)
        return await inquiry_repo.create(data)


def make_image_bytes(fmt: str = "PNG", size: tuple = (200, 150), color: str = "#1e40af") -> bytes:
    """Encode a solid-colour test image."""
    buffer = io.BytesIO()
    mode = "RGBA" if fmt == "PNG" else "RGB"
    Image.new(mode, size, color).save(buffer, format=fmt)
    return buffer.getvalue()


# Common test fixtures
@pytest.fixture
async def test_property(property_repository: PropertyRepository) -> Property:
    return await PropertyFactory.create_property(property_repository)


@pytest.fixture
async def test_admin(admin_repository: AdminUserRepository) -> AdminUser:
    return await AdminFactory.create_admin(admin_repository, email="admin@example.com")


@pytest.fixture
async def admin_client(client: AsyncClient, test_admin: AdminUser) -> AsyncClient:
    """HTTP client holding a logged-in admin session cookie."""
    response = await client.post(
        "/api/admin/login",
        json={"email": test_admin.email, "password": ADMIN_PASSWORD}
    )
    assert response.status_code == 200, response.text
    return client
