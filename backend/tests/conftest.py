"""
ReliefHub - Test Configuration and Fixtures
"""
import os
from typing import AsyncGenerator, Callable
import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from faker import Faker

# Set testing environment
os.environ['ENVIRONMENT'] = 'testing'
os.environ['DATABASE_URL'] = 'sqlite+aiosqlite:///./test.db'
os.environ['JWT_SECRET_KEY'] = 'test-jwt-secret-key-for-testing'
os.environ['RATE_LIMIT_ENABLED'] = 'false'

from reliefhub.main import app
from reliefhub.core.database import Base, get_db, create_engine_for_url
from reliefhub.core.security import create_access_token
from reliefhub.models import Camp, CampNeed, Profile, ProfileRole
from reliefhub.schemas.profile import Actor

fake = Faker()

# Test database setup
TEST_DATABASE_URL = 'sqlite+aiosqlite:///./test.db'
test_engine = create_engine_for_url(TEST_DATABASE_URL)
TestSessionLocal = async_sessionmaker(
    bind=test_engine,
    class_=AsyncSession,
    expire_on_commit=False
)


@pytest.fixture(scope='function')
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create a fresh database session for each test"""
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with TestSessionLocal() as session:
        yield session
        await session.rollback()

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture
def session_factory(db_session: AsyncSession) -> async_sessionmaker:
    """Factory for independent sessions (one per simulated concurrent request)"""
    return TestSessionLocal


@pytest.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create test client with database override"""
    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url='http://test') as ac:
        yield ac

    app.dependency_overrides.clear()


# ==================== Profiles ====================

@pytest.fixture
def make_profile(db_session: AsyncSession) -> Callable:
    """Create a profile with the given role"""
    async def _make(role: ProfileRole = ProfileRole.USER, **kwargs) -> Profile:
        profile = Profile(
            id=kwargs.pop('id', fake.uuid4()),
            full_name=kwargs.pop('full_name', fake.name()),
            phone=kwargs.pop('phone', fake.msisdn()),
            role=role.value,
        )
        db_session.add(profile)
        await db_session.commit()
        await db_session.refresh(profile)
        return profile
    return _make


@pytest.fixture
async def citizen(make_profile) -> Profile:
    return await make_profile(ProfileRole.USER)


@pytest.fixture
async def camp_admin(make_profile) -> Profile:
    return await make_profile(ProfileRole.CAMP)


@pytest.fixture
async def ngo(make_profile) -> Profile:
    return await make_profile(ProfileRole.NGO)


def actor_for(profile: Profile) -> Actor:
    return Actor(id=profile.id, role=ProfileRole(profile.role))


def auth_headers_for(profile: Profile) -> dict:
    token = create_access_token({'sub': profile.id})
    return {'Authorization': f'Bearer {token}'}


@pytest.fixture
def citizen_headers(citizen: Profile) -> dict:
    return auth_headers_for(citizen)


@pytest.fixture
def camp_admin_headers(camp_admin: Profile) -> dict:
    return auth_headers_for(camp_admin)


@pytest.fixture
def ngo_headers(ngo: Profile) -> dict:
    return auth_headers_for(ngo)


# ==================== Camps & needs ====================

@pytest.fixture
def make_camp(db_session: AsyncSession) -> Callable:
    """Create a camp owned by `admin`"""
    async def _make(admin: Profile, **kwargs) -> Camp:
        camp = Camp(
            camp_admin_id=admin.id,
            name=kwargs.pop('name', f"{fake.city()} Relief Camp"),
            location=kwargs.pop('location', fake.address()),
            total_capacity=kwargs.pop('total_capacity', 100),
            occupied_seats=kwargs.pop('occupied_seats', 0),
            contact_phone=kwargs.pop('contact_phone', fake.msisdn()),
            **kwargs,
        )
        db_session.add(camp)
        await db_session.commit()
        await db_session.refresh(camp)
        return camp
    return _make


@pytest.fixture
async def camp(make_camp, camp_admin: Profile) -> Camp:
    return await make_camp(camp_admin)


@pytest.fixture
def make_need(db_session: AsyncSession) -> Callable:
    async def _make(camp: Camp, **kwargs) -> CampNeed:
        need = CampNeed(
            camp_id=camp.id,
            item_name=kwargs.pop('item_name', 'Blankets'),
            quantity_needed=kwargs.pop('quantity_needed', 10),
            quantity_fulfilled=kwargs.pop('quantity_fulfilled', 0),
            **kwargs,
        )
        db_session.add(need)
        await db_session.commit()
        await db_session.refresh(need)
        return need
    return _make


@pytest.fixture
async def need(make_need, camp: Camp) -> CampNeed:
    """Need for 10 blankets at `camp`"""
    return await make_need(camp)


@pytest.fixture
def citizen_actor(citizen: Profile) -> Actor:
    return actor_for(citizen)


@pytest.fixture
def camp_admin_actor(camp_admin: Profile) -> Actor:
    return actor_for(camp_admin)


@pytest.fixture
def ngo_actor(ngo: Profile) -> Actor:
    return actor_for(ngo)


@pytest.fixture
def as_actor() -> Callable:
    """Actor context for any profile"""
    return actor_for


@pytest.fixture
def headers_for() -> Callable:
    """Bearer headers for any profile"""
    return auth_headers_for
