import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from tests.fixtures.sample_data import SampleData
from tests.utils.auth_client import login, register
from todoapp.adapter.services.password_hasher import BcryptPasswordHasher
from todoapp.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from todoapp.adapter.session_store.memory_session_store import InMemorySessionStore
from todoapp.depends import get_password_hasher, get_session_store, get_unit_of_work


@pytest_asyncio.fixture
def test_data():
    return SampleData()


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
def session_store():
    return InMemorySessionStore()


@pytest_asyncio.fixture
async def client(db_session, session_store):
    from todoapp.api.app import create_app

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    fast_hasher = BcryptPasswordHasher(rounds=4)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_session_store] = lambda: session_store
    app.dependency_overrides[get_password_hasher] = lambda: fast_hasher

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac


@pytest_asyncio.fixture
async def alice(client, test_data):
    """Registered, logged-in user; auth headers for their session"""
    user = test_data.user("alice")
    await register(client, user["email"], user["password"])
    _, headers = await login(client, user["email"], user["password"])
    return headers


@pytest_asyncio.fixture
async def bob(client, test_data):
    user = test_data.user("bob")
    await register(client, user["email"], user["password"])
    _, headers = await login(client, user["email"], user["password"])
    return headers
