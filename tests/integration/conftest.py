import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from auth_core.adapter.services.password_service import BcryptPasswordService
from auth_core.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from auth_core.app.services.auth_service import AuthService
from auth_core.depends import get_auth_service, get_unit_of_work, token_service


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
async def client(db_session):
    from httpx import ASGITransport
    from auth_core.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)
    password_service = BcryptPasswordService(rounds=4)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    async def override_get_auth_service():
        return AuthService(SqlAlchemyUnitOfWork(db_session), password_service, token_service)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_auth_service] = override_get_auth_service

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def register_user(client):
    async def _register(email="user@example.com", password="SecurePass123!", name="Test User"):
        response = await client.post(
            "/auth/register", json={"email": email, "name": name, "password": password}
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _register
