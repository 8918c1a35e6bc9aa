import os
from typing import AsyncGenerator, Dict

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ.setdefault("MOCK_LATENCY_SECONDS", "0")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import app.core.models  # noqa: F401  registers tables on Base.metadata
from app.core.state import clear_all_state
from app.db.session import Base, get_db
from app.main import app


TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

STUDENT_LOGIN = {"identifier": "245uai130", "password": "Yadu@1234", "user_type": "student"}
FACULTY_LOGIN = {"identifier": "FAC1023", "password": "Faculty@123", "user_type": "faculty"}
ADMIN_LOGIN = {"identifier": "ADM0001", "password": "Admin@123", "user_type": "admin"}


@pytest.fixture(autouse=True)
def reset_state():
    """Every test starts with fresh dashboard state."""
    clear_all_state()
    yield
    clear_all_state()


@pytest.fixture()
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """In-memory SQLite session shared with the app through get_db."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:

        async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
            yield session

        app.dependency_overrides[get_db] = override_get_db
        yield session

    app.dependency_overrides.pop(get_db, None)
    await engine.dispose()


@pytest.fixture()
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client bound to the FastAPI app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


async def _login(client: AsyncClient, payload: Dict[str, str]) -> Dict[str, str]:
    response = await client.post("/api/v1/auth/login", json=payload)
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture()
async def student_headers(client: AsyncClient) -> Dict[str, str]:
    return await _login(client, STUDENT_LOGIN)


@pytest.fixture()
async def faculty_headers(client: AsyncClient) -> Dict[str, str]:
    return await _login(client, FACULTY_LOGIN)


@pytest.fixture()
async def admin_headers(client: AsyncClient) -> Dict[str, str]:
    return await _login(client, ADMIN_LOGIN)
