"""Pytest configuration and fixtures for the directory service.

Every test gets a fresh in-memory SQLite database (aiosqlite, StaticPool)
with foreign keys and case-sensitive LIKE enabled. HTTP tests run against
app.main:app with get_db / get_db_transactional overridden to that database.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production")
os.environ["RATE_LIMIT_ENABLED"] = "false"

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

import app.infrastructure.persistence.models  # noqa: E402,F401
from app.application.services import (  # noqa: E402
    AssignmentService,
    AuthService,
    RoleService,
    UserService,
)
from app.infrastructure.persistence.database import (  # noqa: E402
    Base,
    configure_sqlite_pragmas,
    get_db,
    get_db_transactional,
    make_session_factory,
)
from app.infrastructure.persistence.repositories import (  # noqa: E402
    RoleRepository,
    UserRepository,
    UserRoleRepository,
)
from app.infrastructure.security import JwtTokenIssuer  # noqa: E402
from app.main import app  # noqa: E402
from app.shared.context import clear_current_user  # noqa: E402
from tests.helpers import user_payload  # noqa: E402


class FakeHasher:
    """Reversible stand-in for bcrypt so service tests stay fast."""

    async def hash(self, password: str) -> str:
        return f"hashed:{password}"

    async def verify(self, password: str, hashed_password: str | None) -> bool:
        return hashed_password == f"hashed:{password}"


@pytest.fixture(autouse=True)
def _reset_actor():
    clear_current_user()
    yield
    clear_current_user()


@pytest.fixture
async def engine():
    eng = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    configure_sqlite_pragmas(eng)
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield eng
    await eng.dispose()


@pytest.fixture
def session_factory(engine):
    return make_session_factory(engine)


@pytest.fixture
async def db_session(session_factory) -> AsyncSession:
    """Session for repository/service tests. Nothing is committed."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def hasher() -> FakeHasher:
    return FakeHasher()


@pytest.fixture
def user_repo(db_session) -> UserRepository:
    return UserRepository(db_session)


@pytest.fixture
def role_repo(db_session) -> RoleRepository:
    return RoleRepository(db_session)


@pytest.fixture
def user_service(user_repo, hasher) -> UserService:
    return UserService(user_repo, hasher)


@pytest.fixture
def role_service(role_repo) -> RoleService:
    return RoleService(role_repo)


@pytest.fixture
def assignment_service(db_session, user_repo, role_repo) -> AssignmentService:
    return AssignmentService(user_repo, role_repo, UserRoleRepository(db_session))


@pytest.fixture
def auth_service(user_service, user_repo, hasher) -> AuthService:
    return AuthService(user_service, user_repo, hasher, JwtTokenIssuer())


@pytest.fixture
async def client(session_factory) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI), bound to the test database."""

    async def _get_db():
        async with session_factory() as session:
            yield session

    async def _get_db_transactional():
        async with session_factory() as session:
            async with session.begin():
                yield session

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_db_transactional] = _get_db_transactional
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
async def auth_headers(client: AsyncClient) -> dict[str, str]:
    """Register and log in a user; return the Authorization header."""
    body = user_payload("admin", password="adminpass1")
    resp = await client.post("/api/v1/auth/register", json=body)
    assert resp.status_code == 201, resp.text
    resp = await client.post(
        "/api/v1/auth/login",
        json={"email": body["email"], "password": body["password"]},
    )
    assert resp.status_code == 200, resp.text
    return {"Authorization": f"Bearer {resp.json()['access_token']}"}
