"""테스트 인프라 — 임시 SQLite DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure — Temporary SQLite DB, session, and httpx client fixtures.
Uses sqlite+aiosqlite in a temp directory unless TEST_DATABASE_URL points
at another database. Schema is applied once per session, data is deleted
after each test. Every request gets its own session so a failed request
rolls back exactly as it does in production.
"""

import os
import tempfile
from collections.abc import AsyncGenerator

# 앱 설정이 임포트되기 전에 테스트 환경을 지정 — must run before scheduling_api imports
_TMP_DIR = tempfile.mkdtemp(prefix="scheduling_api_tests_")
TEST_DATABASE_URL = os.environ.setdefault(
    "TEST_DATABASE_URL", f"sqlite+aiosqlite:///{_TMP_DIR}/test.db"
)
os.environ["DATABASE_URL"] = TEST_DATABASE_URL
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-with-at-least-32-bytes")
os.environ.setdefault("AXIOM_API_TOKEN", "")

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from scheduling_api.database import Base, get_db  # noqa: E402
from scheduling_api.main import app  # noqa: E402
from scheduling_api.models import Department, Employee  # noqa: E402
from scheduling_api.utils.jwt import create_access_token  # noqa: E402
from scheduling_api.utils.password import hash_password  # noqa: E402

_schema_created = False


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 첫 호출 시 스키마를 생성하고, 종료 시 데이터를 비웁니다."""
    global _schema_created
    eng = create_async_engine(TEST_DATABASE_URL, echo=False)

    if not _schema_created:
        async with eng.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)
        _schema_created = True

    yield eng

    # 테스트 후 모든 데이터 정리 — 자식 테이블부터 삭제
    async with eng.begin() as conn:
        for table in reversed(Base.metadata.sorted_tables):
            await conn.execute(table.delete())
    await eng.dispose()


@pytest_asyncio.fixture
async def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db(session_factory: async_sessionmaker[AsyncSession]) -> AsyncGenerator[AsyncSession, None]:
    """픽스처 데이터 생성용 세션. 생성한 데이터는 바로 커밋합니다."""
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(session_factory: async_sessionmaker[AsyncSession]) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — 요청마다 새 DB 세션을 사용합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def department(db: AsyncSession) -> Department:
    """첫 번째 생산 부서를 생성합니다."""
    d = Department(name="Cutting", production_order=1)
    db.add(d)
    await db.commit()
    return d


@pytest_asyncio.fixture
async def second_department(db: AsyncSession) -> Department:
    """두 번째 생산 부서를 생성합니다."""
    d = Department(name="Sewing", production_order=2)
    db.add(d)
    await db.commit()
    return d


@pytest_asyncio.fixture
async def employee(db: AsyncSession, department: Department) -> Employee:
    """Cutting 부서 소속 직원(로그인 계정)을 생성합니다."""
    e = Employee(
        name="Maria Silva",
        username="maria",
        password_hash=hash_password("maria123!"),
        departments=[department],
    )
    db.add(e)
    await db.commit()
    return e


@pytest_asyncio.fixture
async def other_employee(db: AsyncSession) -> Employee:
    """부서가 없는 두 번째 직원을 생성합니다."""
    e = Employee(
        name="Joao Souza",
        username="joao",
        password_hash=hash_password("joao123!"),
        departments=[],
    )
    db.add(e)
    await db.commit()
    return e


def make_token(employee: Employee) -> str:
    """테스트용 JWT 액세스 토큰을 생성합니다."""
    return create_access_token({
        "sub": str(employee.id),
        "username": employee.username,
        "role": "colab",
    })


@pytest.fixture
def token(employee: Employee) -> str:
    return make_token(employee)


@pytest.fixture
def headers(token: str) -> dict[str, str]:
    return auth_header(token)


def auth_header(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
