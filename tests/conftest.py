# tests/conftest.py

from pathlib import Path
from typing import AsyncGenerator, Callable, List

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from sqlalchemy import text
from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import NullPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from navigator.main import app as main_app
from navigator.core import dependencies as deps
from navigator.core.config import Settings
from navigator.domains.importer.backends import SQLiteBackend

# 모든 테이블이 SQLModel.metadata에 등록되도록 모델을 임포트합니다.
from navigator.domains.directory import models as directory_models  # noqa: F401


# --- 테스트용 데이터베이스 설정 ---
# 테스트마다 임시 디렉토리에 새 SQLite 파일을 만듭니다.
# 가져오기 서비스는 자체 연결을 열기 때문에 메모리 DB가 아니라 파일 DB여야 합니다.
@pytest.fixture(scope="function")
def database_url(tmp_path: Path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'navigator_test.db'}"


@pytest_asyncio.fixture(scope="function")
async def test_engine(database_url: str) -> AsyncGenerator[AsyncEngine, None]:
    """
    모든 테이블을 생성한 테스트용 엔진을 제공합니다.
    """
    engine = create_async_engine(database_url, echo=False, poolclass=NullPool)
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(test_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    TestingSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    async with TestingSessionLocal() as session:
        yield session


@pytest.fixture(scope="function")
def fetch_rows(test_engine: AsyncEngine) -> Callable:
    """
    가져오기 결과를 확인하기 위해 새 연결로 쿼리를 실행하는 함수를 반환합니다.
    """
    async def _fetch(sql: str) -> List[tuple]:
        async with test_engine.connect() as conn:
            result = await conn.execute(text(sql))
            return [tuple(row) for row in result.all()]
    return _fetch


# --- 가져오기 설정 픽스처 ---
@pytest.fixture(scope="function")
def import_settings(database_url: str, tmp_path: Path) -> Settings:
    """
    .env를 무시하고 테스트 DB와 임시 SQL 파일을 가리키는 설정입니다.
    """
    return Settings(
        _env_file=None,
        APP_ENV="testing",
        DATABASE_URL=database_url,
        IMPORT_SQL_FILE=str(tmp_path / "navigator_export.sql"),
        IMPORT_ENDPOINT_ENABLED=True,
    )


@pytest.fixture(scope="function")
def write_script(import_settings: Settings) -> Callable[[str], Path]:
    """설정된 IMPORT_SQL_FILE 경로에 SQL 스크립트를 기록하는 함수를 반환합니다."""
    def _write(sql: str) -> Path:
        path = import_settings.import_sql_path
        path.write_text(sql, encoding="utf-8")
        return path
    return _write


class RecordingSQLiteBackend(SQLiteBackend):
    """
    호출 순서와 배치 실행 중의 외래 키 검사 상태를 기록하는 SQLite 백엔드입니다.
    """
    def __init__(self):
        self.calls: List[str] = []
        self.checks_during_batch = None

    async def disable_checks(self, driver_conn) -> None:
        self.calls.append("disable")
        await super().disable_checks(driver_conn)

    async def enable_checks(self, driver_conn) -> None:
        self.calls.append("enable")
        await super().enable_checks(driver_conn)

    async def run_batch(self, driver_conn, script: str, *, transactional: bool = False) -> None:
        self.calls.append("batch")
        self.checks_during_batch = await self.checks_enabled(driver_conn)
        await super().run_batch(driver_conn, script, transactional=transactional)


@pytest.fixture(scope="function")
def recording_backend() -> RecordingSQLiteBackend:
    return RecordingSQLiteBackend()


# --- HTTP 클라이언트 픽스처 ---
@pytest_asyncio.fixture(scope="function")
async def client(
    db_session: AsyncSession, import_settings: Settings
) -> AsyncGenerator[AsyncClient, None]:
    """
    DB 세션과 설정 의존성을 테스트용으로 교체한 AsyncClient를 반환합니다.
    """
    async def override_get_db_session():
        yield db_session

    original_overrides = main_app.dependency_overrides.copy()
    try:
        main_app.dependency_overrides.update({
            deps.get_db_session: override_get_db_session,
            deps.get_settings: lambda: import_settings,
        })
        transport = ASGITransport(app=main_app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
    finally:
        main_app.dependency_overrides.clear()
        main_app.dependency_overrides.update(original_overrides)
