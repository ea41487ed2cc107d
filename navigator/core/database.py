# navigator/core/database.py

"""
애플리케이션의 데이터베이스 연결 및 세션 관리를 담당하는 모듈입니다.

- 웹 애플리케이션용 SQLModel 비동기 엔진과 세션 공장을 설정합니다.
- SQL 가져오기 전용의 풀링하지 않는 일회성 엔진을 만드는 함수를 제공합니다.
- 개발용으로 테이블을 생성하는 함수를 포함합니다.
"""

from typing import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import NullPool

from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from navigator.core.config import Settings, settings
from navigator.domains.importer.backends import get_backend

# 모든 SQLModel 클래스가 SQLModel.metadata에 등록되도록 모델 모듈을 임포트합니다.
from navigator.domains.directory import models  # noqa: F401


# 웹 애플리케이션용 엔진입니다.
engine: AsyncEngine = create_async_engine(
    settings.database_url(),
    echo=settings.DEBUG_MODE,  # 디버그 모드일 때만 SQL 쿼리 출력
    future=True,
    pool_pre_ping=True,
    pool_recycle=3600,  # 1시간마다 연결 재활용
)

AsyncSessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
)

metadata = SQLModel.metadata


def create_import_engine(config: Settings) -> AsyncEngine:
    """
    SQL 가져오기 한 번을 위한 엔진을 생성합니다.
    NullPool을 사용하므로 연결은 재사용되지 않고 닫을 때 바로 끊깁니다.
    """
    url = config.database_url()
    backend = get_backend(make_url(url).get_backend_name())
    return create_async_engine(
        url,
        echo=config.DEBUG_MODE,
        poolclass=NullPool,
        connect_args=backend.connect_args(),
    )


async def create_db_and_tables(db_engine: AsyncEngine = engine) -> None:
    """
    등록된 모든 테이블을 생성합니다. 기존 테이블은 삭제하지 않습니다. (개발용)
    """
    async with db_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI 의존성 주입을 위한 비동기 데이터베이스 세션 제너레이터입니다.
    요청마다 새로운 세션을 생성하고, 요청 처리 후 세션을 자동으로 닫습니다.
    """
    async with AsyncSessionLocal() as session:
        yield session


@asynccontextmanager
async def get_async_session_context() -> AsyncGenerator[AsyncSession, None]:
    """
    스크립트 등 요청 밖에서 사용할 독립적인 비동기 DB 세션을 제공하는 컨텍스트 관리자입니다.
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
