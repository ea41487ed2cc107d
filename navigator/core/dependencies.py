# navigator/core/dependencies.py

"""
FastAPI 애플리케이션의 의존성 주입(Dependency Injection)을 정의하는 모듈입니다.

- 데이터베이스 세션 (get_db_session).
- 애플리케이션 설정 (get_settings). 테스트에서는 dependency_overrides로 교체합니다.
"""

from typing import AsyncGenerator

from sqlmodel.ext.asyncio.session import AsyncSession

from navigator.core.config import Settings, settings
from navigator.core.database import get_session as get_main_app_session


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    navigator.core.database.get_session을 래핑한 세션 의존성입니다.
    """
    async for session in get_main_app_session():
        yield session


def get_settings() -> Settings:
    """시작 시 로드된 설정 객체를 반환합니다."""
    return settings
