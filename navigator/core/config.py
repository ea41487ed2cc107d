# navigator/core/config.py

from typing import Any, Optional
from pathlib import Path
import os

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL

# 프로젝트의 루트 디렉토리 경로를 계산합니다.
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# 호스팅 업체가 넘겨주는 URL 스킴을 비동기 드라이버 스킴으로 바꿉니다.
_ASYNC_SCHEMES = {
    "postgres://": "postgresql+asyncpg://",
    "postgresql://": "postgresql+asyncpg://",
    "mysql://": "mysql+aiomysql://",
    "sqlite://": "sqlite+aiosqlite://",
}


class Settings(BaseSettings):
    """
    애플리케이션의 모든 설정을 정의하는 Pydantic BaseSettings 모델입니다.
    환경 변수 및 .env 파일에서 값을 자동으로 로드합니다.
    시작 시 한 번 만들어서 가져오기 서비스에 명시적으로 전달합니다.
    """

    # --- Pydantic Settings 설정 ---
    model_config = SettingsConfigDict(
        env_file=os.path.join(BASE_DIR, '.env'),  # 프로젝트 루트의 .env 파일
        env_file_encoding='utf-8',
        extra='ignore',                      # 모델에 없는 변수는 무시
        case_sensitive=True                  # 환경 변수 이름 대소문자 구분
    )

    # --- 애플리케이션 기본 설정 ---
    APP_NAME: str = "Campus Navigator API"
    APP_VERSION: str = "0.1.0"
    APP_ENV: str = Field("development", description="Application environment (e.g., development, production, testing)")
    DEBUG_MODE: bool = Field(False, description="Enable SQL echo and verbose logging")

    # --- 데이터베이스 설정 ---
    # DATABASE_URL이 있으면 개별 접속 정보보다 우선합니다.
    DATABASE_URL: Optional[SecretStr] = Field(None, description="Full SQLAlchemy database URL (overrides DB_* fields)")
    DB_CONNECTION: str = Field("postgresql+asyncpg", description="SQLAlchemy async driver name")
    DB_HOST: str = Field("localhost", description="Database host")
    DB_PORT: Optional[int] = Field(None, description="Database port (driver default when empty)")
    DB_DATABASE: str = Field("navigator", description="Database name (file path for sqlite)")
    DB_USERNAME: Optional[str] = Field(None, description="Database user")
    DB_PASSWORD: Optional[SecretStr] = Field(None, description="Database password")

    # --- SQL 가져오기 설정 ---
    IMPORT_SQL_FILE: str = Field("database/navigator_export.sql", description="SQL script to import (relative to project root)")
    IMPORT_FILE_ENCODING: str = Field("utf-8", description="Encoding used to read the SQL script")
    IMPORT_USE_TRANSACTION: bool = Field(False, description="Wrap the whole batch in one transaction")
    IMPORT_ENDPOINT_ENABLED: bool = Field(False, description="Expose POST /admin/import over HTTP")

    def model_post_init(self, __context: Any) -> None:  # noqa: ANN001
        # 상대 경로는 프로젝트 루트를 기준으로 해석합니다.
        if not os.path.isabs(self.IMPORT_SQL_FILE):
            self.IMPORT_SQL_FILE = os.path.join(BASE_DIR, self.IMPORT_SQL_FILE)

    @property
    def import_sql_path(self) -> Path:
        return Path(self.IMPORT_SQL_FILE)

    def database_url(self) -> str:
        """
        SQLAlchemy 비동기 엔진용 접속 URL 문자열을 반환합니다.
        """
        if self.DATABASE_URL is not None:
            url = self.DATABASE_URL.get_secret_value().strip()
            for scheme, async_scheme in _ASYNC_SCHEMES.items():
                if url.startswith(scheme):
                    return async_scheme + url[len(scheme):]
            return url

        url = URL.create(
            drivername=self.DB_CONNECTION,
            username=self.DB_USERNAME,
            password=self.DB_PASSWORD.get_secret_value() if self.DB_PASSWORD else None,
            host=None if self.DB_CONNECTION.startswith("sqlite") else self.DB_HOST,
            port=self.DB_PORT,
            database=self.DB_DATABASE,
        )
        return url.render_as_string(hide_password=False)


settings = Settings()
