# navigator/domains/importer/services.py

"""
레거시 SQL 스크립트 가져오기 서비스 모듈입니다.

CLI(scripts/import_database.py)와 HTTP(routers.py) 어댑터가 같은 함수를 사용합니다.

1. 파일 존재 확인 (없으면 DB에 접속하지 않고 실패)
2. 파일 전체를 문자열로 읽기
3. 풀링하지 않는 새 연결 획득
4. 외래 키 검사 끄기
5. 스크립트 전체를 하나의 배치로 실행
6. 외래 키 검사 다시 켜기 (5의 성공/실패와 무관하게 항상)
7. 결과 보고

기본 설정에서는 트랜잭션으로 감싸지 않으므로, 실패한 문장 앞의 문장들은 이미 반영된 상태로 남습니다.
INSERT만 있는 스크립트를 다시 실행하면 중복되거나 유일 제약 위반으로 실패합니다.
"""

import logging
import time
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, AsyncGenerator, Callable, List, Optional

from sqlalchemy.exc import ArgumentError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from navigator.core.config import Settings
from navigator.core.database import create_import_engine

from .backends import ImportBackend, get_backend
from .exceptions import (
    ImportFailure,
    ScriptNotFoundError,
    ScriptReadError,
    DatabaseConnectionError,
    ScriptExecutionError,
)
from .schemas import ImportOutcome, ImportReport, ImportStatus

logger = logging.getLogger(__name__)

StepCallback = Callable[[str], None]


def _step(on_step: Optional[StepCallback], message: str) -> None:
    logger.info(message)
    if on_step is not None:
        on_step(message)


@asynccontextmanager
async def constraint_checks_disabled(
    backend: ImportBackend, driver_conn: Any, on_step: Optional[StepCallback] = None
) -> AsyncGenerator[None, None]:
    """
    외래 키 검사를 끈 상태를 획득하고, 블록을 벗어날 때 (예외 포함) 반드시 다시 켭니다.
    끄는 단계에서 실패하면 켜는 단계도 실행하지 않습니다.
    블록이 이미 실패한 경우 다시 켜는 단계의 오류는 기록만 하고 원래 오류를 그대로 올립니다.
    """
    _step(on_step, "Disabling foreign key checks...")
    await backend.disable_checks(driver_conn)
    try:
        yield
    except BaseException:
        _step(on_step, "Re-enabling foreign key checks...")
        try:
            await backend.enable_checks(driver_conn)
        except backend.driver_errors() as e:
            logger.error("외래 키 검사를 다시 켜지 못했습니다: %s", e)
        raise
    else:
        _step(on_step, "Re-enabling foreign key checks...")
        await backend.enable_checks(driver_conn)


async def _probe_checks(backend: ImportBackend, driver_conn: Any) -> bool:
    try:
        restored = await backend.checks_enabled(driver_conn)
    except backend.driver_errors() as e:
        logger.warning("외래 키 검사 상태를 확인하지 못했습니다: %s", e)
        return False
    if not restored:
        logger.warning("외래 키 검사가 다시 켜지지 않았습니다. (backend=%s)", backend.name)
    return restored


def read_script(path: Path, encoding: str = "utf-8") -> str:
    """
    스크립트 파일 전체를 읽습니다.
    파일이 없으면 ScriptNotFoundError, 읽거나 디코딩할 수 없으면 ScriptReadError.
    """
    if not path.is_file():
        raise ScriptNotFoundError(f"SQL file not found at: {path}")
    try:
        return path.read_text(encoding=encoding)
    except (OSError, UnicodeError, LookupError) as e:
        logger.error("SQL 파일 읽기 오류 (%s): %s", path, e)
        raise ScriptReadError(f"Could not read SQL file at {path}: {e}") from e


async def import_script(
    config: Settings,
    *,
    script_path: Optional[Path] = None,
    engine: Optional[AsyncEngine] = None,
    backend: Optional[ImportBackend] = None,
    on_step: Optional[StepCallback] = None,
) -> ImportReport:
    """
    SQL 스크립트를 대상 DB에 하나의 배치로 실행합니다.

    Args:
        config: 시작 시 로드한 설정. 접속 정보와 가져오기 옵션을 담습니다.
        script_path: 실행할 파일. 없으면 `config.IMPORT_SQL_FILE`.
        engine: 사용할 엔진. 없으면 NullPool 엔진을 만들고 끝나면 정리합니다.
        backend: 엔진별 백엔드. 없으면 엔진의 방언 이름으로 찾습니다.
        on_step: 진행 단계 메시지를 받을 콜백.

    Returns:
        ImportReport: 성공 보고.

    Raises:
        ScriptNotFoundError: 파일이 없음. DB에 접속하지 않습니다.
        ScriptReadError: 파일을 읽거나 디코딩할 수 없음. DB에 접속하지 않습니다.
        UnsupportedDialectError: 지원하지 않는 DB 엔진.
        DatabaseConnectionError: 엔진을 만들 수 없거나 DB에 접속할 수 없음.
        ScriptExecutionError: 엔진이 스크립트를 거부했거나 실행 중 실패함.
    """
    path = Path(script_path) if script_path is not None else config.import_sql_path
    transactional = config.IMPORT_USE_TRANSACTION
    started = time.perf_counter()

    _step(on_step, "Reading SQL file...")
    script = read_script(path, config.IMPORT_FILE_ENCODING)
    script_bytes = len(script.encode(config.IMPORT_FILE_ENCODING))
    logger.info("SQL 파일 %s (%d bytes) 읽기 완료.", path, script_bytes)

    owns_engine = engine is None
    if owns_engine:
        try:
            engine = create_import_engine(config)
        except (ArgumentError, ImportError) as e:
            # 잘못된 URL 또는 설치되지 않은 드라이버
            logger.error("가져오기 엔진 생성 오류: %s", e)
            raise DatabaseConnectionError(f"Could not create database engine: {e}") from e

    try:
        if backend is None:
            backend = get_backend(engine.dialect.name)

        _step(on_step, "Connecting to database...")
        try:
            conn = await engine.connect()
        except (SQLAlchemyError, OSError) as e:
            logger.error("데이터베이스 연결 오류: %s", e)
            raise DatabaseConnectionError(str(getattr(e, "orig", None) or e)) from e

        try:
            raw_conn = await conn.get_raw_connection()
            driver_conn = raw_conn.driver_connection

            failure: Optional[BaseException] = None
            try:
                async with constraint_checks_disabled(backend, driver_conn, on_step):
                    _step(on_step, "Executing SQL statements...")
                    await backend.run_batch(driver_conn, script, transactional=transactional)
            except backend.driver_errors() as e:
                failure = e

            restored = await _probe_checks(backend, driver_conn)
            if failure is not None:
                logger.error("SQL 스크립트 실행 실패: %s", failure)
                raise ScriptExecutionError(
                    str(failure), constraint_checks_restored=restored
                ) from failure
        finally:
            await conn.close()
    finally:
        if owns_engine:
            await engine.dispose()

    report = ImportReport(
        script_path=str(path),
        backend=backend.name,
        script_bytes=script_bytes,
        transactional=transactional,
        constraint_checks_restored=restored,
        elapsed_seconds=round(time.perf_counter() - started, 3),
    )
    logger.info("SQL 가져오기 완료: %s", report.model_dump())
    return report


async def run_import(
    config: Settings,
    *,
    script_path: Optional[Path] = None,
    engine: Optional[AsyncEngine] = None,
    backend: Optional[ImportBackend] = None,
    on_step: Optional[StepCallback] = None,
) -> ImportOutcome:
    """
    import_script를 실행하고, 실패를 예외 대신 ImportOutcome 상태 값으로 돌려줍니다.
    CLI/HTTP 어댑터는 이 함수만 사용합니다.
    """
    path = Path(script_path) if script_path is not None else config.import_sql_path
    steps: List[str] = []

    def _collect(message: str) -> None:
        steps.append(message)
        if on_step is not None:
            on_step(message)

    _collect("Starting database import...")
    try:
        report = await import_script(
            config, script_path=path, engine=engine, backend=backend, on_step=_collect
        )
    except ImportFailure as e:
        return ImportOutcome(
            status=e.status,
            message=e.message,
            script_path=str(path),
            steps=steps,
            constraint_checks_restored=e.constraint_checks_restored,
        )

    return ImportOutcome(
        status=ImportStatus.SUCCESS,
        message="Database imported successfully!",
        script_path=str(path),
        steps=steps,
        report=report,
        constraint_checks_restored=report.constraint_checks_restored,
    )
