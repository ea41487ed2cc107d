# navigator/domains/importer/backends.py

"""
DB 엔진별 가져오기 백엔드를 정의하는 모듈입니다.

외래 키 검사 토글과 다중 문장 배치 실행은 엔진마다 방법이 다르므로,
SQLAlchemy 방언 이름(`engine.dialect.name`)으로 백엔드를 찾아 사용합니다.
모든 메서드는 SQLAlchemy 연결이 아니라 드라이버 연결(asyncpg, aiomysql, aiosqlite)을 받습니다.
SQLAlchemy 실행 경로는 문장을 prepare 하므로 여러 문장을 한 번에 보낼 수 없습니다.
"""

import re
import sqlite3
from typing import Any, Dict, Tuple, Type

import asyncpg

from .exceptions import UnsupportedDialectError


class ImportBackend:
    """
    엔진별 백엔드의 공통 인터페이스입니다.
    """
    name: str = ""
    disable_checks_sql: str = ""
    enable_checks_sql: str = ""
    probe_checks_sql: str = ""

    def connect_args(self) -> Dict[str, Any]:
        """가져오기 엔진 생성 시 드라이버에 넘길 추가 인자입니다."""
        return {}

    def driver_errors(self) -> Tuple[Type[BaseException], ...]:
        """엔진이 스크립트를 거부할 때 드라이버가 던지는 예외 유형입니다."""
        raise NotImplementedError

    async def execute(self, driver_conn: Any, sql: str) -> None:
        raise NotImplementedError

    async def fetch_scalar(self, driver_conn: Any, sql: str) -> Any:
        raise NotImplementedError

    async def run_batch(self, driver_conn: Any, script: str, *, transactional: bool = False) -> None:
        raise NotImplementedError

    async def disable_checks(self, driver_conn: Any) -> None:
        await self.execute(driver_conn, self.disable_checks_sql)

    async def enable_checks(self, driver_conn: Any) -> None:
        await self.execute(driver_conn, self.enable_checks_sql)

    async def checks_enabled(self, driver_conn: Any) -> bool:
        value = await self.fetch_scalar(driver_conn, self.probe_checks_sql)
        return int(value) == 1


# =============================================================================
# 1. MySQL / MariaDB (aiomysql)
# =============================================================================
class MySQLBackend(ImportBackend):
    name = "mysql"
    disable_checks_sql = "SET FOREIGN_KEY_CHECKS=0"
    enable_checks_sql = "SET FOREIGN_KEY_CHECKS=1"
    probe_checks_sql = "SELECT @@FOREIGN_KEY_CHECKS"

    def connect_args(self) -> Dict[str, Any]:
        # 다중 문장 실행 허용. SQLAlchemy가 기본으로 넣는 FOUND_ROWS도 유지합니다.
        from pymysql.constants import CLIENT

        return {"client_flag": CLIENT.MULTI_STATEMENTS | CLIENT.FOUND_ROWS}

    def driver_errors(self) -> Tuple[Type[BaseException], ...]:
        from pymysql.err import MySQLError

        return (MySQLError,)

    async def execute(self, driver_conn: Any, sql: str) -> None:
        async with driver_conn.cursor() as cur:
            await cur.execute(sql)

    async def fetch_scalar(self, driver_conn: Any, sql: str) -> Any:
        async with driver_conn.cursor() as cur:
            await cur.execute(sql)
            row = await cur.fetchone()
        return row[0]

    async def run_batch(self, driver_conn: Any, script: str, *, transactional: bool = False) -> None:
        if transactional:
            await driver_conn.begin()
        else:
            await driver_conn.autocommit(True)

        try:
            async with driver_conn.cursor() as cur:
                await cur.execute(script)
                # 뒤쪽 문장의 오류는 결과 집합을 넘길 때 올라옵니다.
                while await cur.nextset():
                    pass
        except self.driver_errors():
            if transactional:
                await driver_conn.rollback()
            raise

        if transactional:
            await driver_conn.commit()


# =============================================================================
# 2. PostgreSQL (asyncpg)
# =============================================================================
class PostgreSQLBackend(ImportBackend):
    """
    session_replication_role = replica 동안에는 FK 트리거가 동작하지 않습니다.
    이 설정은 superuser 권한이 필요합니다.
    """
    name = "postgresql"
    disable_checks_sql = "SET session_replication_role = 'replica'"
    enable_checks_sql = "SET session_replication_role = 'origin'"
    probe_checks_sql = "SHOW session_replication_role"

    def driver_errors(self) -> Tuple[Type[BaseException], ...]:
        return (asyncpg.PostgresError, asyncpg.InterfaceError)

    async def execute(self, driver_conn: Any, sql: str) -> None:
        await driver_conn.execute(sql)

    async def fetch_scalar(self, driver_conn: Any, sql: str) -> Any:
        return await driver_conn.fetchval(sql)

    async def run_batch(self, driver_conn: Any, script: str, *, transactional: bool = False) -> None:
        # 인자 없는 execute는 simple query 프로토콜이라 여러 문장을 그대로 보냅니다.
        if transactional:
            async with driver_conn.transaction():
                await driver_conn.execute(script)
        else:
            await driver_conn.execute(script)

    async def checks_enabled(self, driver_conn: Any) -> bool:
        value = await self.fetch_scalar(driver_conn, self.probe_checks_sql)
        return value == "origin"


# =============================================================================
# 3. SQLite (aiosqlite)
# =============================================================================
# sqlite3 .dump 출력처럼 앞쪽 주석/PRAGMA 뒤에 스스로 BEGIN 하는 스크립트
_OWN_TRANSACTION_RE = re.compile(
    r"\A\s*(?:(?:--[^\n]*\n|PRAGMA\b[^;]*;)\s*)*BEGIN\b", re.IGNORECASE
)


class SQLiteBackend(ImportBackend):
    """
    PRAGMA foreign_keys는 트랜잭션 안에서는 무시되므로 배치 바깥에서 토글합니다.
    실패한 배치가 열어 둔 트랜잭션은 롤백해서 다시 켜는 PRAGMA가 적용되게 합니다.
    """
    name = "sqlite"
    disable_checks_sql = "PRAGMA foreign_keys = OFF"
    enable_checks_sql = "PRAGMA foreign_keys = ON"
    probe_checks_sql = "PRAGMA foreign_keys"

    def driver_errors(self) -> Tuple[Type[BaseException], ...]:
        return (sqlite3.Error,)

    async def execute(self, driver_conn: Any, sql: str) -> None:
        cursor = await driver_conn.execute(sql)
        await cursor.close()

    async def fetch_scalar(self, driver_conn: Any, sql: str) -> Any:
        cursor = await driver_conn.execute(sql)
        row = await cursor.fetchone()
        await cursor.close()
        return row[0]

    def opens_own_transaction(self, script: str) -> bool:
        return _OWN_TRANSACTION_RE.match(script) is not None

    async def run_batch(self, driver_conn: Any, script: str, *, transactional: bool = False) -> None:
        # 스크립트가 직접 BEGIN 하면 BEGIN을 중첩할 수 없으므로 그 트랜잭션을 그대로 씁니다.
        if transactional and not self.opens_own_transaction(script):
            script = f"BEGIN;\n{script}\n;\nCOMMIT;"

        try:
            await driver_conn.executescript(script)
        except sqlite3.Error:
            # 이미 커밋된 문장은 남고, 커밋되지 않은 문장만 버려집니다.
            if driver_conn.in_transaction:
                await driver_conn.rollback()
            raise


BACKENDS: Dict[str, ImportBackend] = {
    "mysql": MySQLBackend(),
    "mariadb": MySQLBackend(),
    "postgresql": PostgreSQLBackend(),
    "sqlite": SQLiteBackend(),
}


def get_backend(dialect_name: str) -> ImportBackend:
    """
    SQLAlchemy 방언 이름으로 백엔드를 찾습니다. 지원하지 않으면 UnsupportedDialectError.
    """
    try:
        return BACKENDS[dialect_name]
    except KeyError:
        raise UnsupportedDialectError(
            f"Unsupported database dialect for import: {dialect_name!r}"
        ) from None
