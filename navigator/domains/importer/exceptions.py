# navigator/domains/importer/exceptions.py

"""
SQL 가져오기 실패 유형입니다. 모든 실패는 해당 실행에서 최종적이며 재시도하지 않습니다.
"""

from typing import Optional

from .schemas import ImportStatus


class ImportFailure(Exception):
    status: ImportStatus = ImportStatus.EXECUTION_ERROR

    def __init__(self, message: str, *, constraint_checks_restored: Optional[bool] = None):
        super().__init__(message)
        self.message = message
        self.constraint_checks_restored = constraint_checks_restored


class ScriptNotFoundError(ImportFailure):
    """스크립트 파일이 없습니다. DB에는 접속하지 않습니다."""
    status = ImportStatus.NOT_FOUND


class ScriptReadError(ImportFailure):
    """스크립트 파일을 읽거나 디코딩할 수 없습니다. DB에는 접속하지 않습니다."""
    status = ImportStatus.READ_ERROR


class UnsupportedDialectError(ImportFailure):
    status = ImportStatus.UNSUPPORTED_DIALECT


class DatabaseConnectionError(ImportFailure):
    status = ImportStatus.CONNECTION_ERROR


class ScriptExecutionError(ImportFailure):
    """엔진이 스크립트를 거부했거나 실행 중 실패했습니다. 메시지는 엔진 메시지 그대로입니다."""
    status = ImportStatus.EXECUTION_ERROR
