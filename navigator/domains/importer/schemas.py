# navigator/domains/importer/schemas.py

"""
SQL 가져오기 결과를 표현하는 Pydantic 스키마 모듈입니다.
"""

from enum import Enum
from typing import Optional, List

from pydantic import BaseModel, Field


class ImportStatus(str, Enum):
    SUCCESS = "success"
    NOT_FOUND = "not_found"
    CONNECTION_ERROR = "connection_error"
    EXECUTION_ERROR = "execution_error"
    UNSUPPORTED_DIALECT = "unsupported_dialect"
    READ_ERROR = "read_error"


class ImportReport(BaseModel):
    """
    성공한 가져오기 한 번에 대한 보고입니다.
    """
    script_path: str = Field(..., description="실행한 SQL 파일 경로")
    backend: str = Field(..., description="대상 DB 백엔드 이름 (mysql, postgresql, sqlite)")
    script_bytes: int = Field(..., description="읽어 들인 스크립트 크기 (bytes)")
    transactional: bool = Field(False, description="트랜잭션으로 감싸 실행했는지 여부")
    constraint_checks_restored: bool = Field(..., description="종료 시 외래 키 검사가 다시 켜졌는지 여부")
    elapsed_seconds: float = Field(..., description="소요 시간 (초)")


class ImportOutcome(BaseModel):
    """
    CLI/HTTP 어댑터가 공통으로 받는 결과입니다. 예외 대신 상태 값으로 실패를 표현합니다.
    """
    status: ImportStatus
    message: str
    script_path: str
    steps: List[str] = Field(default_factory=list, description="진행 단계 메시지")
    report: Optional[ImportReport] = None
    constraint_checks_restored: Optional[bool] = Field(
        None, description="DB에 연결한 경우에만 값이 있습니다."
    )

    @property
    def ok(self) -> bool:
        return self.status == ImportStatus.SUCCESS
