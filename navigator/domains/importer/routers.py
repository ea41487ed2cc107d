# navigator/domains/importer/routers.py

"""
SQL 가져오기의 HTTP 어댑터입니다.

브라우저에서 한 번 실행하고 끄는 용도이므로 기본값은 비활성화(IMPORT_ENDPOINT_ENABLED=false)입니다.
응답은 HTML 상태 페이지이며, 결과 상태에 따라 HTTP 상태 코드가 달라집니다.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import HTMLResponse

from navigator.core import dependencies as deps
from navigator.core.config import Settings

from . import services as importer_services
from .pages import render_import_page
from .schemas import ImportStatus

router = APIRouter(
    tags=["Database Import (레거시 데이터 가져오기)"],
    responses={403: {"description": "Import endpoint disabled"}},
)

STATUS_CODES = {
    ImportStatus.SUCCESS: status.HTTP_200_OK,
    ImportStatus.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ImportStatus.READ_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ImportStatus.CONNECTION_ERROR: status.HTTP_503_SERVICE_UNAVAILABLE,
    ImportStatus.EXECUTION_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ImportStatus.UNSUPPORTED_DIALECT: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


@router.post("/import", response_class=HTMLResponse, summary="레거시 SQL 파일 가져오기")
async def import_database(config: Settings = Depends(deps.get_settings)):
    """
    설정된 SQL 파일(`IMPORT_SQL_FILE`)을 대상 DB에 실행하고 HTML 상태 페이지를 반환합니다.
    - 200: 성공
    - 404: SQL 파일 없음
    - 500: SQL 파일을 읽을 수 없음 (인코딩 등)
    - 503: DB 연결 실패
    - 500: 실행 실패
    """
    if not config.IMPORT_ENDPOINT_ENABLED:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Database import endpoint is disabled")

    outcome = await importer_services.run_import(config)
    return HTMLResponse(content=render_import_page(outcome), status_code=STATUS_CODES[outcome.status])
