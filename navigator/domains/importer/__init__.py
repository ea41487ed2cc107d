# navigator/domains/importer/__init__.py

"""
레거시 SQL 덤프 가져오기 도메인 패키지입니다.

신뢰할 수 있는 SQL 스크립트를 대상 DB에 한 번, 안전하게 적용합니다.
외래 키 검사를 끈 상태에서 스크립트 전체를 하나의 배치로 실행하고,
성공/실패와 관계없이 검사를 다시 켭니다.

주요 서브모듈:
- `backends.py`: DB 엔진별 외래 키 토글과 다중 문장 배치 실행.
- `services.py`: 가져오기 본체 (`import_script`, `run_import`).
- `exceptions.py`: 실패 유형.
- `schemas.py`: 결과 보고 모델.
- `pages.py`, `routers.py`: HTTP 어댑터 (HTML 상태 페이지).

CLI 어댑터는 `scripts/import_database.py`에 있습니다.
"""

__title__ = "Campus Navigator Importer Domain"
__version__ = "0.1.0"
__all__ = []
