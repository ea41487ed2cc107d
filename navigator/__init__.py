# navigator/__init__.py

"""
Campus Navigator 백엔드의 메인 패키지입니다.

이 패키지는 캠퍼스 시설 안내(디렉터리) 데이터 모델과
레거시 SQL 덤프(navigator_export.sql)를 운영 DB로 옮기는 1회성 가져오기 도구를 포함합니다.

- `core`: 설정, 데이터베이스 연결, 공통 CRUD 및 의존성.
- `domains.directory`: 시설(Facility), 지도 마커(Marker), 시설 사진(FacilityPhoto) 모델.
- `domains.importer`: SQL 스크립트 일괄 가져오기 서비스와 HTTP 어댑터.
"""

APP_NAME = "Campus Navigator API"
APP_VERSION = "0.1.0"
API_PREFIX = "/api/v1"  # API 라우트의 공통 접두사 (main.py에서 적용)

__version__ = APP_VERSION
__title__ = APP_NAME
__description__ = "Campus facility directory backend with a one-shot legacy SQL importer."
__all__ = []
