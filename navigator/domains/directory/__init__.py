# navigator/domains/directory/__init__.py

"""
캠퍼스 시설 디렉터리 도메인 패키지입니다.

시설(Facility), 지도 마커(Marker), 시설 사진(FacilityPhoto) 레코드를 정의합니다.
레코드는 필드 저장 외의 동작이 없으며, 스키마는 레거시 데이터(navigator_export.sql)와 맞춥니다.

주요 서브모듈:
- `models.py`: 테이블에 매핑되는 SQLModel 정의.
- `schemas.py`: 생성/응답용 Pydantic 모델.
- `crud.py`: 비동기 CRUD 로직.
- `services.py`: 기본 시설 데이터 시딩.
"""

__title__ = "Campus Navigator Directory Domain"
__version__ = "0.1.0"
__all__ = []
