# tests/domains/__init__.py

"""
도메인별 테스트 모듈 패키지입니다.

- `test_directory.py`: 시설 디렉터리 모델, CRUD, 시더.
- `test_importer.py`, `test_backends.py`, `test_importer_routes.py`: 레거시 SQL 가져오기.
"""

__all__ = []
