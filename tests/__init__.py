# tests/__init__.py

"""
Campus Navigator 애플리케이션의 테스트 스위트 패키지입니다.

- `conftest.py`: 임시 SQLite 파일 DB, 가져오기 설정, HTTP 클라이언트 픽스처.
- `domains/`: 도메인(directory, importer)별 테스트 모듈.
- `test_scripts.py`: scripts/ 아래 Typer CLI 테스트.
"""

__title__ = "Campus Navigator API Tests"
__version__ = "0.1.0"
__all__ = []
