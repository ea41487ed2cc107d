# navigator/core/__init__.py

"""
애플리케이션 전반에서 사용하는 핵심 구성 요소 패키지입니다.

- `config.py`: 환경 변수 및 .env 기반 설정 (Pydantic Settings).
- `database.py`: 비동기 엔진, 세션, 가져오기 전용 일회성 엔진.
- `crud_base.py`: 공통 비동기 CRUD 기본 클래스.
- `dependencies.py`: FastAPI 의존성 주입 함수.
"""

__title__ = "Campus Navigator Core"
__version__ = "0.1.0"
__all__ = []
