# core/__init__.py
"""
core - lambda-version-report 인프라

CLI와 수집 모듈이 공유하는 최상위 패키지입니다.

아키텍처:
    core/
    ├── parallel/       # 병렬 처리 (bounded executor, 에러 수집, boto3 client)
    ├── config.py       # 중앙 설정 관리
    └── exceptions.py   # 통합 예외 계층

Usage:
    from core.config import load_settings
    settings = load_settings()

    from core.exceptions import APICallError, format_error_for_user
"""

from core import config, exceptions, parallel

__all__: list[str] = [
    "config",
    "exceptions",
    "parallel",
]
