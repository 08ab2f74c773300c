"""AWS 관련 공유 유틸리티.

하위 모듈:
- lambda_: 배포된 Lambda 함수와 환경 변수 수집
"""

from . import lambda_

__all__ = ["lambda_"]
