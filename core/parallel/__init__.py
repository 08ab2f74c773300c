"""
core/parallel - 병렬 처리 모듈

페이지 단위로 조회한 AWS 리소스를 동시 실행 수를 제한하며 처리합니다.

주요 구성 요소:
- BoundedExecutor: 최대 N개 작업만 동시에 실행하는 실행기
- bounded_map: 간편한 병렬 변환 함수
- ErrorCollector: 항목 단위 에러 수집기
- get_client / get_session: boto3 client/session 생성 헬퍼

Example:
    from core.parallel import bounded_map

    for record in bounded_map(convert, descriptors, max_workers=10):
        records.append(record)
"""

from .client import get_client, get_session
from .errors import CollectedError, ErrorCollector, ErrorSeverity
from .executor import BoundedExecutor, ParallelConfig, bounded_map

__all__: list[str] = [
    # Executor
    "BoundedExecutor",
    "ParallelConfig",
    "bounded_map",
    # Client
    "get_client",
    "get_session",
    # Error handling
    "ErrorCollector",
    "ErrorSeverity",
    "CollectedError",
]
