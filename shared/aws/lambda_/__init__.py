"""
shared/aws/lambda_ - Lambda 공통 모듈

배포된 Lambda 함수 목록과 환경 변수를 수집합니다.
"""

from .collector import (
    LambdaFunctionRecord,
    has_environment,
    iter_function_descriptors,
    list_deployed_functions,
    to_record,
)

__all__: list[str] = [
    "LambdaFunctionRecord",
    "has_environment",
    "iter_function_descriptors",
    "list_deployed_functions",
    "to_record",
]
