"""
shared/aws/lambda_/collector.py - 배포된 Lambda 함수 수집

list_functions 페이지네이터로 모든 페이지를 조회하고, 환경 변수가 설정된
함수만 LambdaFunctionRecord로 변환합니다.

처리 방식:
- max_workers <= 1: 페이지 순서대로 순차 변환
- max_workers > 1: 페이지는 호출 스레드에서 순차 조회(다음 페이지 marker가 이전 응답에 의존),
  함수별 변환은 BoundedExecutor로 최대 max_workers개 동시 실행 (결과 순서 보장 없음)

어느 페이지에서든 API 에러가 발생하면 전체 수집을 중단하고 APICallError를 발생시킵니다.
부분 결과는 반환하지 않습니다.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from core.exceptions import APICallError
from core.parallel import bounded_map
from core.config import DEFAULT_MAX_WORKERS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LambdaFunctionRecord:
    """Lambda 함수 요약 정보 (환경 변수가 설정된 함수만 생성)"""

    function_name: str
    function_arn: str
    environment_variables: dict[str, str] = field(default_factory=dict)

    @property
    def variable_count(self) -> int:
        return len(self.environment_variables)


def has_environment(descriptor: Mapping[str, Any]) -> bool:
    """환경 변수가 하나 이상 설정된 함수인지 판단

    list_functions 응답의 함수 항목 중 Environment.Variables가 비어 있지 않은
    경우에만 True입니다. False인 함수는 에러 없이 결과에서 제외됩니다.

    Args:
        descriptor: list_functions 응답의 함수 항목

    Returns:
        환경 변수가 하나 이상이면 True
    """
    environment = descriptor.get("Environment") or {}
    return bool(environment.get("Variables"))


def to_record(descriptor: Mapping[str, Any]) -> LambdaFunctionRecord:
    """함수 항목을 LambdaFunctionRecord로 변환

    환경 변수 매핑은 응답 객체를 참조하지 않도록 복사합니다.
    """
    variables = (descriptor.get("Environment") or {}).get("Variables") or {}
    return LambdaFunctionRecord(
        function_name=descriptor.get("FunctionName", ""),
        function_arn=descriptor.get("FunctionArn", ""),
        environment_variables=dict(variables),
    )


def iter_function_descriptors(pages: Iterable[Mapping[str, Any]]) -> Iterator[Mapping[str, Any]]:
    """페이지를 하나씩 소비하며 환경 변수가 있는 함수 항목만 반환"""
    for page_number, page in enumerate(pages, start=1):
        functions = page.get("Functions", [])
        logger.debug(f"list_functions 페이지 {page_number}: {len(functions)}개 함수")
        for descriptor in functions:
            if has_environment(descriptor):
                yield descriptor


def list_deployed_functions(
    client,
    max_workers: int = DEFAULT_MAX_WORKERS,
) -> list[LambdaFunctionRecord]:
    """배포된 Lambda 함수 목록 수집

    Args:
        client: boto3 Lambda client
        max_workers: 동시 변환 작업 수 (1이면 순차 처리)

    Returns:
        환경 변수가 설정된 함수의 LambdaFunctionRecord 리스트
        (max_workers > 1이면 순서 보장 없음)

    Raises:
        APICallError: 어느 페이지에서든 list_functions 호출이 실패한 경우
    """
    records: list[LambdaFunctionRecord] = []

    try:
        paginator = client.get_paginator("list_functions")
        descriptors = iter_function_descriptors(paginator.paginate())

        if max_workers <= 1:
            records.extend(to_record(descriptor) for descriptor in descriptors)
        else:
            for record in bounded_map(to_record, descriptors, max_workers=max_workers):
                records.append(record)

    except (ClientError, BotoCoreError) as e:
        error = APICallError.from_client_error("lambda", "list_functions", e)
        logger.debug(f"Lambda 목록 조회 실패: {error.error_code}")
        raise error from e

    logger.info(f"환경 변수가 설정된 Lambda 함수 {len(records)}개 수집")
    return records
