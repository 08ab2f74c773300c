"""
core/parallel/client.py - boto3 session/client 생성 헬퍼

타임아웃과 연결 풀이 설정된 boto3 client를 생성합니다.
애플리케이션 수준 재시도가 없으므로 기본값은 SDK 재시도도 끈 상태(max_attempts=1)입니다.

주요 구성 요소:
- get_session: 프로파일/리전으로 boto3 Session 생성
- get_client: 설정이 적용된 boto3 client 생성

Example:
    from core.parallel.client import get_client, get_session

    session = get_session(profile_name="dev", region_name="ap-northeast-2")
    lambda_client = get_client(session, "lambda")
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Literal, cast

if TYPE_CHECKING:
    import boto3

# Retry mode 타입 (botocore TypedDict와 호환)
RetryMode = Literal["legacy", "standard", "adaptive"]

DEFAULT_MAX_ATTEMPTS = 1  # 재시도 없음
DEFAULT_RETRY_MODE: RetryMode = "standard"
DEFAULT_CONNECT_TIMEOUT = 10  # 초
DEFAULT_READ_TIMEOUT = 30  # 초
DEFAULT_MAX_POOL_CONNECTIONS = 10  # max_workers 이상 권장


def get_session(
    profile_name: str | None = None,
    region_name: str | None = None,
) -> boto3.Session:
    """boto3 Session 생성

    Args:
        profile_name: AWS 프로파일 (None이면 기본 자격 증명 체인)
        region_name: 리전 (None이면 환경/프로파일 기본값)

    Returns:
        boto3 Session
    """
    import boto3

    return boto3.Session(profile_name=profile_name, region_name=region_name)


def get_client(
    session: boto3.Session,
    service_name: str,
    region_name: str | None = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    retry_mode: RetryMode = DEFAULT_RETRY_MODE,
    connect_timeout: int = DEFAULT_CONNECT_TIMEOUT,
    read_timeout: int = DEFAULT_READ_TIMEOUT,
    max_pool_connections: int = DEFAULT_MAX_POOL_CONNECTIONS,
    **kwargs: Any,
) -> Any:
    """설정이 적용된 boto3 client 생성

    Args:
        session: boto3 Session
        service_name: AWS 서비스 이름 (lambda 등)
        region_name: 리전 (None이면 세션 기본값)
        max_attempts: 최대 시도 횟수 (기본: 1, 재시도 없음)
        retry_mode: 재시도 모드
        connect_timeout: 연결 타임아웃 (초)
        read_timeout: 읽기 타임아웃 (초)
        max_pool_connections: HTTP 연결 풀 크기
        **kwargs: session.client()에 전달할 추가 인자

    Returns:
        boto3 client
    """
    from botocore.config import Config

    config = Config(
        retries={"max_attempts": max_attempts, "mode": retry_mode},  # pyright: ignore[reportArgumentType]
        connect_timeout=connect_timeout,
        read_timeout=read_timeout,
        max_pool_connections=max_pool_connections,
    )

    # 기존 config가 있으면 병합
    if "config" in kwargs:
        existing = kwargs.pop("config")
        config = config.merge(existing)

    # cast to Any to bypass boto3-stubs Literal type requirements
    return session.client(  # pyright: ignore[reportCallIssue]
        cast(Any, service_name),
        region_name=region_name,
        config=config,
        **kwargs,
    )
