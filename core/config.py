"""
core/config.py - 중앙 설정 관리

환경 변수와 CLI 옵션으로부터 실행 설정(Settings)을 구성합니다.
설정 파일은 사용하지 않습니다.

설정 항목:
    MY_TOKEN              GitHub API Bearer 토큰 (필수, versions/report 명령)
    github_owner          package.json을 조회할 저장소 소유자
    repositories          버전을 조회할 저장소 목록 (기본: DEFAULT_REPOSITORIES)
    max_workers           Lambda 목록 변환 시 동시 실행 수 (기본: 10)

Usage:
    from core.config import load_settings

    try:
        settings = load_settings()
    except ConfigError as e:
        ...  # 진입점에서만 종료 여부 결정
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from core.exceptions import ConfigError

TOKEN_ENV_VAR = "MY_TOKEN"

DEFAULT_GITHUB_OWNER = "Mikeysauce"
DEFAULT_GITHUB_API_URL = "https://api.github.com"

# 버전을 조회할 저장소 (탐색하지 않는 고정 목록)
DEFAULT_REPOSITORIES: tuple[str, ...] = (
    "Scotski",
    "scraper",
    "standen-node",
    "now-github-starter",
    "movies-front",
)

DEFAULT_MAX_WORKERS = 10
DEFAULT_REQUEST_TIMEOUT = 10  # 초

_VERSION_FILE = Path(__file__).resolve().parent.parent / "version.txt"


def get_version() -> str:
    """version.txt에서 버전 문자열 반환"""
    try:
        return _VERSION_FILE.read_text(encoding="utf-8").strip()
    except OSError:
        return "0.0.0"


@dataclass
class Settings:
    """실행 설정

    Attributes:
        github_token: GitHub Bearer 토큰 (functions 명령에서는 None 가능)
        github_owner: 저장소 소유자
        repositories: 버전을 조회할 저장소 이름 목록
        max_workers: 동시 변환 작업 수 (1이면 순차 처리)
        github_api_url: GitHub API 베이스 URL
        request_timeout: GitHub 요청 타임아웃 (초)
        aws_profile: boto3 프로파일 (None이면 기본 자격 증명 체인)
        aws_region: AWS 리전 (None이면 세션 기본값)
    """

    github_token: str | None = None
    github_owner: str = DEFAULT_GITHUB_OWNER
    repositories: tuple[str, ...] = field(default=DEFAULT_REPOSITORIES)
    max_workers: int = DEFAULT_MAX_WORKERS
    github_api_url: str = DEFAULT_GITHUB_API_URL
    request_timeout: int = DEFAULT_REQUEST_TIMEOUT
    aws_profile: str | None = None
    aws_region: str | None = None

    def __post_init__(self) -> None:
        if self.max_workers < 1:
            raise ConfigError("max_workers", f"1 이상이어야 합니다 (입력값: {self.max_workers})")
        if not self.repositories:
            raise ConfigError("repositories", "저장소 목록이 비어 있습니다")
        self.repositories = tuple(self.repositories)


def load_settings(
    env: Mapping[str, str] | None = None,
    require_token: bool = True,
    **overrides,
) -> Settings:
    """환경 변수와 오버라이드 값으로 Settings 생성

    토큰 누락 시 프로세스를 직접 종료하지 않고 ConfigError를 발생시킵니다.
    종료 여부는 CLI 진입점에서만 결정합니다.

    Args:
        env: 환경 변수 매핑 (None이면 os.environ)
        require_token: True이면 MY_TOKEN 누락 시 ConfigError
        **overrides: Settings 필드 오버라이드 (None 값은 무시)

    Returns:
        Settings 인스턴스

    Raises:
        ConfigError: 토큰 누락 또는 잘못된 설정값
    """
    env = os.environ if env is None else env

    token = env.get(TOKEN_ENV_VAR) or None
    if require_token and not token:
        raise ConfigError(TOKEN_ENV_VAR, f"{TOKEN_ENV_VAR} environment variable not set")

    values = {k: v for k, v in overrides.items() if v is not None}
    return Settings(github_token=token, **values)
