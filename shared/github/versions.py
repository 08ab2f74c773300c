"""
shared/github/versions.py - 저장소별 package.json 버전 수집

각 저장소 기본 브랜치의 package.json을 순차 조회하여 version 필드를 모읍니다.

에러 정책:
- 조회/디코딩/파싱 실패는 저장소 단위로 ErrorCollector에 기록(WARNING)하고 다음 저장소로 진행
- version 필드가 없는 저장소도 결과에서 제외하고 WARNING으로 기록
- fetch_package_versions 자체는 저장소별 실패로 예외를 발생시키지 않음
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from typing import Any

from core.exceptions import ContentDecodeError, ContentError, ContentNotFoundError, PackageJsonParseError
from core.parallel import ErrorCollector, ErrorSeverity

from .client import GitHubClient

logger = logging.getLogger(__name__)

PACKAGE_JSON_PATH = "package.json"
VERSION_FIELD = "version"


def get_package_json(client: GitHubClient, owner: str, repo: str) -> dict[str, Any]:
    """저장소 기본 브랜치의 package.json을 조회하여 파싱

    Args:
        client: GitHubClient
        owner: 저장소 소유자
        repo: 저장소 이름

    Returns:
        package.json 객체

    Raises:
        ContentFetchError: 요청 실패
        ContentNotFoundError: 응답에 콘텐츠 항목이 없음
        ContentDecodeError: 첫 번째 항목을 텍스트로 디코딩할 수 없음
        PackageJsonParseError: JSON 파싱 실패 또는 객체가 아님
    """
    items = client.get_content(owner, repo, PACKAGE_JSON_PATH)
    if not items:
        raise ContentNotFoundError(repo, "package.json 콘텐츠를 찾을 수 없습니다")

    text = items[0].decoded_content()
    if text is None:
        raise ContentDecodeError(repo, "package.json 콘텐츠를 디코딩할 수 없습니다")

    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise PackageJsonParseError(repo, "package.json 파싱 실패", cause=e) from e

    if not isinstance(document, dict):
        raise PackageJsonParseError(repo, f"package.json이 객체가 아닙니다 ({type(document).__name__})")

    return document


def extract_version(document: dict[str, Any]) -> tuple[bool, Any]:
    """package.json 객체에서 version 필드 추출

    필드가 없으면 (False, None)을 반환하며, 호출자는 해당 저장소를 결과에서 제외합니다.
    """
    if VERSION_FIELD not in document:
        return False, None
    return True, document[VERSION_FIELD]


def fetch_package_versions(
    client: GitHubClient,
    repositories: Iterable[str],
    owner: str,
    collector: ErrorCollector | None = None,
) -> dict[str, Any]:
    """저장소별 package.json version 수집

    Args:
        client: GitHubClient
        repositories: 조회할 저장소 이름 목록
        owner: 저장소 소유자
        collector: ErrorCollector (None이면 내부에서 생성, 로깅은 동일)

    Returns:
        {저장소 이름: version 값} 딕셔너리
    """
    collector = collector if collector is not None else ErrorCollector("github")
    versions: dict[str, Any] = {}

    for repo in repositories:
        try:
            document = get_package_json(client, owner, repo)
        except ContentError as e:
            collector.collect(e, repo, "get_package_json")
            continue

        found, version = extract_version(document)
        if not found:
            collector.collect_generic(
                "MissingVersion",
                "package.json에 version 필드가 없습니다",
                repo,
                "get_package_json",
                severity=ErrorSeverity.WARNING,
            )
            continue

        versions[repo] = version
        logger.debug(f"[{repo}] package.json version: {version}")

    return versions
