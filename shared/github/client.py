"""
shared/github/client.py - GitHub Contents API 클라이언트

GET /repos/{owner}/{repo}/contents/{path} 로 파일 콘텐츠를 조회합니다.
ref를 지정하지 않으면 저장소의 기본 브랜치를 사용합니다.
"""

from __future__ import annotations

import base64
import binascii
import logging
from dataclasses import dataclass
from typing import Any

import requests

from core.config import DEFAULT_GITHUB_API_URL, DEFAULT_REQUEST_TIMEOUT
from core.exceptions import ContentFetchError

logger = logging.getLogger(__name__)

GITHUB_API_VERSION = "2022-11-28"


@dataclass
class ContentItem:
    """Contents API 응답 항목 (파일 메타데이터 + 인코딩된 내용)"""

    name: str
    path: str
    type: str = "file"
    sha: str = ""
    size: int = 0
    encoding: str | None = None
    content: str | None = None
    download_url: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ContentItem:
        return cls(
            name=data.get("name", ""),
            path=data.get("path", ""),
            type=data.get("type", "file"),
            sha=data.get("sha", ""),
            size=data.get("size", 0) or 0,
            encoding=data.get("encoding"),
            content=data.get("content"),
            download_url=data.get("download_url"),
        )

    def decoded_content(self) -> str | None:
        """전송 인코딩을 풀어 텍스트로 반환

        base64 본문은 76자마다 줄바꿈이 들어 있으므로 공백을 제거한 뒤 디코딩합니다.

        Returns:
            디코딩된 텍스트. 내용이 없거나(빈 본문 포함) 디코딩할 수 없으면 None
        """
        if self.content is None:
            return None

        if self.encoding in (None, "", "utf-8"):
            return self.content or None

        if self.encoding != "base64":
            return None

        try:
            raw = base64.b64decode("".join(self.content.split()), validate=True)
            text = raw.decode("utf-8")
        except (binascii.Error, UnicodeDecodeError):
            return None
        return text or None


class GitHubClient:
    """GitHub REST API 클라이언트 (Bearer 토큰 인증)

    Example:
        client = GitHubClient(token)
        items = client.get_content("Mikeysauce", "scraper", "package.json")
    """

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_GITHUB_API_URL,
        timeout: int = DEFAULT_REQUEST_TIMEOUT,
        session: requests.Session | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "Authorization": f"Bearer {token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": GITHUB_API_VERSION,
            }
        )

    def get_content(
        self,
        owner: str,
        repo: str,
        path: str,
        ref: str | None = None,
    ) -> list[ContentItem]:
        """파일(또는 디렉토리) 콘텐츠 조회

        Args:
            owner: 저장소 소유자
            repo: 저장소 이름
            path: 저장소 내 경로
            ref: 브랜치/태그/커밋 (None이면 기본 브랜치)

        Returns:
            ContentItem 리스트 (파일이면 1개, 디렉토리면 항목 수만큼)

        Raises:
            ContentFetchError: 네트워크 실패, HTTP 에러, JSON이 아니거나 객체(목록)가 아닌 응답
        """
        url = f"{self.base_url}/repos/{owner}/{repo}/contents/{path.lstrip('/')}"
        params = {"ref": ref} if ref else None

        logger.debug(f"GET {url}")
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise ContentFetchError(repo, f"{path} 요청 실패", cause=e) from e

        if response.status_code != 200:
            raise ContentFetchError(
                repo,
                f"{path} 요청 실패 (HTTP {response.status_code})",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise ContentFetchError(repo, f"{path} 응답이 JSON이 아닙니다", cause=e) from e

        items = data if isinstance(data, list) else [data]
        if not all(isinstance(item, dict) for item in items):
            raise ContentFetchError(
                repo,
                f"{path} 응답 형식이 올바르지 않습니다 ({type(data).__name__})",
                status_code=response.status_code,
            )
        return [ContentItem.from_dict(item) for item in items]
