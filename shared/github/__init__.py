"""
shared/github - GitHub 저장소 메타데이터 조회

Contents API 클라이언트와 package.json 버전 수집 로직
"""

from .client import ContentItem, GitHubClient
from .versions import extract_version, fetch_package_versions, get_package_json

__all__: list[str] = [
    "ContentItem",
    "GitHubClient",
    "extract_version",
    "fetch_package_versions",
    "get_package_json",
]
