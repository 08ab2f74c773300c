"""
tests/conftest.py - pytest 공통 픽스처

AWS/GitHub API 모킹과 테스트 헬퍼를 제공합니다.

Usage:
    def test_something(lambda_client, make_function):
        # lambda_client: Stubber를 붙일 수 있는 실제 boto3 Lambda client
        # make_function: list_functions 응답 항목 생성 헬퍼
        pass
"""

import base64
import json
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional
from unittest.mock import MagicMock

import pytest

# 프로젝트 루트를 sys.path에 추가
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


# =============================================================================
# 환경 설정
# =============================================================================


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """테스트 환경 설정 (실제 자격 증명 사용 방지)"""
    monkeypatch.setenv("AWS_DEFAULT_REGION", "ap-northeast-2")
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.delenv("AWS_PROFILE", raising=False)

    yield


# =============================================================================
# AWS 픽스처
# =============================================================================


@pytest.fixture
def lambda_client():
    """Stubber용 실제 boto3 Lambda client"""
    import boto3

    return boto3.client("lambda", region_name="ap-northeast-2")


@pytest.fixture
def make_function():
    """list_functions 응답의 함수 항목 생성 헬퍼"""

    def _make(name: str, variables: Optional[Dict[str, str]] = None, **extra: Any) -> Dict[str, Any]:
        descriptor: Dict[str, Any] = {
            "FunctionName": name,
            "FunctionArn": f"arn:aws:lambda:ap-northeast-2:123456789012:function:{name}",
            "Runtime": "nodejs20.x",
        }
        if variables is not None:
            descriptor["Environment"] = {"Variables": variables}
        descriptor.update(extra)
        return descriptor

    return _make


def create_mock_client_error(
    error_code: str,
    error_message: str = "Test error",
    operation: str = "ListFunctions",
) -> Exception:
    """ClientError 생성 헬퍼"""
    from botocore.exceptions import ClientError

    return ClientError(
        {
            "Error": {
                "Code": error_code,
                "Message": error_message,
            }
        },
        operation,
    )


# =============================================================================
# GitHub 픽스처
# =============================================================================


def encode_content(text: str, line_length: int = 60) -> str:
    """GitHub Contents API처럼 base64 + 줄바꿈으로 인코딩"""
    encoded = base64.b64encode(text.encode("utf-8")).decode("ascii")
    return "\n".join(encoded[i : i + line_length] for i in range(0, len(encoded), line_length)) + "\n"


def package_json_item(document: Any, name: str = "package.json") -> Dict[str, Any]:
    """package.json Contents API 응답 항목 생성"""
    text = document if isinstance(document, str) else json.dumps(document, indent=2)
    return {
        "type": "file",
        "encoding": "base64",
        "size": len(text),
        "name": name,
        "path": name,
        "sha": "3d21ec53a331a6f037a91c368710b99387d012c1",
        "content": encode_content(text),
        "download_url": f"https://raw.githubusercontent.com/Mikeysauce/repo/main/{name}",
    }


@pytest.fixture
def mock_http_session():
    """requests.Session 모킹 (headers는 실제 dict)"""
    session = MagicMock()
    session.headers = {}
    return session


def make_http_response(status_code: int = 200, payload: Any = None) -> MagicMock:
    """requests.Response 모킹"""
    response = MagicMock()
    response.status_code = status_code
    if isinstance(payload, Exception):
        response.json.side_effect = payload
    else:
        response.json.return_value = payload
    return response


@pytest.fixture
def clean_env(monkeypatch):
    """MY_TOKEN이 없는 환경"""
    monkeypatch.delenv("MY_TOKEN", raising=False)
    return os.environ


# =============================================================================
# 헬퍼 픽스처 (테스트 모듈에서 conftest import 없이 사용)
# =============================================================================


@pytest.fixture
def client_error():
    """create_mock_client_error 헬퍼"""
    return create_mock_client_error


@pytest.fixture
def content_item():
    """package_json_item 헬퍼"""
    return package_json_item


@pytest.fixture
def http_response():
    """make_http_response 헬퍼"""
    return make_http_response
