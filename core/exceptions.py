"""
core/exceptions.py - 통합 예외 계층 구조

애플리케이션 전체에서 사용되는 예외 클래스들을 정의합니다.
일관된 예외 처리와 에러 메시지를 제공합니다.

예외 계층 구조:
    LVRError (베이스)
    ├── ConfigError (설정 관련, MY_TOKEN 누락 등)
    ├── APICallError (AWS API 호출 실패)
    └── ContentError (GitHub 저장소별 package.json 조회 실패)
        ├── ContentFetchError
        ├── ContentNotFoundError
        ├── ContentDecodeError
        └── PackageJsonParseError

치명적 에러(ConfigError, APICallError)는 CLI 진입점까지 전파되어 실행을 중단하고,
ContentError는 저장소 단위로 수집(ErrorCollector)된 뒤 건너뜁니다.

Usage:
    from core.exceptions import APICallError

    try:
        pages = paginator.paginate()
    except ClientError as e:
        raise APICallError.from_client_error("lambda", "list_functions", e) from e
"""

from typing import Any, Dict, Optional

# =============================================================================
# 베이스 예외
# =============================================================================


class LVRError(Exception):
    """lambda-version-report 기본 예외 클래스

    모든 커스텀 예외의 베이스 클래스입니다.

    Attributes:
        message: 에러 메시지
        cause: 원인 예외 (체이닝용)
        details: 추가 상세 정보
    """

    def __init__(
        self,
        message: str,
        cause: Optional[Exception] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.details = details or {}

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """예외 정보를 딕셔너리로 반환"""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "cause": str(self.cause) if self.cause else None,
            "details": self.details,
        }


# =============================================================================
# 설정 관련 예외
# =============================================================================


class ConfigError(LVRError):
    """설정 관련 예외"""

    def __init__(
        self,
        key: str,
        message: str,
        cause: Optional[Exception] = None,
    ):
        full_message = f"설정 오류 [{key}]: {message}"
        super().__init__(full_message, cause)
        self.config_key = key
        self.details["config_key"] = key


# =============================================================================
# AWS API 호출 예외
# =============================================================================


class APICallError(LVRError):
    """AWS API 호출 관련 예외

    boto3/botocore의 ClientError를 래핑하여 일관된 예외 처리를 제공합니다.
    """

    def __init__(
        self,
        service: str,
        operation: str,
        error_code: Optional[str] = None,
        error_message: Optional[str] = None,
        cause: Optional[Exception] = None,
    ):
        message = f"{service}.{operation}"
        if error_code:
            message = f"{message} 실패 ({error_code})"
        if error_message:
            message = f"{message}: {error_message}"

        super().__init__(message, cause)
        self.service = service
        self.operation = operation
        self.error_code = error_code
        self.error_message = error_message
        self.details.update(
            {
                "service": service,
                "operation": operation,
                "error_code": error_code,
            }
        )

    @classmethod
    def from_client_error(
        cls,
        service: str,
        operation: str,
        client_error: Exception,
    ) -> "APICallError":
        """botocore 예외로부터 생성

        ClientError는 응답의 에러 코드/메시지를 사용하고,
        BotoCoreError(네트워크, 자격 증명 등)는 예외 클래스 이름을 코드로 사용합니다.

        Args:
            service: AWS 서비스 이름
            operation: API 작업 이름
            client_error: ClientError 또는 BotoCoreError 예외

        Returns:
            APICallError 인스턴스
        """
        error_code = None
        error_message = None

        # ClientError 형식 파싱
        if hasattr(client_error, "response"):
            error_info = client_error.response.get("Error", {})
            error_code = error_info.get("Code")
            error_message = error_info.get("Message")
        else:
            error_code = type(client_error).__name__
            error_message = str(client_error)

        return cls(
            service=service,
            operation=operation,
            error_code=error_code,
            error_message=error_message,
        )


# =============================================================================
# GitHub 콘텐츠 관련 예외
# =============================================================================


class ContentError(LVRError):
    """저장소 단위 package.json 조회 실패

    Version Fetcher가 저장소별로 흡수하는 에러의 베이스입니다.
    """

    error_code = "ContentError"

    def __init__(
        self,
        repository: str,
        message: str,
        cause: Optional[Exception] = None,
    ):
        full_message = f"[{repository}] {message}"
        super().__init__(full_message, cause)
        self.repository = repository
        self.details["repository"] = repository


class ContentFetchError(ContentError):
    """콘텐츠 요청 실패 (네트워크, HTTP 에러)"""

    error_code = "ContentFetchFailed"

    def __init__(
        self,
        repository: str,
        message: str,
        status_code: Optional[int] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(repository, message, cause)
        self.status_code = status_code
        if status_code is not None:
            self.details["status_code"] = status_code


class ContentNotFoundError(ContentError):
    """응답에 콘텐츠 항목이 없음"""

    error_code = "ContentNotFound"


class ContentDecodeError(ContentError):
    """콘텐츠 디코딩 실패"""

    error_code = "ContentDecodeFailed"


class PackageJsonParseError(ContentError):
    """package.json 파싱 실패 (잘못된 JSON 또는 객체가 아님)"""

    error_code = "PackageJsonParseFailed"


# =============================================================================
# 예외 유틸리티 함수
# =============================================================================


def format_error_for_user(error: Exception) -> str:
    """사용자에게 표시할 에러 메시지 포맷팅

    Args:
        error: 예외

    Returns:
        사용자 친화적인 에러 메시지
    """
    if isinstance(error, APICallError):
        friendly_messages = {
            "AccessDeniedException": "권한이 없습니다. IAM 정책을 확인하세요.",
            "ExpiredTokenException": "인증 토큰이 만료되었습니다. 다시 로그인하세요.",
            "UnrecognizedClientException": "잘못된 자격 증명입니다.",
            "NoCredentialsError": "AWS 자격 증명을 찾을 수 없습니다.",
        }
        hint = friendly_messages.get(error.error_code or "")
        if hint:
            return f"{error} ({hint})"
        return str(error)

    if isinstance(error, LVRError):
        # 커스텀 예외는 이미 포맷팅됨
        return str(error)

    return f"{type(error).__name__}: {error}"
