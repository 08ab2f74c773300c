"""
core/parallel/errors.py - 에러 수집 및 관리

항목 단위로 흡수되는 에러(저장소별 package.json 조회 실패 등)를 일관되게
수집하고 로깅하는 유틸리티입니다.

주요 구성 요소:
- ErrorSeverity: 에러 심각도 분류
- CollectedError: 수집된 에러 상세 정보
- ErrorCollector: 스레드 세이프 에러 수집기

Example:
    collector = ErrorCollector("github")

    try:
        package_json = get_package_json(client, owner, repo)
    except ContentError as e:
        collector.collect(e, repo, "get_content")

    if collector.has_errors:
        print(collector.get_summary())
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

logger = logging.getLogger(__name__)


class ErrorSeverity(Enum):
    """에러 심각도 분류

    수집된 에러의 심각도를 나타내며, 로깅 레벨을 결정합니다.
    """

    CRITICAL = "critical"  # 핵심 기능 실패
    WARNING = "warning"  # 부분 실패 - 보고하되 계속 진행
    INFO = "info"  # 정보성 - 로그만 남김
    DEBUG = "debug"


_LOG_LEVELS = {
    ErrorSeverity.CRITICAL: logging.ERROR,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.DEBUG: logging.DEBUG,
}


@dataclass
class CollectedError:
    """수집된 에러 상세 정보

    Attributes:
        timestamp: 에러 발생 시각
        service: 서비스 이름 (예: "github")
        target: 실패한 대상 (예: 저장소 이름)
        operation: 작업 이름 (예: "get_content")
        error_code: 에러 코드 (예: "ContentFetchFailed")
        error_message: 에러 메시지
        severity: 에러 심각도
    """

    timestamp: datetime
    service: str
    target: str
    operation: str
    error_code: str
    error_message: str
    severity: ErrorSeverity

    def __str__(self) -> str:
        return (
            f"[{self.severity.value.upper()}] {self.target} - "
            f"{self.service}.{self.operation}: {self.error_code} ({self.error_message})"
        )

    def to_dict(self) -> dict[str, str]:
        """딕셔너리로 변환 (로깅/직렬화용)"""
        return {
            "timestamp": self.timestamp.isoformat(),
            "service": self.service,
            "target": self.target,
            "operation": self.operation,
            "error_code": self.error_code,
            "error_message": self.error_message,
            "severity": self.severity.value,
        }


class ErrorCollector:
    """스레드 세이프 에러 수집기

    수집 시점에 심각도에 맞는 로그 레벨로 진단 메시지를 한 번 남기고,
    작업 완료 후 요약 보고를 제공합니다.

    Example:
        collector = ErrorCollector("github")
        collector.collect(error, "scraper", "get_content")

        if collector.has_errors:
            print(collector.get_summary())
    """

    def __init__(self, service: str):
        """초기화

        Args:
            service: 서비스 이름 (수집된 에러에 공통 적용)
        """
        self.service = service
        self._errors: list[CollectedError] = []
        self._lock = threading.Lock()

    def collect(
        self,
        error: Exception,
        target: str,
        operation: str,
        severity: ErrorSeverity = ErrorSeverity.WARNING,
    ) -> CollectedError:
        """예외를 수집하고 로깅

        에러 코드는 예외의 error_code 속성을 사용하며, 없으면 예외 클래스 이름을 사용합니다.

        Args:
            error: 발생한 예외
            target: 실패한 대상 (저장소 이름 등)
            operation: 작업 이름
            severity: 에러 심각도 (기본: WARNING)

        Returns:
            수집된 CollectedError
        """
        error_code = getattr(error, "error_code", None) or type(error).__name__
        return self.collect_generic(error_code, str(error), target, operation, severity)

    def collect_generic(
        self,
        error_code: str,
        error_message: str,
        target: str,
        operation: str,
        severity: ErrorSeverity = ErrorSeverity.WARNING,
    ) -> CollectedError:
        """예외 없이 에러 정보를 직접 수집 (필드 누락 등)

        Args:
            error_code: 에러 코드 문자열
            error_message: 에러 메시지
            target: 실패한 대상
            operation: 작업 이름
            severity: 에러 심각도 (기본: WARNING)

        Returns:
            수집된 CollectedError
        """
        collected = CollectedError(
            timestamp=datetime.now(),
            service=self.service,
            target=target,
            operation=operation,
            error_code=error_code,
            error_message=error_message,
            severity=severity,
        )

        with self._lock:
            self._errors.append(collected)

        logger.log(_LOG_LEVELS[severity], f"{collected}")
        return collected

    @property
    def errors(self) -> list[CollectedError]:
        """수집된 모든 에러의 복사본 반환"""
        with self._lock:
            return list(self._errors)

    @property
    def has_errors(self) -> bool:
        """에러 존재 여부"""
        with self._lock:
            return len(self._errors) > 0

    @property
    def targets(self) -> list[str]:
        """에러가 발생한 대상 목록 (수집 순서)"""
        with self._lock:
            return [e.target for e in self._errors]

    def get_summary(self) -> str:
        """심각도별 에러 건수를 포함한 요약 문자열 반환

        Returns:
            포맷팅된 요약 문자열 (예: "에러 3건 (info: 1건, warning: 2건)")
        """
        with self._lock:
            if not self._errors:
                return "에러 없음"

            by_severity: dict[str, int] = {}
            for e in self._errors:
                by_severity[e.severity.value] = by_severity.get(e.severity.value, 0) + 1

            parts = [f"{k}: {v}건" for k, v in sorted(by_severity.items())]
            return f"에러 {len(self._errors)}건 ({', '.join(parts)})"
