"""
cli/report.py - 함수 목록과 package.json 버전 결합 리포트

저장소 이름이 함수 이름에 부분 문자열로 포함되는 첫 번째 함수를 매칭합니다.
여러 함수가 같은 저장소 이름을 포함하면 함수 목록 순서(페이지 순서)상 첫 번째가
선택됩니다. 최적 매칭이 아닌 첫 매칭이며, 동률 해소 규칙은 따로 두지 않습니다.
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from rich.markup import escape

from cli.ui import console, print_rule, print_warning
from shared.aws.lambda_ import LambdaFunctionRecord


@dataclass(frozen=True)
class ReportEntry:
    """저장소 하나에 대한 결합 결과 (function이 None이면 매칭 실패)"""

    repository: str
    version: Any
    function: LambdaFunctionRecord | None = None

    @property
    def matched(self) -> bool:
        return self.function is not None


def find_function(
    functions: Sequence[LambdaFunctionRecord],
    repository: str,
) -> LambdaFunctionRecord | None:
    """repository를 이름에 포함하는 첫 번째 함수 반환"""
    return next((fn for fn in functions if repository in fn.function_name), None)


def join_versions(
    functions: Sequence[LambdaFunctionRecord],
    versions: Mapping[str, Any],
) -> list[ReportEntry]:
    """버전 매핑 순서대로 저장소별 매칭 결과 생성 (I/O 없음)"""
    return [
        ReportEntry(repository=repo, version=version, function=find_function(functions, repo))
        for repo, version in versions.items()
    ]


def format_version(version: Any) -> str:
    """JSON 값을 출력용 문자열로 변환 (문자열은 따옴표 없이)"""
    if isinstance(version, str):
        return version
    return json.dumps(version)


def print_report(entries: Sequence[ReportEntry]) -> None:
    """매칭된 저장소는 함수 정보 블록을, 매칭 실패는 진단 한 줄을 출력"""
    for entry in entries:
        fn = entry.function
        if fn is None:
            print_warning(f"Function with name {escape(entry.repository)} not found")
            continue

        print_rule()
        console.print(f"[bold]Function:[/bold] {escape(fn.function_name)}")
        console.print(f"[bold]ARN:[/bold] {escape(fn.function_arn)}")
        console.print("[bold]Environment variables:[/bold]")
        for key, value in sorted(fn.environment_variables.items()):
            console.print(f"  {escape(key)} = {escape(value)}")
        console.print(f"[bold]Package.json version:[/bold] {escape(format_version(entry.version))}")
        print_rule()
