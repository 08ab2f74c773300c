"""
cli/app.py - 메인 CLI 엔트리포인트

Click 기반의 CLI 애플리케이션 진입점입니다.

명령어 구조:
    lvr --version           # 버전 표시
    lvr functions           # 환경 변수가 설정된 Lambda 함수 목록
    lvr versions            # 저장소별 package.json 버전
    lvr report              # 함수 목록 + 버전 결합 리포트

    예시:
    lvr functions -p dev -r ap-northeast-2
    lvr functions --sequential
    MY_TOKEN=... lvr report -w 10

종료 코드:
    0: 정상 완료 (저장소별 버전 조회 실패가 있어도 0)
    1: MY_TOKEN 누락 등 설정 오류, 또는 Lambda 목록 조회 실패

Usage:
    $ lvr report
    $ python main.py report
"""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import Any

import click
from botocore.exceptions import BotoCoreError

from cli.report import format_version, join_versions, print_report
from cli.ui import console, print_error, print_header, print_info, print_success, print_table, print_warning, setup_logging
from core.config import DEFAULT_MAX_WORKERS, Settings, get_version, load_settings
from core.exceptions import APICallError, ConfigError, LVRError, format_error_for_user
from core.parallel import ErrorCollector, get_client, get_session
from shared.aws.lambda_ import LambdaFunctionRecord, list_deployed_functions
from shared.github import GitHubClient, fetch_package_versions

VERSION = get_version()


def aws_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Lambda 조회 공통 옵션"""
    func = click.option(
        "--sequential",
        is_flag=True,
        help="페이지와 함수를 순차 처리 (--max-workers 1과 동일)",
    )(func)
    func = click.option(
        "-w",
        "--max-workers",
        type=click.IntRange(1, 100),
        default=DEFAULT_MAX_WORKERS,
        show_default=True,
        help="동시 변환 작업 수",
    )(func)
    func = click.option("-r", "--region", "region", default=None, help="AWS 리전 (기본: 세션 기본값)")(func)
    func = click.option("-p", "--profile", "profile", default=None, help="AWS 프로파일")(func)
    return func


def owner_option(func: Callable[..., Any]) -> Callable[..., Any]:
    """GitHub 저장소 소유자 옵션"""
    return click.option("--owner", default=None, help="package.json을 조회할 저장소 소유자")(func)


def _load_settings(require_token: bool, **overrides: Any) -> Settings:
    """설정 로드 - 실패 시 stderr 출력 후 종료 코드 1

    네트워크 호출보다 먼저 실행되어야 합니다.
    """
    try:
        return load_settings(require_token=require_token, **overrides)
    except ConfigError as e:
        click.echo(str(e), err=True)
        raise SystemExit(1) from e


def _collect_functions(settings: Settings) -> list[LambdaFunctionRecord]:
    """Lambda 함수 목록 수집 (소요 시간 출력)

    Raises:
        APICallError: 세션 생성 또는 list_functions 실패
    """
    try:
        session = get_session(settings.aws_profile, settings.aws_region)
        lambda_client = get_client(session, "lambda")
    except BotoCoreError as e:
        raise APICallError.from_client_error("lambda", "create_client", e) from e

    start = time.monotonic()
    functions = list_deployed_functions(lambda_client, max_workers=settings.max_workers)
    print_info(f"Got lambdas in {time.monotonic() - start:.2f}s ({len(functions)}개)")
    return functions


def _collect_versions(settings: Settings) -> tuple[dict[str, Any], ErrorCollector]:
    """저장소별 package.json 버전 수집"""
    assert settings.github_token is not None
    github = GitHubClient(
        settings.github_token,
        base_url=settings.github_api_url,
        timeout=settings.request_timeout,
    )
    collector = ErrorCollector("github")
    versions = fetch_package_versions(github, settings.repositories, settings.github_owner, collector)
    return versions, collector


def _print_collector_summary(collector: ErrorCollector) -> None:
    if collector.has_errors:
        print_warning(f"package.json 조회: {collector.get_summary()} - {', '.join(collector.targets)}")


def _run_or_exit(func: Callable[[], None]) -> None:
    """치명적 에러를 출력하고 종료 코드 1로 종료"""
    try:
        func()
    except LVRError as e:
        print_error(format_error_for_user(e))
        raise SystemExit(1) from e


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(VERSION, "--version", prog_name="lvr")
@click.option("-v", "--verbose", count=True, help="로그 상세도 (-v: INFO, -vv: DEBUG)")
def cli(verbose: int) -> None:
    """배포된 Lambda 함수와 저장소 package.json 버전 리포트"""
    setup_logging(verbose)


@cli.command("functions")
@aws_options
def functions_cmd(profile: str | None, region: str | None, max_workers: int, sequential: bool) -> None:
    """환경 변수가 설정된 Lambda 함수 목록 출력"""
    settings = _load_settings(
        require_token=False,
        aws_profile=profile,
        aws_region=region,
        max_workers=1 if sequential else max_workers,
    )

    def run() -> None:
        functions = _collect_functions(settings)
        if not functions:
            print_warning("환경 변수가 설정된 Lambda 함수가 없습니다")
            return

        rows = [
            [
                fn.function_name,
                fn.function_arn,
                "\n".join(f"{k}={v}" for k, v in sorted(fn.environment_variables.items())),
            ]
            for fn in functions
        ]
        print_table("Deployed lambdas", ["Function", "ARN", "Environment variables"], rows)

    _run_or_exit(run)


@cli.command("versions")
@owner_option
def versions_cmd(owner: str | None) -> None:
    """저장소별 package.json version 출력"""
    settings = _load_settings(require_token=True, github_owner=owner)

    versions, collector = _collect_versions(settings)
    if versions:
        print_table(
            f"package.json versions ({settings.github_owner})",
            ["Repository", "Version"],
            [[repo, format_version(version)] for repo, version in versions.items()],
        )
    else:
        print_warning("버전을 가져온 저장소가 없습니다")
    _print_collector_summary(collector)


@cli.command("report")
@aws_options
@owner_option
def report_cmd(
    profile: str | None,
    region: str | None,
    max_workers: int,
    sequential: bool,
    owner: str | None,
) -> None:
    """Lambda 함수와 package.json 버전 결합 리포트"""
    settings = _load_settings(
        require_token=True,
        aws_profile=profile,
        aws_region=region,
        max_workers=1 if sequential else max_workers,
        github_owner=owner,
    )

    def run() -> None:
        functions = _collect_functions(settings)
        versions, collector = _collect_versions(settings)

        print_header("Lambda / package.json report")
        entries = join_versions(functions, versions)
        print_report(entries)

        matched = sum(1 for entry in entries if entry.matched)
        console.print()
        print_success(f"매칭 {matched}/{len(entries)}개 저장소")
        _print_collector_summary(collector)

    _run_or_exit(run)


if __name__ == "__main__":
    cli()
