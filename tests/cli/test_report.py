# tests/cli/test_report.py
"""
Tests for cli/report.py - joining Lambda functions with package.json versions

Tests cover:
- First-match substring lookup
- Join ordering and unmatched repositories
- Report rendering
"""

import pytest

from cli.report import ReportEntry, find_function, format_version, join_versions, print_report
from shared.aws.lambda_ import LambdaFunctionRecord


def _record(name, variables=None):
    return LambdaFunctionRecord(
        function_name=name,
        function_arn=f"arn:aws:lambda:ap-northeast-2:123456789012:function:{name}",
        environment_variables=variables or {"STAGE": "prod"},
    )


@pytest.fixture
def functions():
    return [
        _record("prod-scraper-handler", {"TABLE": "scraper", "STAGE": "prod"}),
        _record("movies-front-api"),
        _record("dev-scraper-worker"),
    ]


# =============================================================================
# Matching Tests
# =============================================================================


class TestFindFunction:
    """Test substring lookup"""

    def test_substring_match(self, functions):
        assert find_function(functions, "movies-front").function_name == "movies-front-api"

    def test_first_match_wins(self, functions):
        """Several candidates: the first in list order is chosen"""
        assert find_function(functions, "scraper").function_name == "prod-scraper-handler"

    def test_no_match(self, functions):
        assert find_function(functions, "nonexistent-repo") is None

    def test_case_sensitive(self, functions):
        assert find_function(functions, "Scraper") is None


class TestJoinVersions:
    """Test join of version mapping against function list"""

    def test_matched_and_unmatched(self, functions):
        entries = join_versions(functions, {"scraper": "1.2.0", "nonexistent-repo": "0.0.1"})

        assert entries == [
            ReportEntry("scraper", "1.2.0", functions[0]),
            ReportEntry("nonexistent-repo", "0.0.1", None),
        ]
        assert [e.matched for e in entries] == [True, False]

    def test_follows_version_order(self, functions):
        entries = join_versions(functions, {"movies-front": "2.0.0", "scraper": "1.0.0"})

        assert [e.repository for e in entries] == ["movies-front", "scraper"]

    def test_empty_inputs(self):
        assert join_versions([], {}) == []
        assert join_versions([], {"scraper": "1.0.0"})[0].function is None


@pytest.mark.parametrize(
    "value, expected",
    [
        ("1.2.0", "1.2.0"),
        (None, "null"),
        (3, "3"),
        ({"major": 1}, '{"major": 1}'),
    ],
)
def test_format_version(value, expected):
    assert format_version(value) == expected


# =============================================================================
# Rendering Tests
# =============================================================================


class TestPrintReport:
    """Test rendered report text"""

    def test_matched_block(self, capsys, functions):
        print_report([ReportEntry("scraper", "1.2.0", functions[0])])

        out = capsys.readouterr().out
        assert "Function: prod-scraper-handler" in out
        assert "ARN: arn:aws:lambda:ap-northeast-2:123456789012:function:prod-scraper-handler" in out
        assert "Environment variables:" in out
        assert "Package.json version: 1.2.0" in out
        # 환경 변수는 키 순서
        assert out.index("STAGE = prod") < out.index("TABLE = scraper")

    def test_unmatched_line(self, capsys):
        print_report([ReportEntry("nonexistent-repo", "0.0.1", None)])

        out = capsys.readouterr().out
        assert "Function with name nonexistent-repo not found" in out
        assert "Package.json version" not in out

    def test_markup_is_escaped(self, capsys):
        """Values containing rich markup are printed literally"""
        record = _record("fn-[bold]x[/bold]", {"KEY": "[red]value[/red]"})

        print_report([ReportEntry("fn-", "1.0.0", record)])

        out = capsys.readouterr().out
        assert "fn-[bold]x[/bold]" in out
        assert "KEY = [red]value[/red]" in out
