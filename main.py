"""lvr 실행 진입점 (python main.py 또는 console_script)"""

import os
import sys

try:
    from cli.app import cli
except ModuleNotFoundError:
    # console_script로 실행 시 프로젝트 루트를 sys.path에 추가
    sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))
    from cli.app import cli


def main() -> None:
    """lvr CLI 실행 (cli.app:cli 위임)"""
    cli(prog_name="lvr")


if __name__ == "__main__":
    main()
