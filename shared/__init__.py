"""공유 유틸리티 - CLI 명령에서 공통 사용.

- aws: AWS 관련 유틸리티 (Lambda 함수 수집)
- github: GitHub 저장소 유틸리티 (package.json 버전 수집)

의존성 구조:
    core (인프라)
       ↑
    shared (공유 유틸리티)
       ↑
    cli
"""

from . import aws, github

__all__ = ["aws", "github"]
