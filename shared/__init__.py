"""공유 유틸리티 - 파이프라인 단계에서 공통 사용.

- aws: AWS 서비스별 수집/발행 유틸리티 (ECS, CloudWatch 메트릭)

의존성 구조:
    core (인프라)
       ↑
    shared (공유 유틸리티)
       ↑
    core.runner / functions / cli
"""

from . import aws

__all__ = ["aws"]
