"""AWS 관련 공유 유틸리티.

하위 모듈:
- ecs: ECS 클러스터/서비스 목록 조회 (pagination + describe 배치)
- metrics: ECS 서비스 메트릭 셰이핑 및 PutMetricData 배치 발행
"""

from . import ecs, metrics

__all__ = ["ecs", "metrics"]
