"""
shared/aws/metrics/types.py - ECS 서비스 메트릭 타입 정의
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

# 메트릭 차원 이름
DIMENSION_CLUSTER = "ECS_CLUSTER"
DIMENSION_SERVICE = "SERVICE_NAME"

UNIT_COUNT = "Count"


class MetricKind(Enum):
    """서비스당 발행하는 메트릭 종류 (정의 순서 = 발행 순서)"""

    RUNNING = "ECSRunningCount"
    DESIRED = "ECSDesiredCount"
    PENDING = "ECSPendingCount"


@dataclass(frozen=True)
class MetricRecord:
    """CloudWatch 메트릭 데이터 포인트 하나

    타임스탬프는 지정하지 않으며 CloudWatch가 수신 시각을 사용합니다.

    Attributes:
        kind: 메트릭 종류 (MetricName)
        cluster_name: ECS_CLUSTER 차원 값
        service_name: SERVICE_NAME 차원 값
        value: 서비스 카운터 값
        unit: 단위 (항상 Count)
    """

    kind: MetricKind
    cluster_name: str
    service_name: str
    value: int
    unit: str = UNIT_COUNT

    @property
    def metric_name(self) -> str:
        return self.kind.value

    def to_metric_datum(self) -> dict[str, Any]:
        """PutMetricData의 MetricData 항목으로 변환"""
        return {
            "MetricName": self.metric_name,
            "Dimensions": [
                {"Name": DIMENSION_CLUSTER, "Value": self.cluster_name},
                {"Name": DIMENSION_SERVICE, "Value": self.service_name},
            ],
            "Unit": self.unit,
            "Value": self.value,
        }


@dataclass(frozen=True)
class PublishResult:
    """메트릭 발행 결과

    Attributes:
        batch_count: PutMetricData 호출 횟수
        metric_count: 전송한 메트릭 수
    """

    batch_count: int = 0
    metric_count: int = 0
