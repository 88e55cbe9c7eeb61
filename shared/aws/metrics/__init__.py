"""ECS 서비스 메트릭 셰이핑 및 CloudWatch 발행.

Usage:
    from shared.aws.metrics import publish_metrics, shape_metrics

    records = shape_metrics(cluster, services)
    result = publish_metrics(cloudwatch, "ecs-services", records)
"""

from .publisher import PUT_BATCH_SIZE, publish_metrics
from .shaper import shape_metrics
from .types import (
    DIMENSION_CLUSTER,
    DIMENSION_SERVICE,
    UNIT_COUNT,
    MetricKind,
    MetricRecord,
    PublishResult,
)

__all__ = [
    "DIMENSION_CLUSTER",
    "DIMENSION_SERVICE",
    "PUT_BATCH_SIZE",
    "UNIT_COUNT",
    "MetricKind",
    "MetricRecord",
    "PublishResult",
    "publish_metrics",
    "shape_metrics",
]
