"""
shared/aws/metrics/shaper.py - ECS 서비스 → 메트릭 레코드 변환
"""

from __future__ import annotations

from collections.abc import Sequence

from shared.aws.ecs.types import ECSCluster, ECSService

from .types import MetricKind, MetricRecord


def _counter_value(service: ECSService, kind: MetricKind) -> int:
    if kind is MetricKind.RUNNING:
        return service.running_count
    if kind is MetricKind.DESIRED:
        return service.desired_count
    return service.pending_count


def shape_metrics(cluster: ECSCluster, services: Sequence[ECSService]) -> tuple[MetricRecord, ...]:
    """클러스터의 서비스 목록을 메트릭 레코드로 변환

    서비스마다 RUNNING, DESIRED, PENDING 순서로 정확히 3개씩 생성합니다.
    값은 서비스 카운터를 그대로 사용하며 서비스 간 집계는 하지 않습니다.

    Args:
        cluster: 서비스가 속한 클러스터
        services: 입력 순서대로 변환할 서비스 목록

    Returns:
        3 × len(services)개의 MetricRecord 튜플
    """
    return tuple(
        MetricRecord(
            kind=kind,
            cluster_name=cluster.cluster_name,
            service_name=service.service_name,
            value=_counter_value(service, kind),
        )
        for service in services
        for kind in MetricKind
    )
