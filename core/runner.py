"""
core/runner.py - 수집/발행 실행 오케스트레이션

한 번의 실행(run) 흐름:
    1. 클러스터 목록 조회 (1회)
    2. 클러스터마다 서비스 조회 → 메트릭 셰이핑 (순차, 병렬 없음)
    3. 누적된 메트릭을 마지막에 한 번 발행

어느 단계에서든 첫 에러가 나면 나머지를 중단하고 그 에러를 전파합니다.
발행 이전 단계에서 실패하면 아무 메트릭도 발행하지 않습니다.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from core.aws import create_session, get_client
from core.config import MonitorConfig
from shared.aws.ecs import list_clusters, list_services
from shared.aws.metrics import MetricRecord, PublishResult, publish_metrics, shape_metrics

if TYPE_CHECKING:
    import boto3

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Metrics creation complete"
DRY_RUN_MESSAGE = "Metrics collected (dry run, not published)"


@dataclass(frozen=True)
class CollectionResult:
    """수집 단계 결과

    Attributes:
        cluster_count: 조회된 클러스터 수
        service_count: 조회된 서비스 수 (전체 클러스터 합계)
        metrics: 셰이핑된 메트릭 (클러스터/서비스 순서)
    """

    cluster_count: int
    service_count: int
    metrics: tuple[MetricRecord, ...]


@dataclass(frozen=True)
class RunResult:
    """실행 결과

    Attributes:
        collection: 수집 단계 결과
        publish: 발행 결과 (dry run이면 None)
        message: 트리거에 반환할 종료 메시지
    """

    collection: CollectionResult
    publish: PublishResult | None
    message: str

    @property
    def metrics(self) -> tuple[MetricRecord, ...]:
        return self.collection.metrics


def collect_metrics(ecs: Any) -> CollectionResult:
    """모든 클러스터의 서비스 메트릭 수집

    Args:
        ecs: boto3 ECS client

    Returns:
        CollectionResult

    Raises:
        UpstreamListError: 클러스터/서비스 목록 조회 실패
        UpstreamDescribeError: 클러스터/서비스 상세 조회 실패
    """
    clusters = list_clusters(ecs)

    metrics: list[MetricRecord] = []
    service_count = 0
    for cluster in clusters:
        services = list_services(ecs, cluster)
        service_count += len(services)
        metrics.extend(shape_metrics(cluster, services))

    return CollectionResult(
        cluster_count=len(clusters),
        service_count=service_count,
        metrics=tuple(metrics),
    )


def run_once(
    config: MonitorConfig,
    session: boto3.Session | None = None,
    ecs_client: Any = None,
    cloudwatch_client: Any = None,
) -> RunResult:
    """수집 → 발행 1회 실행

    Args:
        config: 실행 설정 (실행 중 변경되지 않음)
        session: boto3 Session (None이면 설정으로 생성)
        ecs_client: ECS client (None이면 session에서 생성)
        cloudwatch_client: CloudWatch client (None이면 session에서 생성)

    Returns:
        RunResult

    Raises:
        MonitorError: 첫 번째로 발생한 업스트림 에러
    """
    logger.info("starting to generate CloudWatch metrics for ECS (namespace=%s)", config.namespace)

    try:
        if ecs_client is None or (cloudwatch_client is None and not config.dry_run):
            if session is None:
                session = create_session(config)
        if ecs_client is None:
            ecs_client = get_client(session, "ecs", region_name=config.region)

        collection = collect_metrics(ecs_client)
        logger.info(
            "collected %d metrics from %d services in %d clusters",
            len(collection.metrics),
            collection.service_count,
            collection.cluster_count,
        )

        if config.dry_run:
            return RunResult(collection=collection, publish=None, message=DRY_RUN_MESSAGE)

        if cloudwatch_client is None:
            cloudwatch_client = get_client(session, "cloudwatch", region_name=config.region)

        published = publish_metrics(cloudwatch_client, config.namespace, collection.metrics)
    except Exception:
        logger.exception("failed to create ECS metrics")
        raise

    return RunResult(collection=collection, publish=published, message=SUCCESS_MESSAGE)
