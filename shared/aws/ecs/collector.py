"""
shared/aws/ecs/collector.py - ECS Cluster/Service 수집

두 단계로 수집합니다.
    1. List*: nextToken이 없을 때까지 페이지를 따라가며 ARN 누적
    2. Describe*: ARN을 10개씩 나눠 상세 정보 조회 (API 하드 제한)

어느 단계든 첫 에러에서 중단하고 예외를 전파합니다. 부분 결과는 반환하지 않습니다.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from core.batching import chunk
from core.exceptions import UpstreamDescribeError, UpstreamListError

from .types import ECSCluster, ECSService

logger = logging.getLogger(__name__)

# DescribeClusters / DescribeServices 요청당 최대 ARN 수
DESCRIBE_BATCH_SIZE = 10


def _list_arns(ecs: Any, operation: str, result_key: str, **params: Any) -> tuple[str, ...]:
    """List* API의 모든 페이지에서 ARN 수집

    Args:
        ecs: boto3 ECS client
        operation: paginator 이름 (list_clusters, list_services)
        result_key: 응답의 ARN 목록 키 (clusterArns, serviceArns)
        **params: paginate()에 전달할 인자

    Returns:
        페이지 순서대로 이어붙인 ARN 튜플

    Raises:
        UpstreamListError: 목록 조회 실패
    """
    arns: list[str] = []

    try:
        paginator = ecs.get_paginator(operation)
        for page in paginator.paginate(**params):
            arns.extend(page.get(result_key, []))
    except (ClientError, BotoCoreError) as e:
        logger.error("failed to %s: %s", operation, e)
        raise UpstreamListError.from_client_error("ecs", operation, e) from e

    return tuple(arns)


def _describe_in_batches(
    arns: tuple[str, ...],
    operation: str,
    describe: Callable[[list[str]], dict[str, Any]],
    result_key: str,
) -> list[dict[str, Any]]:
    """ARN을 DESCRIBE_BATCH_SIZE개씩 나눠 Describe* 호출

    Args:
        arns: 조회할 ARN
        operation: API 작업 이름 (로그/예외용)
        describe: 배치 하나를 받아 API 응답을 반환하는 호출
        result_key: 응답의 상세 목록 키 (clusters, services)

    Returns:
        배치 순서대로 이어붙인 상세 정보 목록

    Raises:
        UpstreamDescribeError: 상세 조회 실패
    """
    details: list[dict[str, Any]] = []

    for batch in chunk(arns, DESCRIBE_BATCH_SIZE):
        try:
            response = describe(list(batch))
        except (ClientError, BotoCoreError) as e:
            logger.error("failed to %s (%d arns): %s", operation, len(batch), e)
            raise UpstreamDescribeError.from_client_error("ecs", operation, e) from e

        # 조회 불가 ARN (삭제됨 등)은 건너뜀
        for failure in response.get("failures", []):
            logger.warning("%s failure for %s: %s", operation, failure.get("arn"), failure.get("reason"))

        details.extend(response.get(result_key, []))

    return details


def list_clusters(ecs: Any) -> tuple[ECSCluster, ...]:
    """리전의 모든 ECS 클러스터 조회

    Args:
        ecs: boto3 ECS client

    Returns:
        ECSCluster 튜플 (클러스터가 없으면 빈 튜플)

    Raises:
        UpstreamListError: ListClusters 실패
        UpstreamDescribeError: DescribeClusters 실패
    """
    cluster_arns = _list_arns(ecs, "list_clusters", "clusterArns")
    logger.info("found cluster arns: %s", list(cluster_arns))

    details = _describe_in_batches(
        cluster_arns,
        "describe_clusters",
        lambda batch: ecs.describe_clusters(clusters=batch),
        "clusters",
    )
    clusters = tuple(ECSCluster.from_api(data) for data in details)

    logger.info("found clusters: %s", [c.cluster_name for c in clusters])
    return clusters


def list_services(ecs: Any, cluster: ECSCluster) -> tuple[ECSService, ...]:
    """클러스터의 모든 ECS 서비스 조회

    Args:
        ecs: boto3 ECS client
        cluster: 대상 클러스터

    Returns:
        ECSService 튜플 (서비스가 없으면 빈 튜플)

    Raises:
        UpstreamListError: ListServices 실패
        UpstreamDescribeError: DescribeServices 실패
    """
    service_arns = _list_arns(ecs, "list_services", "serviceArns", cluster=cluster.cluster_arn)
    logger.info("found service arns for %s: %s", cluster.cluster_name, list(service_arns))

    details = _describe_in_batches(
        service_arns,
        "describe_services",
        lambda batch: ecs.describe_services(cluster=cluster.cluster_arn, services=batch),
        "services",
    )
    services = tuple(ECSService.from_api(data) for data in details)

    logger.info("found services for %s: %s", cluster.cluster_name, [s.service_name for s in services])
    return services
