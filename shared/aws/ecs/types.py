"""
shared/aws/ecs/types.py - ECS 리소스 타입 정의

DescribeClusters / DescribeServices 응답에서 파이프라인이 사용하는 필드만 추린
데이터 클래스입니다. 한 번의 실행 안에서만 생성/사용됩니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ECSCluster:
    """ECS 클러스터 정보

    Attributes:
        cluster_arn: 클러스터 ARN (ListServices/DescribeServices 범위 지정에 사용)
        cluster_name: 클러스터 이름 (메트릭 ECS_CLUSTER 차원 값)
        status: 클러스터 상태 (ACTIVE, INACTIVE 등)
        active_services_count: 활성 서비스 수
        running_tasks_count: 실행 중인 태스크 수
        pending_tasks_count: 대기 중인 태스크 수
    """

    cluster_arn: str
    cluster_name: str
    status: str = ""
    active_services_count: int = 0
    running_tasks_count: int = 0
    pending_tasks_count: int = 0

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> ECSCluster:
        """DescribeClusters 응답의 clusters 항목에서 생성"""
        return cls(
            cluster_arn=data.get("clusterArn", ""),
            cluster_name=data.get("clusterName", ""),
            status=data.get("status", ""),
            active_services_count=data.get("activeServicesCount", 0),
            running_tasks_count=data.get("runningTasksCount", 0),
            pending_tasks_count=data.get("pendingTasksCount", 0),
        )


@dataclass(frozen=True)
class ECSService:
    """ECS 서비스 정보

    Attributes:
        service_name: 서비스 이름 (메트릭 SERVICE_NAME 차원 값)
        service_arn: 서비스 ARN
        cluster_arn: 소속 클러스터 ARN
        status: 서비스 상태 (ACTIVE, DRAINING 등)
        running_count: 실행 중인 태스크 수
        desired_count: 목표 태스크 수
        pending_count: 대기 중인 태스크 수
    """

    service_name: str
    service_arn: str = ""
    cluster_arn: str = ""
    status: str = ""
    running_count: int = 0
    desired_count: int = 0
    pending_count: int = 0

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> ECSService:
        """DescribeServices 응답의 services 항목에서 생성"""
        return cls(
            service_name=data.get("serviceName", ""),
            service_arn=data.get("serviceArn", ""),
            cluster_arn=data.get("clusterArn", ""),
            status=data.get("status", ""),
            running_count=data.get("runningCount", 0),
            desired_count=data.get("desiredCount", 0),
            pending_count=data.get("pendingCount", 0),
        )
