"""
tests/conftest.py - pytest 공통 픽스처

AWS API 모킹과 테스트 헬퍼를 제공합니다.

Usage:
    def test_something(fake_ecs):
        ecs = fake_ecs({"alpha": [make_service("web", 3, 3, 0)]})
        clusters = list_clusters(ecs)
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional
from unittest.mock import MagicMock

import pytest

# 프로젝트 루트를 sys.path에 추가
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


ACCOUNT_ID = "123456789012"
REGION = "ap-southeast-2"


# =============================================================================
# 환경 설정
# =============================================================================


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """테스트 환경 설정 (실제 AWS 자격 증명/설정 차단)"""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", REGION)
    for key in ("REGION", "AWS_REGION", "AWS_PROFILE", "CLOUDWATCH_NAMESPACE", "ECS_MONITOR_DRY_RUN"):
        monkeypatch.delenv(key, raising=False)

    yield


# =============================================================================
# 테스트 데이터 팩토리
# =============================================================================


def cluster_arn(name: str) -> str:
    """클러스터 ARN 생성"""
    return f"arn:aws:ecs:{REGION}:{ACCOUNT_ID}:cluster/{name}"


def service_arn(cluster: str, name: str) -> str:
    """서비스 ARN 생성"""
    return f"arn:aws:ecs:{REGION}:{ACCOUNT_ID}:service/{cluster}/{name}"


def make_service(name: str, running: int = 1, desired: int = 1, pending: int = 0) -> Dict[str, Any]:
    """DescribeServices 응답 형식의 서비스 생성 (ARN은 fake_ecs가 채움)"""
    return {
        "serviceName": name,
        "status": "ACTIVE",
        "runningCount": running,
        "desiredCount": desired,
        "pendingCount": pending,
    }


def paginate_list(arns: List[str], key: str, page_size: int = 10) -> List[Dict[str, Any]]:
    """ARN 목록을 nextToken으로 연결된 List* 페이지로 분할"""
    if not arns:
        return [{key: []}]

    pages = []
    for i in range(0, len(arns), page_size):
        page: Dict[str, Any] = {key: arns[i : i + page_size]}
        if i + page_size < len(arns):
            page["nextToken"] = f"token-{i + page_size}"
        pages.append(page)
    return pages


def build_fake_ecs(
    clusters: Dict[str, List[Dict[str, Any]]],
    page_size: int = 10,
    cluster_pages: Optional[List[Dict[str, Any]]] = None,
) -> MagicMock:
    """MagicMock 기반 ECS client 생성

    Args:
        clusters: {클러스터 이름: [make_service(...)]} (삽입 순서 = 목록 순서)
        page_size: List* 페이지 크기
        cluster_pages: ListClusters 페이지를 직접 지정할 때 사용

    Returns:
        get_paginator / describe_clusters / describe_services가 설정된 MagicMock
    """
    ecs = MagicMock()

    services_by_arn: Dict[str, List[Dict[str, Any]]] = {}
    for name, services in clusters.items():
        arn = cluster_arn(name)
        services_by_arn[arn] = [
            {**svc, "serviceArn": service_arn(name, svc["serviceName"]), "clusterArn": arn} for svc in services
        ]

    list_cluster_pages = cluster_pages or paginate_list(list(services_by_arn), "clusterArns", page_size)

    clusters_paginator = MagicMock()
    clusters_paginator.paginate.side_effect = lambda **kwargs: iter(list_cluster_pages)

    services_paginator = MagicMock()
    services_paginator.paginate.side_effect = lambda cluster, **kwargs: iter(
        paginate_list(
            [svc["serviceArn"] for svc in services_by_arn.get(cluster, [])],
            "serviceArns",
            page_size,
        )
    )

    paginators = {"list_clusters": clusters_paginator, "list_services": services_paginator}
    ecs.get_paginator.side_effect = lambda operation: paginators[operation]

    def describe_clusters(clusters):
        return {
            "clusters": [
                {"clusterArn": arn, "clusterName": arn.rsplit("/", 1)[-1], "status": "ACTIVE"} for arn in clusters
            ],
            "failures": [],
        }

    def describe_services(cluster, services):
        known = {svc["serviceArn"]: svc for svc in services_by_arn.get(cluster, [])}
        return {"services": [known[arn] for arn in services if arn in known], "failures": []}

    ecs.describe_clusters.side_effect = describe_clusters
    ecs.describe_services.side_effect = describe_services

    return ecs


def create_mock_client_error(
    error_code: str,
    error_message: str = "Test error",
    operation_name: str = "TestOperation",
) -> Exception:
    """ClientError 생성 헬퍼"""
    from botocore.exceptions import ClientError

    return ClientError(
        {
            "Error": {
                "Code": error_code,
                "Message": error_message,
            }
        },
        operation_name,
    )


# =============================================================================
# AWS 모킹 픽스처
# =============================================================================


@pytest.fixture
def fake_ecs():
    """fake ECS client 팩토리"""
    return build_fake_ecs


@pytest.fixture
def mock_cloudwatch_client():
    """CloudWatch 클라이언트 모킹"""
    mock_client = MagicMock()
    mock_client.put_metric_data.return_value = {}
    return mock_client


@pytest.fixture
def monitor_config():
    """테스트용 MonitorConfig"""
    from core.config import MonitorConfig

    return MonitorConfig(region=REGION, namespace="ecs-services")
