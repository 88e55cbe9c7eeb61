"""ECS 클러스터/서비스 수집.

Usage:
    from shared.aws.ecs import list_clusters, list_services

    for cluster in list_clusters(ecs):
        services = list_services(ecs, cluster)
"""

from .collector import DESCRIBE_BATCH_SIZE, list_clusters, list_services
from .types import ECSCluster, ECSService

__all__ = [
    "DESCRIBE_BATCH_SIZE",
    "ECSCluster",
    "ECSService",
    "list_clusters",
    "list_services",
]
