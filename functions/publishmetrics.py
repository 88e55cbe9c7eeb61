"""
functions/publishmetrics.py - ECS 메트릭 발행 Lambda 핸들러

스케줄 이벤트(예: rate(1 minute))로 호출되며 입력 파라미터는 사용하지 않습니다.
설정은 콜드 스타트 시 한 번만 환경변수에서 읽습니다.

Handler:
    functions.publishmetrics.handler

필요 IAM 권한:
    - ecs:ListClusters, ecs:DescribeClusters
    - ecs:ListServices, ecs:DescribeServices
    - cloudwatch:PutMetricData
"""

from __future__ import annotations

import logging
from typing import Any

from core.config import LogConfig, MonitorConfig
from core.runner import run_once


def configure_logging(log: LogConfig, root: logging.Logger | None = None) -> None:
    """LogConfig로 루트 logger 설정

    Lambda 런타임은 루트 logger에 핸들러를 미리 붙여두므로 기존 핸들러에
    포맷을 적용하고, 핸들러가 없으면 StreamHandler를 추가합니다.

    Args:
        log: 로깅 설정
        root: 대상 logger (기본: 루트 logger)
    """
    root = root or logging.getLogger()
    if not root.handlers:
        root.addHandler(logging.StreamHandler())

    formatter = logging.Formatter(log.format, log.date_format)
    for handler in root.handlers:
        handler.setFormatter(formatter)
    root.setLevel(log.numeric_level)

    logging.getLogger("botocore").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)


CONFIG = MonitorConfig.from_env()
configure_logging(CONFIG.log)

logger = logging.getLogger(__name__)


def handler(event: dict[str, Any] | None, context: Any) -> str:
    """Lambda 진입점

    Args:
        event: 스케줄 이벤트 (사용하지 않음)
        context: Lambda context (사용하지 않음)

    Returns:
        종료 메시지 ("Metrics creation complete")

    Raises:
        MonitorError: 실행 중 첫 번째로 발생한 에러 (Lambda 실패로 보고됨)
    """
    result = run_once(CONFIG)
    logger.info(
        "%s: %d metrics from %d services in %d clusters",
        result.message,
        len(result.metrics),
        result.collection.service_count,
        result.collection.cluster_count,
    )
    return result.message
