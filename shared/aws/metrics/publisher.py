"""
shared/aws/metrics/publisher.py - CloudWatch PutMetricData 배치 발행

PutMetricData 요청당 20개씩 순차 전송합니다.
배치 하나가 실패하면 즉시 중단하며, 이미 전송된 배치는 그대로 둡니다
(롤백/재시도 없음). 남은 메트릭은 전송되지 않습니다.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from core.batching import chunk
from core.exceptions import UpstreamPublishError

from .types import MetricRecord, PublishResult

logger = logging.getLogger(__name__)

# PutMetricData 요청당 최대 메트릭 수
PUT_BATCH_SIZE = 20


def publish_metrics(
    cloudwatch_client: Any,
    namespace: str,
    metrics: Sequence[MetricRecord],
) -> PublishResult:
    """메트릭을 CloudWatch에 배치 발행

    Args:
        cloudwatch_client: boto3 CloudWatch client
        namespace: 커스텀 메트릭 네임스페이스
        metrics: 발행할 메트릭 (비어있으면 API 호출 없음)

    Returns:
        PublishResult (배치 수, 메트릭 수)

    Raises:
        UpstreamPublishError: 배치 전송 실패 (batch_index, sent_count 포함)
    """
    if not metrics:
        logger.info("no metrics to send")
        return PublishResult()

    batches = chunk(metrics, PUT_BATCH_SIZE)
    sent = 0

    for index, batch in enumerate(batches):
        logger.debug("sending batch %d/%d (%d metrics) to %s", index + 1, len(batches), len(batch), namespace)
        try:
            cloudwatch_client.put_metric_data(
                Namespace=namespace,
                MetricData=[record.to_metric_datum() for record in batch],
            )
        except (ClientError, BotoCoreError) as e:
            logger.error(
                "failed to put metric batch %d/%d (%d metrics already sent): %s",
                index + 1,
                len(batches),
                sent,
                e,
            )
            raise UpstreamPublishError.from_client_error(
                "cloudwatch",
                "put_metric_data",
                e,
                batch_index=index,
                sent_count=sent,
            ) from e
        sent += len(batch)

    logger.info("sent %d metrics to %s in %d batches", sent, namespace, len(batches))
    return PublishResult(batch_count=len(batches), metric_count=sent)
