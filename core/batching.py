"""
core/batching.py - 고정 크기 청크 분할

AWS API의 배치 크기 제한(DescribeClusters/DescribeServices 10개,
PutMetricData 20개)에 맞춰 시퀀스를 분할합니다.
원본 시퀀스를 소비(변경)하지 않는 순수 함수입니다.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def chunk(items: Sequence[T], size: int) -> tuple[tuple[T, ...], ...]:
    """시퀀스를 size개 이하의 연속 청크로 분할

    Args:
        items: 분할할 시퀀스
        size: 청크 최대 크기 (1 이상)

    Returns:
        순서가 보존된 청크 튜플. 빈 입력이면 빈 튜플.

    Raises:
        ValueError: size가 1 미만

    Example:
        chunk([1, 2, 3, 4, 5], 2)  # ((1, 2), (3, 4), (5,))
    """
    if size < 1:
        raise ValueError(f"chunk size must be >= 1, got {size}")

    return tuple(tuple(items[i : i + size]) for i in range(0, len(items), size))
