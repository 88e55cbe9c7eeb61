"""
core/aws/client.py - boto3 session/client 생성 헬퍼

타임아웃 + 연결 풀이 설정된 boto3 client를 생성합니다.
파이프라인은 어느 단계에서도 재시도하지 않으므로 SDK 레벨 재시도도 끕니다
(standard 모드, max_attempts=1 = 최초 호출 1회).

주요 구성 요소:
- create_session: 설정의 profile/region으로 boto3 Session 생성
- get_client: 재시도 없는 boto3 client 생성

Example:
    from core.aws.client import create_session, get_client

    session = create_session(config)
    cloudwatch = get_client(session, "cloudwatch", region_name=config.region)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Literal, cast

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError

from core.exceptions import ConfigError

if TYPE_CHECKING:
    from core.config import MonitorConfig

# Retry mode 타입 (botocore TypedDict와 호환)
RetryMode = Literal["legacy", "standard", "adaptive"]

DEFAULT_MAX_ATTEMPTS = 1  # 재시도 없음
DEFAULT_RETRY_MODE: RetryMode = "standard"
DEFAULT_CONNECT_TIMEOUT = 10  # 초
DEFAULT_READ_TIMEOUT = 30  # 초
DEFAULT_MAX_POOL_CONNECTIONS = 10


def create_session(config: MonitorConfig) -> boto3.Session:
    """설정으로부터 boto3 Session 생성

    Args:
        config: 실행 설정 (profile, region 사용)

    Returns:
        boto3 Session

    Raises:
        ConfigError: 프로파일을 찾을 수 없는 등 세션 생성 실패
    """
    try:
        return boto3.Session(profile_name=config.profile, region_name=config.region)
    except BotoCoreError as e:
        raise ConfigError("profile", f"세션 생성 실패 ({config.profile})", cause=e) from e


def get_client(
    session: boto3.Session,
    service_name: str,
    region_name: str | None = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    retry_mode: RetryMode = DEFAULT_RETRY_MODE,
    connect_timeout: int = DEFAULT_CONNECT_TIMEOUT,
    read_timeout: int = DEFAULT_READ_TIMEOUT,
    max_pool_connections: int = DEFAULT_MAX_POOL_CONNECTIONS,
    **kwargs: Any,
) -> Any:
    """boto3 client 생성

    Args:
        session: boto3 Session
        service_name: AWS 서비스 이름 (ecs, cloudwatch)
        region_name: 리전 (None이면 세션 기본값)
        max_attempts: 최대 시도 횟수 (기본: 1, 재시도 없음)
        retry_mode: 재시도 모드
        connect_timeout: 연결 타임아웃 (초)
        read_timeout: 읽기 타임아웃 (초)
        max_pool_connections: HTTP 연결 풀 크기
        **kwargs: session.client()에 전달할 추가 인자

    Returns:
        boto3 client

    Raises:
        ConfigError: 리전을 결정할 수 없는 등 client 생성 실패
    """
    config = Config(
        retries={"max_attempts": max_attempts, "mode": retry_mode},  # pyright: ignore[reportArgumentType]
        connect_timeout=connect_timeout,
        read_timeout=read_timeout,
        max_pool_connections=max_pool_connections,
    )

    # 기존 config가 있으면 병합
    if "config" in kwargs:
        existing = kwargs.pop("config")
        config = config.merge(existing)

    try:
        # cast to Any to bypass boto3-stubs Literal type requirements
        return session.client(  # pyright: ignore[reportCallIssue]
            cast(Any, service_name),
            region_name=region_name,
            config=config,
            **kwargs,
        )
    except BotoCoreError as e:
        raise ConfigError("region", f"{service_name} client 생성 실패 (region={region_name})", cause=e) from e
