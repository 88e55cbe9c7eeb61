"""
core/config.py - 실행 설정

프로세스 시작 시 환경변수를 한 번 읽어 불변(frozen) 설정 객체로 만듭니다.
실행 도중에는 다시 읽지 않으며, CLI 옵션은 with_overrides()로 새 객체를 만들어 반영합니다.

환경변수:
    REGION / AWS_REGION / AWS_DEFAULT_REGION: ECS, CloudWatch 대상 리전
    CLOUDWATCH_NAMESPACE: 커스텀 메트릭 네임스페이스 (기본: ecs-services)
    AWS_PROFILE: 로컬 실행 시 사용할 프로파일
    ECS_MONITOR_DRY_RUN: true면 PutMetricData 호출 생략
    LOG_LEVEL / LOG_FORMAT: 로깅 설정

Usage:
    from core.config import MonitorConfig

    config = MonitorConfig.from_env()
    config = config.with_overrides(namespace="my-ecs")
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, replace
from functools import lru_cache
from pathlib import Path

from core.exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_NAMESPACE = "ecs-services"
RESERVED_NAMESPACE_PREFIX = "AWS/"
MAX_NAMESPACE_LENGTH = 255

_TRUE_VALUES = {"true", "1", "yes", "on"}
_FALSE_VALUES = {"false", "0", "no", "off"}


# =============================================================================
# 환경변수 헬퍼
# =============================================================================


def get_env_bool(key: str, default: bool = False) -> bool:
    """환경변수를 bool로 변환 (알 수 없는 값이면 기본값)"""
    value = os.environ.get(key)
    if value is None:
        return default

    value = value.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return default


def get_default_region() -> str | None:
    """환경변수에서 리전 조회

    REGION(배포 설정) → AWS_REGION → AWS_DEFAULT_REGION 순서.
    모두 없으면 None을 반환하여 boto3 기본 체인에 맡깁니다.
    """
    for key in ("REGION", "AWS_REGION", "AWS_DEFAULT_REGION"):
        value = os.environ.get(key)
        if value:
            return value
    return None


def get_default_profile() -> str | None:
    """AWS_PROFILE 환경변수에서 프로파일 조회"""
    return os.environ.get("AWS_PROFILE") or None


@lru_cache(maxsize=1)
def get_version() -> str:
    """version.txt 파일에서 버전 문자열 반환"""
    version_file = Path(__file__).resolve().parent.parent / "version.txt"
    try:
        return version_file.read_text(encoding="utf-8").strip() or "0.0.0"
    except OSError:
        logger.debug("version.txt not found: %s", version_file)
        return "0.0.0"


# =============================================================================
# 설정 데이터클래스
# =============================================================================


@dataclass(frozen=True)
class LogConfig:
    """로깅 설정

    Attributes:
        level: 로그 레벨 이름
        format: 로그 포맷 문자열
        date_format: 날짜 포맷 문자열
    """

    level: str = "INFO"
    format: str = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"

    @classmethod
    def from_env(cls) -> LogConfig:
        """LOG_LEVEL / LOG_FORMAT / LOG_DATE_FORMAT 환경변수에서 로드"""
        defaults = cls()
        return cls(
            level=os.environ.get("LOG_LEVEL", defaults.level).upper(),
            format=os.environ.get("LOG_FORMAT", defaults.format),
            date_format=os.environ.get("LOG_DATE_FORMAT", defaults.date_format),
        )

    @property
    def numeric_level(self) -> int:
        """logging 모듈 레벨 값 (알 수 없는 이름이면 INFO)"""
        level = logging.getLevelName(self.level)
        return level if isinstance(level, int) else logging.INFO


@dataclass(frozen=True)
class MonitorConfig:
    """ECS 메트릭 발행 실행 설정

    Attributes:
        region: ECS/CloudWatch 리전 (None이면 boto3 기본값)
        namespace: CloudWatch 커스텀 메트릭 네임스페이스
        profile: AWS 프로파일 이름 (None이면 기본 자격 증명 체인)
        dry_run: True면 수집만 하고 PutMetricData를 호출하지 않음
        log: 로깅 설정
    """

    region: str | None = None
    namespace: str = DEFAULT_NAMESPACE
    profile: str | None = None
    dry_run: bool = False
    log: LogConfig = field(default_factory=LogConfig)

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """설정값 검증

        Raises:
            ConfigError: 네임스페이스가 비어있거나, 너무 길거나, 예약 접두사(AWS/)로 시작
        """
        if not self.namespace or not self.namespace.strip():
            raise ConfigError("namespace", "네임스페이스가 비어있음")
        if len(self.namespace) > MAX_NAMESPACE_LENGTH:
            raise ConfigError("namespace", f"네임스페이스는 최대 {MAX_NAMESPACE_LENGTH}자")
        if self.namespace.startswith(RESERVED_NAMESPACE_PREFIX):
            raise ConfigError("namespace", f"'{RESERVED_NAMESPACE_PREFIX}' 접두사는 AWS 예약 네임스페이스")

    @classmethod
    def from_env(cls) -> MonitorConfig:
        """환경변수에서 설정 로드"""
        return cls(
            region=get_default_region(),
            namespace=os.environ.get("CLOUDWATCH_NAMESPACE") or DEFAULT_NAMESPACE,
            profile=get_default_profile(),
            dry_run=get_env_bool("ECS_MONITOR_DRY_RUN"),
            log=LogConfig.from_env(),
        )

    def with_overrides(self, **changes) -> MonitorConfig:
        """None이 아닌 값만 덮어쓴 새 설정 반환

        Args:
            **changes: 덮어쓸 필드 (None은 무시)

        Returns:
            새 MonitorConfig 인스턴스 (원본은 변경되지 않음)
        """
        updates = {key: value for key, value in changes.items() if value is not None}
        if not updates:
            return self
        return replace(self, **updates)
