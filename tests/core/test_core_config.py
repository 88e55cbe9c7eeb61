"""
tests/core/test_core_config.py - core/config.py 테스트
"""

import dataclasses
import logging

import pytest

from core.config import (
    DEFAULT_NAMESPACE,
    LogConfig,
    MonitorConfig,
    get_default_profile,
    get_default_region,
    get_env_bool,
    get_version,
)
from core.exceptions import ConfigError


class TestEnvironmentHelpers:
    """환경변수 헬퍼 함수 테스트"""

    def test_region_prefers_deploy_setting(self, monkeypatch):
        """REGION이 AWS_REGION보다 우선"""
        monkeypatch.setenv("REGION", "ap-southeast-2")
        monkeypatch.setenv("AWS_REGION", "us-west-2")
        assert get_default_region() == "ap-southeast-2"

    def test_region_from_aws_region(self, monkeypatch):
        monkeypatch.setenv("AWS_REGION", "us-west-2")
        assert get_default_region() == "us-west-2"

    def test_region_none(self, monkeypatch):
        """리전 환경변수 없을 때 None"""
        monkeypatch.delenv("AWS_DEFAULT_REGION", raising=False)
        assert get_default_region() is None

    def test_profile(self, monkeypatch):
        monkeypatch.setenv("AWS_PROFILE", "ecs-monitor")
        assert get_default_profile() == "ecs-monitor"

    def test_profile_none(self):
        assert get_default_profile() is None

    @pytest.mark.parametrize("value", ["true", "1", "yes", "on", "TRUE", "Yes"])
    def test_get_env_bool_true_values(self, monkeypatch, value):
        monkeypatch.setenv("TEST_BOOL", value)
        assert get_env_bool("TEST_BOOL") is True

    @pytest.mark.parametrize("value", ["false", "0", "no", "off", "FALSE", "No"])
    def test_get_env_bool_false_values(self, monkeypatch, value):
        monkeypatch.setenv("TEST_BOOL", value)
        assert get_env_bool("TEST_BOOL", default=True) is False

    def test_get_env_bool_invalid(self, monkeypatch):
        """유효하지 않은 값은 기본값"""
        monkeypatch.setenv("TEST_BOOL", "invalid")
        assert get_env_bool("TEST_BOOL", default=True) is True
        assert get_env_bool("TEST_BOOL", default=False) is False

    def test_get_env_bool_missing(self):
        assert get_env_bool("NONEXISTENT", default=True) is True


class TestMonitorConfig:
    """MonitorConfig 테스트"""

    def test_defaults(self):
        config = MonitorConfig()
        assert config.region is None
        assert config.namespace == DEFAULT_NAMESPACE == "ecs-services"
        assert config.profile is None
        assert config.dry_run is False

    def test_is_frozen(self):
        """설정은 불변"""
        config = MonitorConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.namespace = "other"

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("REGION", "ap-southeast-2")
        monkeypatch.setenv("CLOUDWATCH_NAMESPACE", "my-ecs")
        monkeypatch.setenv("AWS_PROFILE", "ecs-monitor")
        monkeypatch.setenv("ECS_MONITOR_DRY_RUN", "true")

        config = MonitorConfig.from_env()

        assert config.region == "ap-southeast-2"
        assert config.namespace == "my-ecs"
        assert config.profile == "ecs-monitor"
        assert config.dry_run is True

    def test_from_env_empty_namespace_falls_back(self, monkeypatch):
        monkeypatch.setenv("CLOUDWATCH_NAMESPACE", "")
        assert MonitorConfig.from_env().namespace == DEFAULT_NAMESPACE

    @pytest.mark.parametrize("namespace", ["", "   ", "AWS/ECS", "x" * 256])
    def test_invalid_namespace(self, namespace):
        with pytest.raises(ConfigError) as exc_info:
            MonitorConfig(namespace=namespace)
        assert exc_info.value.config_key == "namespace"

    def test_with_overrides(self):
        """None이 아닌 값만 덮어쓰고 원본은 유지"""
        base = MonitorConfig(region="ap-southeast-2", namespace="ecs-services")
        updated = base.with_overrides(region=None, namespace="other", dry_run=True)

        assert updated.region == "ap-southeast-2"
        assert updated.namespace == "other"
        assert updated.dry_run is True
        assert base.namespace == "ecs-services"
        assert base.dry_run is False

    def test_with_overrides_no_changes(self):
        base = MonitorConfig()
        assert base.with_overrides(region=None) is base

    def test_with_overrides_validates(self):
        with pytest.raises(ConfigError):
            MonitorConfig().with_overrides(namespace="AWS/Custom")


class TestLogConfig:
    """LogConfig 테스트"""

    def test_default_values(self):
        config = LogConfig()
        assert config.level == "INFO"
        assert "%(asctime)s" in config.format
        assert config.date_format == "%Y-%m-%d %H:%M:%S"
        assert config.numeric_level == logging.INFO

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("LOG_FORMAT", "%(message)s")
        monkeypatch.setenv("LOG_DATE_FORMAT", "%H:%M")
        config = LogConfig.from_env()
        assert config.level == "DEBUG"
        assert config.format == "%(message)s"
        assert config.date_format == "%H:%M"
        assert config.numeric_level == logging.DEBUG

    def test_unknown_level(self):
        assert LogConfig(level="NOPE").numeric_level == logging.INFO


class TestGetVersion:
    """get_version 테스트"""

    def test_version_format(self):
        get_version.cache_clear()
        version = get_version()
        assert isinstance(version, str)
        assert any(c.isdigit() for c in version)
