"""
core/exceptions.py - 통합 예외 계층 구조

수집/발행 파이프라인 전체에서 사용되는 예외 클래스들을 정의합니다.
모든 업스트림 예외는 해당 실행(run)에 대해 종료성(terminal)이며 재시도하지 않습니다.

예외 계층 구조:
    MonitorError (베이스)
    ├── ConfigError (설정 관련)
    └── UpstreamError (AWS API 호출 실패)
        ├── UpstreamListError (ListClusters / ListServices)
        ├── UpstreamDescribeError (DescribeClusters / DescribeServices)
        └── UpstreamPublishError (PutMetricData)

Usage:
    from core.exceptions import UpstreamListError

    try:
        pages = list(paginator.paginate())
    except ClientError as e:
        raise UpstreamListError.from_client_error("ecs", "list_clusters", e) from e
"""

from __future__ import annotations

from typing import Any

# =============================================================================
# 베이스 예외
# =============================================================================


class MonitorError(Exception):
    """ECS Monitor 기본 예외 클래스

    Attributes:
        message: 에러 메시지
        cause: 원인 예외 (체이닝용)
        details: 추가 상세 정보
    """

    def __init__(
        self,
        message: str,
        cause: Exception | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.details = details or {}

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """예외 정보를 딕셔너리로 반환"""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "cause": str(self.cause) if self.cause else None,
            "details": self.details,
        }


# =============================================================================
# 설정 관련 예외
# =============================================================================


class ConfigError(MonitorError):
    """설정 관련 예외"""

    def __init__(
        self,
        key: str,
        message: str,
        cause: Exception | None = None,
    ):
        full_message = f"설정 오류 [{key}]: {message}"
        super().__init__(full_message, cause)
        self.config_key = key
        self.details["config_key"] = key


# =============================================================================
# 업스트림(AWS API) 관련 예외
# =============================================================================


class UpstreamError(MonitorError):
    """AWS API 호출 관련 예외

    boto3/botocore 예외를 래핑하여 일관된 예외 처리를 제공합니다.
    """

    def __init__(
        self,
        service: str,
        operation: str,
        error_code: str | None = None,
        error_message: str | None = None,
        cause: Exception | None = None,
    ):
        message = f"{service}.{operation}"
        if error_code:
            message = f"{message} 실패 ({error_code})"
        if error_message:
            message = f"{message}: {error_message}"

        super().__init__(message, cause)
        self.service = service
        self.operation = operation
        self.error_code = error_code
        self.error_message = error_message
        self.details.update(
            {
                "service": service,
                "operation": operation,
                "error_code": error_code,
            }
        )

    @classmethod
    def from_client_error(
        cls,
        service: str,
        operation: str,
        client_error: Exception,
        **kwargs: Any,
    ):
        """botocore 예외로부터 생성

        ClientError는 응답의 Error 코드/메시지를 꺼내 쓰고,
        그 외 BotoCoreError(연결 실패, 자격 증명 없음 등)는 메시지만 보존합니다.

        Args:
            service: AWS 서비스 이름
            operation: API 작업 이름
            client_error: 원인 예외
            **kwargs: 하위 클래스 전용 추가 인자

        Returns:
            해당 클래스의 인스턴스
        """
        error_code = None
        error_message = None

        if hasattr(client_error, "response"):
            error_info = client_error.response.get("Error", {})
            error_code = error_info.get("Code")
            error_message = error_info.get("Message")

        return cls(
            service=service,
            operation=operation,
            error_code=error_code,
            error_message=error_message,
            cause=client_error,
            **kwargs,
        )


class UpstreamListError(UpstreamError):
    """리소스 목록 조회(List*) 실패"""

    pass


class UpstreamDescribeError(UpstreamError):
    """리소스 상세 조회(Describe*) 실패"""

    pass


class UpstreamPublishError(UpstreamError):
    """메트릭 발행(PutMetricData) 실패

    실패 이전에 전송된 배치는 롤백되지 않습니다.

    Attributes:
        batch_index: 실패한 배치의 0-based 인덱스
        sent_count: 실패 이전에 전송 완료된 메트릭 수
    """

    def __init__(
        self,
        service: str,
        operation: str,
        error_code: str | None = None,
        error_message: str | None = None,
        cause: Exception | None = None,
        batch_index: int = 0,
        sent_count: int = 0,
    ):
        super().__init__(service, operation, error_code, error_message, cause)
        self.batch_index = batch_index
        self.sent_count = sent_count
        self.details.update({"batch_index": batch_index, "sent_count": sent_count})


# =============================================================================
# 예외 유틸리티 함수
# =============================================================================


def format_error_for_user(error: Exception) -> str:
    """사용자에게 표시할 에러 메시지 포맷팅

    Args:
        error: 예외

    Returns:
        사용자 친화적인 에러 메시지
    """
    friendly_messages = {
        "AccessDenied": "권한이 없습니다. IAM 정책을 확인하세요.",
        "AccessDeniedException": "권한이 없습니다. IAM 정책을 확인하세요.",
        "ExpiredToken": "인증 토큰이 만료되었습니다. 다시 로그인하세요.",
        "ExpiredTokenException": "인증 토큰이 만료되었습니다. 다시 로그인하세요.",
        "InvalidClientTokenId": "잘못된 자격 증명입니다.",
        "Throttling": "요청이 너무 많습니다. 잠시 후 다시 시도하세요.",
        "ThrottlingException": "요청이 너무 많습니다. 잠시 후 다시 시도하세요.",
    }

    if isinstance(error, UpstreamError) and error.error_code in friendly_messages:
        return f"{error.service}.{error.operation}: {friendly_messages[error.error_code]}"

    # 커스텀 예외는 이미 포맷팅됨
    return str(error)
