# cli/ui - 콘솔 출력 컴포넌트 (rich)
"""
콘솔 출력 모듈

CLI 전용 출력 유틸리티 (상태 메시지, 테이블, 로깅 핸들러)
"""

from .console import (
    SYMBOL_ERROR,
    SYMBOL_INFO,
    SYMBOL_SUCCESS,
    console,
    get_console,
    print_error,
    print_info,
    print_success,
    print_table,
    setup_logging,
)

__all__: list[str] = [
    "SYMBOL_ERROR",
    "SYMBOL_INFO",
    "SYMBOL_SUCCESS",
    "console",
    "get_console",
    "print_error",
    "print_info",
    "print_success",
    "print_table",
    "setup_logging",
]
