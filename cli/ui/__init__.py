# cli/ui - 콘솔 출력 컴포넌트 (rich)
"""
콘솔 출력 모듈

CLI 전용 UI 컴포넌트들 (상태 메시지, 로깅 설정)
"""

from .console import (
    SYMBOL_ERROR,
    SYMBOL_INFO,
    SYMBOL_SUCCESS,
    SYMBOL_WARNING,
    console,
    get_console,
    print_error,
    print_info,
    print_success,
    print_warning,
    report_console,
    setup_logging,
)

__all__ = [
    "console",
    "report_console",
    "get_console",
    "setup_logging",
    "print_success",
    "print_error",
    "print_warning",
    "print_info",
    "SYMBOL_SUCCESS",
    "SYMBOL_ERROR",
    "SYMBOL_WARNING",
    "SYMBOL_INFO",
]
