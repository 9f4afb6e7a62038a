"""
core/parallel - 병렬 처리 모듈

리전별 AWS 작업을 병렬로 안전하게 처리합니다.

주요 구성 요소:
- RegionExecutor: 리전 순서를 보존하는 병렬 실행기
- parallel_collect: 간편한 병렬 수집 함수
- ErrorCollector: 복구 가능한 에러 수집기

Example:
    from core.parallel import parallel_collect

    result = parallel_collect(regions, collect_region, max_workers=20)

    records = result.get_flat_data()
    print(f"성공: {result.success_count}, 실패: {result.error_count}")
"""

from .client import get_client
from .errors import (
    CollectedError,
    ErrorCollector,
    ErrorSeverity,
    try_or_default,
)
from .executor import ParallelConfig, RegionExecutor, parallel_collect
from .types import ErrorCategory, ParallelExecutionResult, TaskError, TaskResult

__all__: list[str] = [
    # Executor
    "RegionExecutor",
    "ParallelConfig",
    "parallel_collect",
    # Client
    "get_client",
    # Error handling
    "ErrorCollector",
    "ErrorSeverity",
    "CollectedError",
    "try_or_default",
    # Types
    "ErrorCategory",
    "TaskError",
    "TaskResult",
    "ParallelExecutionResult",
]
