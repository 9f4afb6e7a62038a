"""
core/parallel/executor.py - 리전 병렬 실행기

리전별 작업을 ThreadPoolExecutor로 동시에 실행하고 모두 완료될 때까지 기다립니다.
한 리전의 실패가 다른 리전 작업을 취소하지 않으며 (join-all),
결과는 완료 순서가 아닌 리전 입력 순서대로 반환됩니다.

주요 구성 요소:
- ParallelConfig: 병렬 실행 설정 (워커 수)
- RegionExecutor: 리전 병렬 실행기
- parallel_collect: 간편한 병렬 수집 래퍼 함수

Example:
    from core.parallel import parallel_collect

    def collect_region(region):
        return [...]

    result = parallel_collect(["us-east-1", "eu-west-1"], collect_region)
    records = result.get_flat_data()
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from typing import TypeVar

from .errors import categorize_error, get_error_code
from .types import ParallelExecutionResult, TaskError, TaskResult

logger = logging.getLogger(__name__)

T = TypeVar("T")

# 워커 수 상한
MAX_WORKERS_LIMIT = 100


def _clear_exception_chain(e: BaseException) -> None:
    """traceback + chained exception 메모리 누수 방지"""
    e.__traceback__ = None
    if e.__context__ is not None:
        e.__context__.__traceback__ = None
    if e.__cause__ is not None:
        e.__cause__.__traceback__ = None


@dataclass
class ParallelConfig:
    """병렬 실행 설정

    Attributes:
        max_workers: 최대 동시 스레드 수 (None이면 작업 수만큼, 최대 100)
    """

    max_workers: int | None = None

    def __post_init__(self) -> None:
        if self.max_workers is not None:
            if self.max_workers < 1:
                raise ValueError(f"max_workers must be >= 1, got {self.max_workers}")
            if self.max_workers > MAX_WORKERS_LIMIT:
                self.max_workers = MAX_WORKERS_LIMIT

    def resolve_workers(self, task_count: int) -> int:
        """작업 수에 맞춘 실제 워커 수"""
        limit = self.max_workers or MAX_WORKERS_LIMIT
        return max(1, min(task_count, limit))


class RegionExecutor:
    """리전 병렬 실행기

    특징:
    - ThreadPoolExecutor 기반 병렬 처리
    - 리전 순서 보존 (인덱스 슬롯에 결과 저장)
    - 개별 작업 예외는 TaskResult 실패로 기록하고 나머지 작업은 계속 진행

    Example:
        executor = RegionExecutor(ParallelConfig(max_workers=10))
        result = executor.execute(regions, collect_region)
    """

    def __init__(self, config: ParallelConfig | None = None):
        self.config = config or ParallelConfig()

    def execute(self, regions: Sequence[str], func: Callable[[str], T]) -> ParallelExecutionResult[T]:
        """작업 함수를 모든 리전에 병렬 실행

        Args:
            regions: 대상 리전 목록 (결과 순서 기준)
            func: (region) -> T 함수

        Returns:
            ParallelExecutionResult[T]: 리전 순서대로 정렬된 실행 결과
        """
        if not regions:
            logger.warning("실행할 작업이 없습니다")
            return ParallelExecutionResult()

        workers = self.config.resolve_workers(len(regions))
        logger.info(f"병렬 실행 시작: {len(regions)}개 리전, max_workers={workers}")

        start_time = time.monotonic()
        slots: list[TaskResult[T] | None] = [None] * len(regions)

        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures: list[Future[TaskResult[T]]] = [
                executor.submit(self._execute_single, func, region) for region in regions
            ]
            # 모든 작업 완료 대기 (입력 순서대로 슬롯에 저장)
            for index, future in enumerate(futures):
                slots[index] = future.result()

        results = tuple(r for r in slots if r is not None)
        exec_result = ParallelExecutionResult(results=results)

        total_time = (time.monotonic() - start_time) * 1000
        logger.info(
            f"병렬 실행 완료: 성공 {exec_result.success_count}, 실패 {exec_result.error_count}, 총 {total_time:.0f}ms"
        )
        return exec_result

    def _execute_single(self, func: Callable[[str], T], region: str) -> TaskResult[T]:
        """단일 리전 작업 실행 (워커 스레드 내에서 호출)"""
        start_time = time.monotonic()
        try:
            data = func(region)
            return TaskResult(
                region=region,
                success=True,
                data=data,
                duration_ms=(time.monotonic() - start_time) * 1000,
            )
        except Exception as e:
            logger.error(f"작업 실행 중 예외 [{region}]: {e}")
            _clear_exception_chain(e)
            return TaskResult(
                region=region,
                success=False,
                error=TaskError(
                    region=region,
                    category=categorize_error(e),
                    error_code=get_error_code(e),
                    message=str(e),
                ),
                duration_ms=(time.monotonic() - start_time) * 1000,
            )


def parallel_collect(
    regions: Sequence[str],
    collector_func: Callable[[str], T],
    max_workers: int | None = None,
) -> ParallelExecutionResult[T]:
    """병렬 수집 편의 함수

    Args:
        regions: 대상 리전 목록
        collector_func: (region) -> T
        max_workers: 최대 동시 스레드 수 (None이면 리전 수만큼)

    Returns:
        ParallelExecutionResult[T]
    """
    executor = RegionExecutor(ParallelConfig(max_workers=max_workers))
    return executor.execute(regions, collector_func)
