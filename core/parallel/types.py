"""
core/parallel/types.py - 병렬 실행 결과 타입

리전 단위 작업의 결과(TaskResult)와 전체 실행 결과(ParallelExecutionResult)를 정의합니다.
결과는 리전 입력 순서대로 보관됩니다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class ErrorCategory(Enum):
    """에러 카테고리"""

    ACCESS_DENIED = "access_denied"
    NOT_FOUND = "not_found"
    THROTTLING = "throttling"
    TIMEOUT = "timeout"
    INVALID_REQUEST = "invalid_request"
    SERVICE_ERROR = "service_error"
    NETWORK = "network"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class TaskError:
    """작업 실패 정보

    Attributes:
        region: 대상 리전
        category: 에러 카테고리
        error_code: 에러 코드 (예: "AccessDenied")
        message: 에러 메시지
    """

    region: str
    category: ErrorCategory
    error_code: str
    message: str

    def __str__(self) -> str:
        return f"[{self.region}] {self.error_code}: {self.message}"


@dataclass(frozen=True)
class TaskResult(Generic[T]):
    """단일 리전 작업 결과

    Attributes:
        region: 대상 리전
        success: 성공 여부
        data: 성공 시 결과 데이터
        error: 실패 시 에러 정보
        duration_ms: 실행 시간 (밀리초)
    """

    region: str
    success: bool
    data: T | None = None
    error: TaskError | None = None
    duration_ms: float = 0.0


@dataclass(frozen=True)
class ParallelExecutionResult(Generic[T]):
    """전체 병렬 실행 결과 (리전 입력 순서 유지)

    Attributes:
        results: 리전 순서대로 정렬된 TaskResult 튜플
    """

    results: tuple[TaskResult[T], ...] = field(default_factory=tuple)

    @property
    def success_count(self) -> int:
        return sum(1 for r in self.results if r.success)

    @property
    def error_count(self) -> int:
        return sum(1 for r in self.results if not r.success)

    @property
    def errors(self) -> list[TaskError]:
        return [r.error for r in self.results if r.error is not None]

    def get_data(self) -> list[T]:
        """성공한 작업의 데이터 목록 (리전 순서)"""
        return [r.data for r in self.results if r.success and r.data is not None]

    def get_flat_data(self) -> list:
        """리스트 데이터를 리전 순서대로 평탄화하여 반환"""
        flat: list = []
        for data in self.get_data():
            if isinstance(data, list):
                flat.extend(data)
            else:
                flat.append(data)
        return flat

    def get_error_summary(self) -> str:
        """실패 작업 요약 문자열"""
        if not self.error_count:
            return "에러 없음"
        lines = [f"실패 {self.error_count}건:"]
        lines.extend(f"  - {e}" for e in self.errors)
        return "\n".join(lines)
