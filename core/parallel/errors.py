"""
core/parallel/errors.py - 에러 수집 및 관리

병렬 수집 중 발생하는 복구 가능한 에러를 일관되게 수집하고 관리하는 유틸리티입니다.

주요 구성 요소:
- ErrorSeverity: 에러 심각도 분류
- CollectedError: 수집된 에러 상세 정보
- ErrorCollector: 스레드 세이프 에러 수집기
- try_or_default: 실패 시 기본값 반환 헬퍼

Example:
    collector = ErrorCollector("ec2")

    size = try_or_default(
        lambda: get_attached_storage_gb(ec2, instance_id),
        default=0,
        collector=collector,
        region=region,
        operation="describe_volumes",
        resource_id=instance_id,
    )

    if collector.has_errors:
        print(collector.get_summary())
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import TypeVar

from botocore.exceptions import BotoCoreError, ClientError, ConnectTimeoutError, EndpointConnectionError, ReadTimeoutError

from .types import ErrorCategory

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ErrorSeverity(Enum):
    """에러 심각도 분류

    수집된 에러의 심각도를 나타내며, 로깅 레벨을 결정합니다.
    """

    CRITICAL = "critical"  # 리전 수집 중단
    WARNING = "warning"  # 필드 대체값 사용 - 보고하되 계속 진행
    INFO = "info"  # 정보성 - 로그만 남김 (권한 없음 등)
    DEBUG = "debug"


@dataclass
class CollectedError:
    """수집된 에러 상세 정보

    Attributes:
        timestamp: 에러 발생 시각
        region: AWS 리전
        service: AWS 서비스 이름 (예: "ec2", "pricing")
        operation: API 작업 이름 (예: "describe_volumes")
        error_code: AWS 에러 코드 (예: "AccessDenied")
        error_message: 에러 메시지
        severity: 에러 심각도
        category: 에러 카테고리 (ErrorCategory)
        resource_id: 관련 리소스 ID (인스턴스 ID, 인스턴스 타입 등)
    """

    timestamp: datetime
    region: str
    service: str
    operation: str
    error_code: str
    error_message: str
    severity: ErrorSeverity
    category: ErrorCategory
    resource_id: str | None = None

    def __str__(self) -> str:
        target = f" ({self.resource_id})" if self.resource_id else ""
        return f"[{self.severity.value.upper()}] {self.region} - {self.service}.{self.operation}{target}: {self.error_code}"

    def to_dict(self) -> dict[str, str | None]:
        """딕셔너리로 변환 (로깅/직렬화용)"""
        return {
            "timestamp": self.timestamp.isoformat(),
            "region": self.region,
            "service": self.service,
            "operation": self.operation,
            "error_code": self.error_code,
            "error_message": self.error_message,
            "severity": self.severity.value,
            "category": self.category.value,
            "resource_id": self.resource_id,
        }


def categorize_error_code(error_code: str) -> ErrorCategory:
    """에러 코드 문자열을 기반으로 ErrorCategory 분류

    Args:
        error_code: AWS 에러 코드 문자열 (예: "AccessDenied", "ThrottlingException")

    Returns:
        분류된 에러 카테고리. 매칭되는 키워드가 없으면 UNKNOWN 반환.
    """
    code = error_code.lower()

    if any(x in code for x in ["accessdenied", "unauthorized", "forbidden", "authfailure"]):
        return ErrorCategory.ACCESS_DENIED
    if any(x in code for x in ["notfound", "nosuch", "doesnotexist"]):
        return ErrorCategory.NOT_FOUND
    if any(x in code for x in ["throttl", "ratelimit", "toomanyrequests", "requestlimitexceeded"]):
        return ErrorCategory.THROTTLING
    if any(x in code for x in ["timeout", "timedout"]):
        return ErrorCategory.TIMEOUT
    if any(x in code for x in ["invalid", "validation", "malformed"]):
        return ErrorCategory.INVALID_REQUEST
    if any(x in code for x in ["internal", "serviceunavailable", "serviceerror"]):
        return ErrorCategory.SERVICE_ERROR

    return ErrorCategory.UNKNOWN


def get_error_code(error: BaseException) -> str:
    """예외에서 AWS 에러 코드 추출 (ClientError가 아니면 예외 클래스명)"""
    if isinstance(error, ClientError):
        return error.response.get("Error", {}).get("Code", "Unknown")
    return type(error).__name__


def categorize_error(error: BaseException) -> ErrorCategory:
    """예외 객체를 ErrorCategory로 분류"""
    if isinstance(error, ClientError):
        return categorize_error_code(get_error_code(error))
    if isinstance(error, (ConnectTimeoutError, ReadTimeoutError)):
        return ErrorCategory.TIMEOUT
    if isinstance(error, EndpointConnectionError):
        return ErrorCategory.NETWORK
    if isinstance(error, BotoCoreError):
        return ErrorCategory.SERVICE_ERROR
    return ErrorCategory.UNKNOWN


class ErrorCollector:
    """스레드 세이프 에러 수집기

    여러 리전 워커 스레드에서 발생하는 에러를 안전하게 수집하고
    심각도별 요약 보고를 제공합니다.

    Example:
        collector = ErrorCollector("ec2")

        try:
            ec2.describe_volumes(...)
        except ClientError as e:
            collector.collect(e, region, "describe_volumes", resource_id=instance_id)

        if collector.has_errors:
            print(collector.get_summary())
    """

    def __init__(self, service: str):
        """
        Args:
            service: AWS 서비스 이름 (수집된 에러의 기본값)
        """
        self.service = service
        self._errors: list[CollectedError] = []
        self._lock = threading.Lock()

    def collect(
        self,
        error: BaseException,
        region: str,
        operation: str,
        severity: ErrorSeverity = ErrorSeverity.WARNING,
        resource_id: str | None = None,
        service: str | None = None,
    ) -> None:
        """예외를 수집하고 로깅

        에러 코드에서 카테고리를 자동 분류하며, ACCESS_DENIED는
        심각도를 INFO로 자동 다운그레이드합니다.

        Args:
            error: 발생한 예외 (ClientError, BotoCoreError 등)
            region: AWS 리전
            operation: API 작업 이름
            severity: 에러 심각도 (기본: WARNING)
            resource_id: 관련 리소스 ID (선택사항)
            service: 서비스 이름 (None이면 수집기 기본값)
        """
        if isinstance(error, ClientError):
            error_message = error.response.get("Error", {}).get("Message", str(error))
        else:
            error_message = str(error)
        category = categorize_error(error)

        # 권한 없음은 INFO로 다운그레이드 (CRITICAL 제외)
        if category == ErrorCategory.ACCESS_DENIED and severity != ErrorSeverity.CRITICAL:
            severity = ErrorSeverity.INFO

        collected = CollectedError(
            timestamp=datetime.now(),
            region=region,
            service=service or self.service,
            operation=operation,
            error_code=get_error_code(error),
            error_message=error_message,
            severity=severity,
            category=category,
            resource_id=resource_id,
        )

        with self._lock:
            self._errors.append(collected)

        log_msg = f"{collected} - {error_message}"
        if severity == ErrorSeverity.CRITICAL:
            logger.error(log_msg)
        elif severity == ErrorSeverity.WARNING:
            logger.warning(log_msg)
        elif severity == ErrorSeverity.INFO:
            logger.info(log_msg)
        else:
            logger.debug(log_msg)

    @property
    def errors(self) -> list[CollectedError]:
        """수집된 모든 에러의 복사본 반환"""
        with self._lock:
            return list(self._errors)

    @property
    def has_errors(self) -> bool:
        with self._lock:
            return len(self._errors) > 0

    @property
    def critical_errors(self) -> list[CollectedError]:
        """CRITICAL 심각도 에러만 반환"""
        with self._lock:
            return [e for e in self._errors if e.severity == ErrorSeverity.CRITICAL]

    def get_summary(self) -> str:
        """심각도별 에러 건수를 포함한 요약 문자열 반환

        Returns:
            포맷팅된 요약 문자열 (예: "에러 3건 (critical: 1건, warning: 2건)")
        """
        with self._lock:
            if not self._errors:
                return "에러 없음"

            by_severity: dict[str, int] = {}
            for e in self._errors:
                by_severity[e.severity.value] = by_severity.get(e.severity.value, 0) + 1

            parts = [f"{k}: {v}건" for k, v in sorted(by_severity.items())]
            return f"에러 {len(self._errors)}건 ({', '.join(parts)})"

    def get_by_region(self) -> dict[str, list[CollectedError]]:
        """리전별로 에러를 그룹핑하여 반환"""
        with self._lock:
            result: dict[str, list[CollectedError]] = {}
            for e in self._errors:
                result.setdefault(e.region, []).append(e)
            return result

    def clear(self) -> None:
        with self._lock:
            self._errors.clear()


def try_or_default(
    func: Callable[[], T],
    default: T,
    collector: ErrorCollector | None = None,
    region: str = "",
    operation: str = "",
    resource_id: str | None = None,
    severity: ErrorSeverity = ErrorSeverity.WARNING,
) -> T:
    """함수 실행, AWS 호출 실패 시 기본값 반환 + 에러 수집

    부수적인 API 호출(볼륨 조회 등)에서 실패해도 전체 로직을 중단하지 않고
    기본값으로 대체하면서 에러를 수집합니다. AWS 예외가 아닌 에러(버그)는 전파합니다.

    Args:
        func: 실행할 함수 (인자 없음)
        default: 실패 시 반환할 기본값
        collector: ErrorCollector 인스턴스 (None이면 로깅만)
        region: AWS 리전
        operation: API 작업 이름
        resource_id: 관련 리소스 ID
        severity: 에러 심각도 (기본: WARNING)

    Returns:
        함수 실행 결과 또는 실패 시 default 값
    """
    try:
        return func()
    except (ClientError, BotoCoreError) as e:
        if collector:
            collector.collect(e, region, operation, severity=severity, resource_id=resource_id)
        else:
            target = f" ({resource_id})" if resource_id else ""
            logger.warning(f"[{region}] {operation}{target}: {get_error_code(e)} - {e}")
        return default
