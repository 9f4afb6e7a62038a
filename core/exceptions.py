"""
core/exceptions.py - 통합 예외 계층 구조

인벤토리 수집 전체에서 사용되는 예외 클래스들을 정의합니다.

예외 계층 구조:
    InventoryError (베이스)
    ├── RegionDiscoveryError (활성 리전 조회 실패 - 전체 수집 중단)
    ├── APICallError (AWS API 호출 실패 래퍼)
    └── ConfigError (설정 관련)

리전 목록 조회 실패만 호출자에게 전파되며, 그 외 API 실패는
수집기 내부에서 기록 후 대체값(sentinel)으로 처리됩니다.

Usage:
    from core.exceptions import RegionDiscoveryError

    try:
        records = collector.collect_all()
    except RegionDiscoveryError as e:
        print(e.to_dict())
"""

from typing import Any, Dict, Optional

# =============================================================================
# 베이스 예외
# =============================================================================


class InventoryError(Exception):
    """EC2 인벤토리 기본 예외 클래스

    Attributes:
        message: 에러 메시지
        cause: 원인 예외 (체이닝용)
        details: 추가 상세 정보
    """

    def __init__(
        self,
        message: str,
        cause: Optional[Exception] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.details = details or {}

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """예외 정보를 딕셔너리로 반환"""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "cause": str(self.cause) if self.cause else None,
            "details": self.details,
        }


# =============================================================================
# AWS API 관련 예외
# =============================================================================


class APICallError(InventoryError):
    """AWS API 호출 실패 예외

    Attributes:
        service: AWS 서비스 이름 (예: "ec2", "pricing")
        operation: API 작업 이름 (예: "describe_regions")
        error_code: AWS 에러 코드 (ClientError인 경우)
    """

    def __init__(
        self,
        service: str,
        operation: str,
        cause: Optional[Exception] = None,
        region: Optional[str] = None,
    ):
        self.service = service
        self.operation = operation
        self.region = region
        self.error_code = _extract_error_code(cause)

        location = f"{service}.{operation}"
        if region:
            location = f"{location} ({region})"
        super().__init__(f"API 호출 실패 [{location}]", cause)

        self.details["service"] = service
        self.details["operation"] = operation
        if region:
            self.details["region"] = region
        if self.error_code:
            self.details["error_code"] = self.error_code


class RegionDiscoveryError(APICallError):
    """활성 리전 목록 조회 실패 예외

    어떤 리전이 존재하는지 알 수 없으면 부분 결과도 의미가 없으므로
    전체 수집을 중단합니다.
    """

    def __init__(self, cause: Optional[Exception] = None, region: Optional[str] = None):
        super().__init__("ec2", "describe_regions", cause=cause, region=region)
        self.message = "활성 리전 목록 조회 실패"


# =============================================================================
# 설정 관련 예외
# =============================================================================


class ConfigError(InventoryError):
    """설정 관련 예외"""

    def __init__(self, message: str, key: Optional[str] = None):
        super().__init__(message)
        self.key = key
        if key:
            self.details["key"] = key


def _extract_error_code(error: Optional[Exception]) -> Optional[str]:
    """ClientError 형태의 예외에서 에러 코드 추출"""
    if error is None:
        return None
    response = getattr(error, "response", None)
    if not isinstance(response, dict):
        return None
    return response.get("Error", {}).get("Code")
