# core/auth/__init__.py
"""
AWS 인증 모듈 (core/auth)

프로파일 또는 기본 자격 증명 체인으로 boto3 Session을 생성합니다.

사용 예시:
    from core.auth import get_session

    session = get_session(profile_name="my-profile", region_name="us-east-1")
"""

from .session import get_session

__all__ = ["get_session"]
