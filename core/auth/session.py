"""
core/auth/session.py - boto3 Session 생성

boto3 Session은 스레드 세이프하지 않으므로 리전 작업마다
새 Session을 생성해서 사용합니다.

Usage:
    from core.auth.session import get_session

    session = get_session("my-profile", "ap-northeast-2")
    ec2 = session.client("ec2")
"""

from __future__ import annotations

import logging

import boto3

logger = logging.getLogger(__name__)


def get_session(profile_name: str | None = None, region_name: str | None = None) -> boto3.Session:
    """프로파일/리전 기준 boto3 Session 생성

    Args:
        profile_name: AWS 프로파일 이름 (None이면 기본 자격 증명 체인)
        region_name: 기본 리전 (None이면 프로파일/환경 변수 설정)

    Returns:
        boto3.Session
    """
    logger.debug(f"Session 생성: profile={profile_name or 'default'}, region={region_name or '-'}")
    return boto3.Session(profile_name=profile_name, region_name=region_name)
