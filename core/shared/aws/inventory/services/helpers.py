"""
core/shared/aws/inventory/services/helpers.py - 수집 공통 헬퍼
"""

from __future__ import annotations

from typing import Any


def parse_tags(tags: list[dict[str, Any]] | None, exclude_aws: bool = True) -> dict[str, str]:
    """AWS 태그 리스트를 딕셔너리로 변환합니다.

    Args:
        tags: ``[{"Key": ..., "Value": ...}]`` 형식의 태그 리스트
        exclude_aws: True면 ``aws:`` 접두어 시스템 태그 제외

    Returns:
        ``{key: value}`` 딕셔너리 (키가 비어 있는 항목은 무시)
    """
    if not tags:
        return {}

    result: dict[str, str] = {}
    for tag in tags:
        key = tag.get("Key", "")
        if not key:
            continue
        if exclude_aws and key.startswith("aws:"):
            continue
        result[key] = tag.get("Value", "")
    return result


def get_tag_value(tags: dict[str, str], key: str, default: str = "") -> str:
    """태그 값 조회 (없거나 빈 값이면 default)"""
    return tags.get(key) or default
