"""
core/shared/aws/inventory/services - 서비스별 리소스 조회 함수
"""

from .ec2 import get_attached_storage_gb, get_enabled_regions, iter_instances, parse_instance
from .helpers import get_tag_value, parse_tags

__all__ = [
    "get_enabled_regions",
    "iter_instances",
    "get_attached_storage_gb",
    "parse_instance",
    "parse_tags",
    "get_tag_value",
]
