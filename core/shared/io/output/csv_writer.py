"""
core/shared/io/output/csv_writer.py - 인벤토리 CSV 변환

ResourceRecord 목록을 헤더 1행 + 레코드당 1행의 CSV 텍스트로 변환합니다.
쉼표/따옴표/줄바꿈이 포함된 필드만 따옴표로 감싸고 내부 따옴표는 두 번 씁니다.
"""

from __future__ import annotations

import csv
import io
from collections.abc import Iterable

from core.shared.aws.inventory.types import ResourceRecord

CSV_HEADERS = [
    "Instance ID",
    "Name",
    "Region",
    "Instance Type",
    "State",
    "vCPUs",
    "CPU Architecture",
    "RAM (GB)",
    "Disk Storage (GB)",
    "Hourly Price (USD)",
    "Annual Cost (USD)",
]


def format_number(value: float | int) -> str:
    """정수로 떨어지는 값은 소수점 없이 표기 (1.0 -> "1", 0.5 -> "0.5")"""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def record_to_row(record: ResourceRecord) -> list[str]:
    """ResourceRecord -> CSV 행 (시간당 가격 소수 4자리, 연간 비용 소수 2자리)"""
    return [
        record.instance_id,
        record.name,
        record.region,
        record.instance_type,
        record.state,
        str(record.cpu_count),
        record.cpu_architecture,
        format_number(record.ram_gb),
        str(record.disk_storage_gb),
        f"{record.hourly_price:.4f}",
        f"{record.annual_cost:.2f}",
    ]


def to_csv(records: Iterable[ResourceRecord]) -> str:
    """레코드 목록을 CSV 텍스트로 변환

    Args:
        records: ResourceRecord 목록 (순서 유지)

    Returns:
        줄바꿈(\\n)으로 구분된 CSV 텍스트 (마지막 줄바꿈 없음)
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for record in records:
        writer.writerow(record_to_row(record))
    return buffer.getvalue().rstrip("\n")
