"""
shared/io/output - 인벤토리 출력 모듈

csv_writer: ResourceRecord 목록 → CSV 텍스트
report: 리전별 테이블 + 요약 통계 (Rich)
"""

from .csv_writer import CSV_HEADERS, format_number, record_to_row, to_csv
from .report import (
    InventorySummary,
    build_report,
    group_by_region,
    print_report,
    render_report_text,
    summarize,
)

__all__: list[str] = [
    # CSV
    "CSV_HEADERS",
    "to_csv",
    "record_to_row",
    "format_number",
    # Report
    "InventorySummary",
    "build_report",
    "group_by_region",
    "summarize",
    "render_report_text",
    "print_report",
]
