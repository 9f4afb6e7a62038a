"""
core/shared/io/output/report.py - 인벤토리 리포트

리전별 인스턴스 테이블과 요약 통계를 Rich renderable로 구성합니다.
같은 renderable을 터미널에 출력하거나 일반 텍스트로 내보낼 수 있습니다.

구성:
    - 리전별 테이블 (처음 등장한 리전 순서)
    - 요약 통계: 인스턴스/vCPU/RAM/디스크 합계, 연간 비용 (전체/running)
    - 상태별 인스턴스 수
    - 타입별 인스턴스 수 (개수 내림차순, 타입명 오름차순)
"""

from __future__ import annotations

import io
from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, field

from rich.console import Console, Group, RenderableType
from rich.markup import escape
from rich.rule import Rule
from rich.table import Table

from core.shared.aws.inventory.types import ResourceRecord

from .csv_writer import format_number

REPORT_WIDTH = 160


@dataclass
class InventorySummary:
    """인벤토리 요약 통계"""

    total_instances: int = 0
    total_vcpus: int = 0
    total_ram_gb: float = 0.0
    total_disk_gb: int = 0
    total_annual_cost: float = 0.0
    running_annual_cost: float = 0.0
    by_state: dict[str, int] = field(default_factory=dict)
    by_type: list[tuple[str, int]] = field(default_factory=list)


def group_by_region(records: Sequence[ResourceRecord]) -> dict[str, list[ResourceRecord]]:
    """리전별 그룹화 (처음 등장한 순서 유지)"""
    groups: dict[str, list[ResourceRecord]] = {}
    for record in records:
        groups.setdefault(record.region, []).append(record)
    return groups


def summarize(records: Sequence[ResourceRecord]) -> InventorySummary:
    """요약 통계 계산"""
    type_counts = Counter(r.instance_type for r in records)

    return InventorySummary(
        total_instances=len(records),
        total_vcpus=sum(r.cpu_count for r in records),
        total_ram_gb=round(sum(r.ram_gb for r in records), 2),
        total_disk_gb=sum(r.disk_storage_gb for r in records),
        total_annual_cost=round(sum(r.annual_cost for r in records), 2),
        running_annual_cost=round(sum(r.annual_cost for r in records if r.is_running), 2),
        by_state=dict(Counter(r.state for r in records)),
        by_type=sorted(type_counts.items(), key=lambda item: (-item[1], item[0])),
    )


def _region_table(region: str, records: Sequence[ResourceRecord]) -> Table:
    table = Table(
        title=f"Region: {region} ({len(records)} instances)",
        title_justify="left",
        show_header=True,
        header_style="bold magenta",
    )
    table.add_column("Name", style="cyan")
    table.add_column("Instance ID")
    table.add_column("Type")
    table.add_column("State")
    table.add_column("CPU")
    table.add_column("RAM (GB)", justify="right")
    table.add_column("Disk (GB)", justify="right")
    table.add_column("Hourly (USD)", justify="right")
    table.add_column("Annual (USD)", justify="right")

    for r in records:
        state = f"[green]{escape(r.state)}[/green]" if r.is_running else f"[dim]{escape(r.state)}[/dim]"
        table.add_row(
            escape(r.name),
            escape(r.instance_id),
            escape(r.instance_type),
            state,
            f"{r.cpu_count} vCPUs ({escape(r.cpu_architecture)})",
            format_number(r.ram_gb),
            str(r.disk_storage_gb),
            f"${r.hourly_price:.4f}",
            f"${r.annual_cost:,.2f}",
        )
    return table


def _summary_table(summary: InventorySummary) -> Table:
    table = Table(title="Summary Statistics", title_justify="left", show_header=True)
    table.add_column("항목", style="cyan")
    table.add_column("값", justify="right")

    table.add_row("Total instances", str(summary.total_instances))
    table.add_row("Total vCPUs", str(summary.total_vcpus))
    table.add_row("Total RAM", f"{format_number(summary.total_ram_gb)} GB")
    table.add_row("Total disk storage", f"{summary.total_disk_gb} GB")
    table.add_row("Annual cost (all)", f"${summary.total_annual_cost:,.2f}")
    table.add_row("Annual cost (running)", f"[green]${summary.running_annual_cost:,.2f}[/green]")
    return table


def _count_table(title: str, label: str, counts: Sequence[tuple[str, int]]) -> Table:
    table = Table(title=title, title_justify="left", show_header=True)
    table.add_column(label, style="cyan")
    table.add_column("Count", justify="right")
    for key, count in counts:
        table.add_row(escape(key), str(count))
    return table


def build_report(records: Sequence[ResourceRecord]) -> Group:
    """리포트 renderable 구성

    Args:
        records: ResourceRecord 목록

    Returns:
        리전별 테이블과 요약 통계를 담은 Rich Group
    """
    parts: list[RenderableType] = [Rule("EC2 Instance Summary")]

    for region, region_records in group_by_region(records).items():
        parts.append(_region_table(region, region_records))

    summary = summarize(records)
    parts.append(Rule("Summary Statistics"))
    parts.append(_summary_table(summary))
    parts.append(_count_table("Instances by state", "State", list(summary.by_state.items())))
    parts.append(_count_table("Instances by type", "Instance Type", summary.by_type))
    return Group(*parts)


def render_report_text(records: Sequence[ResourceRecord], width: int = REPORT_WIDTH) -> str:
    """리포트를 스타일 없는 일반 텍스트로 렌더링 (파일 출력용)"""
    console = Console(file=io.StringIO(), record=True, width=width, color_system=None)
    console.print(build_report(records))
    return console.export_text(styles=False)


def print_report(records: Sequence[ResourceRecord], console: Console) -> None:
    """리포트를 콘솔에 출력"""
    console.print(build_report(records))
