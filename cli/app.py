"""
cli/app.py - 메인 CLI 엔트리포인트

Click 기반의 CLI 애플리케이션 진입점입니다.
계정의 모든 활성 리전에서 EC2 인스턴스를 수집하여
리전별 리포트 또는 CSV로 출력합니다.

명령어 구조:
    ec2-inventory                       # 리포트 (stdout)
    ec2-inventory --csv                 # CSV (stdout)
    ec2-inventory --csv -o out.csv      # CSV 파일 저장
    ec2-inventory -p prod --max-workers 8
    ec2-inventory --version             # 버전 표시

출력:
    - 진행/상태 메시지와 로그: stderr
    - 리포트/CSV: stdout 또는 -o 파일

종료 코드:
    0: 성공 (인스턴스가 없는 경우 포함)
    1: 설정 오류, 활성 리전 조회 실패, 출력 파일 쓰기 실패

Usage:
    # 명령줄에서 직접 실행
    $ ec2-inventory --csv

    # 모듈로 실행
    $ python -m cli.app
"""

import logging

import click
from botocore.exceptions import BotoCoreError, ClientError
from rich.markup import escape

from cli.ui.console import print_error, print_info, print_success, print_warning, report_console, setup_logging
from core.config import DEFAULT_NAME_TAG_KEY, DEFAULT_OPERATING_SYSTEM, InventoryConfig, get_version
from core.exceptions import ConfigError, InventoryError
from core.shared.aws.inventory import InventoryCollector
from core.shared.io.config import OutputConfig
from core.shared.io.output import print_report, render_report_text, to_csv
from core.tools.io.file import write_file

# Keep lightweight, centralized logging config
# WARNING 레벨로 설정하여 INFO 로그가 출력에 섞이지 않도록 함
logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

logger = logging.getLogger(__name__)

VERSION = get_version()


def _log_metrics(collector: InventoryCollector) -> None:
    """캐시 메트릭 로깅 (INFO)"""
    for name, metrics in collector.get_metrics().items():
        logger.info(
            f"[{name}] API 호출: {metrics['api_calls']}, "
            f"캐시 히트: {metrics['cache_hits']}, "
            f"캐시 미스: {metrics['cache_misses']}, "
            f"에러: {metrics['errors']}, "
            f"히트율: {metrics['hit_rate']:.1%}"
        )


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(VERSION, prog_name="ec2-inventory")
@click.option("--csv", "csv_format", is_flag=True, help="CSV 형식으로 출력")
@click.option("-o", "--output", "output", type=click.Path(dir_okay=False), default=None, help="출력 파일 경로")
@click.option("-p", "--profile", "profile", default=None, help="AWS 프로파일 (기본: 기본 자격 증명 체인)")
@click.option(
    "--os",
    "operating_system",
    default=DEFAULT_OPERATING_SYSTEM,
    show_default=True,
    help="가격 조회 운영체제 (Pricing API operatingSystem)",
)
@click.option("--max-workers", type=click.IntRange(min=1), default=None, help="리전 병렬 수 (기본: 리전 수)")
@click.option("--name-tag", "name_tag", default=DEFAULT_NAME_TAG_KEY, show_default=True, help="이름으로 사용할 태그 키")
@click.option("-v", "--verbose", is_flag=True, help="상세 로그 출력")
def cli(
    csv_format: bool,
    output: str | None,
    profile: str | None,
    operating_system: str,
    max_workers: int | None,
    name_tag: str,
    verbose: bool,
) -> None:
    """EC2 Inventory - 전체 리전 EC2 인스턴스 인벤토리 및 On-Demand 비용"""
    setup_logging(verbose)
    output_config = OutputConfig.from_options(csv=csv_format, output_path=output)

    try:
        config = InventoryConfig(
            profile_name=profile,
            name_tag_key=name_tag,
            operating_system=operating_system,
            max_workers=max_workers,
        )
    except ConfigError as e:
        print_error(escape(str(e)))
        raise SystemExit(1) from e

    print_info("Starting EC2 instance discovery...")
    collector = InventoryCollector(config)

    try:
        records = collector.collect_all()
    except (InventoryError, ClientError, BotoCoreError) as e:
        print_error(f"Error: {escape(str(e))}")
        raise SystemExit(1) from e

    _log_metrics(collector)
    if collector.error_collector.has_errors:
        print_warning(collector.error_collector.get_summary())

    if not records:
        print_warning("No EC2 instances found in any region.")
        return

    if output_config.should_output_csv():
        content = to_csv(records)
    elif output_config.to_stdout:
        print_report(records, report_console)
        return
    else:
        content = render_report_text(records)

    if output_config.to_stdout:
        click.echo(content)
        return

    try:
        path = write_file(output_config.output_path, content)
    except OSError as e:
        print_error(f"출력 파일 쓰기 실패: {escape(str(e))}")
        raise SystemExit(1) from e
    print_success(f"Output written to: {escape(str(path))}")


if __name__ == "__main__":
    cli()
