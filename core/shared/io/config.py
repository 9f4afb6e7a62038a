"""출력 설정 모듈

인벤토리 출력 형식 및 대상 설정

Usage:
    from core.shared.io.config import OutputConfig, OutputFormat

    config = OutputConfig.from_options(csv=True, output_path="inventory.csv")

    if config.should_output_csv():
        # CSV 출력
        pass

    if config.should_output_console():
        # 리포트 출력
        pass
"""

from dataclasses import dataclass, field
from enum import Flag, auto


class OutputFormat(Flag):
    """출력 형식 플래그

    Usage:
        fmt = OutputFormat.CSV

        if OutputFormat.CSV in fmt:
            ...
    """

    NONE = 0
    CONSOLE = auto()
    CSV = auto()


@dataclass
class OutputConfig:
    """출력 설정

    Attributes:
        formats: 출력 형식 플래그 (기본값: CONSOLE 리포트)
        output_path: 출력 파일 경로 (None이면 stdout)
    """

    formats: OutputFormat = field(default=OutputFormat.CONSOLE)
    output_path: str | None = None

    def should_output_console(self) -> bool:
        """리포트 출력 여부"""
        return OutputFormat.CONSOLE in self.formats

    def should_output_csv(self) -> bool:
        """CSV 출력 여부"""
        return OutputFormat.CSV in self.formats

    @property
    def to_stdout(self) -> bool:
        return not self.output_path

    @classmethod
    def from_string(cls, format_str: str, output_path: str | None = None) -> "OutputConfig":
        """문자열에서 OutputConfig 생성

        Args:
            format_str: 형식 문자열 ("console", "csv")
            output_path: 출력 파일 경로

        Returns:
            OutputConfig 인스턴스
        """
        format_map = {
            "console": OutputFormat.CONSOLE,
            "csv": OutputFormat.CSV,
        }

        formats = format_map.get(format_str.lower(), OutputFormat.CONSOLE)
        return cls(formats=formats, output_path=output_path)

    @classmethod
    def from_options(cls, csv: bool = False, output_path: str | None = None) -> "OutputConfig":
        """CLI 옵션에서 OutputConfig 생성"""
        return cls.from_string("csv" if csv else "console", output_path=output_path)
