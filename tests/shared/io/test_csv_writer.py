"""
tests/shared/io/test_csv_writer.py - CSV 변환 테스트
"""

import csv
import io

from core.shared.io.output.csv_writer import CSV_HEADERS, format_number, to_csv

HEADER_LINE = (
    "Instance ID,Name,Region,Instance Type,State,vCPUs,CPU Architecture,"
    "RAM (GB),Disk Storage (GB),Hourly Price (USD),Annual Cost (USD)"
)


class TestToCsv:
    """to_csv 테스트"""

    def test_header_only(self):
        """레코드가 없으면 헤더만"""
        assert to_csv([]) == HEADER_LINE
        assert len(CSV_HEADERS) == 11

    def test_row_format(self, make_record):
        """가격 소수 4자리, 연간 비용 소수 2자리"""
        output = to_csv([make_record()])

        lines = output.split("\n")
        assert lines[0] == HEADER_LINE
        assert lines[1] == "i-1234567890abcdef0,web-server,us-east-1,t3.micro,running,2,x86_64,1,8,0.0104,91.10"

    def test_one_line_per_record(self, make_record):
        """레코드 순서대로 한 줄씩, 마지막 줄바꿈 없음"""
        records = [make_record(instance_id=f"i-{n}") for n in range(3)]

        output = to_csv(records)

        assert not output.endswith("\n")
        assert [line.split(",")[0] for line in output.split("\n")[1:]] == ["i-0", "i-1", "i-2"]

    def test_quoting_round_trip(self, make_record):
        """쉼표/따옴표/줄바꿈 포함 필드는 원래 값으로 재파싱"""
        names = ['web, "prod"', 'say "hi"', "multi\nline"]
        records = [make_record(instance_id=f"i-{n}", name=name) for n, name in enumerate(names)]

        output = to_csv(records)
        rows = list(csv.reader(io.StringIO(output)))

        assert [row[1] for row in rows[1:]] == names
        assert '"web, ""prod"""' in output

    def test_plain_fields_not_quoted(self, make_record):
        """특수문자가 없는 필드는 따옴표 없음"""
        assert '"' not in to_csv([make_record()])

    def test_zero_values(self, make_record):
        """조회 실패 대체값"""
        record = make_record(cpu_count=0, ram_gb=0.0, hourly_price=0.0, annual_cost=0.0, name="N/A")

        row = to_csv([record]).split("\n")[1].split(",")

        assert row[1] == "N/A"
        assert row[5:] == ["0", "x86_64", "0", "8", "0.0000", "0.00"]


class TestFormatNumber:
    """format_number 테스트"""

    def test_integral(self):
        """정수 값은 소수점 없이"""
        assert format_number(1.0) == "1"
        assert format_number(16) == "16"

    def test_fractional(self):
        """소수 값은 그대로"""
        assert format_number(0.5) == "0.5"
        assert format_number(15.25) == "15.25"
