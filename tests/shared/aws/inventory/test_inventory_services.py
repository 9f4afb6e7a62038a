"""
tests/shared/aws/inventory/test_inventory_services.py - EC2 조회 함수 테스트
"""

from unittest.mock import MagicMock

import boto3
from botocore.stub import Stubber

from core.shared.aws.inventory.services.ec2 import (
    get_attached_storage_gb,
    get_enabled_regions,
    iter_instances,
    parse_instance,
)
from core.shared.aws.inventory.services.helpers import get_tag_value, parse_tags

from conftest import make_instance


def _reservation(*instances):
    return {"ReservationId": "r-0123456789abcdef0", "Instances": list(instances)}


class TestGetEnabledRegions:
    """get_enabled_regions 테스트"""

    def test_regions_in_response_order(self, mock_ec2_client):
        """응답 순서 유지, opt-in 되지 않은 리전 제외 요청"""
        regions = get_enabled_regions(mock_ec2_client)

        assert regions == ["us-east-1", "ap-northeast-2"]
        mock_ec2_client.describe_regions.assert_called_once_with(AllRegions=False)

    def test_empty(self):
        """리전 없음"""
        ec2 = MagicMock()
        ec2.describe_regions.return_value = {"Regions": []}

        assert get_enabled_regions(ec2) == []


class TestIterInstances:
    """iter_instances 테스트"""

    def test_follows_next_token(self):
        """NextToken이 없을 때까지 페이지 조회"""
        ec2 = boto3.client("ec2", region_name="us-east-1")
        stubber = Stubber(ec2)
        stubber.add_response(
            "describe_instances",
            {
                "Reservations": [_reservation(make_instance("i-1"), make_instance("i-2"))],
                "NextToken": "page-2",
            },
            {"MaxResults": 1000},
        )
        stubber.add_response(
            "describe_instances",
            {"Reservations": [_reservation(make_instance("i-3")), _reservation(make_instance("i-4"))]},
            {"MaxResults": 1000, "NextToken": "page-2"},
        )

        with stubber:
            ids = [inst["InstanceId"] for inst in iter_instances(ec2)]
            stubber.assert_no_pending_responses()

        assert ids == ["i-1", "i-2", "i-3", "i-4"]

    def test_page_size(self):
        """페이지 크기 전달"""
        ec2 = boto3.client("ec2", region_name="us-east-1")
        stubber = Stubber(ec2)
        stubber.add_response("describe_instances", {"Reservations": []}, {"MaxResults": 50})

        with stubber:
            assert list(iter_instances(ec2, page_size=50)) == []
            stubber.assert_no_pending_responses()


class TestGetAttachedStorage:
    """get_attached_storage_gb 테스트"""

    def test_sum_volume_sizes(self):
        """연결된 볼륨 크기 합계"""
        ec2 = MagicMock()
        paginator = MagicMock()
        paginator.paginate.return_value = [
            {"Volumes": [{"VolumeId": "vol-1", "Size": 8}, {"VolumeId": "vol-2", "Size": 100}]},
            {"Volumes": [{"VolumeId": "vol-3", "Size": 20}]},
        ]
        ec2.get_paginator.return_value = paginator

        assert get_attached_storage_gb(ec2, "i-1") == 128
        ec2.get_paginator.assert_called_once_with("describe_volumes")
        paginator.paginate.assert_called_once_with(
            Filters=[{"Name": "attachment.instance-id", "Values": ["i-1"]}]
        )

    def test_no_volumes(self):
        """볼륨이 없으면 0"""
        ec2 = MagicMock()
        ec2.get_paginator.return_value.paginate.return_value = [{"Volumes": []}]

        assert get_attached_storage_gb(ec2, "i-1") == 0


class TestParseInstance:
    """parse_instance 테스트"""

    def test_full_instance(self):
        """모든 필드가 있는 인스턴스"""
        fields = parse_instance(make_instance("i-abc", "m5.large", "stopped", "db", "arm64"))

        assert fields == {
            "instance_id": "i-abc",
            "name": "db",
            "instance_type": "m5.large",
            "state": "stopped",
            "cpu_architecture": "arm64",
        }

    def test_sentinels(self):
        """필드가 없으면 대체값"""
        fields = parse_instance({})

        assert fields == {
            "instance_id": "N/A",
            "name": "N/A",
            "instance_type": "unknown",
            "state": "unknown",
            "cpu_architecture": "unknown",
        }

    def test_empty_name_tag(self):
        """빈 Name 태그는 N/A"""
        inst = make_instance(name=None)
        inst["Tags"] = [{"Key": "Name", "Value": ""}, {"Key": "env", "Value": "prod"}]

        assert parse_instance(inst)["name"] == "N/A"

    def test_custom_name_tag_key(self):
        """이름 태그 키 지정"""
        inst = make_instance()
        inst["Tags"].append({"Key": "aws:cloudformation:stack-name", "Value": "web-stack"})

        assert parse_instance(inst, "aws:cloudformation:stack-name")["name"] == "web-stack"


class TestTagHelpers:
    """태그 헬퍼 테스트"""

    def test_parse_tags_excludes_aws(self):
        """aws: 접두어 태그 제외"""
        tags = [{"Key": "Name", "Value": "web"}, {"Key": "aws:autoscaling:groupName", "Value": "asg"}]

        assert parse_tags(tags) == {"Name": "web"}
        assert parse_tags(tags, exclude_aws=False) == {"Name": "web", "aws:autoscaling:groupName": "asg"}

    def test_parse_tags_empty(self):
        """태그 없음"""
        assert parse_tags(None) == {}
        assert parse_tags([{"Key": "", "Value": "x"}]) == {}

    def test_get_tag_value_default(self):
        """없는 키는 기본값"""
        assert get_tag_value({"Name": "web"}, "Name") == "web"
        assert get_tag_value({}, "Name", "N/A") == "N/A"
