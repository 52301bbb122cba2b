"""
Tests for sfdisksort.core.models module.
"""

from sfdisksort.core.models import (
    DeviceName,
    LineKind,
    PartitionRecord,
    PartitionTable,
    PassthroughLine,
)


class TestDeviceName:
    """Tests for DeviceName."""

    def test_plain_device(self) -> None:
        name = DeviceName(base="/dev/sda", separator="", number=3)
        assert name.prefix == "/dev/sda"
        assert name.path == "/dev/sda3"

    def test_nvme_device(self) -> None:
        name = DeviceName(base="/dev/nvme0n1", separator="p", number=2)
        assert name.prefix == "/dev/nvme0n1p"
        assert name.path == "/dev/nvme0n1p2"

    def test_with_number(self) -> None:
        name = DeviceName(base="/dev/mmcblk0", separator="p", number=7)
        renamed = name.with_number(1)
        assert renamed.path == "/dev/mmcblk0p1"
        assert name.number == 7


class TestPartitionRecord:
    """Tests for PartitionRecord."""

    def test_original_label_defaults_to_label(self) -> None:
        record = PartitionRecord(label="/dev/sda1", start=2048)
        assert record.original_label == "/dev/sda1"
        assert record.relabeled is False

    def test_relabeled(self) -> None:
        record = PartitionRecord(label="/dev/sda1", start=2048, original_label="/dev/sda3")
        assert record.relabeled is True

    def test_end(self) -> None:
        record = PartitionRecord(label="/dev/sda1", start=2048, size=2048)
        assert record.end == 4095
        assert PartitionRecord(label="/dev/sda1", start=2048).end is None

    def test_content_key_ignores_label(self) -> None:
        a = PartitionRecord(label="/dev/sda1", start=2048, size=10, type="83", attrs=["bootable"])
        b = PartitionRecord(label="/dev/sda4", start=2048, size=10, type="83", attrs=["bootable"])
        assert a.content_key() == b.content_key()

    def test_to_dict(self) -> None:
        record = PartitionRecord(
            label="/dev/sda2",
            start=206848,
            size=843776,
            type="83",
            attrs=['name="root"'],
            line_number=9,
        )
        data = record.to_dict()
        assert data["label"] == "/dev/sda2"
        assert data["start"] == 206848
        assert data["attrs"] == ['name="root"']
        assert data["line_number"] == 9


class TestPartitionTable:
    """Tests for PartitionTable."""

    def test_empty(self) -> None:
        table = PartitionTable()
        assert table.is_empty is True
        assert table.sector_size == 512
        assert table.label_type is None

    def test_headers(self) -> None:
        table = PartitionTable(
            headers={"label": "gpt", "device": "/dev/sdb", "sector-size": "4096"}
        )
        assert table.label_type == "gpt"
        assert table.device == "/dev/sdb"
        assert table.sector_size == 4096

    def test_bad_sector_size_falls_back(self) -> None:
        table = PartitionTable(headers={"sector-size": "big"})
        assert table.sector_size == 512

    def test_to_dict(self) -> None:
        table = PartitionTable(
            passthrough=[PassthroughLine("label: gpt", 1, LineKind.HEADER)],
            partitions=[PartitionRecord(label="/dev/sda1", start=2048)],
            headers={"label": "gpt"},
        )
        data = table.to_dict()
        assert data["headers"] == {"label": "gpt"}
        assert data["passthrough"] == ["label: gpt"]
        assert data["partitions"][0]["label"] == "/dev/sda1"
