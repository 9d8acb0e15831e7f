"""Tests for core data models."""

from __future__ import annotations

import uuid
from pathlib import Path

from guidscan.models import GuidRecord, Match, ScanResult

from conftest import GUID_TEXT


def _match() -> Match:
    return Match(
        start=0,
        end=10,
        text="ignored",
        time_low="A864F394",
        time_mid_hi=("c94e", "4727"),
        clock_seq=("8e", "eb"),
        node=("89", "22", "3e", "30", "96", "af"),
    )


class TestMatch:
    """Test Match dataclass."""

    def test_canonical_text(self) -> None:
        """Should join the field captures as 8-4-4-4-12."""
        assert _match().canonical_text() == "A864F394-c94e-4727-8eeb-89223e3096af"


class TestGuidRecord:
    """Test GuidRecord dataclass."""

    def test_defaults(self, expected_guid: uuid.UUID) -> None:
        """Should start at one occurrence without offsets."""
        record = GuidRecord(guid=expected_guid)

        assert record.count == 1
        assert record.offsets == []

    def test_offsets_not_shared(self, expected_guid: uuid.UUID) -> None:
        """Should give each record its own offsets list."""
        first = GuidRecord(guid=expected_guid)
        second = GuidRecord(guid=expected_guid)
        first.offsets.append(3)

        assert second.offsets == []


class TestScanResult:
    """Test ScanResult dataclass."""

    def test_counts(self, expected_guid: uuid.UUID) -> None:
        """Should map each GUID to its count."""
        other = uuid.UUID(int=1)
        result = ScanResult(
            path=Path("ids.txt"),
            records=[GuidRecord(guid=expected_guid, count=2), GuidRecord(guid=other)],
        )

        assert result.counts() == {uuid.UUID(GUID_TEXT): 2, other: 1}
        assert result.malformed == []
