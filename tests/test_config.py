"""Tests for scan configuration."""

from __future__ import annotations

import logging

import pytest

from guidscan.config import MAX_BLOCK_SIZE, MIN_BLOCK_SIZE, ScanConfig, TextEncoding


class TestScanConfig:
    """Test ScanConfig dataclass."""

    def test_default_config(self) -> None:
        """Should create config with default values."""
        config = ScanConfig()

        assert config.block_size == 65536
        assert config.effective_block_size == 65536
        assert config.carry_over_max_chars == 64
        assert config.effective_carry_over == 64
        assert config.encoding is TextEncoding.AUTO_DETECT
        assert config.track_offsets is False

    def test_block_size_below_minimum(self, caplog: pytest.LogCaptureFixture) -> None:
        """Should raise a tiny block size to the minimum."""
        config = ScanConfig(block_size=20)

        with caplog.at_level(logging.DEBUG, logger="guidscan.config"):
            assert config.effective_block_size == MIN_BLOCK_SIZE
        assert "clamped" in caplog.text

    def test_block_size_above_maximum(self) -> None:
        """Should lower a huge block size to the maximum."""
        config = ScanConfig(block_size=MAX_BLOCK_SIZE * 4)

        assert config.effective_block_size == MAX_BLOCK_SIZE

    def test_custom_range(self) -> None:
        """Should clamp into a configured range."""
        config = ScanConfig(block_size=10, min_block_size=100, max_block_size=200)

        assert config.effective_block_size == 100

    def test_carry_over_below_block_size(self) -> None:
        """Should keep the carry-over strictly shorter than a block."""
        config = ScanConfig(block_size=16, min_block_size=1, carry_over_max_chars=64)

        assert config.effective_carry_over == 15

    def test_negative_carry_over(self) -> None:
        """Should clamp a negative carry-over to zero."""
        assert ScanConfig(carry_over_max_chars=-5).effective_carry_over == 0

    def test_encoding_from_string(self) -> None:
        """Should accept an encoding name."""
        assert ScanConfig(encoding="UTF8").encoding is TextEncoding.UTF8

    def test_invalid_encoding(self) -> None:
        """Should reject unknown encoding names."""
        with pytest.raises(ValueError):
            ScanConfig(encoding="EBCDIC")

    def test_clamp_logged_once(self, caplog: pytest.LogCaptureFixture) -> None:
        """Should log the clamp once when both effective sizes are read."""
        config = ScanConfig(block_size=20)

        with caplog.at_level(logging.DEBUG, logger="guidscan.config"):
            block = config.effective_block_size
            carry = config.effective_carry_over

        assert (block, carry) == (MIN_BLOCK_SIZE, 64)
        assert len([r for r in caplog.records if "clamped" in r.getMessage()]) == 1
