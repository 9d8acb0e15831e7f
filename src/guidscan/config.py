"""Scan configuration defaults."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

LOGGER = logging.getLogger(__name__)

DEFAULT_BLOCK_SIZE = 65536
MIN_BLOCK_SIZE = 4096
MAX_BLOCK_SIZE = 1 << 30
DEFAULT_CARRY_OVER_CHARS = 64


class TextEncoding(str, Enum):
    """Text decodings selectable for a scan."""

    AUTO_DETECT = "AutoDetect"
    ASCII = "ASCII"
    UNICODE = "Unicode"
    UTF32 = "UTF32"
    UTF7 = "UTF7"
    UTF8 = "UTF8"


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


@dataclass(slots=True)
class ScanConfig:
    block_size: int = DEFAULT_BLOCK_SIZE
    min_block_size: int = MIN_BLOCK_SIZE
    max_block_size: int = MAX_BLOCK_SIZE
    carry_over_max_chars: int = DEFAULT_CARRY_OVER_CHARS
    encoding: TextEncoding = TextEncoding.AUTO_DETECT
    track_offsets: bool = False

    def __post_init__(self) -> None:
        self.encoding = TextEncoding(self.encoding)
        if self.min_block_size < 1:
            self.min_block_size = 1
        if self.max_block_size < self.min_block_size:
            self.max_block_size = self.min_block_size

    @property
    def effective_block_size(self) -> int:
        """Block size clamped into the supported range, in decoded characters."""
        size = self._clamped_block_size()
        if size != self.block_size:
            LOGGER.debug("Block size %s clamped to %s", self.block_size, size)
        return size

    @property
    def effective_carry_over(self) -> int:
        """Carry-over cap, always strictly below the block size."""
        return _clamp(self.carry_over_max_chars, 0, self._clamped_block_size() - 1)

    def _clamped_block_size(self) -> int:
        return _clamp(self.block_size, self.min_block_size, self.max_block_size)
