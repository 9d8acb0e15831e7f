"""Block-by-block GUID scanning of decoded text streams."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, TextIO, Tuple

from guidscan.config import ScanConfig
from guidscan.models import MalformedCandidate, ScanResult
from guidscan.scan.accumulator import GuidAccumulator
from guidscan.scan.matcher import canonicalize, iter_matches
from guidscan.utils.files import open_text
from guidscan.utils.text import OffsetMap, strip_whitespace, strip_whitespace_with_offsets

LOGGER = logging.getLogger(__name__)


class BlockScanner:
    """Scans a text stream in bounded blocks, stitching matches across block edges.

    Each block is appended to the unconsumed tail of the previous one
    (the carry-over), stripped of whitespace and matched. The carry-over is
    capped so memory stays bounded no matter how long the input runs without
    a match.
    """

    def __init__(self, config: Optional[ScanConfig] = None) -> None:
        self.config = config or ScanConfig()

    def scan_stream(self, handle: TextIO, path: Optional[Path] = None) -> ScanResult:
        """Scan an open text stream until it is exhausted."""
        block_size = self.config.effective_block_size
        carry_cap = self.config.effective_carry_over
        track = self.config.track_offsets

        accumulator = GuidAccumulator()
        malformed: List[MalformedCandidate] = []
        carry = ""
        carry_map: Optional[OffsetMap] = OffsetMap() if track else None
        position = 0
        blocks = 0

        while True:
            chunk = handle.read(block_size)
            final = not chunk
            if final:
                if not carry:
                    break
                buffer, mapping = carry, carry_map
            else:
                blocks += 1
                if carry_map is not None:
                    cleaned, chunk_map = strip_whitespace_with_offsets(chunk, position)
                    carry_map.extend(chunk_map, len(carry))
                else:
                    cleaned = strip_whitespace(chunk)
                buffer, mapping = carry + cleaned, carry_map
                position += len(chunk)
                LOGGER.debug(
                    "Block %d: %d chars read, %d chars to match", blocks, len(chunk), len(buffer)
                )

            consumed, deferred = self._consume(buffer, mapping, final, accumulator, malformed)
            if final:
                break

            keep = len(buffer) - consumed
            if deferred:
                # pending match stays whole, up to the block limit
                keep = min(keep, block_size - 1)
            else:
                keep = min(keep, carry_cap)
            carry = buffer[len(buffer) - keep :]
            if mapping is not None:
                carry_map = mapping.tail(len(buffer) - keep)

        return ScanResult(
            path=path,
            records=accumulator.results(),
            malformed=malformed,
            chars_read=position,
            blocks=blocks,
        )

    def _consume(
        self,
        buffer: str,
        mapping: Optional[OffsetMap],
        final: bool,
        accumulator: GuidAccumulator,
        malformed: List[MalformedCandidate],
    ) -> Tuple[int, bool]:
        """Record every match in buffer and return the index just past the last one.

        A match touching the end of the buffer is left unconsumed unless the
        stream is exhausted, since the next block may still extend it. The
        second element of the result tells whether that happened.
        """
        consumed = 0
        for match in iter_matches(buffer):
            if match.end == len(buffer) and not final:
                return match.start, True
            consumed = match.end
            offset = mapping.locate(match.start) if mapping is not None else None
            guid = canonicalize(match)
            if guid is None:
                LOGGER.warning("Skipping malformed GUID candidate %r", match.text)
                malformed.append(MalformedCandidate(text=match.text, offset=offset))
                continue
            accumulator.record(guid, offset)
        return consumed, False


def scan_file(path: Path, config: Optional[ScanConfig] = None) -> ScanResult:
    """Scan one file; raises PathNotFound or AccessDenied before any result exists."""
    config = config or ScanConfig()
    with open_text(path, config.encoding) as handle:
        LOGGER.debug("Scanning %s", path)
        return BlockScanner(config).scan_stream(handle, path=path)
