"""Core guidscan data models."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple


@dataclass(slots=True)
class Match:
    """GUID candidate located in a whitespace-free buffer."""

    start: int
    end: int
    text: str
    time_low: str
    time_mid_hi: Tuple[str, str]
    clock_seq: Tuple[str, str]
    node: Tuple[str, str, str, str, str, str]

    def canonical_text(self) -> str:
        """Rebuild the hyphenated 8-4-4-4-12 form from the field captures."""
        return "-".join(
            (
                self.time_low,
                self.time_mid_hi[0],
                self.time_mid_hi[1],
                "".join(self.clock_seq),
                "".join(self.node),
            )
        )


@dataclass(slots=True)
class GuidRecord:
    """A distinct GUID and how many times it was seen."""

    guid: uuid.UUID
    count: int = 1
    offsets: List[int] = field(default_factory=list)


@dataclass(slots=True)
class MalformedCandidate:
    """Text that fit the coarse GUID grammar but did not parse."""

    text: str
    offset: Optional[int] = None


@dataclass(slots=True)
class ScanResult:
    path: Optional[Path]
    records: List[GuidRecord]
    malformed: List[MalformedCandidate] = field(default_factory=list)
    chars_read: int = 0
    blocks: int = 0

    def counts(self) -> Dict[uuid.UUID, int]:
        return {record.guid: record.count for record in self.records}
