"""Per-scan GUID occurrence counting."""

from __future__ import annotations

import uuid
from typing import Dict, List, Optional

from guidscan.models import GuidRecord


class GuidAccumulator:
    """Counts occurrences of each distinct GUID seen during one scan."""

    def __init__(self) -> None:
        self._records: Dict[uuid.UUID, GuidRecord] = {}

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, guid: object) -> bool:
        return guid in self._records

    def record(self, guid: uuid.UUID, offset: Optional[int] = None) -> GuidRecord:
        """Insert guid with a count of 1, or bump the count of an existing record."""
        existing = self._records.get(guid)
        if existing is None:
            existing = self._records[guid] = GuidRecord(guid=guid)
        else:
            existing.count += 1
        if offset is not None:
            existing.offsets.append(offset)
        return existing

    def results(self) -> List[GuidRecord]:
        """All records, in no particular order."""
        return list(self._records.values())
