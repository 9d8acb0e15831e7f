"""Whitespace stripping and offset bookkeeping for scan buffers."""

from __future__ import annotations

import re
from bisect import bisect_right
from dataclasses import dataclass, field
from typing import List, Tuple

_WHITESPACE = re.compile(r"\s+")


def strip_whitespace(text: str) -> str:
    """Remove every whitespace character from text."""
    return _WHITESPACE.sub("", text)


@dataclass(slots=True)
class OffsetMap:
    """Maps positions in a stripped buffer back to original character offsets.

    The buffer is described as contiguous segments: ``starts[i]`` is the
    stripped position where segment ``i`` begins and ``origins[i]`` the
    original offset of that character. Inside a segment both advance together;
    a new segment begins after every whitespace run that was removed.
    """

    starts: List[int] = field(default_factory=list)
    origins: List[int] = field(default_factory=list)

    def locate(self, position: int) -> int:
        index = bisect_right(self.starts, position) - 1
        if index < 0:
            raise IndexError(f"Position {position} precedes the mapped buffer")
        return self.origins[index] + (position - self.starts[index])

    def tail(self, start: int) -> "OffsetMap":
        """Map for the suffix beginning at stripped position ``start``, rebased to 0."""
        result = OffsetMap()
        index = bisect_right(self.starts, start) - 1
        if index < 0:
            return result
        result.starts.append(0)
        result.origins.append(self.origins[index] + (start - self.starts[index]))
        for seg_start, origin in zip(self.starts[index + 1 :], self.origins[index + 1 :]):
            result.starts.append(seg_start - start)
            result.origins.append(origin)
        return result

    def extend(self, other: "OffsetMap", shift: int) -> None:
        """Append ``other``, whose positions start at stripped position ``shift``."""
        for seg_start, origin in zip(other.starts, other.origins):
            if self.starts and self.starts[-1] == seg_start + shift:
                # empty trailing segment, replace it
                self.origins[-1] = origin
                continue
            self.starts.append(seg_start + shift)
            self.origins.append(origin)


def strip_whitespace_with_offsets(text: str, base: int = 0) -> Tuple[str, OffsetMap]:
    """Strip whitespace and return a map back to offsets counted from ``base``."""
    mapping = OffsetMap()
    parts: List[str] = []
    stripped = 0
    cursor = 0
    for run in _WHITESPACE.finditer(text):
        if run.start() > cursor:
            mapping.starts.append(stripped)
            mapping.origins.append(base + cursor)
            parts.append(text[cursor : run.start()])
            stripped += run.start() - cursor
        cursor = run.end()
    if cursor < len(text):
        mapping.starts.append(stripped)
        mapping.origins.append(base + cursor)
        parts.append(text[cursor:])
    return "".join(parts), mapping
