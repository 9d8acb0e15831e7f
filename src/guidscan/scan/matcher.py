"""GUID literal recognition over whitespace-free text.

Three literal styles are accepted, all case-insensitive:

* canonical ``a864f394-c94e-4727-8eeb-89223e3096af``
* C struct ``0xa864f394,0xc94e,0x4727,0x8e,0xeb,0x89,0x22,0x3e,0x30,0x96,0xaf``
* brace-wrapped struct, where the eight trailing octets sit inside ``{ }``

One grammar covers all of them: every field may be preceded by an optional
comma or hyphen and an optional ``0x`` prefix. Octets written with a ``0x``
prefix may be a single digit in the coarse grammar; such candidates fail
canonical parsing and are reported as malformed.
"""

from __future__ import annotations

import re
import uuid
from typing import Iterator, Optional

from guidscan.models import Match

_HEX = "[0-9a-f]"
_SEP = "[,-]?"

CANONICAL_PATTERN = re.compile(
    rf"{_HEX}{{8}}-{_HEX}{{4}}-{_HEX}{{4}}-{_HEX}{{4}}-{_HEX}{{12}}", re.IGNORECASE
)

_NODE_NAMES = tuple(f"node{index}" for index in range(6))


def _word(name: str, width: int) -> str:
    return rf"(?:0x)?(?P<{name}>{_HEX}{{{width}}})"


def _octet(name: str) -> str:
    return rf"(?P<{name}_x>0x)?(?P<{name}>(?({name}_x){_HEX}{{1,2}}|{_HEX}{{2}}))"


def _build_pattern() -> re.Pattern[str]:
    parts = [
        _word("time_low", 8),
        _SEP + _word("time_mid", 4),
        _SEP + _word("time_hi", 4),
        _SEP + r"\{?" + _octet("clock_hi"),
        _SEP + _octet("clock_lo"),
    ]
    parts.extend(_SEP + _octet(name) for name in _NODE_NAMES)
    parts.append(r"\}?")
    return re.compile("".join(parts), re.IGNORECASE)


GUID_PATTERN = _build_pattern()


def iter_matches(buffer: str, start: int = 0) -> Iterator[Match]:
    """Yield non-overlapping GUID candidates in buffer, left to right."""
    for found in GUID_PATTERN.finditer(buffer, start):
        yield Match(
            start=found.start(),
            end=found.end(),
            text=found.group(0),
            time_low=found.group("time_low"),
            time_mid_hi=(found.group("time_mid"), found.group("time_hi")),
            clock_seq=(found.group("clock_hi"), found.group("clock_lo")),
            node=tuple(found.group(name) for name in _NODE_NAMES),
        )


def parse_canonical(text: str) -> Optional[uuid.UUID]:
    """Parse a hyphenated 8-4-4-4-12 GUID, or return None."""
    if not CANONICAL_PATTERN.fullmatch(text):
        return None
    return uuid.UUID(text)


def canonicalize(match: Match) -> Optional[uuid.UUID]:
    """Convert a candidate in any accepted style to its 128-bit value.

    Returns None when the candidate cannot be parsed.
    """
    guid = parse_canonical(match.text)
    if guid is not None:
        return guid
    return parse_canonical(match.canonical_text())
