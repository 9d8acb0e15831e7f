"""Shared fixtures for guidscan tests."""

from __future__ import annotations

import uuid

import pytest

GUID_TEXT = "a864f394-c94e-4727-8eeb-89223e3096af"
STRUCT_TEXT = "0xa864f394,0xc94e,0x4727,0x8e,0xeb,0x89,0x22,0x3e,0x30,0x96,0xaf"
BRACED_TEXT = "0xa864f394, 0xc94e, 0x4727, { 0x8e, 0xeb, 0x89, 0x22, 0x3e, 0x30, 0x96, 0xaf }"


@pytest.fixture
def expected_guid() -> uuid.UUID:
    return uuid.UUID(GUID_TEXT)
