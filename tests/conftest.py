"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from swissuid import SwissUid


@pytest.fixture
def uid_text() -> str:
    """Canonical text of a known valid UID."""
    return "CHE-109.322.551"


@pytest.fixture
def uid(uid_text: str) -> SwissUid:
    """Parsed known valid UID (check digit 1)."""
    return SwissUid(uid_text)


@pytest.fixture
def sentinel_payload() -> list[int]:
    """Payload whose weighted sum leaves remainder 1, so it has no check digit."""
    return [1, 0, 0, 0, 0, 0, 8, 0]
