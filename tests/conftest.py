"""Shared fixtures for unit tests."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

import pytest
import structlog

from signatory.signatory import Signatory

if TYPE_CHECKING:
    from collections.abc import Iterator

FIXED_NOW = datetime(2024, 9, 28, 3, 37, 25, tzinfo=UTC)


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    yield
    structlog.reset_defaults()


@pytest.fixture()
def secret() -> str:
    return "ds069ed4223ac1660f"


@pytest.fixture()
def shutdown_params() -> dict[str, Any]:
    """Device shutdown request with a known signature."""
    return {
        "client_id": "16327128",
        "method": "android.shutdown",
        "timestamp": "1727494645",
    }


@pytest.fixture()
def signatory(secret: str) -> Signatory:
    return Signatory(secret, clock=lambda: FIXED_NOW)
