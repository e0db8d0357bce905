"""Pytest configuration and fixtures for Diem tests."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from datetime import datetime, timezone
from pathlib import Path

import pytest
from loguru import logger

# Add the parent directory to sys.path so diem can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from diem import clock as diem_clock  # noqa: E402


@pytest.fixture
def fixed_clock() -> diem_clock.FixedClock:
    """Clock pinned to Monday 2024-01-15 12:00 UTC."""
    return diem_clock.FixedClock(datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc))


@pytest.fixture(autouse=True)
def restore_default_clock() -> Iterator[None]:
    """Put back whatever default clock a test installed."""
    previous = diem_clock.get_clock()
    yield
    diem_clock.set_clock(previous)


@pytest.fixture
def log_records() -> Iterator[list[dict]]:
    """Capture diem's loguru records for the duration of a test."""
    records: list[dict] = []
    logger.enable("diem")
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    try:
        yield records
    finally:
        logger.remove(handler_id)
        logger.disable("diem")
