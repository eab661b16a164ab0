from collections.abc import Generator
from datetime import date
from typing import Any

import pytest

from repeatcal.models import EventForm, RepeatInfo, RepeatType
from repeatcal.recurrence import RecurrenceConfig


@pytest.fixture
def far_horizon() -> RecurrenceConfig:
    """Recurrence config with a distant horizon cap.

    Most property tests span several years; the default cap (2025-12-31)
    would reject them.
    """
    return RecurrenceConfig(max_end_date=date(2400, 12, 31))


@pytest.fixture
def monthly_form() -> EventForm:
    """Event form repeating monthly from a 31st anchor."""
    return EventForm(
        title="Rent due",
        date=date(2025, 1, 31),
        start_time="09:00",
        end_time="09:30",
        category="finance",
        repeat=RepeatInfo(type=RepeatType.MONTHLY, interval=1, end_date=date(2025, 4, 30)),
    )


@pytest.fixture(autouse=True)
def clean_test_environment(monkeypatch: Any) -> Generator[None, Any, None]:
    """Clear repeatcal environment overrides before each test."""
    for name in ("REPEATCAL_DEBUG", "REPEATCAL_LOG_LEVEL", "REPEATCAL_MAX_END_DATE"):
        monkeypatch.delenv(name, raising=False)
    yield
