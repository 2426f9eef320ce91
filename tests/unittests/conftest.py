"""Contains configurations for the test run."""

from pathlib import Path

import pytest

from rngestimate.estimation.dataclasses import DateRange, Timer0VCountRange, TimeRange


@pytest.fixture(scope="session")
def resources_folder() -> Path:
    """Returns the path to the test resources folder."""
    return Path(__file__).parents[1] / "resources"


@pytest.fixture
def single_day() -> DateRange:
    """2000-01-01 only."""
    return DateRange(start_year=2000, start_month=1, start_day=1, end_year=2000, end_month=1, end_day=1)


@pytest.fixture
def full_day() -> TimeRange:
    """Every second of the day."""
    return TimeRange(hour_start=0, hour_end=23, minute_start=0, minute_end=59, second_start=0, second_end=59)


@pytest.fixture
def two_timer0_one_vcount() -> list[Timer0VCountRange]:
    """One region of 2 Timer0 values x 1 VCount value."""
    return [Timer0VCountRange(timer0_min=0x600, timer0_max=0x601, vcount_min=0x50, vcount_max=0x50)]
