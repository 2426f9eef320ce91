# ABOUTME: Unit tests for the search space size calculators.
# ABOUTME: Tests day, second, key combination and Timer0/VCount counting.

import pytest

from rngestimate.estimation.dataclasses import DateRange, KeySpec, Timer0VCountRange, TimeRange
from rngestimate.estimation.search_space import (
    calculate_datetime_search_space,
    calculate_mtseed_search_space,
    count_days,
    count_generated_results,
    count_key_combinations,
    count_timer0_vcount_combinations,
    count_valid_seconds,
)
from rngestimate.utils.key_input import DS_BUTTONS


def _date_range(start: tuple[int, int, int], end: tuple[int, int, int]) -> DateRange:
    return DateRange(
        start_year=start[0],
        start_month=start[1],
        start_day=start[2],
        end_year=end[0],
        end_month=end[1],
        end_day=end[2],
    )


class TestCountDays:
    """Tests for count_days function."""

    def test_same_day(self) -> None:
        """Same start and end day counts as 1."""
        assert count_days(_date_range((2000, 1, 1), (2000, 1, 1))) == 1

    def test_two_days(self) -> None:
        """One-day span counts both ends."""
        assert count_days(_date_range((2000, 1, 1), (2000, 1, 2))) == 2

    def test_year_boundary(self) -> None:
        """2000-12-31 to 2001-01-01 is 2 days."""
        assert count_days(_date_range((2000, 12, 31), (2001, 1, 1))) == 2

    def test_leap_february(self) -> None:
        """February 2000 has 29 days."""
        assert count_days(_date_range((2000, 2, 1), (2000, 2, 29))) == 29

    def test_leap_year(self) -> None:
        """Year 2000 has 366 days."""
        assert count_days(_date_range((2000, 1, 1), (2000, 12, 31))) == 366

    def test_inverted_range_is_zero(self) -> None:
        """End before start is an empty range, not negative."""
        assert count_days(_date_range((2000, 1, 10), (2000, 1, 1))) == 0

    def test_invalid_date_raises(self) -> None:
        """Non-existent calendar dates are rejected."""
        with pytest.raises(ValueError):
            count_days(_date_range((2001, 2, 29), (2001, 3, 1)))


class TestCountValidSeconds:
    """Tests for count_valid_seconds function."""

    def test_full_day(self, full_day: TimeRange) -> None:
        """Full range is 86400 seconds."""
        assert count_valid_seconds(full_day) == 86_400

    def test_default_is_full_day(self) -> None:
        """TimeRange defaults cover the whole day."""
        assert count_valid_seconds(TimeRange()) == 86_400

    def test_single_second(self) -> None:
        """12:30:45 only is 1 second."""
        time_range = TimeRange(
            hour_start=12, hour_end=12, minute_start=30, minute_end=30, second_start=45, second_end=45
        )
        assert count_valid_seconds(time_range) == 1

    def test_single_hour(self) -> None:
        """One hour with all minutes and seconds is 3600."""
        assert count_valid_seconds(TimeRange(hour_start=10, hour_end=10)) == 3600

    def test_fields_are_independent(self) -> None:
        """Hours 10-12 with seconds 0-5 is 3 x 60 x 6."""
        assert count_valid_seconds(TimeRange(hour_start=10, hour_end=12, second_start=0, second_end=5)) == 1080

    def test_inverted_field_is_zero(self) -> None:
        """One inverted field makes the whole product 0."""
        assert count_valid_seconds(TimeRange(minute_start=30, minute_end=10)) == 0

    def test_two_inverted_fields_stay_zero(self) -> None:
        """Two inverted fields do not multiply into a positive count."""
        assert count_valid_seconds(TimeRange(hour_start=5, hour_end=3, minute_start=30, minute_end=10)) == 0


class TestCountKeyCombinations:
    """Tests for count_key_combinations function."""

    def test_no_buttons(self) -> None:
        """Empty key spec has only the no-press combination."""
        assert count_key_combinations(KeySpec()) == 1

    def test_single_button(self) -> None:
        """One button is pressed or not."""
        assert count_key_combinations(KeySpec(available_buttons=("A",))) == 2

    def test_two_free_buttons(self) -> None:
        """A and B give 4 combinations."""
        assert count_key_combinations(KeySpec(available_buttons=("A", "B"))) == 4

    def test_up_down(self) -> None:
        """Up+Down is excluded."""
        assert count_key_combinations(KeySpec(available_buttons=("Up", "Down"))) == 3

    def test_left_right(self) -> None:
        """Left+Right is excluded."""
        assert count_key_combinations(KeySpec(available_buttons=("Left", "Right"))) == 3

    def test_soft_reset(self) -> None:
        """L+R+Start+Select is excluded from 16 subsets."""
        assert count_key_combinations(KeySpec(available_buttons=("L", "R", "Start", "Select"))) == 15

    def test_all_buttons(self) -> None:
        """All 12 buttons: 16 (ABXY) x 3 (vertical) x 3 (horizontal) x 15 (soft reset group)."""
        result = count_key_combinations(KeySpec(available_buttons=tuple(DS_BUTTONS)))  # type: ignore[arg-type]
        assert result == 16 * 3 * 3 * 15
        assert 0 < result < 4096


class TestCountTimer0VCountCombinations:
    """Tests for count_timer0_vcount_combinations function."""

    def test_empty(self) -> None:
        """No regions is 0."""
        assert count_timer0_vcount_combinations([]) == 0

    def test_regions_sum(self) -> None:
        """Regions of 3x2 and 1x1 sum to 7."""
        ranges = [
            Timer0VCountRange(timer0_min=0x600, timer0_max=0x602, vcount_min=0x50, vcount_max=0x51),
            Timer0VCountRange(timer0_min=0x700, timer0_max=0x700, vcount_min=0x60, vcount_max=0x60),
        ]
        assert count_timer0_vcount_combinations(ranges) == 7

    def test_inverted_region_contributes_zero(self) -> None:
        """Inverted region adds nothing."""
        ranges = [
            Timer0VCountRange(timer0_min=0x602, timer0_max=0x600, vcount_min=0x50, vcount_max=0x51),
            Timer0VCountRange(timer0_min=0x700, timer0_max=0x700, vcount_min=0x60, vcount_max=0x60),
        ]
        assert count_timer0_vcount_combinations(ranges) == 1


class TestCalculateSearchSpace:
    """Tests for the combined search space functions."""

    def test_single_second_multiple_regions(self) -> None:
        """days=1, seconds=1, t0vc=7, keys=1 gives 7."""
        time_range = TimeRange(hour_start=0, hour_end=0, minute_start=0, minute_end=0, second_start=0, second_end=0)
        ranges = [
            Timer0VCountRange(timer0_min=0x600, timer0_max=0x602, vcount_min=0x50, vcount_max=0x51),
            Timer0VCountRange(timer0_min=0x700, timer0_max=0x700, vcount_min=0x60, vcount_max=0x60),
        ]
        assert calculate_datetime_search_space(_date_range((2000, 1, 1), (2000, 1, 1)), time_range, ranges, 1) == 7

    def test_full_day_scenario(
        self,
        single_day: DateRange,
        full_day: TimeRange,
        two_timer0_one_vcount: list[Timer0VCountRange],
    ) -> None:
        """1 day x 86400 s x 2 x 1 key combination is 172800."""
        key_count = count_key_combinations(KeySpec())
        assert calculate_datetime_search_space(single_day, full_day, two_timer0_one_vcount, key_count) == 172_800

    def test_key_count_multiplies(
        self,
        single_day: DateRange,
        full_day: TimeRange,
        two_timer0_one_vcount: list[Timer0VCountRange],
    ) -> None:
        """Key combination count is a plain factor."""
        assert calculate_datetime_search_space(single_day, full_day, two_timer0_one_vcount, 4) == 4 * 172_800

    def test_mtseed_space(self) -> None:
        """MT seed space is 2^32."""
        assert calculate_mtseed_search_space() == 4_294_967_296


class TestCountGeneratedResults:
    """Tests for count_generated_results function."""

    def test_basic(self) -> None:
        """100 seeds x 1000 advances."""
        assert count_generated_results(100, 1000, 0) == 100_000

    def test_offset(self) -> None:
        """Offset reduces the advances per seed."""
        assert count_generated_results(10, 100, 40) == 600

    def test_offset_past_max_is_zero(self) -> None:
        """Offset beyond max advance generates nothing."""
        assert count_generated_results(10, 100, 200) == 0
