# ABOUTME: Search space size calculators for datetime, MT seed and list searches.
# ABOUTME: Counts days, seconds, key combinations and Timer0/VCount combinations.

from collections.abc import Sequence

from rngestimate.estimation.dataclasses import DateRange, KeySpec, Timer0VCountRange, TimeRange
from rngestimate.utils.key_input import iter_valid_key_masks

# Every 32-bit MT seed
MT_SEED_FULL_SPACE = 2**32


def count_days(date_range: DateRange) -> int:
    """Count calendar days in the range, both ends included.

    Args:
        date_range: Inclusive start/end dates.

    Returns:
        Number of days (same day -> 1), 0 if the end is before the start.
    """
    delta = date_range.end_date - date_range.start_date
    return max(delta.days + 1, 0)


def count_valid_seconds(time_range: TimeRange) -> int:
    """Count searched seconds per day.

    Hours, minutes and seconds are multiplied as independent digits, the same
    way the search engine walks them. An inverted field contributes 0.

    Args:
        time_range: Inclusive hour/minute/second ranges.

    Returns:
        Seconds searched per day (86400 for the full range).
    """
    hours = time_range.hour_end - time_range.hour_start + 1
    minutes = time_range.minute_end - time_range.minute_start + 1
    seconds = time_range.second_end - time_range.second_start + 1
    return max(hours, 0) * max(minutes, 0) * max(seconds, 0)


def count_key_combinations(key_spec: KeySpec) -> int:
    """Count valid button combinations for a key spec.

    Walks all 2^n subsets of the available buttons and drops Up+Down,
    Left+Right and soft reset (L+R+Start+Select) patterns. The exclusions
    overlap, so there is no closed form.

    Args:
        key_spec: Buttons that may be held.

    Returns:
        Number of valid combinations, 1 for no buttons (nothing pressed).
    """
    return sum(1 for _ in iter_valid_key_masks(key_spec.available_buttons))


def count_timer0_vcount_combinations(ranges: Sequence[Timer0VCountRange]) -> int:
    """Sum the Timer0 x VCount sizes of all regions.

    Regions are expected not to overlap; nothing is deduplicated.
    """
    total = 0
    for r in ranges:
        timer0 = r.timer0_max - r.timer0_min + 1
        vcount = r.vcount_max - r.vcount_min + 1
        total += max(timer0, 0) * max(vcount, 0)
    return total


def calculate_datetime_search_space(
    date_range: DateRange,
    time_range: TimeRange,
    ranges: Sequence[Timer0VCountRange],
    key_combination_count: int,
) -> int:
    """Calculate the search space of a datetime-driven search.

    Shared by datetime search, egg search and TID adjustment.

    Args:
        date_range: Days to search.
        time_range: Seconds to search within each day.
        ranges: Timer0/VCount regions of the target console.
        key_combination_count: Result of count_key_combinations.

    Returns:
        days * seconds * timer0_vcount * key_combination_count.
    """
    days = count_days(date_range)
    seconds = count_valid_seconds(time_range)
    timer0_vcount = count_timer0_vcount_combinations(ranges)
    return days * seconds * timer0_vcount * key_combination_count


def calculate_mtseed_search_space() -> int:
    """Search space of an MT seed IV search (always 2^32)."""
    return MT_SEED_FULL_SPACE


def count_generated_results(seed_count: int, max_advance: int, user_offset: int) -> int:
    """Count entries generated by a list feature before filtering.

    Args:
        seed_count: Number of starting seeds.
        max_advance: Last advance generated for each seed.
        user_offset: First advance generated for each seed.

    Returns:
        seed_count * max(max_advance - user_offset, 0).
    """
    return seed_count * max(max_advance - user_offset, 0)
