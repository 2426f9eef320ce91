# ABOUTME: Per-feature result count estimators combining search space and hit rate.
# ABOUTME: Each estimator returns an EstimationResult compared against a warning threshold.

import logging
import math
from collections.abc import Sequence

from rngestimate.estimation.dataclasses import (
    DateRange,
    EggFilter,
    EstimationResult,
    IvFilter,
    PokemonFilter,
    Timer0VCountRange,
    TimeRange,
    TrainerInfoFilter,
)
from rngestimate.estimation.hit_rate import (
    estimate_egg_filter_hit_rate,
    estimate_iv_filter_hit_rate,
    estimate_pokemon_filter_hit_rate,
    estimate_trainer_info_filter_hit_rate,
)
from rngestimate.estimation.search_space import (
    MT_SEED_FULL_SPACE,
    calculate_datetime_search_space,
    calculate_mtseed_search_space,
    count_generated_results,
)

logger = logging.getLogger(__name__)

DEFAULT_RESULT_WARNING_THRESHOLD = 50_000


def _round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for non-negative values."""
    whole = math.floor(value)
    # value + 0.5 can round up in float arithmetic (0.49999999999999994 + 0.5 == 1.0)
    return whole + 1 if value - whole >= 0.5 else whole


def build_estimation(search_space_size: int, hit_rate: float, threshold: int) -> EstimationResult:
    """Combine a search space size and a hit rate into an EstimationResult.

    Args:
        search_space_size: Number of combinations the search enumerates.
        hit_rate: Approximate pass rate of the filter.
        threshold: Estimated counts above this value exceed the threshold.

    Returns:
        EstimationResult with the rounded estimated count.
    """
    estimated_count = _round_half_up(search_space_size * hit_rate)
    result = EstimationResult(
        search_space_size=search_space_size,
        hit_rate=hit_rate,
        estimated_count=estimated_count,
        exceeds_threshold=estimated_count > threshold,
    )
    logger.debug(
        "Estimated %d results (space=%d, hit_rate=%.3g, threshold=%d)",
        estimated_count,
        search_space_size,
        hit_rate,
        threshold,
    )
    return result


def estimate_datetime_search_results(
    date_range: DateRange,
    time_range: TimeRange,
    ranges: Sequence[Timer0VCountRange],
    key_combination_count: int,
    target_seeds_count: int,
    threshold: int = DEFAULT_RESULT_WARNING_THRESHOLD,
) -> EstimationResult:
    """Estimate results of a datetime search for a set of target MT seeds.

    Every combination is hashed and looked up in the target set, so the hit
    rate is target_seeds_count / 2^32.
    """
    search_space_size = calculate_datetime_search_space(date_range, time_range, ranges, key_combination_count)
    hit_rate = target_seeds_count / MT_SEED_FULL_SPACE
    return build_estimation(search_space_size, hit_rate, threshold)


def estimate_mtseed_search_results(
    iv_filter: IvFilter,
    threshold: int = DEFAULT_RESULT_WARNING_THRESHOLD,
) -> EstimationResult:
    """Estimate results of an IV search over all MT seeds."""
    search_space_size = calculate_mtseed_search_space()
    hit_rate = estimate_iv_filter_hit_rate(iv_filter)
    return build_estimation(search_space_size, hit_rate, threshold)


def estimate_egg_search_results(
    date_range: DateRange,
    time_range: TimeRange,
    ranges: Sequence[Timer0VCountRange],
    key_combination_count: int,
    egg_filter: EggFilter | None,
    masuda_method: bool,
    threshold: int = DEFAULT_RESULT_WARNING_THRESHOLD,
) -> EstimationResult:
    """Estimate results of an egg search over boot datetimes."""
    search_space_size = calculate_datetime_search_space(date_range, time_range, ranges, key_combination_count)
    hit_rate = estimate_egg_filter_hit_rate(masuda_method, egg_filter)
    return build_estimation(search_space_size, hit_rate, threshold)


def estimate_tid_adjust_results(
    date_range: DateRange,
    time_range: TimeRange,
    ranges: Sequence[Timer0VCountRange],
    key_combination_count: int,
    trainer_filter: TrainerInfoFilter,
    threshold: int = DEFAULT_RESULT_WARNING_THRESHOLD,
) -> EstimationResult:
    """Estimate results of a TID/SID adjustment search."""
    search_space_size = calculate_datetime_search_space(date_range, time_range, ranges, key_combination_count)
    hit_rate = estimate_trainer_info_filter_hit_rate(trainer_filter)
    return build_estimation(search_space_size, hit_rate, threshold)


def estimate_pokemon_list_results(
    seed_count: int,
    max_advance: int,
    user_offset: int,
    pokemon_filter: PokemonFilter | None = None,
    threshold: int = DEFAULT_RESULT_WARNING_THRESHOLD,
) -> EstimationResult:
    """Estimate the rows of a generated Pokemon list after filtering.

    Args:
        seed_count: Number of starting seeds.
        max_advance: Last advance generated for each seed.
        user_offset: First advance generated for each seed.
        pokemon_filter: Filter applied to the list, None for no filter.
        threshold: Warning threshold.

    Returns:
        EstimationResult over seed_count * (max_advance - user_offset) entries.
    """
    generated = count_generated_results(seed_count, max_advance, user_offset)
    hit_rate = estimate_pokemon_filter_hit_rate(pokemon_filter)
    return build_estimation(generated, hit_rate, threshold)


def estimate_egg_list_results(
    seed_count: int,
    max_advance: int,
    user_offset: int,
    egg_filter: EggFilter | None,
    masuda_method: bool,
    threshold: int = DEFAULT_RESULT_WARNING_THRESHOLD,
) -> EstimationResult:
    """Estimate the rows of a generated egg list after filtering."""
    generated = count_generated_results(seed_count, max_advance, user_offset)
    hit_rate = estimate_egg_filter_hit_rate(masuda_method, egg_filter)
    return build_estimation(generated, hit_rate, threshold)
