"""ABOUTME: Search result estimation package.
ABOUTME: Exposes search space calculators, hit rate estimators and per-feature estimators."""

from rngestimate.estimation.dataclasses import (
    CoreDataFilter,
    DateRange,
    EggFilter,
    EstimationResult,
    IvFilter,
    KeySpec,
    PokemonFilter,
    StatsFilter,
    Timer0VCountRange,
    TimeRange,
    TrainerInfoFilter,
)
from rngestimate.estimation.estimator import (
    DEFAULT_RESULT_WARNING_THRESHOLD,
    build_estimation,
    estimate_datetime_search_results,
    estimate_egg_list_results,
    estimate_egg_search_results,
    estimate_mtseed_search_results,
    estimate_pokemon_list_results,
    estimate_tid_adjust_results,
)
from rngestimate.estimation.hit_rate import (
    estimate_core_data_filter_hit_rate,
    estimate_egg_filter_hit_rate,
    estimate_iv_filter_hit_rate,
    estimate_pokemon_filter_hit_rate,
    estimate_trainer_info_filter_hit_rate,
    iv_stat_hit_rate,
    shiny_hit_rate,
)
from rngestimate.estimation.search_space import (
    calculate_datetime_search_space,
    calculate_mtseed_search_space,
    count_days,
    count_generated_results,
    count_key_combinations,
    count_timer0_vcount_combinations,
    count_valid_seconds,
)

__all__ = [
    "DEFAULT_RESULT_WARNING_THRESHOLD",
    "CoreDataFilter",
    "DateRange",
    "EggFilter",
    "EstimationResult",
    "IvFilter",
    "KeySpec",
    "PokemonFilter",
    "StatsFilter",
    "TimeRange",
    "Timer0VCountRange",
    "TrainerInfoFilter",
    "build_estimation",
    "calculate_datetime_search_space",
    "calculate_mtseed_search_space",
    "count_days",
    "count_generated_results",
    "count_key_combinations",
    "count_timer0_vcount_combinations",
    "count_valid_seconds",
    "estimate_core_data_filter_hit_rate",
    "estimate_datetime_search_results",
    "estimate_egg_filter_hit_rate",
    "estimate_egg_list_results",
    "estimate_egg_search_results",
    "estimate_iv_filter_hit_rate",
    "estimate_mtseed_search_results",
    "estimate_pokemon_filter_hit_rate",
    "estimate_pokemon_list_results",
    "estimate_tid_adjust_results",
    "estimate_trainer_info_filter_hit_rate",
    "iv_stat_hit_rate",
    "shiny_hit_rate",
]
