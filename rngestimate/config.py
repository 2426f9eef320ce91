"""ABOUTME: Loaders for estimation request files.
ABOUTME: Parses a YAML request into validated inputs and dispatches it to the matching estimator."""

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, model_validator

from rngestimate.estimation.dataclasses import (
    DateRange,
    EggFilter,
    EstimationResult,
    IvFilter,
    KeySpec,
    PokemonFilter,
    Timer0VCountRange,
    TimeRange,
    TrainerInfoFilter,
)
from rngestimate.estimation.estimator import (
    estimate_datetime_search_results,
    estimate_egg_list_results,
    estimate_egg_search_results,
    estimate_mtseed_search_results,
    estimate_pokemon_list_results,
    estimate_tid_adjust_results,
)
from rngestimate.estimation.search_space import count_key_combinations

Feature = Literal["datetime_search", "mtseed_search", "egg_search", "tid_adjust", "pokemon_list", "egg_list"]

_DATETIME_INPUTS = ("date_range", "time_range", "timer0_vcount_ranges")
_LIST_INPUTS = ("seed_count", "max_advance")

# Inputs that must be present for each feature
_REQUIRED_INPUTS: dict[str, tuple[str, ...]] = {
    "datetime_search": (*_DATETIME_INPUTS, "target_seeds_count"),
    "mtseed_search": ("iv_filter",),
    "egg_search": _DATETIME_INPUTS,
    "tid_adjust": (*_DATETIME_INPUTS, "trainer_info_filter"),
    "pokemon_list": _LIST_INPUTS,
    "egg_list": _LIST_INPUTS,
}


class EstimationRequest(BaseModel):
    """A single estimation request as read from a YAML file.

    Only the inputs used by `feature` need to be present; see _REQUIRED_INPUTS.
    """

    model_config = ConfigDict(extra="forbid")

    feature: Feature
    threshold: int | None = None

    # Datetime-driven searches
    date_range: DateRange | None = None
    time_range: TimeRange | None = None
    timer0_vcount_ranges: list[Timer0VCountRange] | None = None
    key_spec: KeySpec = KeySpec()
    target_seeds_count: int | None = None

    # Generated lists
    seed_count: int | None = None
    max_advance: int | None = None
    user_offset: int = 0

    # Filters
    iv_filter: IvFilter | None = None
    egg_filter: EggFilter | None = None
    pokemon_filter: PokemonFilter | None = None
    trainer_info_filter: TrainerInfoFilter | None = None
    masuda_method: bool = False

    @model_validator(mode="after")
    def _check_required_inputs(self) -> "EstimationRequest":
        missing = [name for name in _REQUIRED_INPUTS[self.feature] if getattr(self, name) is None]
        if missing:
            raise ValueError(f"Feature '{self.feature}' requires: {', '.join(missing)}")
        return self

    def _datetime_inputs(self) -> tuple[DateRange, TimeRange, list[Timer0VCountRange], int]:
        """Return date range, time range, Timer0/VCount ranges and key combination count."""
        if self.date_range is None or self.time_range is None or self.timer0_vcount_ranges is None:
            raise ValueError(f"Feature '{self.feature}' requires: {', '.join(_DATETIME_INPUTS)}")
        key_combination_count = count_key_combinations(self.key_spec)
        return self.date_range, self.time_range, self.timer0_vcount_ranges, key_combination_count

    def _list_inputs(self) -> tuple[int, int, int]:
        """Return seed count, max advance and user offset."""
        if self.seed_count is None or self.max_advance is None:
            raise ValueError(f"Feature '{self.feature}' requires: {', '.join(_LIST_INPUTS)}")
        return self.seed_count, self.max_advance, self.user_offset

    def estimate(self, default_threshold: int) -> EstimationResult:
        """Run the estimator matching `feature`.

        Args:
            default_threshold: Threshold used when the request does not set one.

        Returns:
            EstimationResult of the feature's estimator.
        """
        threshold = self.threshold if self.threshold is not None else default_threshold

        if self.feature == "mtseed_search":
            iv_filter = self.iv_filter if self.iv_filter is not None else IvFilter.any()
            return estimate_mtseed_search_results(iv_filter, threshold)

        if self.feature == "pokemon_list":
            return estimate_pokemon_list_results(*self._list_inputs(), self.pokemon_filter, threshold)

        if self.feature == "egg_list":
            return estimate_egg_list_results(*self._list_inputs(), self.egg_filter, self.masuda_method, threshold)

        date_range, time_range, ranges, key_combination_count = self._datetime_inputs()

        if self.feature == "datetime_search":
            return estimate_datetime_search_results(
                date_range,
                time_range,
                ranges,
                key_combination_count,
                self.target_seeds_count or 0,
                threshold,
            )

        if self.feature == "egg_search":
            return estimate_egg_search_results(
                date_range,
                time_range,
                ranges,
                key_combination_count,
                self.egg_filter,
                self.masuda_method,
                threshold,
            )

        trainer_filter = self.trainer_info_filter if self.trainer_info_filter is not None else TrainerInfoFilter()
        return estimate_tid_adjust_results(date_range, time_range, ranges, key_combination_count, trainer_filter, threshold)


def load_estimation_request(request_path: Path) -> EstimationRequest:
    """Load an estimation request from a YAML file.

    Args:
        request_path: Path to the request file.

    Returns:
        Parsed EstimationRequest object.

    Raises:
        FileNotFoundError: If the request file doesn't exist.
        ValueError: If the request file is invalid.
    """
    if not request_path.exists():
        raise FileNotFoundError(f"Estimation request not found: {request_path}")

    with request_path.open() as f:
        raw_request = yaml.safe_load(f)

    if not isinstance(raw_request, dict):
        raise ValueError(f"Estimation request must be a mapping: {request_path}")

    return EstimationRequest.model_validate(raw_request)
