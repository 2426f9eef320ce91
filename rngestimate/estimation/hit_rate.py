# ABOUTME: Hit rate estimators for IV, core data, trainer info, egg and Pokemon filters.
# ABOUTME: Multiplies independent per-attribute probabilities into one approximate rate.

from rngestimate.estimation.dataclasses import (
    HIDDEN_POWER_MAX_POWER,
    HIDDEN_POWER_MIN_POWER,
    HIDDEN_POWER_TYPES,
    NATURES,
    CoreDataFilter,
    EggFilter,
    IvFilter,
    PokemonFilter,
    ShinyFilter,
    TrainerInfoFilter,
)

# The random IV domain has 32 values per stat. Do not change to 31.
IV_VALUE_SPACE = 32

# Hidden Power base power spans 30-70, 41 levels
HIDDEN_POWER_POWER_LEVELS = HIDDEN_POWER_MAX_POWER - HIDDEN_POWER_MIN_POWER + 1

# 16-bit shiny value domain
SHINY_VALUE_SPACE = 65_536

SHINY_RATES: dict[str, int] = {
    "Shiny": 8,
    "Star": 7,
    "Square": 1,
}

# Masuda method: six rerolls of the PID
MASUDA_SHINY_RATES: dict[str, int] = {
    "Shiny": 48,
    "Star": 42,
    "Square": 6,
}

# Approximation: ignores the species gender ratio.
GENDER_HIT_RATE = 0.5

# Approximation: First/Second only, the Hidden slot is not modelled.
ABILITY_SLOT_HIT_RATE = 0.5

TRAINER_ID_HIT_RATE = 1 / 65_536
SECRET_ID_HIT_RATE = 1 / 65_536
SHINY_PID_HIT_RATE = 8 / 65_536


def iv_stat_hit_rate(min_iv: int, max_iv: int) -> float:
    """Probability that one random IV falls in [min_iv, max_iv].

    Args:
        min_iv: Lower bound (inclusive).
        max_iv: Upper bound (inclusive).

    Returns:
        (max_iv - min_iv + 1) / 32, 0 for an inverted range.
    """
    return max(max_iv - min_iv + 1, 0) / IV_VALUE_SPACE


def estimate_iv_filter_hit_rate(iv_filter: IvFilter) -> float:
    """Approximate the pass rate of an IV filter.

    Stat ranges, Hidden Power type and Hidden Power power are treated as
    independent factors.

    Args:
        iv_filter: IV ranges and optional Hidden Power constraints.

    Returns:
        Product of the six stat rates, the selected type share (n/16) and the
        power share ((70 - min + 1) / 41).
    """
    rate = 1.0
    for min_iv, max_iv in iv_filter.stat_ranges:
        rate *= iv_stat_hit_rate(min_iv, max_iv)

    if iv_filter.hidden_power_types:
        rate *= len(iv_filter.hidden_power_types) / len(HIDDEN_POWER_TYPES)

    if iv_filter.hidden_power_min_power is not None:
        rate *= (HIDDEN_POWER_MAX_POWER - iv_filter.hidden_power_min_power + 1) / HIDDEN_POWER_POWER_LEVELS

    return rate


def shiny_hit_rate(shiny: ShinyFilter | None, masuda_method: bool) -> float:
    """Probability that a random PID matches the shiny filter.

    Args:
        shiny: "Shiny" (any), "Star" or "Square", None for no constraint.
        masuda_method: Whether eggs are bred with the Masuda method.

    Returns:
        Rate out of 65536, 1 if no shiny constraint.
    """
    if shiny is None:
        return 1.0

    table = MASUDA_SHINY_RATES if masuda_method else SHINY_RATES
    return table[shiny] / SHINY_VALUE_SPACE


def estimate_core_data_filter_hit_rate(
    core_filter: CoreDataFilter | None = None,
    masuda_method: bool = False,
) -> float:
    """Approximate the pass rate of a core data filter.

    The stats post-filter is not estimated (factor 1): its rate depends on
    per-species base stats.

    Args:
        core_filter: Filter to estimate, None for no filter.
        masuda_method: Whether the shiny rate uses the Masuda table.

    Returns:
        Product of the IV, nature, gender, ability slot and shiny factors.
    """
    if core_filter is None:
        return 1.0

    rate = 1.0

    if core_filter.iv is not None:
        rate *= estimate_iv_filter_hit_rate(core_filter.iv)

    if core_filter.natures:
        rate *= len(core_filter.natures) / len(NATURES)

    if core_filter.gender is not None:
        rate *= GENDER_HIT_RATE

    if core_filter.ability_slot is not None:
        rate *= ABILITY_SLOT_HIT_RATE

    if core_filter.shiny is not None:
        rate *= shiny_hit_rate(core_filter.shiny, masuda_method)

    return rate


def estimate_trainer_info_filter_hit_rate(trainer_filter: TrainerInfoFilter) -> float:
    """Approximate the pass rate of a TID/SID/shiny PID filter."""
    rate = 1.0

    if trainer_filter.tid is not None:
        rate *= TRAINER_ID_HIT_RATE
    if trainer_filter.sid is not None:
        rate *= SECRET_ID_HIT_RATE
    if trainer_filter.shiny_pid is not None:
        rate *= SHINY_PID_HIT_RATE

    return rate


def estimate_egg_filter_hit_rate(masuda_method: bool, egg_filter: EggFilter | None = None) -> float:
    """Approximate the pass rate of an egg filter. min_margin_frames is not estimated."""
    return estimate_core_data_filter_hit_rate(egg_filter, masuda_method)


def estimate_pokemon_filter_hit_rate(pokemon_filter: PokemonFilter | None = None) -> float:
    """Approximate the pass rate of a Pokemon list filter.

    species_ids and level_range are not estimated. Shiny odds never depend on
    the breeding method here.
    """
    return estimate_core_data_filter_hit_rate(pokemon_filter)
