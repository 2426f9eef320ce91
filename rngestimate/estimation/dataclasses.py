"""ABOUTME: Frozen data classes describing search inputs, filters and estimation results.
ABOUTME: Contains DateRange, TimeRange, Timer0VCountRange, KeySpec, the filter classes and EstimationResult."""

from collections.abc import Hashable
from dataclasses import dataclass
from datetime import date
from typing import Annotated, Literal, TypeVar, get_args

from pydantic import AfterValidator, Field

DsButton = Literal["A", "B", "X", "Y", "L", "R", "Start", "Select", "Up", "Down", "Left", "Right"]

HiddenPowerType = Literal[
    "Fighting",
    "Flying",
    "Poison",
    "Ground",
    "Rock",
    "Bug",
    "Ghost",
    "Steel",
    "Fire",
    "Water",
    "Grass",
    "Electric",
    "Psychic",
    "Ice",
    "Dragon",
    "Dark",
]

Nature = Literal[
    "Hardy",
    "Lonely",
    "Brave",
    "Adamant",
    "Naughty",
    "Bold",
    "Docile",
    "Relaxed",
    "Impish",
    "Lax",
    "Timid",
    "Hasty",
    "Serious",
    "Jolly",
    "Naive",
    "Modest",
    "Mild",
    "Quiet",
    "Bashful",
    "Rash",
    "Calm",
    "Gentle",
    "Sassy",
    "Careful",
    "Quirky",
]

Gender = Literal["Male", "Female", "Genderless"]
AbilitySlot = Literal["First", "Second", "Hidden"]

# Shiny = Star or Square, Star = common shiny, Square = rare shiny
ShinyFilter = Literal["Shiny", "Star", "Square"]

HIDDEN_POWER_TYPES: tuple[str, ...] = get_args(HiddenPowerType)
NATURES: tuple[str, ...] = get_args(Nature)

IV_MIN = 0
IV_MAX = 31
HIDDEN_POWER_MIN_POWER = 30
HIDDEN_POWER_MAX_POWER = 70
UINT16_MAX = 0xFFFF
UINT32_MAX = 0xFFFF_FFFF

T = TypeVar("T", bound=Hashable)


def reject_duplicates(values: tuple[T, ...]) -> tuple[T, ...]:
    """Raise ValueError if a selection names the same entry twice."""
    duplicates = sorted({str(v) for v in values if values.count(v) > 1})
    if duplicates:
        raise ValueError(f"Duplicate entries: {', '.join(duplicates)}")
    return values


StatRange = tuple[int, int]
IvValue = Annotated[int, Field(ge=IV_MIN, le=IV_MAX)]
IvRange = tuple[IvValue, IvValue]
HiddenPowerPower = Annotated[int, Field(ge=HIDDEN_POWER_MIN_POWER, le=HIDDEN_POWER_MAX_POWER)]
Uint16 = Annotated[int, Field(ge=0, le=UINT16_MAX)]
Uint32 = Annotated[int, Field(ge=0, le=UINT32_MAX)]

ButtonSet = Annotated[tuple[DsButton, ...], AfterValidator(reject_duplicates)]
HiddenPowerTypeSet = Annotated[tuple[HiddenPowerType, ...], AfterValidator(reject_duplicates)]
NatureSet = Annotated[tuple[Nature, ...], AfterValidator(reject_duplicates)]


@dataclass(frozen=True)
class DateRange:
    """Inclusive calendar range searched day by day."""

    start_year: int
    start_month: int
    start_day: int
    end_year: int
    end_month: int
    end_day: int

    @property
    def start_date(self) -> date:
        """First searched day."""
        return date(self.start_year, self.start_month, self.start_day)

    @property
    def end_date(self) -> date:
        """Last searched day."""
        return date(self.end_year, self.end_month, self.end_day)


@dataclass(frozen=True)
class TimeRange:
    """Inclusive hour, minute and second ranges searched within each day.

    The three fields are independent: 10-12h with 0-5s means seconds 0-5 of
    every minute in hours 10, 11 and 12.
    """

    hour_start: int = 0
    hour_end: int = 23
    minute_start: int = 0
    minute_end: int = 59
    second_start: int = 0
    second_end: int = 59


@dataclass(frozen=True)
class Timer0VCountRange:
    """One rectangular Timer0 x VCount region of the hardware parameter grid."""

    timer0_min: int
    timer0_max: int
    vcount_min: int
    vcount_max: int


@dataclass(frozen=True)
class KeySpec:
    """Buttons that may be held while the game boots.

    Attributes:
        available_buttons: Button names; every valid subset is searched.
    """

    available_buttons: ButtonSet = ()


@dataclass(frozen=True)
class IvFilter:
    """IV range filter with optional Hidden Power constraints.

    Attributes:
        hp: Accepted (min, max) HP IV.
        attack: Accepted (min, max) Attack IV.
        defense: Accepted (min, max) Defense IV.
        sp_attack: Accepted (min, max) Sp. Atk IV.
        sp_defense: Accepted (min, max) Sp. Def IV.
        speed: Accepted (min, max) Speed IV.
        hidden_power_types: Accepted Hidden Power types, None for any.
        hidden_power_min_power: Minimum Hidden Power base power (30-70), None for any.
    """

    hp: IvRange = (IV_MIN, IV_MAX)
    attack: IvRange = (IV_MIN, IV_MAX)
    defense: IvRange = (IV_MIN, IV_MAX)
    sp_attack: IvRange = (IV_MIN, IV_MAX)
    sp_defense: IvRange = (IV_MIN, IV_MAX)
    speed: IvRange = (IV_MIN, IV_MAX)
    hidden_power_types: HiddenPowerTypeSet | None = None
    hidden_power_min_power: HiddenPowerPower | None = None

    @classmethod
    def any(cls) -> "IvFilter":
        """Filter accepting every IV spread."""
        return cls()

    @classmethod
    def six_v(cls) -> "IvFilter":
        """Filter requiring 31 in every stat."""
        perfect = (IV_MAX, IV_MAX)
        return cls(
            hp=perfect,
            attack=perfect,
            defense=perfect,
            sp_attack=perfect,
            sp_defense=perfect,
            speed=perfect,
        )

    @property
    def stat_ranges(self) -> tuple[IvRange, ...]:
        """The six stat ranges in HP, Atk, Def, SpA, SpD, Spe order."""
        return (self.hp, self.attack, self.defense, self.sp_attack, self.sp_defense, self.speed)


@dataclass(frozen=True)
class StatsFilter:
    """Exact stat values applied as a post-filter on generated Pokemon."""

    hp: int | None = None
    attack: int | None = None
    defense: int | None = None
    sp_attack: int | None = None
    sp_defense: int | None = None
    speed: int | None = None


@dataclass(frozen=True)
class CoreDataFilter:
    """Filter shared by generated Pokemon and eggs. None means no constraint."""

    iv: IvFilter | None = None
    natures: NatureSet | None = None
    gender: Gender | None = None
    ability_slot: AbilitySlot | None = None
    shiny: ShinyFilter | None = None
    stats: StatsFilter | None = None

    @classmethod
    def any(cls) -> "CoreDataFilter":
        """Filter without any constraint."""
        return cls()


@dataclass(frozen=True)
class PokemonFilter(CoreDataFilter):
    """Filter for wild/static Pokemon lists, adding species and level constraints."""

    species_ids: tuple[int, ...] | None = None
    level_range: StatRange | None = None


@dataclass(frozen=True)
class EggFilter(CoreDataFilter):
    """Filter for egg lists, adding the minimum NPC margin in frames."""

    min_margin_frames: int | None = None


@dataclass(frozen=True)
class TrainerInfoFilter:
    """Exact TID/SID match, or a PID that must come out shiny."""

    tid: Uint16 | None = None
    sid: Uint16 | None = None
    shiny_pid: Uint32 | None = None


@dataclass(frozen=True)
class EstimationResult:
    """Estimated outcome of a search, used to decide whether to warn the user.

    Attributes:
        search_space_size: Number of combinations the search enumerates.
        hit_rate: Approximate probability that one combination passes the filter.
        estimated_count: round(search_space_size * hit_rate).
        exceeds_threshold: True if estimated_count is above the warning threshold.
    """

    search_space_size: int
    hit_rate: float
    estimated_count: int
    exceeds_threshold: bool
