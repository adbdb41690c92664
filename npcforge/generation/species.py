"""
Species baselines.

Starting characteristics are fixed representative values rather than
2d10 rolls, so generation stays deterministic. Each
baseline also carries the species' movement, Fortune and Fate, and the
talents every member of the species is born with.
"""

from collections.abc import Iterable, Iterator
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, model_validator

from npcforge.generation.models import Characteristic

DEFAULT_SPECIES_ID = "human"


class SpeciesBaseline(BaseModel):
    """Starting values and fixed lookups for one species."""

    id: str
    name: str
    characteristics: dict[Characteristic, int]
    movement: int = Field(ge=0)
    fortune: int = Field(ge=0)
    fate: int = Field(ge=0)
    talents: tuple[str, ...] = Field(default=(), description="Innate talents, granted at no XP cost")
    wounds_include_strength: bool = Field(
        default=True,
        description="Whether Strength Bonus counts towards Wounds (false for Halflings)",
    )

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _has_every_characteristic(self) -> "SpeciesBaseline":
        missing = set(Characteristic) - set(self.characteristics)
        if missing:
            names = ", ".join(sorted(missing))
            raise ValueError(f"Species {self.id!r} is missing base values for: {names}")
        return self

    def base_value(self, characteristic: Characteristic) -> int:
        return self.characteristics[characteristic]


class SpeciesCatalog:
    """Read-only registry of species baselines; unknown ids resolve to the default."""

    def __init__(self, species: Iterable[SpeciesBaseline], default_id: str = DEFAULT_SPECIES_ID):
        records = {baseline.id: baseline for baseline in species}
        if default_id not in records:
            raise ValueError(f"Default species {default_id!r} is not in the catalog")
        self._species = MappingProxyType(records)
        self.default_id = default_id

    def __contains__(self, species_id: object) -> bool:
        return species_id in self._species

    def __iter__(self) -> Iterator[SpeciesBaseline]:
        return iter(self._species.values())

    def ids(self) -> list[str]:
        return list(self._species)

    def get(self, species_id: str) -> SpeciesBaseline:
        return self._species.get(species_id, self._species[self.default_id])


def _values(ws, bs, s, t, i, ag, dex, int_, wp, fel) -> dict[Characteristic, int]:
    return dict(zip(Characteristic, (ws, bs, s, t, i, ag, dex, int_, wp, fel)))


SPECIES: tuple[SpeciesBaseline, ...] = (
    SpeciesBaseline(
        id="human",
        name="Human",
        characteristics=_values(30, 30, 30, 30, 30, 30, 30, 30, 30, 30),
        movement=4,
        fortune=2,
        fate=2,
    ),
    SpeciesBaseline(
        id="halfling",
        name="Halfling",
        characteristics=_values(20, 35, 15, 25, 35, 35, 35, 35, 40, 35),
        movement=3,
        fortune=3,
        fate=3,
        talents=("Night Vision", "Resistance (Chaos)", "Small"),
        wounds_include_strength=False,
    ),
    SpeciesBaseline(
        id="dwarf",
        name="Dwarf",
        characteristics=_values(35, 25, 30, 40, 25, 20, 35, 30, 45, 25),
        movement=3,
        fortune=2,
        fate=2,
        talents=("Magic Resistance", "Night Vision", "Resolute", "Sturdy"),
    ),
    SpeciesBaseline(
        id="high-elf",
        name="High Elf",
        characteristics=_values(35, 35, 25, 25, 40, 35, 35, 35, 35, 30),
        movement=5,
        fortune=2,
        fate=1,
        talents=("Acute Sense (Sight)", "Coolheaded", "Night Vision", "Second Sight", "Read/Write"),
    ),
    SpeciesBaseline(
        id="wood-elf",
        name="Wood Elf",
        characteristics=_values(35, 35, 25, 25, 40, 35, 35, 30, 35, 30),
        movement=5,
        fortune=2,
        fate=1,
        talents=("Acute Sense (Sight)", "Hardy", "Night Vision", "Read/Write", "Rover"),
    ),
)

SPECIES_IDS: tuple[str, ...] = tuple(baseline.id for baseline in SPECIES)


def default_species_catalog() -> SpeciesCatalog:
    """Build the standard five-species catalog."""
    return SpeciesCatalog(SPECIES)
