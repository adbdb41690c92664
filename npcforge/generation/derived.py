"""Wounds, movement, Fortune, Fate and Resilience from final characteristics."""

from npcforge.generation.models import DerivedStats
from npcforge.generation.species import SpeciesCatalog


def characteristic_bonus(value: int) -> int:
    """The tens digit of a characteristic, e.g. 34 -> 3."""
    return value // 10


class DerivedStatsCalculator:
    """Compute secondary statistics for a species from post-allocation values."""

    def __init__(self, species: SpeciesCatalog):
        self._species = species

    def wounds(self, strength: int, toughness: int, willpower: int, species_id: str) -> int:
        """
        SB + 2×TB + WPB, or 2×TB + WPB for species whose Wounds ignore
        Strength (Halflings). Never less than 1.
        """
        baseline = self._species.get(species_id)
        wounds = 2 * characteristic_bonus(toughness) + characteristic_bonus(willpower)
        if baseline.wounds_include_strength:
            wounds += characteristic_bonus(strength)
        return max(wounds, 1)

    def calculate(self, strength: int, toughness: int, willpower: int, species_id: str) -> DerivedStats:
        baseline = self._species.get(species_id)
        return DerivedStats(
            wounds=self.wounds(strength, toughness, willpower, species_id),
            movement=baseline.movement,
            fortune=baseline.fortune,
            fate=baseline.fate,
            resilience=characteristic_bonus(toughness) + characteristic_bonus(willpower),
        )
