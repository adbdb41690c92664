"""
NPCGenerator — the generation pipeline in one call.

    (total_xp, archetype_id, species_id)
        → ArchetypeCatalog.resolve / SpeciesCatalog.get
        → BudgetAllocator.allocate
        → DerivedStatsCalculator.calculate
        → EquipmentAdvisor.suggest
        → GeneratedNPC

All collaborators are injected; from_defaults() wires the standard tables.
The generator holds no per-call state, so one instance can serve any
number of concurrent requests.
"""

from __future__ import annotations

from npcforge.generation.allocator import BudgetAllocator
from npcforge.generation.archetypes import ArchetypeCatalog, default_archetype_catalog
from npcforge.generation.derived import DerivedStatsCalculator
from npcforge.generation.equipment import EquipmentAdvisor
from npcforge.generation.models import AllocationResult, Characteristic, GeneratedNPC
from npcforge.generation.species import SpeciesCatalog, default_species_catalog


class NPCGenerator:
    """
    Build NPCs from an XP budget, an archetype id and a species id.

    Args:
        archetypes: Archetype catalog (also supplies the skill link table)
        species: Species catalog
        allocator: Budget allocator; built from the archetype catalog's skill
                   links when omitted
        equipment: Gear advisor
    """

    def __init__(
        self,
        archetypes: ArchetypeCatalog,
        species: SpeciesCatalog,
        allocator: BudgetAllocator | None = None,
        equipment: EquipmentAdvisor | None = None,
    ):
        self.archetypes = archetypes
        self.species = species
        self.allocator = allocator or BudgetAllocator(
            skill_links=archetypes.skill_links,
            fallback_characteristic=archetypes.fallback_characteristic,
        )
        self.derived = DerivedStatsCalculator(species)
        self.equipment = equipment or EquipmentAdvisor(default_id=archetypes.default_id)

    @classmethod
    def from_defaults(cls, max_advances: int | None = None) -> NPCGenerator:
        archetypes = default_archetype_catalog()
        allocator = BudgetAllocator(
            skill_links=archetypes.skill_links,
            fallback_characteristic=archetypes.fallback_characteristic,
            max_advances=max_advances,
        )
        return cls(archetypes, default_species_catalog(), allocator=allocator)

    def allocate(self, total_xp: int | float, archetype_id: str, species_id: str) -> AllocationResult:
        """Run only the allocation step (used by previews)."""
        archetype, fallback_used = self.archetypes.resolve(archetype_id)
        baseline = self.species.get(species_id)
        return self.allocator.allocate(total_xp, archetype, baseline, fallback_used=fallback_used)

    def generate(self, total_xp: int | float, archetype_id: str, species_id: str) -> GeneratedNPC:
        archetype, _ = self.archetypes.resolve(archetype_id)
        baseline = self.species.get(species_id)
        allocation = self.allocate(total_xp, archetype_id, species_id)

        derived = self.derived.calculate(
            strength=allocation.final_value(Characteristic.S),
            toughness=allocation.final_value(Characteristic.T),
            willpower=allocation.final_value(Characteristic.WP),
            species_id=baseline.id,
        )

        return GeneratedNPC(
            archetype_name=archetype.name,
            suggested_career=archetype.suggested_career,
            species_name=baseline.name,
            allocation=allocation,
            derived=derived,
            equipment=list(self.equipment.suggest(archetype.id)),
        )
