"""
NPC Generation Core.

Turns an XP budget into advances the way a WFRP 4e character would buy
them, weighted by an archetype:

    costs.py       progressive cost schedules (characteristics, skills, talents)
    archetypes.py  archetype catalog and skill → characteristic links
    species.py     species baselines and innate talents
    allocator.py   BudgetAllocator — the 60/25/15 greedy allocation
    derived.py     Wounds, movement, Fortune, Fate, Resilience
    equipment.py   suggested starting gear
    generator.py   NPCGenerator — wires the above together

Everything here is synchronous and side-effect free.
"""

from npcforge.generation.allocator import BudgetAllocator
from npcforge.generation.archetypes import Archetype, ArchetypeCatalog, default_archetype_catalog
from npcforge.generation.costs import AdvancementCosts, ProgressiveCostSchedule, ScheduleKind
from npcforge.generation.derived import DerivedStatsCalculator
from npcforge.generation.equipment import EquipmentAdvisor
from npcforge.generation.generator import NPCGenerator
from npcforge.generation.models import (
    AllocationResult,
    AllocationSummary,
    Characteristic,
    CharacteristicAllocation,
    DerivedStats,
    GeneratedNPC,
    PriorityTier,
    SkillAllocation,
    TalentAllocation,
)
from npcforge.generation.species import SpeciesBaseline, SpeciesCatalog, default_species_catalog

__all__ = [
    "AdvancementCosts",
    "AllocationResult",
    "AllocationSummary",
    "Archetype",
    "ArchetypeCatalog",
    "BudgetAllocator",
    "Characteristic",
    "CharacteristicAllocation",
    "DerivedStats",
    "DerivedStatsCalculator",
    "EquipmentAdvisor",
    "GeneratedNPC",
    "NPCGenerator",
    "PriorityTier",
    "ProgressiveCostSchedule",
    "ScheduleKind",
    "SkillAllocation",
    "SpeciesBaseline",
    "SpeciesCatalog",
    "TalentAllocation",
    "default_archetype_catalog",
    "default_species_catalog",
]
