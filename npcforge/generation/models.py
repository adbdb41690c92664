"""
Data structures for NPC generation.

Characteristic and PriorityTier identify what is being advanced; the
*Allocation models describe how an XP budget was spent; GeneratedNPC bundles
an allocation with its derived statistics and suggested gear.
"""

import math
from enum import StrEnum

from pydantic import BaseModel, Field


class Characteristic(StrEnum):
    """The ten WFRP characteristics, in character-sheet order."""

    WS = "ws"
    BS = "bs"
    S = "s"
    T = "t"
    I = "i"  # noqa: E741
    AG = "ag"
    DEX = "dex"
    INT = "int"
    WP = "wp"
    FEL = "fel"

    @property
    def label(self) -> str:
        return CHARACTERISTIC_LABELS[self]


CHARACTERISTIC_LABELS: dict[Characteristic, str] = {
    Characteristic.WS: "Weapon Skill",
    Characteristic.BS: "Ballistic Skill",
    Characteristic.S: "Strength",
    Characteristic.T: "Toughness",
    Characteristic.I: "Initiative",
    Characteristic.AG: "Agility",
    Characteristic.DEX: "Dexterity",
    Characteristic.INT: "Intelligence",
    Characteristic.WP: "Willpower",
    Characteristic.FEL: "Fellowship",
}


class PriorityTier(StrEnum):
    """How strongly an archetype favours a characteristic."""

    PRIMARY = "primary"
    SECONDARY = "secondary"
    TERTIARY = "tertiary"


class CharacteristicAllocation(BaseModel):
    """Advances bought for one characteristic."""

    base: int = Field(description="Species starting value")
    advances: int = Field(ge=0, description="Advances purchased")
    final: int = Field(description="base + advances")
    xp_spent: int = Field(ge=0)
    tier: PriorityTier


class SkillAllocation(BaseModel):
    """Advances bought for one favoured skill."""

    name: str
    advances: int = Field(ge=0)
    total: int = Field(description="Linked characteristic's final value + advances")
    xp_spent: int = Field(ge=0)
    characteristic: Characteristic = Field(description="Characteristic the skill tests against")


class TalentAllocation(BaseModel):
    """A talent held by the NPC, either innate to its species or bought with XP."""

    name: str
    rank: int = Field(default=1, ge=1)
    xp_spent: int = Field(default=0, ge=0)
    description: str = "Special ability"
    intrinsic: bool = Field(default=False, description="Granted by species at no cost")


class AllocationSummary(BaseModel):
    """Spend per category plus what is left of the budget."""

    total_budget: int | float
    characteristics_xp: int = 0
    skills_xp: int = 0
    talents_xp: int = 0
    total_spent: int = 0
    remaining: int | float = 0

    @property
    def efficiency(self) -> int:
        """Percentage of the budget spent, rounded half up; 0 for an empty or non-finite budget."""
        if self.total_budget <= 0 or not math.isfinite(self.total_budget):
            return 0
        return math.floor(self.total_spent / self.total_budget * 100 + 0.5)


class AllocationResult(BaseModel):
    """Complete output of BudgetAllocator.allocate()."""

    archetype_id: str
    species_id: str
    fallback_used: bool = Field(
        default=False,
        description="True when the requested archetype was unknown and the default was used",
    )
    characteristics: dict[Characteristic, CharacteristicAllocation]
    skills: list[SkillAllocation] = Field(default_factory=list)
    talents: list[TalentAllocation] = Field(default_factory=list)
    summary: AllocationSummary

    def final_value(self, characteristic: Characteristic) -> int:
        return self.characteristics[characteristic].final


class DerivedStats(BaseModel):
    """Secondary statistics computed from final characteristics."""

    wounds: int = Field(ge=1)
    movement: int
    fortune: int
    fate: int
    resilience: int


class GeneratedNPC(BaseModel):
    """Everything the generator knows about a freshly built NPC."""

    archetype_name: str
    suggested_career: str
    species_name: str
    allocation: AllocationResult
    derived: DerivedStats
    equipment: list[str] = Field(default_factory=list)
