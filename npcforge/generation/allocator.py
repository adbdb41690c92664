"""
XP budget allocation.

BudgetAllocator decides how an NPC's XP budget is spent:

    total budget ──┬── 60% characteristics ── split by archetype tier (50/30/20%)
                   ├── 25% skills ────────── split evenly over favoured skills
                   └── 15% talents ───────── flat cost per favoured talent

Within each per-characteristic or per-skill share, advances are bought
greedily from the progressive cost schedule until the next one no longer
fits. Every division rounds down, so the allocator can under-spend but never
overspend. Species talents are granted on top at no cost.

The allocator is pure: same inputs, same result, no I/O and no shared state.
A zero or negative budget is a valid input and simply buys nothing.
"""

import math
from collections.abc import Mapping

from npcforge.generation.archetypes import (
    FALLBACK_CHARACTERISTIC,
    SKILL_CHARACTERISTICS,
    Archetype,
)
from npcforge.generation.costs import AdvancementCosts, ProgressiveCostSchedule
from npcforge.generation.models import (
    AllocationResult,
    AllocationSummary,
    Characteristic,
    CharacteristicAllocation,
    PriorityTier,
    SkillAllocation,
    TalentAllocation,
)
from npcforge.generation.species import SpeciesBaseline
from npcforge.generation.talents import describe_talent

CHARACTERISTIC_SHARE = 0.60
SKILL_SHARE = 0.25

TIER_SHARES: Mapping[PriorityTier, float] = {
    PriorityTier.PRIMARY: 0.50,
    PriorityTier.SECONDARY: 0.30,
    PriorityTier.TERTIARY: 0.20,
}


class BudgetAllocator:
    """
    Spend an XP budget on characteristics, skills and talents.

    Args:
        costs: Price list for advances (default: WFRP 4e core tables)
        skill_links: Skill name -> characteristic it tests against
        fallback_characteristic: Link for skills missing from skill_links
        max_advances: Ceiling on advances for any single characteristic or
                      skill. None uses each schedule's own span, i.e. the
                      number of advances the table prices before repeating
                      its last cost.
    """

    def __init__(
        self,
        costs: AdvancementCosts | None = None,
        skill_links: Mapping[str, Characteristic] = SKILL_CHARACTERISTICS,
        fallback_characteristic: Characteristic = FALLBACK_CHARACTERISTIC,
        max_advances: int | None = None,
    ):
        if max_advances is not None and max_advances < 1:
            raise ValueError("max_advances must be at least 1")
        self.costs = costs or AdvancementCosts()
        self._skill_links = skill_links
        self._fallback_characteristic = fallback_characteristic
        self._max_advances = max_advances

    def ceiling_for(self, schedule: ProgressiveCostSchedule) -> int:
        if self._max_advances is not None:
            return self._max_advances
        return schedule.span

    def linked_characteristic(self, skill_name: str) -> Characteristic:
        return self._skill_links.get(skill_name, self._fallback_characteristic)

    def allocate(
        self,
        total_budget: int | float,
        archetype: Archetype,
        baseline: SpeciesBaseline,
        *,
        fallback_used: bool = False,
    ) -> AllocationResult:
        """
        Distribute ``total_budget`` XP according to ``archetype``.

        Args:
            total_budget: XP available; zero or negative buys nothing
            archetype: Weighting profile to follow
            baseline: Species supplying base characteristics and innate talents
            fallback_used: Recorded on the result; set by callers that
                           substituted the default archetype

        Returns:
            AllocationResult with per-characteristic, per-skill and talent
            spend plus a summary
        """
        characteristic_budget, skill_budget, talent_budget = split_budget(total_budget)

        characteristics = self._allocate_characteristics(characteristic_budget, archetype, baseline)
        skills = self._allocate_skills(skill_budget, archetype, characteristics)
        talents = self._allocate_talents(talent_budget, archetype, baseline)

        characteristics_xp = sum(c.xp_spent for c in characteristics.values())
        skills_xp = sum(s.xp_spent for s in skills)
        talents_xp = sum(t.xp_spent for t in talents)
        total_spent = characteristics_xp + skills_xp + talents_xp

        return AllocationResult(
            archetype_id=archetype.id,
            species_id=baseline.id,
            fallback_used=fallback_used,
            characteristics=characteristics,
            skills=skills,
            talents=talents,
            summary=AllocationSummary(
                total_budget=total_budget,
                characteristics_xp=characteristics_xp,
                skills_xp=skills_xp,
                talents_xp=talents_xp,
                total_spent=total_spent,
                remaining=total_budget - total_spent,
            ),
        )

    def _allocate_characteristics(
        self,
        budget: int,
        archetype: Archetype,
        baseline: SpeciesBaseline,
    ) -> dict[Characteristic, CharacteristicAllocation]:
        schedule = self.costs.characteristic
        allocations: dict[Characteristic, CharacteristicAllocation] = {}

        for characteristic in Characteristic:
            tier = archetype.tier_of(characteristic)
            share = budget * TIER_SHARES[tier] / len(archetype.tier_members(tier))
            advances, spent = self._buy_advances(schedule, math.floor(share))

            base = baseline.base_value(characteristic)
            allocations[characteristic] = CharacteristicAllocation(
                base=base,
                advances=advances,
                final=base + advances,
                xp_spent=spent,
                tier=tier,
            )
        return allocations

    def _allocate_skills(
        self,
        budget: int,
        archetype: Archetype,
        characteristics: Mapping[Characteristic, CharacteristicAllocation],
    ) -> list[SkillAllocation]:
        if not archetype.favored_skills:
            return []

        schedule = self.costs.skill
        xp_per_skill = budget // len(archetype.favored_skills)
        skills: list[SkillAllocation] = []

        for skill_name in archetype.favored_skills:
            advances, spent = self._buy_advances(schedule, xp_per_skill)
            # Skills the share cannot buy a single advance of are left out entirely.
            if advances == 0:
                continue

            linked = self.linked_characteristic(skill_name)
            skills.append(
                SkillAllocation(
                    name=skill_name,
                    advances=advances,
                    total=characteristics[linked].final + advances,
                    xp_spent=spent,
                    characteristic=linked,
                )
            )
        return skills

    def _allocate_talents(
        self,
        budget: int | float,
        archetype: Archetype,
        baseline: SpeciesBaseline,
    ) -> list[TalentAllocation]:
        talents = [
            TalentAllocation(name=name, description=describe_talent(name), intrinsic=True)
            for name in baseline.talents
        ]

        affordable = math.floor(budget / self.costs.talent)
        for name in archetype.favored_talents[:affordable]:
            talents.append(
                TalentAllocation(
                    name=name,
                    xp_spent=self.costs.talent,
                    description=describe_talent(name),
                )
            )
        return talents

    def _buy_advances(self, schedule: ProgressiveCostSchedule, budget: int | float) -> tuple[int, int]:
        """Greedily buy advances while the next one fits; return (advances, xp spent)."""
        ceiling = self.ceiling_for(schedule)
        advances = 0
        spent = 0
        while advances < ceiling:
            cost = schedule.cost_of(advances)
            if spent + cost > budget:
                break
            spent += cost
            advances += 1
        return advances, spent


def split_budget(total_budget: int | float) -> tuple[int, int, int | float]:
    """
    Split a budget 60/25/15 into characteristic, skill and talent pools.

    The talent pool takes whatever rounding leaves over. A non-positive or
    non-finite budget (nan, inf) yields three empty pools.
    """
    if total_budget <= 0 or not math.isfinite(total_budget):
        return 0, 0, 0
    characteristic_budget = math.floor(total_budget * CHARACTERISTIC_SHARE)
    skill_budget = math.floor(total_budget * SKILL_SHARE)
    return characteristic_budget, skill_budget, total_budget - characteristic_budget - skill_budget
