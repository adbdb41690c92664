"""
Progressive XP cost schedules.

Each advance of a characteristic or skill costs more the more advances have
already been bought. Costs are grouped into tiers: the first six advances
(increments 0-5) share tier 0, after which a new tier starts every five
advances (increment 6 is tier 1, increment 11 is tier 2, ...). Past the end
of a table the last cost repeats.

Talents do not follow a schedule; every rank costs the same flat amount.
"""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

CHARACTERISTIC_COSTS = (25, 30, 40, 50, 70, 90, 120, 150, 190, 240)
SKILL_COSTS = (10, 15, 20, 30, 40, 60, 80, 110, 140, 180)
TALENT_COST = 100

# Tier 0 is one increment wider than every tier after it.
FIRST_TIER_SIZE = 6
TIER_SIZE = 5


class ScheduleKind(StrEnum):
    CHARACTERISTIC = "characteristic"
    SKILL = "skill"


def tier_for_increment(increment_index: int) -> int:
    """
    Return the cost tier of the next advance.

    Args:
        increment_index: Zero-based count of advances already purchased

    Example:
        >>> [tier_for_increment(n) for n in (0, 5, 6, 10, 11)]
        [0, 0, 1, 1, 2]
    """
    if increment_index <= FIRST_TIER_SIZE - 1:
        return 0
    return (increment_index - 1) // TIER_SIZE


class ProgressiveCostSchedule(BaseModel):
    """An ordered cost table indexed by tier."""

    costs: tuple[int, ...] = Field(min_length=1, description="Cost per advance for each tier")

    model_config = ConfigDict(frozen=True)

    def cost_of(self, increment_index: int) -> int:
        """XP cost of the advance following ``increment_index`` purchased ones."""
        tier = tier_for_increment(increment_index)
        if tier >= len(self.costs):
            return self.costs[-1]
        return self.costs[tier]

    @property
    def span(self) -> int:
        """Number of advances the table prices before clamping to its last tier."""
        return FIRST_TIER_SIZE + TIER_SIZE * (len(self.costs) - 1)


class AdvancementCosts(BaseModel):
    """The full price list: two schedules plus the flat talent cost."""

    characteristic: ProgressiveCostSchedule = Field(
        default_factory=lambda: ProgressiveCostSchedule(costs=CHARACTERISTIC_COSTS)
    )
    skill: ProgressiveCostSchedule = Field(
        default_factory=lambda: ProgressiveCostSchedule(costs=SKILL_COSTS)
    )
    talent: int = Field(default=TALENT_COST, gt=0, description="XP per talent rank")

    model_config = ConfigDict(frozen=True)

    def schedule(self, kind: ScheduleKind) -> ProgressiveCostSchedule:
        if kind == ScheduleKind.CHARACTERISTIC:
            return self.characteristic
        return self.skill

    def cost_of(self, kind: ScheduleKind, increment_index: int) -> int:
        return self.schedule(kind).cost_of(increment_index)
