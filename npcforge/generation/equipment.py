"""Suggested starting gear per archetype."""

from collections.abc import Mapping
from types import MappingProxyType

from npcforge.generation.archetypes import DEFAULT_ARCHETYPE_ID

STARTING_GEAR: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "aggressive-fighter": (
        "Hand Weapon (Sword or Axe)",
        "Shield",
        "Mail Shirt (3 AP Body)",
        "Leather Jack (1 AP Arms, Legs)",
        "Helmet (2 AP Head)",
    ),
    "ranged-combatant": ("Bow or Crossbow", "20 Arrows/Bolts", "Dagger", "Leather Jerkin (1 AP Body)", "Cloak"),
    "defensive-warrior": ("Hand Weapon", "Shield", "Full Plate (5 AP All Locations)", "Helmet", "Great Weapon"),
    "agile-rogue": ("Dagger", "Rope (10 yards)", "Grappling Hook", "Dark Clothing", "Lockpicks"),
    "cunning-thief": ("Dagger", "Sling and Stones", "Lockpicks", "Dark Cloak", "Crowbar"),
    "wise-priest": ("Religious Symbol", "Staff", "Religious Text", "Healing Draught", "Robes"),
    "powerful-wizard": ("Wizard's Staff", "Grimoire", "Arcane Focus", "Component Pouch", "Robes"),
    "charismatic-leader": ("Quality Sword", "Noble Clothing", "Signet Ring", "Letter of Introduction", "Fine Wine"),
    "scholarly-sage": ("Multiple Books", "Writing Kit", "Reading Glasses", "Scholar's Robes", "Lantern"),
    "hardy-survivalist": ("Bow", "Hunting Knife", "Rope", "Tent and Bedroll", "Rations (1 week)"),
    "brutal-berserker": (
        "Great Axe or Great Hammer",
        "No Armor (frenzied)",
        "Healing Draught",
        "Trophy Necklace",
        "Alcohol (plentiful)",
    ),
    "swift-duelist": ("Rapier", "Main Gauche", "Leather Jerkin", "Fine Clothing", "Dueling Gloves"),
    "intimidating-thug": ("Cudgel or Knuckledusters", "Leather Jack", "Manacles", "Flask of Spirits", "Hood"),
    "sneaky-assassin": ("Poisoned Dagger", "Garrote", "Throwing Knives (3)", "Dark Clothing", "Poison Kit"),
})


class EquipmentAdvisor:
    """Look up a gear list by archetype id, falling back to the default archetype's."""

    def __init__(
        self,
        gear: Mapping[str, tuple[str, ...]] = STARTING_GEAR,
        default_id: str = DEFAULT_ARCHETYPE_ID,
    ):
        if default_id not in gear:
            raise ValueError(f"No gear defined for default archetype {default_id!r}")
        self._gear = gear
        self._default_id = default_id

    def suggest(self, archetype_id: str) -> tuple[str, ...]:
        return self._gear.get(archetype_id, self._gear[self._default_id])
