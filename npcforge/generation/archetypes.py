"""
NPC archetypes and the skill-to-characteristic link table.

An archetype is a weighting profile: it ranks the ten characteristics into
primary, secondary and tertiary tiers, and lists the skills and talents an
NPC of that kind should buy first. The catalog is built once by
default_archetype_catalog() and handed to whoever needs it; nothing mutates
it afterwards.

Unknown archetype ids resolve to the catalog's default archetype instead of
raising. Callers that care can use ArchetypeCatalog.resolve() to learn
whether the fallback was taken.
"""

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, model_validator

from npcforge.generation.models import Characteristic, PriorityTier

C = Characteristic

DEFAULT_ARCHETYPE_ID = "aggressive-fighter"
FALLBACK_CHARACTERISTIC = Characteristic.WS


class Archetype(BaseModel):
    """A named weighting profile for XP distribution."""

    id: str
    name: str
    description: str
    primary: tuple[Characteristic, ...]
    secondary: tuple[Characteristic, ...]
    tertiary: tuple[Characteristic, ...]
    favored_skills: tuple[str, ...] = Field(description="Skills to advance, in priority order")
    favored_talents: tuple[str, ...] = Field(description="Talents to buy, in priority order")
    suggested_career: str

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _tiers_partition_characteristics(self) -> "Archetype":
        tiers = (self.primary, self.secondary, self.tertiary)
        if any(not tier for tier in tiers):
            raise ValueError(f"Archetype {self.id!r} has an empty priority tier")
        listed = [c for tier in tiers for c in tier]
        if len(listed) != len(set(listed)) or set(listed) != set(Characteristic):
            raise ValueError(
                f"Archetype {self.id!r} tiers must cover each characteristic exactly once"
            )
        return self

    def tier_of(self, characteristic: Characteristic) -> PriorityTier:
        if characteristic in self.primary:
            return PriorityTier.PRIMARY
        if characteristic in self.secondary:
            return PriorityTier.SECONDARY
        return PriorityTier.TERTIARY

    def tier_members(self, tier: PriorityTier) -> tuple[Characteristic, ...]:
        return {
            PriorityTier.PRIMARY: self.primary,
            PriorityTier.SECONDARY: self.secondary,
            PriorityTier.TERTIARY: self.tertiary,
        }[tier]


class ArchetypeCatalog:
    """
    Read-only registry of archetypes keyed by id.

    Args:
        archetypes: Archetype records; ids must be unique
        skill_links: Skill name -> characteristic the skill tests against
        default_id: Archetype returned for unknown ids
        fallback_characteristic: Link used for skills missing from skill_links
    """

    def __init__(
        self,
        archetypes: Iterable[Archetype],
        skill_links: Mapping[str, Characteristic],
        default_id: str = DEFAULT_ARCHETYPE_ID,
        fallback_characteristic: Characteristic = FALLBACK_CHARACTERISTIC,
    ):
        records: dict[str, Archetype] = {}
        for archetype in archetypes:
            if archetype.id in records:
                raise ValueError(f"Duplicate archetype id: {archetype.id!r}")
            records[archetype.id] = archetype
        if default_id not in records:
            raise ValueError(f"Default archetype {default_id!r} is not in the catalog")

        self._archetypes = MappingProxyType(records)
        self._skill_links = MappingProxyType(dict(skill_links))
        self.default_id = default_id
        self.fallback_characteristic = fallback_characteristic

    def __contains__(self, archetype_id: object) -> bool:
        return archetype_id in self._archetypes

    def __iter__(self) -> Iterator[Archetype]:
        return iter(self._archetypes.values())

    def __len__(self) -> int:
        return len(self._archetypes)

    def ids(self) -> list[str]:
        return list(self._archetypes)

    def get(self, archetype_id: str) -> Archetype:
        """Return the archetype, or the default archetype for an unknown id."""
        return self.resolve(archetype_id)[0]

    def resolve(self, archetype_id: str) -> tuple[Archetype, bool]:
        """Return ``(archetype, fallback_used)``."""
        archetype = self._archetypes.get(archetype_id)
        if archetype is None:
            return self._archetypes[self.default_id], True
        return archetype, False

    @property
    def skill_links(self) -> Mapping[str, Characteristic]:
        return self._skill_links

    def linked_characteristic(self, skill_name: str) -> Characteristic:
        return self._skill_links.get(skill_name, self.fallback_characteristic)

    def skill_links_for(self, archetype: Archetype) -> dict[str, Characteristic]:
        """Favoured skill -> linked characteristic, in the archetype's skill order."""
        return {skill: self.linked_characteristic(skill) for skill in archetype.favored_skills}


SKILL_CHARACTERISTICS: Mapping[str, Characteristic] = MappingProxyType({
    "Melee (Basic)": C.WS,
    "Melee (Brawling)": C.WS,
    "Melee (Cavalry)": C.WS,
    "Melee (Fencing)": C.WS,
    "Melee (Flail)": C.WS,
    "Melee (Parry)": C.WS,
    "Melee (Polearm)": C.WS,
    "Melee (Two-handed)": C.WS,
    "Ranged (Bow)": C.BS,
    "Ranged (Crossbow)": C.BS,
    "Ranged (Blackpowder)": C.BS,
    "Ranged (Engineering)": C.BS,
    "Ranged (Entangling)": C.BS,
    "Ranged (Explosives)": C.BS,
    "Ranged (Sling)": C.BS,
    "Ranged (Throwing)": C.BS,
    "Athletics": C.AG,
    "Climb": C.AG,
    "Dodge": C.AG,
    "Stealth (Urban)": C.AG,
    "Stealth (Rural)": C.AG,
    "Endurance": C.T,
    "Consume Alcohol": C.T,
    "Perception": C.I,
    "Track": C.I,
    "Intuition": C.I,
    "Pick Lock": C.DEX,
    "Sleight of Hand": C.DEX,
    "Channelling": C.WP,
    "Cool": C.WP,
    "Pray": C.WP,
    "Leadership": C.FEL,
    "Charm": C.FEL,
    "Intimidate": C.FEL,
    "Animal Care": C.INT,
    "Language (Magick)": C.INT,
    "Language (Classical)": C.INT,
    "Lore (History)": C.INT,
    "Lore (Magic)": C.INT,
    "Lore (Theology)": C.INT,
    "Lore (Heraldry)": C.INT,
    "Research": C.INT,
    "Heal": C.INT,
    "Outdoor Survival": C.INT,
})


# Skills WFRP 4e classes as advanced; specialisations share the base name
ADVANCED_SKILLS: frozenset[str] = frozenset({
    "Channelling",
    "Heal",
    "Language",
    "Lore",
    "Pick Lock",
    "Pray",
    "Ranged",
    "Research",
    "Sleight of Hand",
    "Track",
})


def is_advanced_skill(skill_name: str) -> bool:
    """True for an advanced skill, e.g. ``Lore (History)``; unknown skills count as basic."""
    return skill_name.split(" (", 1)[0] in ADVANCED_SKILLS


ARCHETYPES: tuple[Archetype, ...] = (
    Archetype(
        id="aggressive-fighter",
        name="Aggressive Fighter",
        description="Melee combatant focused on dealing damage",
        primary=(C.WS, C.S, C.T),
        secondary=(C.AG, C.I, C.WP),
        tertiary=(C.BS, C.DEX, C.INT, C.FEL),
        favored_skills=("Melee (Basic)", "Melee (Brawling)", "Dodge", "Intimidate", "Endurance"),
        favored_talents=("Strike Mighty Blow", "Combat Reflexes", "Fearless", "Warrior Born", "Strike to Injure"),
        suggested_career="Soldier",
    ),
    Archetype(
        id="ranged-combatant",
        name="Ranged Combatant",
        description="Expert with bows, crossbows, and firearms",
        primary=(C.BS, C.DEX, C.AG),
        secondary=(C.I, C.INT, C.WS),
        tertiary=(C.S, C.T, C.WP, C.FEL),
        favored_skills=("Ranged (Bow)", "Ranged (Crossbow)", "Perception", "Track", "Dodge"),
        favored_talents=("Sharpshooter", "Marksman", "Rapid Reload", "Sure Shot", "Fast Shot"),
        suggested_career="Huntsman",
    ),
    Archetype(
        id="defensive-warrior",
        name="Defensive Warrior",
        description="Tank focused on absorbing damage and protecting others",
        primary=(C.T, C.WP, C.S),
        secondary=(C.WS, C.AG, C.I),
        tertiary=(C.BS, C.DEX, C.INT, C.FEL),
        favored_skills=("Melee (Basic)", "Endurance", "Cool", "Dodge", "Melee (Parry)"),
        favored_talents=("Shieldmaster", "Tenacious", "Robust", "Iron Jaw", "Resolute"),
        suggested_career="Pit Fighter",
    ),
    Archetype(
        id="agile-rogue",
        name="Agile Rogue",
        description="Quick and nimble, specializes in evasion and mobility",
        primary=(C.AG, C.DEX, C.I),
        secondary=(C.WS, C.BS, C.FEL),
        tertiary=(C.S, C.T, C.INT, C.WP),
        favored_skills=("Stealth (Urban)", "Climb", "Athletics", "Dodge", "Perception"),
        favored_talents=("Catfall", "Fleet Footed", "Nimble Fingered", "Step Aside", "Sprint"),
        suggested_career="Thief",
    ),
    Archetype(
        id="cunning-thief",
        name="Cunning Thief",
        description="Master of stealth, lockpicking, and deception",
        primary=(C.DEX, C.INT, C.FEL),
        secondary=(C.AG, C.I, C.WP),
        tertiary=(C.WS, C.BS, C.S, C.T),
        favored_skills=("Sleight of Hand", "Pick Lock", "Stealth (Urban)", "Charm", "Perception"),
        favored_talents=("Nimble Fingered", "Luck", "Shadow", "Criminal", "Etiquette (Criminals)"),
        suggested_career="Thief",
    ),
    Archetype(
        id="wise-priest",
        name="Wise Priest",
        description="Divine spellcaster and spiritual leader",
        primary=(C.WP, C.INT, C.FEL),
        secondary=(C.T, C.I, C.AG),
        tertiary=(C.WS, C.BS, C.S, C.DEX),
        favored_skills=("Pray", "Lore (Theology)", "Heal", "Intuition", "Cool"),
        favored_talents=("Bless", "Holy Visions", "Savvy", "Read/Write", "Etiquette (Cultists)"),
        suggested_career="Priest",
    ),
    Archetype(
        id="powerful-wizard",
        name="Powerful Wizard",
        description="Arcane spellcaster with devastating magic",
        primary=(C.INT, C.WP, C.I),
        secondary=(C.DEX, C.FEL, C.AG),
        tertiary=(C.WS, C.BS, C.S, C.T),
        favored_skills=("Channelling", "Language (Magick)", "Lore (Magic)", "Intuition", "Perception"),
        favored_talents=("Aethyric Attunement", "Instinctive Diction", "Magical Sense", "Petty Magic", "Arcane Magic"),
        suggested_career="Wizard",
    ),
    Archetype(
        id="charismatic-leader",
        name="Charismatic Leader",
        description="Natural leader who inspires and commands others",
        primary=(C.FEL, C.WP, C.INT),
        secondary=(C.I, C.AG, C.T),
        tertiary=(C.WS, C.BS, C.S, C.DEX),
        favored_skills=("Leadership", "Charm", "Intimidate", "Intuition", "Lore (Heraldry)"),
        favored_talents=("Inspiring", "Read/Write", "Etiquette (Nobles)", "Savvy", "Noble Blood"),
        suggested_career="Noble",
    ),
    Archetype(
        id="scholarly-sage",
        name="Scholarly Sage",
        description="Expert in knowledge and lore",
        primary=(C.INT, C.WP, C.I),
        secondary=(C.FEL, C.DEX, C.AG),
        tertiary=(C.WS, C.BS, C.S, C.T),
        favored_skills=("Lore (History)", "Lore (Theology)", "Research", "Language (Classical)", "Perception"),
        favored_talents=("Read/Write", "Savvy", "Linguistics", "Bookish", "Etiquette (Scholars)"),
        suggested_career="Scholar",
    ),
    Archetype(
        id="hardy-survivalist",
        name="Hardy Survivalist",
        description="Wilderness expert and tracker",
        primary=(C.T, C.S, C.I),
        secondary=(C.AG, C.INT, C.BS),
        tertiary=(C.WS, C.DEX, C.WP, C.FEL),
        favored_skills=("Track", "Outdoor Survival", "Animal Care", "Endurance", "Perception"),
        favored_talents=("Rover", "Tenacious", "Hardy", "Trapper", "Strider"),
        suggested_career="Scout",
    ),
    Archetype(
        id="brutal-berserker",
        name="Brutal Berserker",
        description="Raging warrior who sacrifices defense for overwhelming offense",
        primary=(C.S, C.WS, C.T),
        secondary=(C.AG, C.WP, C.I),
        tertiary=(C.BS, C.DEX, C.INT, C.FEL),
        favored_skills=("Melee (Two-handed)", "Melee (Basic)", "Intimidate", "Endurance", "Consume Alcohol"),
        favored_talents=("Frenzy", "Strike Mighty Blow", "Fearless", "Very Strong", "Furious Assault"),
        suggested_career="Berserker",
    ),
    Archetype(
        id="swift-duelist",
        name="Swift Duelist",
        description="Finesse fighter using speed and precision",
        primary=(C.AG, C.I, C.WS),
        secondary=(C.DEX, C.FEL, C.T),
        tertiary=(C.BS, C.S, C.INT, C.WP),
        favored_skills=("Melee (Fencing)", "Dodge", "Athletics", "Cool", "Perception"),
        favored_talents=("Combat Reflexes", "Ambidextrous", "Strike to Stun", "Lightning Reflexes", "Reaction Strike"),
        suggested_career="Duellist",
    ),
    Archetype(
        id="intimidating-thug",
        name="Intimidating Thug",
        description="Brutal enforcer who uses fear and violence",
        primary=(C.S, C.T, C.FEL),
        secondary=(C.WS, C.WP, C.AG),
        tertiary=(C.BS, C.I, C.DEX, C.INT),
        favored_skills=("Intimidate", "Melee (Brawling)", "Endurance", "Consume Alcohol", "Cool"),
        favored_talents=("Menacing", "Strike Mighty Blow", "Criminal", "Dirty Fighting", "Fearless"),
        suggested_career="Bounty Hunter",
    ),
    Archetype(
        id="sneaky-assassin",
        name="Sneaky Assassin",
        description="Silent killer specializing in lethal precision strikes",
        primary=(C.AG, C.DEX, C.WS),
        secondary=(C.I, C.INT, C.BS),
        tertiary=(C.S, C.T, C.WP, C.FEL),
        favored_skills=("Stealth (Urban)", "Melee (Basic)", "Ranged (Throwing)", "Perception", "Climb"),
        favored_talents=("Assassin", "Strike to Stun", "Shadow", "Backstab", "Accurate Shot"),
        suggested_career="Assassin",
    ),
)


def default_archetype_catalog() -> ArchetypeCatalog:
    """Build the standard 14-archetype catalog."""
    return ArchetypeCatalog(ARCHETYPES, SKILL_CHARACTERISTICS)
