"""
Unit tests for the archetype, species and equipment catalogs.
"""

import pytest
from pydantic import ValidationError

from npcforge.generation.archetypes import (
    ARCHETYPES,
    DEFAULT_ARCHETYPE_ID,
    SKILL_CHARACTERISTICS,
    Archetype,
    ArchetypeCatalog,
    default_archetype_catalog,
    is_advanced_skill,
)
from npcforge.generation.equipment import STARTING_GEAR, EquipmentAdvisor
from npcforge.generation.models import Characteristic as C
from npcforge.generation.models import PriorityTier
from npcforge.generation.species import SPECIES_IDS, default_species_catalog
from npcforge.generation.talents import describe_talent


def _archetype(**overrides):
    fields = dict(
        id="test",
        name="Test",
        description="Test archetype",
        primary=(C.WS, C.S, C.T),
        secondary=(C.AG, C.I, C.WP),
        tertiary=(C.BS, C.DEX, C.INT, C.FEL),
        favored_skills=("Dodge",),
        favored_talents=("Fearless",),
        suggested_career="Tester",
    )
    fields.update(overrides)
    return Archetype(**fields)


class TestArchetype:
    def test_tier_lookup(self):
        archetype = _archetype()
        assert archetype.tier_of(C.WS) == PriorityTier.PRIMARY
        assert archetype.tier_of(C.AG) == PriorityTier.SECONDARY
        assert archetype.tier_of(C.FEL) == PriorityTier.TERTIARY
        assert archetype.tier_members(PriorityTier.TERTIARY) == (C.BS, C.DEX, C.INT, C.FEL)

    def test_missing_characteristic_rejected(self):
        with pytest.raises(ValidationError, match="exactly once"):
            _archetype(tertiary=(C.BS, C.DEX, C.INT))

    def test_duplicate_characteristic_rejected(self):
        with pytest.raises(ValidationError, match="exactly once"):
            _archetype(secondary=(C.AG, C.I, C.WP, C.WS))

    def test_empty_tier_rejected(self):
        with pytest.raises(ValidationError, match="empty priority tier"):
            _archetype(
                primary=(),
                secondary=(C.WS, C.S, C.T, C.AG, C.I, C.WP),
            )


class TestArchetypeCatalog:
    def test_builtin_catalog_has_fourteen_archetypes(self):
        catalog = default_archetype_catalog()
        assert len(catalog) == 14
        assert catalog.ids()[0] == "aggressive-fighter"
        assert "sneaky-assassin" in catalog

    def test_every_builtin_archetype_has_three_skills_and_talents(self):
        for archetype in ARCHETYPES:
            assert len(archetype.favored_skills) >= 3, archetype.id
            assert len(archetype.favored_talents) >= 3, archetype.id

    def test_known_id_resolves_without_fallback(self):
        archetype, fallback_used = default_archetype_catalog().resolve("scholarly-sage")
        assert archetype.id == "scholarly-sage"
        assert fallback_used is False

    def test_unknown_id_falls_back_to_default(self):
        archetype, fallback_used = default_archetype_catalog().resolve("dragon-tamer")
        assert archetype.id == DEFAULT_ARCHETYPE_ID
        assert fallback_used is True

    def test_get_falls_back_silently(self):
        assert default_archetype_catalog().get("nope").id == DEFAULT_ARCHETYPE_ID

    def test_duplicate_ids_rejected(self):
        with pytest.raises(ValueError, match="Duplicate"):
            ArchetypeCatalog([_archetype(), _archetype()], SKILL_CHARACTERISTICS, default_id="test")

    def test_default_must_exist(self):
        with pytest.raises(ValueError, match="not in the catalog"):
            ArchetypeCatalog([_archetype()], SKILL_CHARACTERISTICS)

    def test_skill_links_for_archetype(self):
        catalog = ArchetypeCatalog(
            [_archetype(favored_skills=("Dodge", "Unknown Lore"))],
            SKILL_CHARACTERISTICS,
            default_id="test",
        )
        links = catalog.skill_links_for(catalog.get("test"))
        assert links == {"Dodge": C.AG, "Unknown Lore": C.WS}

    def test_skill_links_are_read_only(self):
        catalog = default_archetype_catalog()
        with pytest.raises(TypeError):
            catalog.skill_links["Dodge"] = C.S

    @pytest.mark.parametrize("skill", ["Lore (History)", "Ranged (Bow)", "Channelling", "Pick Lock"])
    def test_advanced_skills(self, skill):
        assert is_advanced_skill(skill) is True

    @pytest.mark.parametrize("skill", ["Melee (Basic)", "Dodge", "Stealth (Rural)", "Unknown Lore"])
    def test_basic_skills(self, skill):
        assert is_advanced_skill(skill) is False


class TestSpeciesCatalog:
    def test_five_species(self):
        assert SPECIES_IDS == ("human", "halfling", "dwarf", "high-elf", "wood-elf")

    def test_human_baseline(self):
        human = default_species_catalog().get("human")
        assert all(human.base_value(c) == 30 for c in C)
        assert (human.movement, human.fortune, human.fate) == (4, 2, 2)
        assert human.talents == ()

    def test_dwarf_baseline(self):
        dwarf = default_species_catalog().get("dwarf")
        assert dwarf.base_value(C.T) == 40
        assert dwarf.base_value(C.WP) == 45
        assert dwarf.movement == 3
        assert "Night Vision" in dwarf.talents

    def test_halfling_wounds_ignore_strength(self):
        catalog = default_species_catalog()
        assert catalog.get("halfling").wounds_include_strength is False
        assert catalog.get("human").wounds_include_strength is True

    def test_unknown_species_falls_back_to_human(self):
        assert default_species_catalog().get("ogre").id == "human"


class TestEquipmentAdvisor:
    def test_every_archetype_has_gear(self):
        for archetype in ARCHETYPES:
            assert len(STARTING_GEAR[archetype.id]) == 5, archetype.id

    def test_suggest_known(self):
        gear = EquipmentAdvisor().suggest("powerful-wizard")
        assert "Grimoire" in gear

    def test_suggest_unknown_uses_default(self):
        advisor = EquipmentAdvisor()
        assert advisor.suggest("mystery") == advisor.suggest(DEFAULT_ARCHETYPE_ID)

    def test_default_needs_gear(self):
        with pytest.raises(ValueError, match="No gear"):
            EquipmentAdvisor(gear={}, default_id="aggressive-fighter")


class TestDescribeTalent:
    def test_known_talent(self):
        assert describe_talent("Fleet Footed") == "Movement increased by +1"

    def test_unknown_talent(self):
        assert describe_talent("Juggling") == "Special ability"
