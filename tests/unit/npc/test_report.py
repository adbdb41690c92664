"""
Tests for the markdown renderers.
"""

import pytest

from npcforge.generation.archetypes import default_archetype_catalog
from npcforge.generation.generator import NPCGenerator
from npcforge.npc.models import CreateNPCRequest
from npcforge.npc.report import (
    render_archetype_list,
    render_distribution_preview,
    render_npc_report,
)


@pytest.fixture
def generator():
    return NPCGenerator.from_defaults()


def _request(**overrides):
    fields = {"name": "Gunther", "totalXP": 1000, "archetype": "aggressive-fighter"}
    fields.update(overrides)
    return CreateNPCRequest.model_validate(fields)


class TestRenderNPCReport:
    def test_sections_in_order(self, generator):
        npc = generator.generate(1000, "aggressive-fighter", "human")
        text = render_npc_report(_request(personalityTraits=["gruff"]), npc)

        headings = [line for line in text.splitlines() if line.startswith("## ")]
        assert headings == [
            "## 📊 Characteristics",
            "## 🎯 Skills",
            "## ⚡ Talents",
            "## 🎭 Personality Traits",
            "## 🛡️ Suggested Equipment",
            "## 💰 XP Breakdown",
            "## 🩸 Derived Statistics",
        ]

    def test_characteristic_markers(self, generator):
        npc = generator.generate(1000, "aggressive-fighter", "human")
        text = render_npc_report(_request(), npc)

        assert "- **Weapon Skill**: 34 (base 30, +4 advances, 100 XP) ⭐" in text
        assert "- **Agility**: 32 (base 30, +2 advances, 50 XP) ✦" in text
        assert "- **Fellowship**: 31 (base 30, +1 advances, 25 XP)\n" in text

    def test_skills_talents_and_breakdown(self, generator):
        npc = generator.generate(1000, "aggressive-fighter", "human")
        text = render_npc_report(_request(), npc)

        assert "- **Melee (Basic)**: 39% (+5 advances, 50 XP)" in text
        assert "- **Strike Mighty Blow** - Add SL to melee damage" in text
        assert "- **Total Spent:** 900 XP" in text
        assert "- **Remaining:** 100 XP" in text
        assert "- **Wounds:** 12" in text
        assert "- **Resilience:** 6" in text

    def test_career_overrides_suggestion(self, generator):
        npc = generator.generate(1000, "aggressive-fighter", "human")

        assert "**Suggested Career:** Soldier" in render_npc_report(_request(), npc)
        text = render_npc_report(_request(career="Mercenary"), npc)
        assert "**Career:** Mercenary" in text
        assert "Suggested Career" not in text

    def test_traits_capitalised(self, generator):
        npc = generator.generate(1000, "aggressive-fighter", "human")
        text = render_npc_report(_request(personalityTraits=["gruff", " loyal ", ""]), npc)
        assert "- Gruff\n- Loyal" in text

    def test_no_skills_or_talents(self, generator):
        npc = generator.generate(0, "aggressive-fighter", "human")
        text = render_npc_report(_request(totalXP=0), npc)

        assert "*No skills acquired with this XP budget*" in text
        assert "*No talents acquired with this XP budget*" in text

    def test_created_header_and_footer(self, generator):
        npc = generator.generate(1000, "aggressive-fighter", "human")
        text = render_npc_report(_request(), npc, actor_id="xyz")

        assert text.startswith("✅ **Custom NPC Created in Foundry: Gunther**")
        assert text.endswith('You can now find "Gunther" in your Actors directory.')

    def test_preview_footer(self, generator):
        npc = generator.generate(1000, "aggressive-fighter", "human")
        text = render_npc_report(_request(createInFoundry=False), npc)
        assert "This is a preview" in text


class TestRenderArchetypeList:
    def test_archetype_entry(self):
        text = render_archetype_list(default_archetype_catalog())

        assert "## Aggressive Fighter" in text
        assert "**ID:** `aggressive-fighter`" in text
        assert "**Primary Characteristics** (50% of XP): WS, S, T" in text
        assert "**Tertiary Characteristics** (20% of XP): BS, DEX, INT, FEL" in text
        assert "**Typical Talents:** Strike Mighty Blow, Combat Reflexes, Fearless\n" in text
        assert "`create_custom_npc`" in text

    def test_guidelines_last(self):
        text = render_archetype_list(default_archetype_catalog())
        assert text.endswith("- **4000+ XP**: Master (legendary hero level)")


class TestRenderDistributionPreview:
    def test_only_advanced_characteristics(self, generator):
        allocation = generator.allocate(24, "aggressive-fighter", "human")
        text = render_distribution_preview("Aggressive Fighter", allocation)

        assert "→" not in text.split("## Skills")[0]
        assert "*No skills with this XP budget*" in text
        assert "*No talents with this XP budget*" in text
        assert "- **Efficiency:** 0%" in text

    def test_skills_and_talents(self, generator):
        allocation = generator.allocate(1000, "aggressive-fighter", "human")
        text = render_distribution_preview("Aggressive Fighter", allocation)

        assert "## Characteristics (550 XP)" in text
        assert "- **Dodge**: +5 advances (50 XP) → 37%" in text
        assert "- **Strike Mighty Blow** (100 XP)" in text
