"""
Markdown rendering for the NPC tools.

Each function returns a complete markdown document ready to hand back to a
chat client: the full NPC sheet, the archetype reference list, and the XP
distribution preview.
"""

from __future__ import annotations

from collections.abc import Iterable

from npcforge.generation.archetypes import Archetype
from npcforge.generation.models import (
    AllocationResult,
    Characteristic,
    GeneratedNPC,
    PriorityTier,
    TalentAllocation,
)
from npcforge.npc.models import CreateNPCRequest

TIER_MARKERS = {
    PriorityTier.PRIMARY: " ⭐",
    PriorityTier.SECONDARY: " ✦",
    PriorityTier.TERTIARY: "",
}

XP_GUIDELINES = (
    "- **500-1000 XP**: Novice (starting adventurer level)",
    "- **1000-2000 XP**: Experienced (seasoned professional)",
    "- **2000-4000 XP**: Veteran (battle-hardened expert)",
    "- **4000+ XP**: Master (legendary hero level)",
)


def _talent_line(talent: TalentAllocation, detail: str) -> str:
    rank = f" (Rank {talent.rank})" if talent.rank > 1 else ""
    return f"- **{talent.name}**{rank}{detail}"


def render_npc_report(
    request: CreateNPCRequest,
    npc: GeneratedNPC,
    actor_id: str | None = None,
) -> str:
    """Render the full NPC sheet; ``actor_id`` marks it as created in Foundry."""
    allocation = npc.allocation
    summary = allocation.summary
    lines: list[str] = []

    if actor_id:
        lines += [
            f"✅ **Custom NPC Created in Foundry: {request.name}**",
            "",
            f"🎭 **Actor ID**: {actor_id}",
            "The NPC has been created in Foundry VTT with all characteristics, skills, and talents!",
            "",
        ]
    else:
        lines += [f"📋 **Custom NPC Preview: {request.name}**", ""]

    lines.append(f"**Species:** {npc.species_name}")
    lines.append(f"**Archetype:** {npc.archetype_name}")
    if request.career:
        lines.append(f"**Career:** {request.career}")
    else:
        lines.append(f"**Suggested Career:** {npc.suggested_career}")
    lines.append(f"**Total XP:** {request.total_xp}")
    if request.description:
        lines.append(f"**Description:** {request.description}")

    lines += ["", "## 📊 Characteristics"]
    for characteristic in Characteristic:
        data = allocation.characteristics[characteristic]
        lines.append(
            f"- **{characteristic.label}**: {data.final} "
            f"(base {data.base}, +{data.advances} advances, {data.xp_spent} XP){TIER_MARKERS[data.tier]}"
        )

    lines += ["", "## 🎯 Skills"]
    if allocation.skills:
        for skill in allocation.skills:
            lines.append(
                f"- **{skill.name}**: {skill.total}% (+{skill.advances} advances, {skill.xp_spent} XP)"
            )
    else:
        lines.append("*No skills acquired with this XP budget*")

    lines += ["", "## ⚡ Talents"]
    if allocation.talents:
        for talent in allocation.talents:
            lines.append(_talent_line(talent, f" - {talent.description}"))
    else:
        lines.append("*No talents acquired with this XP budget*")

    if request.personality_traits:
        lines += ["", "## 🎭 Personality Traits"]
        lines += [f"- {trait[:1].upper()}{trait[1:]}" for trait in request.personality_traits]

    lines += ["", "## 🛡️ Suggested Equipment"]
    lines += [f"- {item}" for item in npc.equipment]

    lines += [
        "",
        "## 💰 XP Breakdown",
        f"- **Characteristics:** {summary.characteristics_xp} XP",
        f"- **Skills:** {summary.skills_xp} XP",
        f"- **Talents:** {summary.talents_xp} XP",
        f"- **Total Spent:** {summary.total_spent} XP",
        f"- **Remaining:** {summary.remaining} XP",
        "",
        "## 🩸 Derived Statistics",
        f"- **Wounds:** {npc.derived.wounds}",
        f"- **Movement:** {npc.derived.movement}",
        f"- **Fortune Points:** {npc.derived.fortune}",
        f"- **Fate Points:** {npc.derived.fate}",
        f"- **Resilience:** {npc.derived.resilience}",
        "",
        "---",
    ]

    if actor_id:
        lines.append(
            f'✅ NPC successfully created in Foundry VTT! You can now find "{request.name}" '
            "in your Actors directory."
        )
    elif request.create_in_foundry:
        lines.append(
            "💡 **Note:** The NPC could not be written to Foundry VTT, so this is a preview only."
        )
    else:
        lines.append(
            "💡 **Note:** This is a preview. Set `createInFoundry: true` to actually create "
            "the NPC in Foundry VTT."
        )

    return "\n".join(lines)


def _upper_ids(characteristics: Iterable[Characteristic]) -> str:
    return ", ".join(c.value.upper() for c in characteristics)


def render_archetype_list(archetypes: Iterable[Archetype]) -> str:
    lines = [
        "⚔️ **WFRP 4e NPC Archetypes**",
        "",
        "Use these archetypes with `create_custom_npc` to generate balanced NPCs.",
        "",
    ]

    for archetype in archetypes:
        lines += [
            f"## {archetype.name}",
            f"**ID:** `{archetype.id}`",
            f"**Description:** {archetype.description}",
            f"**Suggested Career:** {archetype.suggested_career}",
            "",
            f"**Primary Characteristics** (50% of XP): {_upper_ids(archetype.primary)}",
            f"**Secondary Characteristics** (30% of XP): {_upper_ids(archetype.secondary)}",
            f"**Tertiary Characteristics** (20% of XP): {_upper_ids(archetype.tertiary)}",
            "",
            f"**Key Skills:** {', '.join(archetype.favored_skills)}",
            f"**Typical Talents:** {', '.join(archetype.favored_talents[:3])}",
            "",
            "---",
            "",
        ]

    lines.append("**XP Guidelines:**")
    lines += XP_GUIDELINES
    return "\n".join(lines)


def render_distribution_preview(archetype_name: str, allocation: AllocationResult) -> str:
    """Render a compact preview: only characteristics that received advances are listed."""
    summary = allocation.summary
    lines = [
        f"📊 **XP Distribution Preview: {archetype_name}**",
        "",
        f"**Total XP Budget:** {summary.total_budget}",
        "",
        f"## Characteristics ({summary.characteristics_xp} XP)",
    ]

    for characteristic in Characteristic:
        data = allocation.characteristics[characteristic]
        if data.advances > 0:
            lines.append(
                f"- **{characteristic.value.upper()}**: {data.base} → {data.final} "
                f"(+{data.advances}, {data.xp_spent} XP)"
            )

    lines += ["", f"## Skills ({summary.skills_xp} XP)"]
    if allocation.skills:
        for skill in allocation.skills:
            lines.append(
                f"- **{skill.name}**: +{skill.advances} advances ({skill.xp_spent} XP) → {skill.total}%"
            )
    else:
        lines.append("*No skills with this XP budget*")

    lines += ["", f"## Talents ({summary.talents_xp} XP)"]
    if allocation.talents:
        for talent in allocation.talents:
            lines.append(_talent_line(talent, f" ({talent.xp_spent} XP)"))
    else:
        lines.append("*No talents with this XP budget*")

    lines += [
        "",
        "## Summary",
        f"- **Total Spent:** {summary.total_spent} XP",
        f"- **Remaining:** {summary.remaining} XP",
        f"- **Efficiency:** {summary.efficiency}%",
    ]
    return "\n".join(lines)
