"""
npcforge - XP-budgeted NPC generation for WFRP 4e game sessions.

This package turns an XP budget and an archetype into a fully advanced
non-player character, renders it as a narrative report, and can write it
into a Foundry VTT world through the Foundry bridge.
"""

__version__ = "0.1.0"
