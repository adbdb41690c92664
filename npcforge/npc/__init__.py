"""
NPC Tool Layer.

Validates tool arguments, runs the generation core, writes NPCs into
Foundry VTT through the bridge adapter, and renders markdown reports:

    tool arguments → parse_request() → NPCGenerator.generate()
                                              ↓
                         FoundryNPCWriter.create()  (optional)
                                              ↓
                                  render_npc_report() → text
"""

from npcforge.npc.models import CreateNPCRequest, DistributionRequest, NPCToolError
from npcforge.npc.service import NPCToolService, open_service

__all__ = [
    "CreateNPCRequest",
    "DistributionRequest",
    "NPCToolError",
    "NPCToolService",
    "open_service",
]
