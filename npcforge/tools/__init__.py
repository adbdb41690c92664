"""
Tool Integration Layer.

Adapters for external services the NPC tools talk to, currently the
Foundry VTT bridge that creates actors and items in a running world.
"""
