"""Service layer — token validation, guild listing and leaving.

Services may import from domain and infrastructure layers.
They must never import from commands, session, or output.
"""
