"""Domain layer — immutable records built from API payloads.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, session, or config.
"""
