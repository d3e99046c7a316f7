"""Domain layer — item models, name validation, and edit lifecycle.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
