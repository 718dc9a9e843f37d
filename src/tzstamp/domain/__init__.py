"""Domain layer — civil times, designators, instants, and resolvers.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
