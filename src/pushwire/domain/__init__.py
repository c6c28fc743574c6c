"""Domain layer: key ids, actions, conditions, and rulesets.

This layer depends only on stdlib and pydantic.
It must never import from records, services, commands, or config.
"""
