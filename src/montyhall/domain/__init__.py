"""Domain layer — door rules, round and statistics models, errors.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
