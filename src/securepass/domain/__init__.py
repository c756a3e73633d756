"""Domain layer — character sets, entropy, and password generation.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
