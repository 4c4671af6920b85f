"""Domain layer — participants, items, parsing, and grid layout.

This layer depends only on stdlib.
It must never import from services, infrastructure, commands, or config.
"""
