"""Domain layer — adjustment parsing, format resolution, enumerations.

This layer depends only on stdlib.
It must never import from services, commands, output, or config.
"""
