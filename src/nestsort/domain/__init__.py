"""Domain layer — sequence types, classification, comparators.

This layer depends only on the standard library.
It must never import from core, services, commands, output, or config.
"""
