"""Core algorithms — in-place sort, nested sort, nested printer.

Core modules depend only on the domain layer.
They must never import from services, commands, output, or config.
"""
