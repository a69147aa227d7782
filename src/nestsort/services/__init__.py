"""Service layer — user-facing operations returning ServiceResult.

Services may import from domain, core and config.
They must never import from commands or output.
"""
