"""Domain layer — NSID grammar, value types, and parse errors.

This layer depends only on the standard library.
It must never import from services, config, output, or commands.
"""
