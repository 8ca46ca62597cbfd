"""Core helpers and shared application primitives.

Modules in this package are framework-agnostic where possible: validation,
size parsing, text and sequence helpers. ``http`` and ``middleware`` carry the
FastAPI integration.
"""
