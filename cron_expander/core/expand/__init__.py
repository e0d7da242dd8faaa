"""Field expansion engine.

Turns one field's compact syntax into the explicit, ordered values it
matches, so callers can test membership without re-parsing.
"""
