"""Core utilities shared across the locale and negotiation layers.

This package provides foundational utilities that both the locale layer
(parsing, serialization, likely subtags) and the negotiation layer depend on.
By isolating these utilities here, we maintain a clean dependency graph:

    core <- locale <- negotiate

Exports:
    TinyStr4: Packed 1-4 character ASCII subtag
    TinyStr8: Packed 1-8 character ASCII subtag

Python 3.11+.
"""

from .tinystr import TinyStr4, TinyStr8

__all__ = ["TinyStr4", "TinyStr8"]
