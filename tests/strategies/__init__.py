"""Hypothesis strategies for langneg property-based testing.

- language_tags: Subtag strategies and well-formed tag generation

Usage:
    from tests.strategies import language_tags, sample_tags
"""

from .language_tags import (
    extension_subtags,
    language_subtags,
    language_tags,
    private_use_subtags,
    region_subtags,
    sample_tags,
    script_subtags,
    singletons,
    variant_subtags,
)

__all__ = [
    "extension_subtags",
    "language_subtags",
    "language_tags",
    "private_use_subtags",
    "region_subtags",
    "sample_tags",
    "script_subtags",
    "singletons",
    "variant_subtags",
]
