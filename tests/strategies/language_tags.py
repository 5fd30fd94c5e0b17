"""Hypothesis strategies for language tag property-based testing.

Generates well-formed tags from per-position subtag strategies with
random casing and separators, plus a sample of real-world locales.

Usage:
    from hypothesis import given
    from tests.strategies.language_tags import language_tags

    @given(tag=language_tags())
    def test_round_trip(tag):
        ...
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from hypothesis import event
from hypothesis import strategies as st
from hypothesis.strategies import composite

if TYPE_CHECKING:
    from hypothesis.strategies import DrawFn, SearchStrategy

# ============================================================================
# SUBTAGS
# ============================================================================

_ALPHA = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
_DIGITS = "0123456789"
_ALNUM = _ALPHA + _DIGITS

language_subtags: SearchStrategy[str] = st.text(_ALPHA, min_size=2, max_size=3)
script_subtags: SearchStrategy[str] = st.text(_ALPHA, min_size=4, max_size=4)
region_subtags: SearchStrategy[str] = st.one_of(
    st.text(_ALPHA, min_size=2, max_size=2),
    st.text(_DIGITS, min_size=3, max_size=3),
)
# Digit-led so a variant is never mistaken for a script or region.
variant_subtags: SearchStrategy[str] = st.one_of(
    st.builds(lambda d, rest: d + rest, st.sampled_from(_DIGITS), st.text(_ALNUM, min_size=3, max_size=3)),
    st.text(_ALNUM, min_size=5, max_size=8),
)
extension_subtags: SearchStrategy[str] = st.text(_ALNUM, min_size=2, max_size=8)
private_use_subtags: SearchStrategy[str] = st.text(_ALNUM, min_size=1, max_size=8)
singletons: SearchStrategy[str] = st.sampled_from("abcdefghijklmnopqrstuvwyz")

# ============================================================================
# SAMPLE LOCALES
# ============================================================================

# Real-world tags covering the common shapes.
_SAMPLE_TAGS = [
    "en", "en-US", "en-GB", "fr", "fr-CA", "de", "de-AT", "de-CH-1996",
    "es-419", "pt-BR", "zh-Hans", "zh-Hant-TW", "sr-Latn-RS", "sr-Cyrl",
    "ja-JP", "ko", "ru", "pl", "it", "ca-ES-valencia", "und-Cyrl",
    "en-US-u-hc-h12", "th-TH-u-nu-thai", "de-x-phonebk",
]

sample_tags: SearchStrategy[str] = st.sampled_from(_SAMPLE_TAGS)


@composite
def language_tags(draw: DrawFn) -> str:
    """Generate a well-formed tag with random casing and separators.

    Events emitted:
    - tag_shape={script,region,variants,extension,private_use}
    """
    parts = [draw(language_subtags)]
    if draw(st.booleans()):
        parts.append(draw(script_subtags))
        event("tag_shape=script")
    if draw(st.booleans()):
        parts.append(draw(region_subtags))
        event("tag_shape=region")
    variants = draw(st.lists(variant_subtags, max_size=2))
    if variants:
        event("tag_shape=variants")
    parts.extend(variants)
    if draw(st.booleans()):
        event("tag_shape=extension")
        parts.append(draw(singletons))
        pairs = draw(
            st.dictionaries(extension_subtags, extension_subtags, min_size=1, max_size=3)
        )
        for key, value in pairs.items():
            parts.extend((key, value))
    if draw(st.booleans()):
        event("tag_shape=private_use")
        parts.append("x")
        parts.extend(draw(st.lists(private_use_subtags, min_size=1, max_size=3)))

    separator = draw(st.sampled_from("-_"))
    return separator.join(parts)
