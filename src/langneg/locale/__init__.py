"""Language identifiers: parsing, canonical form and likely-subtag expansion.

Exports:
    LanguageIdentifier: Canonical, immutable language tag value
    Extension: One extension block of an identifier
    parse_language_tag: Parse and canonicalize a tag string
    parse_language_tag_with_options: Parse, then apply Intl.Locale style options
    LocaleExpander: Likely-subtags expander over CLDR data
    maximize: Expand with the shared Babel-backed expander

Python 3.11+.
"""

from .identifier import Extension, LanguageIdentifier
from .likely_subtags import LocaleExpander, maximize
from .parser import parse_language_tag, parse_language_tag_with_options

__all__ = [
    "Extension",
    "LanguageIdentifier",
    "LocaleExpander",
    "maximize",
    "parse_language_tag",
    "parse_language_tag_with_options",
]
