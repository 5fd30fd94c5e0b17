"""langneg - Language tag parsing and locale negotiation.

Parses and canonicalizes BCP47-style language tags and picks, from the
locales an application ships, the ones that best serve a user's ordered
list of requested locales.

Public API:
    parse_tag - Parse a tag string into a canonical LanguageIdentifier
    LanguageIdentifier - Immutable, hashable language tag value
    negotiate_languages - Multi-stage locale negotiation
    negotiate_language_tags - String-in, string-out negotiation
    parse_accepted_languages - Split an Accept-Language header into tags
    maximize - Likely-subtags expansion ("en" -> "en-Latn-US")
    NegotiationStrategy - FILTERING / MATCHING / LOOKUP
    TransformResult - MODIFIED / UNMODIFIED

Exceptions:
    LangNegError - Base exception class
    LanguageTagError - Malformed language tag
    TinyStrError - Invalid compact subtag value

Submodules:
    langneg.locale - Identifier, parser, options and likely subtags
    langneg.negotiate - Negotiation engine and lossy conversion helpers
    langneg.locale_utils - POSIX conversion, system locale, babel.Locale bridge
    langneg.diagnostics - Error codes, templates and formatters
    langneg.core - Compact subtag values and Babel access
"""

from .accepted_languages import parse_accepted_languages
from .diagnostics import LangNegError, LanguageTagError, TinyStrError
from .enums import NegotiationStrategy, ParseErrorKind, TransformResult
from .locale import LanguageIdentifier, maximize
from .locale import parse_language_tag as parse_tag
from .negotiate import negotiate_language_tags, negotiate_languages

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("langneg")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "LangNegError",
    "LanguageIdentifier",
    "LanguageTagError",
    "NegotiationStrategy",
    "ParseErrorKind",
    "TinyStrError",
    "TransformResult",
    "__version__",
    "maximize",
    "negotiate_language_tags",
    "negotiate_languages",
    "parse_accepted_languages",
    "parse_tag",
]
