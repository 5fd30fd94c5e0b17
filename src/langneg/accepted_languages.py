"""Accept-Language header tokenizer.

Turns an HTTP Accept-Language value into the ordered list of tag strings
that negotiation consumes. Quality weights are discarded: negotiation
only uses the order in which locales are listed.

Python 3.11+. Zero external dependencies.
"""

from __future__ import annotations

__all__ = ["parse_accepted_languages"]


def parse_accepted_languages(header: str) -> list[str]:
    """Split an Accept-Language header into raw language tags.

    Splits on ",", trims whitespace, keeps what precedes the first ";"
    and drops empty entries. Tags are not validated here; pass the result
    through ``convert_to_identifiers_lossy`` to parse them.

    Args:
        header: Accept-Language header value

    Returns:
        Tag strings in header order

    Example:
        >>> parse_accepted_languages("de-AT;q=0.9,de-DE;q=0.8,de;q=0.7,en-US;q=0.5")
        ['de-AT', 'de-DE', 'de', 'en-US']
        >>> parse_accepted_languages(" fr , ,en;q=0.5")
        ['fr', 'en']
    """
    tags: list[str] = []
    for part in header.split(","):
        tag = part.strip().split(";", 1)[0].strip()
        if tag:
            tags.append(tag)
    return tags
