"""Data model and defaults for the patterns that locate links in documents."""

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class LinkPattern:
    """A regex plus the index of the capture group holding the link text."""

    pattern: re.Pattern[str]
    link_index: int


DEFAULT_LINK_PATTERNS: tuple[LinkPattern, ...] = (
    # attribute/value link
    LinkPattern(
        pattern=re.compile(
            r"""\b(href|src|template|action|url)\s*(?:=|:|\()\s*(['"])([^'"]+?)\2""",
            re.IGNORECASE,
        ),
        link_index=3,
    ),
    # include script
    LinkPattern(
        pattern=re.compile(r"""\binclude\s+(['"])([^'"]+?)\1""", re.IGNORECASE),
        link_index=2,
    ),
)
