"""Logic for scanning document text for link-shaped substrings."""

from collections.abc import Iterable

from cfml_resolver.link_pattern import DEFAULT_LINK_PATTERNS, LinkPattern
from cfml_resolver.raw_link_match import RawLinkMatch


def scan_links(
    text: str,
    patterns: Iterable[LinkPattern] = DEFAULT_LINK_PATTERNS,
) -> list[RawLinkMatch]:
    """Return every link match of every pattern over the whole text.

    Patterns are applied independently and in order; the same span may be
    reported by more than one pattern. The offset of a link is located by
    searching for the link text inside its full match.
    """
    matches: list[RawLinkMatch] = []
    for lp in patterns:
        for m in lp.pattern.finditer(text):
            link = m.group(lp.link_index)
            if not link:
                continue
            pre_len = m.group(0).find(link)
            matches.append(RawLinkMatch(text=link, offset=m.start() + pre_len))
    return matches
