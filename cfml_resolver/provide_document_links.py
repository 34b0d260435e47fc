"""Logic for finding and resolving every link in a document."""

import logging
from collections.abc import Callable, Iterable
from pathlib import Path

from cfml_resolver.document_link import DocumentLink
from cfml_resolver.link_pattern import DEFAULT_LINK_PATTERNS, LinkPattern
from cfml_resolver.resolve_link import resolve_link
from cfml_resolver.scan_links import scan_links
from cfml_resolver.workspace import Workspace

logger = logging.getLogger(__name__)


def provide_document_links(
    text: str,
    document: str | Path,
    workspace: Workspace | None = None,
    patterns: Iterable[LinkPattern] = DEFAULT_LINK_PATTERNS,
    should_cancel: Callable[[], bool] | None = None,
) -> list[DocumentLink]:
    """Scan ``text`` and return a link for every match that resolves.

    A match that fails to resolve is skipped without affecting the others.
    Only OSError and ValueError from a single match are caught and skipped;
    any other exception is unexpected and propagates to the caller.
    ``should_cancel`` is consulted between matches; once it returns True the
    links found so far are returned.
    """
    results: list[DocumentLink] = []
    for match in scan_links(text, patterns):
        if should_cancel is not None and should_cancel():
            logger.debug("Link scan of %s cancelled", document)
            break
        try:
            target = resolve_link(match.text, document, workspace)
        except (OSError, ValueError) as e:
            logger.debug("Could not resolve link %r in %s: %s", match.text, document, e)
            continue
        if target is not None:
            results.append(DocumentLink(match.offset, match.end, target))
    return results
