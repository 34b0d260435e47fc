"""Logic for resolving link text found in a document to a target."""

import re
from pathlib import Path

from cfml_resolver.file_type import FileType
from cfml_resolver.is_uri import is_uri
from cfml_resolver.join_path import join_path
from cfml_resolver.probe import probe
from cfml_resolver.resolve_root_path import resolve_root_path
from cfml_resolver.workspace import Workspace

QUERY_OR_FRAGMENT_RE = re.compile(r"[?#]")


def resolve_link(
    link: str,
    document: str | Path,
    workspace: Workspace | None = None,
) -> Path | str | None:
    """Resolve link text from ``document`` to an existing file or an external URI.

    Anchors (``#section``) never resolve. Scheme-qualified references are
    returned verbatim without touching the filesystem. Anything else must name
    an existing regular file, relative to the document's folder or, with a
    leading ``/`` or ``\\``, to its project root.
    """
    if link.startswith("#"):
        return None

    if is_uri(link):
        return link

    link_path = QUERY_OR_FRAGMENT_RE.split(link, maxsplit=1)[0]
    if not link_path:
        return None

    resource_path: Path | None
    if link_path[:1] in ("/", "\\"):
        resource_path = resolve_root_path(document, link_path, workspace)
    else:
        resource_path = join_path(Path(document).parent, link_path)

    if resource_path is not None and probe(resource_path) == FileType.FILE:
        return resource_path
    return None
