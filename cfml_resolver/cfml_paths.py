"""Command-line access to CFML component path resolution and document links.

Resolves dotted component paths the way a CFML engine looks them up (next to
the calling template, under the project root, then through logical mappings)
and lists the file links found in a template.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from cfml_resolver.filter_components import get_components
from cfml_resolver.filter_directories import get_directories
from cfml_resolver.load_config import load_config
from cfml_resolver.provide_document_links import provide_document_links
from cfml_resolver.resolve_dotted_paths import resolve_dotted_paths
from cfml_resolver.resolver_config import ResolverConfig
from cfml_resolver.scan_links import scan_links


def build_resolver_config(args: argparse.Namespace) -> ResolverConfig:
    """Load the config file and add any --workspace folders given on the command line."""
    config = load_config(args.config)
    resolver_config = ResolverConfig.from_config(config)
    for folder in args.workspace or []:
        resolver_config.workspace.folders.append(folder.resolve())
    return resolver_config


def run_links(args: argparse.Namespace, resolver_config: ResolverConfig) -> int:
    """Print every resolved link of a document."""
    document = args.file.resolve()
    try:
        text = document.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        msg = f"Cannot read {args.file}: {e}"
        raise SystemExit(msg) from e
    links = provide_document_links(
        text,
        document,
        resolver_config.workspace,
        resolver_config.link_patterns,
    )
    for link in links:
        print(f"{link.start}-{link.end}\t{text[link.start : link.end]}\t{link.target}")
    if args.show_unresolved:
        resolved = {(link.start, link.end) for link in links}
        for match in scan_links(text, resolver_config.link_patterns):
            if (match.offset, match.end) not in resolved:
                print(f"{match.offset}-{match.end}\t{match.text}\t(unresolved)")
    return 0


def run_resolve(args: argparse.Namespace, resolver_config: ResolverConfig) -> int:
    """Print the locations a dotted path resolves to."""
    base = args.base.resolve()
    paths = resolve_dotted_paths(
        args.dotted_path,
        base,
        resolver_config.workspace,
        resolver_config.mappings_for(base),
    )
    if not paths:
        print(f"Could not resolve: {args.dotted_path}")
        return 1
    for p in paths:
        print(p)
    return 0


def run_listing(args: argparse.Namespace, resolver_config: ResolverConfig) -> int:
    """Print the sub-directories or components of a directory."""
    try:
        if args.command == "components":
            entries = get_components(args.dir, resolver_config.component_extension)
        else:
            entries = get_directories(args.dir)
    except OSError as e:
        msg = f"Cannot list {args.dir}: {e}"
        raise SystemExit(msg) from e
    for name, _kind in entries:
        print(name)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the command-line tool."""
    ap = argparse.ArgumentParser(
        description="Resolve CFML dotted component paths and document links.",
    )
    ap.add_argument("--config", help="Path to a YAML configuration file")
    ap.add_argument(
        "--workspace",
        type=Path,
        action="append",
        help="Project root folder (repeatable, added to configured folders)",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Log resolution attempts",
    )
    sub = ap.add_subparsers(dest="command", required=True)

    links = sub.add_parser("links", help="List resolved links in a document")
    links.add_argument("file", type=Path, help="Document to scan")
    links.add_argument(
        "--show-unresolved",
        action="store_true",
        help="Also list link-shaped text that did not resolve",
    )

    resolve = sub.add_parser("resolve", help="Resolve a dotted component path")
    resolve.add_argument("dotted_path", help="Dotted path, e.g. model.user.Service")
    resolve.add_argument(
        "--from",
        dest="base",
        type=Path,
        required=True,
        help="Document the path is referenced from",
    )

    for name, help_text in (
        ("components", "List component files in a directory"),
        ("directories", "List sub-directories of a directory"),
    ):
        listing = sub.add_parser(name, help=help_text)
        listing.add_argument("dir", type=Path, help="Directory to list")

    args = ap.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    resolver_config = build_resolver_config(args)
    if args.command == "links":
        return run_links(args, resolver_config)
    if args.command == "resolve":
        return run_resolve(args, resolver_config)
    return run_listing(args, resolver_config)


if __name__ == "__main__":
    raise SystemExit(main())
