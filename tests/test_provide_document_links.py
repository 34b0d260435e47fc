"""Tests for scanning and resolving all links of a document."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from cfml_resolver.document_link import DocumentLink
from cfml_resolver.provide_document_links import provide_document_links
from cfml_resolver.workspace import Workspace


def test_synthetic_image_span(tmp_path: Path) -> None:
    """Verify that the reported span slices exactly the link text."""
    (tmp_path / "a").mkdir()
    (tmp_path / "a" / "b.png").write_bytes(b"")
    doc = tmp_path / "page.cfm"
    text = '<img src="a/b.png">'

    links = provide_document_links(text, doc)

    assert links == [DocumentLink(10, 17, tmp_path / "a" / "b.png")]
    assert text[links[0].start : links[0].end] == "a/b.png"
    assert not links[0].is_external


def test_only_resolvable_links_reported(tmp_path: Path) -> None:
    """Verify that anchors, missing files and directories produce nothing."""
    (tmp_path / "inc").mkdir()
    (tmp_path / "inc" / "header.cfm").write_text("")
    (tmp_path / "css").mkdir()
    (tmp_path / "css" / "site.css").write_text("")
    doc = tmp_path / "index.cfm"
    text = (
        '<a href="#top">top</a>\n'
        '<a href="https://example.com/x">ext</a>\n'
        "<cfinclude template=\"inc/header.cfm\">\n"
        '<img src="missing.png">\n'
        '<a href="inc">dir</a>\n'
        '<link href="/css/site.css">\n'
    )

    links = provide_document_links(text, doc, Workspace([tmp_path]))

    assert [link.target for link in links] == [
        "https://example.com/x",
        tmp_path / "inc" / "header.cfm",
        tmp_path / "css" / "site.css",
    ]
    assert links[0].is_external
    for link in links:
        assert text[link.start : link.end] in {
            "https://example.com/x",
            "inc/header.cfm",
            "/css/site.css",
        }


def test_failed_match_does_not_abort_scan(tmp_path: Path) -> None:
    """Verify that one failing resolution does not stop the remaining matches."""
    text = '<a href="one.cfm"><a href="two.cfm">'
    target = tmp_path / "two.cfm"
    with patch(
        "cfml_resolver.provide_document_links.resolve_link",
        side_effect=[OSError("boom"), target],
    ):
        links = provide_document_links(text, tmp_path / "page.cfm")
    assert links == [DocumentLink(27, 34, target)]


def test_cancellation_between_matches(tmp_path: Path) -> None:
    """Verify that cancellation stops the scan and keeps links found so far."""
    (tmp_path / "one.cfm").write_text("")
    (tmp_path / "two.cfm").write_text("")
    text = '<a href="one.cfm"><a href="two.cfm">'
    should_cancel = MagicMock(side_effect=[False, True])

    links = provide_document_links(
        text, tmp_path / "page.cfm", should_cancel=should_cancel
    )

    assert [link.target for link in links] == [tmp_path / "one.cfm"]
    assert should_cancel.call_count == 2


def test_unexpected_error_propagates(tmp_path: Path) -> None:
    """Verify that errors other than OSError and ValueError are not swallowed."""
    text = '<a href="one.cfm">'
    with (
        patch(
            "cfml_resolver.provide_document_links.resolve_link",
            side_effect=RuntimeError("bug"),
        ),
        pytest.raises(RuntimeError, match="bug"),
    ):
        provide_document_links(text, tmp_path / "page.cfm")
