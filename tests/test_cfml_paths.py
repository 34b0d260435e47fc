"""Tests for the command-line entry point."""

from pathlib import Path

import pytest
import yaml

from cfml_resolver.cfml_paths import main


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Fixture providing a small CFML project."""
    root = tmp_path / "proj"
    (root / "app").mkdir(parents=True)
    (root / "lib" / "util").mkdir(parents=True)
    (root / "lib" / "Strings.cfc").write_text("component {}")
    (root / "app" / "header.cfm").write_text("")
    (root / "app" / "page.cfm").write_text(
        '<cfinclude template="header.cfm">\n<img src="missing.png">\n'
    )
    return root


def test_resolve_command(project: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Verify that resolve prints the resolved location."""
    code = main(
        [
            "--workspace",
            str(project),
            "resolve",
            "lib.util",
            "--from",
            str(project / "app" / "page.cfm"),
        ]
    )
    assert code == 0
    assert capsys.readouterr().out.strip() == str(project / "lib" / "util")


def test_resolve_command_with_config_mapping(
    project: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Verify that mappings from the config file are used."""
    config_file = tmp_path / "cfml.yml"
    config_file.write_text(
        yaml.dump(
            {
                "workspace_folders": ["proj"],
                "mappings": [
                    {
                        "logicalPath": "/common",
                        "directoryPath": "lib",
                        "isPhysicalDirectoryPath": False,
                    }
                ],
            }
        )
    )
    code = main(
        [
            "--config",
            str(config_file),
            "resolve",
            "common.util",
            "--from",
            str(project / "app" / "page.cfm"),
        ]
    )
    assert code == 0
    assert capsys.readouterr().out.strip() == str(project.resolve() / "lib" / "util")


def test_resolve_command_not_found(
    project: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Verify that an unresolved path exits with status 1."""
    code = main(["resolve", "no.such.Thing", "--from", str(project / "app" / "page.cfm")])
    assert code == 1
    assert "Could not resolve" in capsys.readouterr().out


def test_links_command(project: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Verify that links prints resolved links and, on request, unresolved ones."""
    code = main(["links", str(project / "app" / "page.cfm"), "--show-unresolved"])
    assert code == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert lines[0].startswith("21-31\theader.cfm\t")
    assert lines[0].endswith(str(project.resolve() / "app" / "header.cfm"))
    assert lines[1].endswith("missing.png\t(unresolved)")


def test_listing_commands(project: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Verify the components and directories listings."""
    assert main(["components", str(project / "lib")]) == 0
    assert capsys.readouterr().out.split() == ["Strings.cfc"]
    assert main(["directories", str(project / "lib")]) == 0
    assert capsys.readouterr().out.split() == ["util"]


def test_listing_missing_directory(project: Path) -> None:
    """Verify that listing failures exit with a message."""
    with pytest.raises(SystemExit, match="Cannot list"):
        main(["components", str(project / "nope")])


def test_links_missing_file(project: Path) -> None:
    """Verify that an unreadable document exits with a message."""
    with pytest.raises(SystemExit, match="Cannot read"):
        main(["links", str(project / "nope.cfm")])
