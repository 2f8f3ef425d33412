"""Unit tests for the mdlinks CLI."""

import json
from unittest.mock import MagicMock, patch

from typer.testing import CliRunner

from mdlinks import __version__
from mdlinks.cli import main
from mdlinks.cli._create_app import _create_app

runner = CliRunner()


def _json_output(result) -> dict:
    # Status lines precede the JSON document and never contain braces
    out = result.stdout
    return json.loads(out[out.index("{") :])


def test_no_command_shows_help():
    result = runner.invoke(_create_app(), [])
    assert result.exit_code == 0
    assert "Usage: " in result.stdout


def test_invalid_display_format():
    result = runner.invoke(_create_app(), ["--display", "xml", "link", "style", "."])
    assert result.exit_code == 1


def test_link_check_json_exit_codes(mdlinks_home, dataset):
    (dataset / "a.md").write_text("[ok](b.md)\n", encoding="utf-8")
    (dataset / "b.md").write_text("# B\n", encoding="utf-8")

    result = runner.invoke(_create_app(), ["--display", "json", "link", "check", str(dataset)])
    assert result.exit_code == 0
    assert _json_output(result)["broken_links"] == []

    (dataset / "c.md").write_text("[broken](nowhere.md)\n", encoding="utf-8")
    result = runner.invoke(_create_app(), ["--display", "json", "link", "check", str(dataset)])
    assert result.exit_code == 1
    assert _json_output(result)["broken_links"][0]["lineNumber"] == 1


def test_link_normalize_writes(mdlinks_home, dataset):
    (dataset / "page.md").write_text("# Page\n", encoding="utf-8")
    docs = dataset / "docs"
    docs.mkdir()
    (docs / "current.md").write_text("[p](../page.md)\n", encoding="utf-8")

    result = runner.invoke(_create_app(), ["--display", "json", "link", "normalize", str(dataset)])
    assert result.exit_code == 0
    assert _json_output(result)["by_kind"] == {"normalizedRel": 1}
    assert (docs / "current.md").read_text(encoding="utf-8") == "[p](page.md)\n"


@patch("mdlinks.cli.link._handle_stage_result")
def test_normalize_options_are_passed(mock_handle_stage_result):
    mock_executor = MagicMock()
    mock_handle_stage_result.return_value = mock_executor

    result = runner.invoke(_create_app(), ["link", "normalize", "docs", "--dry-run", "--dataset-root", "/kb"])

    assert result.exit_code == 0
    mock_executor.assert_called_with(path="docs", dry_run=True, dataset_root="/kb")


@patch("mdlinks.cli.link._handle_stage_result")
def test_substitute_arguments_are_passed(mock_handle_stage_result):
    mock_executor = MagicMock()
    mock_handle_stage_result.return_value = mock_executor

    result = runner.invoke(_create_app(), ["link", "substitute", "docs", "old/", "new/", "-n"])

    assert result.exit_code == 0
    mock_executor.assert_called_with(path="docs", old_base="old/", new_base="new/", dry_run=True)


def test_config_show_yaml(mdlinks_home):
    result = runner.invoke(_create_app(), ["config", "show"])
    assert result.exit_code == 0
    assert "sections:" in result.stdout
    assert "- links" in result.stdout


def test_link_show_missing_file_fails(mdlinks_home, dataset):
    result = runner.invoke(_create_app(), ["link", "show", str(dataset / "missing.md")])
    assert result.exit_code == 1


def test_main_version(capsys):
    assert main(["--version"]) == 0
    assert capsys.readouterr().out.strip() == f"mdlinks {__version__}"
