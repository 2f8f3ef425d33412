"""Shared pytest configuration and fixtures for all tests."""

import json
from pathlib import Path

import pytest

from mdlinks.api.config.LinksConfig import LinksConfig
from mdlinks.api.file_service.get_file_service import get_file_service


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast isolated tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Configuration Helpers
# =============================================================================


def minimal_config_dict(dataset_root: str = "/dataset") -> dict:
    """Minimal valid mdlinks configuration dict for testing."""
    return {
        "links": {
            "docs_folders": ["docs"],
            "dataset_root": dataset_root,
            "exclusion_list": [],
        },
        "log": {"level": "INFO"},
    }


@pytest.fixture(name="minimal_config_dict")
def minimal_config_dict_fixture() -> dict:
    """Pytest fixture returning a fresh minimal config dict."""
    return minimal_config_dict()


@pytest.fixture
def links_config() -> LinksConfig:
    """LinksConfig rooted at /dataset with 'docs' as the only docs folder."""
    return LinksConfig(docs_folders=["docs"], dataset_root="/dataset", exclusion_list=[])


@pytest.fixture
def memory_fs():
    """Factory for in-memory file services: memory_fs({"/dataset/a.md": "..."})."""

    def _make(files: dict[str, str] | None = None):
        return get_file_service("memory", files=files or {})

    return _make


@pytest.fixture
def dataset(tmp_path: Path) -> Path:
    """Empty on-disk dataset root."""
    root = tmp_path / "dataset"
    root.mkdir()
    return root


@pytest.fixture
def mdlinks_home(tmp_path: Path, monkeypatch, dataset: Path) -> Path:
    """Set up MDLINKS_HOME with a config whose dataset_root is the dataset fixture.

    Returns:
        Path to the mdlinks home directory
    """
    home = tmp_path / ".mdlinks"
    home.mkdir()
    monkeypatch.setenv("MDLINKS_HOME", str(home))
    (home / "config.json").write_text(json.dumps(minimal_config_dict(str(dataset))), encoding="utf-8")
    return home


# =============================================================================
# Test Helpers
# =============================================================================


def _run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


@pytest.fixture
def run_cmd():
    """The cmd runner, as a fixture so test modules need not import conftest."""
    return _run_cmd
