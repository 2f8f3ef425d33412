"""Unit tests for mdlinks configuration models."""

import json

import pytest
from pydantic import ValidationError

from mdlinks.api.config.LinksConfig import LinksConfig
from mdlinks.api.config.LogConfig import LogConfig
from mdlinks.api.config.MdlinksConfig import MdlinksConfig


def test_load(mdlinks_home, dataset):
    config = MdlinksConfig.load()
    assert config.links.docs_folders == ["docs"]
    assert config.links.dataset_root == str(dataset)
    assert config.log.level == "INFO"
    assert MdlinksConfig.get_config_path() == mdlinks_home / "config.json"


def test_load_missing_file(tmp_path, monkeypatch):
    monkeypatch.setenv("MDLINKS_HOME", str(tmp_path))
    with pytest.raises(ValueError, match="Configuration file not found"):
        MdlinksConfig.load()


def test_load_invalid_json(mdlinks_home):
    (mdlinks_home / "config.json").write_text("{not json")
    with pytest.raises(ValueError, match="Invalid JSON"):
        MdlinksConfig.load()


def test_load_non_object(mdlinks_home):
    (mdlinks_home / "config.json").write_text("[]")
    with pytest.raises(ValueError, match="must be an object"):
        MdlinksConfig.load()


def test_load_validation_error_names_field(mdlinks_home):
    (mdlinks_home / "config.json").write_text(json.dumps({"links": {"docs_folders": []}}))
    with pytest.raises(ValueError, match=r"Configuration validation error: links\.dataset_root"):
        MdlinksConfig.load()


def test_log_section_is_optional(mdlinks_home, dataset):
    (mdlinks_home / "config.json").write_text(json.dumps({"links": {"dataset_root": str(dataset)}}))
    config = MdlinksConfig.load()
    assert config.log == LogConfig()
    assert config.links.exclusion_list == []


def test_links_config_normalizes(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    config = LinksConfig(docs_folders=["docs", "", "api", "docs"], dataset_root="~/kb")
    assert config.docs_folders == ["docs", "api"]
    assert config.dataset_root == str(tmp_path / "kb")


def test_links_config_rejects_empty_root():
    with pytest.raises(ValidationError):
        LinksConfig(dataset_root="")


def test_links_config_is_frozen():
    config = LinksConfig(dataset_root="/dataset")
    with pytest.raises(ValidationError):
        config.dataset_root = "/other"  # type: ignore[misc]


def test_log_level_is_validated():
    with pytest.raises(ValidationError):
        LogConfig(level="LOUD")


def test_with_dataset_root(mdlinks_home):
    config = MdlinksConfig.load()
    assert config.with_dataset_root(None) is config.links
    overridden = config.with_dataset_root("/elsewhere")
    assert overridden.dataset_root == "/elsewhere"
    assert overridden.docs_folders == config.links.docs_folders


def test_to_dict_round_trips(mdlinks_home):
    config = MdlinksConfig.load()
    assert MdlinksConfig(**config.to_dict()) == config
