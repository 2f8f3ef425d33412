"""Unit tests for mdlinks.utils."""

import importlib
import logging

from mdlinks.utils.configure_logging import configure_logging
from mdlinks.utils.get_home_dir import get_home_dir
from mdlinks.utils.get_logger import get_logger

configure_module = importlib.import_module("mdlinks.utils.configure_logging")


def test_get_home_dir_from_env(tmp_path, monkeypatch):
    monkeypatch.setenv("MDLINKS_HOME", str(tmp_path))
    assert get_home_dir() == tmp_path.resolve()


def test_get_home_dir_default(tmp_path, monkeypatch):
    monkeypatch.delenv("MDLINKS_HOME", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    assert get_home_dir() == tmp_path / ".mdlinks"


def test_get_logger_is_namespaced():
    assert get_logger("link").name == "mdlinks.link"


def test_configure_logging_writes_to_home(tmp_path, monkeypatch):
    logger = logging.getLogger("mdlinks")
    monkeypatch.setattr(configure_module, "_state", {"configured": False})
    monkeypatch.setattr(logger, "handlers", [])
    monkeypatch.setattr(logger, "level", logger.level)

    log_file = configure_logging(home=tmp_path / "home", level="WARN")
    assert log_file == tmp_path / "home" / "mdlinks.log"
    assert logger.level == logging.WARNING

    get_logger("link").warning("broken link in %s", "a.md")
    for handler in logger.handlers:
        handler.flush()
    assert "mdlinks.link - WARNING - broken link in a.md" in log_file.read_text(encoding="utf-8")

    # Second call only adjusts the level
    configure_logging(home=tmp_path / "other", level="DEBUG")
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
    for handler in logger.handlers:
        handler.close()
