"""Tests for workspace paths, settings and logging setup."""

import logging

from pomotask.logging_setup import LOG_FILE_NAME, setup_logging
from pomotask.workspace import (
    Settings,
    config_path,
    load_settings,
    log_dir,
    persist_path,
    workspace_root,
)


def test_workspace_root_from_env(workspace):
    assert workspace_root() == workspace.resolve()
    assert persist_path() == workspace.resolve() / "persist.json"
    assert config_path(workspace) == workspace / "config.yaml"
    assert log_dir(workspace) == workspace / "logs"


def test_load_settings(workspace):
    settings = load_settings(workspace)
    assert settings.allow_pause_at_zero is False
    assert settings.log_level == "DEBUG"


def test_load_settings_missing_file(tmp_path):
    assert load_settings(tmp_path) == Settings()


def test_settings_from_dict_defaults():
    assert Settings.from_dict({}) == Settings(allow_pause_at_zero=True, log_level="INFO")
    assert Settings.from_dict({"extra": 1}).allow_pause_at_zero is True


def test_settings_rejects_non_boolean_pause_flag():
    assert Settings.from_dict({"allow_pause_at_zero": "false"}).allow_pause_at_zero is True
    assert Settings.from_dict({"allow_pause_at_zero": 0}).allow_pause_at_zero is True
    assert Settings.from_dict({"allow_pause_at_zero": False}).allow_pause_at_zero is False


def test_settings_round_trip():
    s = Settings(allow_pause_at_zero=False, log_level="WARNING")
    assert Settings.from_dict(s.to_dict()) == s


def test_setup_logging_writes_file(tmp_path):
    root_logger = logging.getLogger()
    saved = list(root_logger.handlers), root_logger.level
    try:
        log_file = setup_logging(log_dir=tmp_path / "logs", level="debug")
        assert log_file.name == LOG_FILE_NAME
        logging.getLogger("pomotask.test").debug("hello from test")
        for h in root_logger.handlers:
            h.flush()
        assert "hello from test" in log_file.read_text(encoding="utf-8")
    finally:
        for h in list(root_logger.handlers):
            root_logger.removeHandler(h)
            h.close()
        for h in saved[0]:
            root_logger.addHandler(h)
        root_logger.setLevel(saved[1])
        logging.captureWarnings(False)
