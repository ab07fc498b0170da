# src/message_translator/tests/test_logging/test_builder_setup.py
import json
import logging
from pathlib import Path

from message_translator.core.logging.builder import make_dict_config, setup_logging
from message_translator.core.logging.formatters import ColorFormatter, JsonFormatter


# Minimal Settings-like object
class DummySettings:
    LOG_FORMAT = "json"
    LOG_LEVEL = "INFO"
    LOG_TO_STDOUT = False
    LOG_DIR = None  # set per test
    LOG_MAX_BYTES = 1000
    LOG_BACKUP_COUNT = 1
    ENV = "development"


def test_make_dict_config_with_files(tmp_path):
    settings = DummySettings()
    settings.LOG_DIR = tmp_path
    cfg = make_dict_config(settings)
    assert set(cfg["handlers"]) == {"console", "file", "error_file"}
    assert cfg["handlers"]["file"]["filename"] == str(tmp_path / "app.log")
    assert cfg["handlers"]["error_file"]["level"] == "ERROR"
    assert cfg["loggers"][""]["handlers"] == ["console", "file", "error_file"]
    assert cfg["formatters"]["json"]["()"] is JsonFormatter


def test_make_dict_config_stdout_only():
    settings = DummySettings()
    settings.LOG_TO_STDOUT = True
    cfg = make_dict_config(settings)
    assert set(cfg["handlers"]) == {"console", "error_console"}


def test_make_dict_config_without_log_dir_skips_files():
    settings = DummySettings()
    settings.LOG_DIR = None
    cfg = make_dict_config(settings)
    assert "file" not in cfg["handlers"]
    assert "error_console" in cfg["handlers"]


def test_text_format_uses_color_formatter():
    settings = DummySettings()
    settings.LOG_TO_STDOUT = True
    settings.LOG_FORMAT = "text"
    cfg = make_dict_config(settings)
    assert cfg["formatters"]["standard"]["()"] is ColorFormatter
    assert cfg["handlers"]["console"]["formatter"] == "standard"


def test_every_handler_redacts():
    settings = DummySettings()
    settings.LOG_DIR = Path("unused")
    cfg = make_dict_config(settings)
    assert all(h["filters"] == ["redact"] for h in cfg["handlers"].values())


def test_setup_logging_writes_json_file(tmp_path, restore_logging):
    settings = DummySettings()
    settings.LOG_DIR = tmp_path / "logs"
    assert not settings.LOG_DIR.exists()

    setup_logging(settings)
    assert settings.LOG_DIR.exists()

    logging.getLogger("message_translator.test").info(
        "traduzido", extra={"key": "User not found", "password": "secret1234"}
    )
    for handler in logging.getLogger().handlers:
        handler.flush()

    lines = (settings.LOG_DIR / "app.log").read_text(encoding="utf-8").splitlines()
    record = json.loads(lines[-1])
    assert record["message"] == "traduzido"
    assert record["key"] == "User not found"
    assert record["password"] == "***REDACTED***"
    assert record["env"] == "development"
    # INFO is below the error file threshold
    assert (settings.LOG_DIR / "errors.log").read_text(encoding="utf-8") == ""
