import logging
from datetime import date

import pytest

from ministry_chat.core import logging_config


@pytest.fixture
def fresh_logging(monkeypatch):
    root = logging.getLogger()
    existing = set(root.handlers)
    level = root.level
    monkeypatch.setattr(logging_config, "_logging_configured", False)
    yield
    for handler in list(root.handlers):
        ours = handler.formatter is not None and handler.formatter._fmt == logging_config.LOG_FORMAT
        if ours and handler not in existing:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


def test_log_file_is_written_to_configured_dir(tmp_path, fresh_logging):
    log_dir = tmp_path / "nested" / "logs"
    logging_config.setup_logging("INFO", log_dir)

    logging_config.get_logger("ministry_chat.test").info("hello gateway")
    for handler in logging.getLogger().handlers:
        handler.flush()

    log_file = logging_config.log_file_for(log_dir)
    assert log_file.exists()
    assert "hello gateway" in log_file.read_text(encoding="utf-8")


def test_console_only_without_log_dir(fresh_logging):
    before = len(logging.getLogger().handlers)
    logging_config.setup_logging("INFO", None)
    added = logging.getLogger().handlers[before:]
    assert len(added) == 1
    assert not isinstance(added[0], logging.FileHandler)


def test_setup_runs_once(tmp_path, fresh_logging):
    logging_config.setup_logging("INFO", None)
    count = len(logging.getLogger().handlers)
    logging_config.setup_logging("DEBUG", tmp_path)
    assert len(logging.getLogger().handlers) == count
    assert not any(tmp_path.iterdir())


def test_log_file_name_carries_the_day(tmp_path):
    assert logging_config.log_file_for(tmp_path, date(2024, 3, 5)).name == "gateway_20240305.log"
