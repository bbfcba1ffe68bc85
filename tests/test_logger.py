"""Tests for log file resolution."""

import os

from countrypick.logger import DEFAULT_LOG_NAME, get_logger, resolve_log_file, setup_logger
from countrypick.utils import get_project_root


def test_explicit_absolute_path_wins(tmp_path, monkeypatch):
    monkeypatch.setenv("COUNTRYPICK_LOG_FILE", str(tmp_path / "env.log"))
    target = str(tmp_path / "explicit.log")

    assert resolve_log_file(target) == target


def test_env_var_used_when_no_argument(tmp_path, monkeypatch):
    monkeypatch.setenv("COUNTRYPICK_LOG_FILE", str(tmp_path / "env.log"))

    assert resolve_log_file() == str(tmp_path / "env.log")


def test_relative_path_is_anchored_at_project_root(monkeypatch):
    monkeypatch.delenv("COUNTRYPICK_LOG_FILE", raising=False)

    assert resolve_log_file("logs/app.log") == os.path.join(get_project_root(), "logs/app.log")


def test_setup_logger_writes_component_records(tmp_path, monkeypatch):
    monkeypatch.delenv("COUNTRYPICK_LOG_FILE", raising=False)
    log_file = tmp_path / "records.log"

    path = setup_logger(log_file=str(log_file), log_level="DEBUG")

    get_logger("collation").info("pool sorted")
    get_logger().complete()

    assert path == str(log_file)
    content = log_file.read_text(encoding="utf-8")
    assert "collation" in content
    assert "pool sorted" in content

    # Restore the default sink for the rest of the suite.
    setup_logger(log_file=os.path.join(get_project_root(), DEFAULT_LOG_NAME))
