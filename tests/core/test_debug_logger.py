"""
test_debug_logger.py
--------------------
Unit tests for category/level filtering and the throttled trace.
"""

import pytest

from strawberry_sprint.core.debug import debug_logger
from strawberry_sprint.core.debug.debug_logger import DebugLogger, LoggerConfig


@pytest.fixture
def loud_logger(monkeypatch):
    """Logging on, INFO level, a private copy of the category table."""
    monkeypatch.setattr(LoggerConfig, "ENABLE_LOGGING", True)
    monkeypatch.setattr(LoggerConfig, "LOG_LEVEL", "INFO")
    monkeypatch.setattr(LoggerConfig, "CATEGORIES", dict(LoggerConfig.CATEGORIES))
    monkeypatch.setattr(DebugLogger, "_last_emit", {})


class Reporter:
    def report(self):
        DebugLogger.system("hello", category="system")


# ===========================================================
# Filtering
# ===========================================================

def test_master_switch_silences_everything(capsys):
    # quiet_logger has switched logging off
    DebugLogger.fail("boom", category="system")
    assert not DebugLogger.enabled("system", "ERROR")
    assert capsys.readouterr().out == ""


def test_disabled_category_is_filtered(loud_logger, capsys):
    LoggerConfig.CATEGORIES["steering"] = False
    DebugLogger.action("turning", category="steering")
    assert capsys.readouterr().out == ""


def test_level_filters_traces(loud_logger, capsys):
    DebugLogger.trace("fine detail", category="system")
    assert capsys.readouterr().out == ""

    LoggerConfig.LOG_LEVEL = "VERBOSE"
    DebugLogger.trace("fine detail", category="system")
    assert "[TRACE] fine detail" in capsys.readouterr().out


def test_source_is_calling_class(loud_logger, capsys):
    Reporter().report()
    out = capsys.readouterr().out
    assert "[Reporter][SYSTEM] hello" in out


def test_source_falls_back_to_module_name(loud_logger, capsys):
    DebugLogger.warn("careful", meta_mode="no_time")
    assert "[TestDebugLogger][WARN] careful" in capsys.readouterr().out


# ===========================================================
# Configure
# ===========================================================

def test_configure_sets_level_and_categories(loud_logger):
    LoggerConfig.configure(level="verbose", categories=["steering"])

    assert LoggerConfig.LOG_LEVEL == "VERBOSE"
    assert DebugLogger.enabled("steering", "VERBOSE")


def test_configure_rejects_unknown_level(loud_logger):
    with pytest.raises(ValueError):
        LoggerConfig.configure(level="chatty")


# ===========================================================
# Throttled Trace
# ===========================================================

def test_throttled_emits_once_per_interval(loud_logger, monkeypatch, capsys):
    LoggerConfig.LOG_LEVEL = "VERBOSE"
    now = [100.0]
    monkeypatch.setattr(debug_logger.time, "monotonic", lambda: now[0])

    assert DebugLogger.throttled("k", "first", interval_s=5.0)
    assert not DebugLogger.throttled("k", "second", interval_s=5.0)
    # Keys are independent
    assert DebugLogger.throttled("other", "third", interval_s=5.0)

    now[0] += 5.0
    assert DebugLogger.throttled("k", "fourth", interval_s=5.0)

    out = capsys.readouterr().out
    assert "first" in out and "fourth" in out
    assert "second" not in out


def test_throttled_skips_below_verbose(loud_logger):
    assert not DebugLogger.throttled("k", "quiet")
    assert "k" not in DebugLogger._last_emit
