"""
Scope filtering in the logger and the UICRAFT_DEBUG switch it shares with settings.
"""
import pytest

from uicraft.core import logging as uicraft_logging
from uicraft.core.config import Settings
from uicraft.core.logging import DEBUG_SCOPES, INFO_SCOPES, is_enabled, log


def test_info_scopes_always_shown(monkeypatch):
    monkeypatch.setattr(uicraft_logging, "DEBUG_MODE", False)
    assert all(is_enabled(scope) for scope in INFO_SCOPES)
    assert not any(is_enabled(scope) for scope in DEBUG_SCOPES)


def test_debug_scopes_need_debug_mode(monkeypatch):
    monkeypatch.setattr(uicraft_logging, "DEBUG_MODE", True)
    assert is_enabled("PROMPT")
    assert is_enabled("SANITIZER")
    assert not is_enabled("UNKNOWN")


def test_log_output(monkeypatch, capsys):
    monkeypatch.setattr(uicraft_logging, "DEBUG_MODE", False)

    log("ORCHESTRATOR", "run started", request_id="abcdef1234567890")
    log("PROMPT", "hidden")

    out = capsys.readouterr().out
    assert "[ORCHESTRATOR] [abcdef12] run started" in out
    assert "hidden" not in out


@pytest.mark.parametrize("value,expected", [("true", True), ("false", False)])
def test_settings_debug_reads_logger_switch(monkeypatch, value, expected):
    monkeypatch.setenv("UICRAFT_DEBUG", value)
    monkeypatch.setenv("DEBUG", "true")
    assert Settings().debug is expected
