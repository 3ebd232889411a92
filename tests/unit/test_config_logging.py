"""Тесты настроек (pydantic-settings) и конфигурации structlog."""

import json
import logging

import pytest
import structlog
from pydantic import ValidationError

from src.config import HttpDateSettings
from src.timestamp import FixedClock, Timestamp
from src.utils import get_logger, resolve_level, setup_logging


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()


class TestSettings:
    """Тесты HttpDateSettings"""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("HTTPDATE_LOG_LEVEL", raising=False)
        monkeypatch.delenv("HTTPDATE_LOG_FORMAT", raising=False)
        config = HttpDateSettings(_env_file=None)
        assert config.log_level == "INFO"
        assert config.log_format == "console"

    def test_env_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HTTPDATE_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("HTTPDATE_LOG_FORMAT", "json")
        config = HttpDateSettings(_env_file=None)
        assert config.log_level == "DEBUG"
        assert config.log_format == "json"

    def test_unknown_format_rejected(self) -> None:
        with pytest.raises(ValidationError):
            HttpDateSettings(_env_file=None, log_format="xml")


class TestLogging:
    """Тесты setup_logging"""

    def test_json_debug_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_logging(HttpDateSettings(_env_file=None, log_level="debug", log_format="json"))

        Timestamp.new(FixedClock(784111777))

        events = [json.loads(line) for line in capsys.readouterr().out.splitlines()]
        names = [e["event"] for e in events]
        assert "clock_read" in names
        assert "timestamp_set" in names

        set_event = next(e for e in events if e["event"] == "timestamp_set")
        assert set_event["seconds"] == 784111777
        assert set_event["previous_seconds"] == 0
        assert "header" not in set_event
        assert set_event["component"] == "timestamp"

    def test_level_filtering(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_logging(HttpDateSettings(_env_file=None, log_level="warning", log_format="json"))

        Timestamp.new(FixedClock(1))

        assert capsys.readouterr().out == ""

    def test_get_logger_binds_component(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_logging(HttpDateSettings(_env_file=None, log_level="info", log_format="json"))

        get_logger("tests").info("hello")

        event = json.loads(capsys.readouterr().out.strip())
        assert event["component"] == "tests"
        assert event["level"] == "info"

    def test_warn_alias_filters_info(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_logging(HttpDateSettings(_env_file=None, log_level="warn", log_format="json"))

        get_logger("tests").info("hidden")
        get_logger("tests").warning("shown")

        event = json.loads(capsys.readouterr().out.strip())
        assert event["event"] == "shown"


class TestResolveLevel:
    """Тесты разрешения имени уровня"""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("debug", logging.DEBUG),
            ("INFO", logging.INFO),
            ("Warning", logging.WARNING),
            ("warn", logging.WARNING),
            ("error", logging.ERROR),
            ("critical", logging.CRITICAL),
        ],
    )
    def test_known_names(self, name: str, expected: int) -> None:
        assert resolve_level(name) == expected

    def test_unknown_falls_back_to_info(self) -> None:
        assert resolve_level("verbose") == logging.INFO
