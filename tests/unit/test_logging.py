"""Unit tests for logging helpers and parser log events."""

import os
import subprocess
import sys
from pathlib import Path

import pytest
import structlog
from structlog.testing import capture_logs

from cluster_uri import PortOutOfRange, parse
from cluster_uri.logging import configure_logging, get_logger, is_configured, reset_logging


class TestConfigureLogging:
    """Tests for structlog configuration."""

    def test_configures_once(self):
        assert not is_configured()
        configure_logging("DEBUG", json_output=False, cache_loggers=False)
        assert is_configured()
        configure_logging("INFO", json_output=True, cache_loggers=False)
        renderer = structlog.get_config()["processors"][-1]
        assert isinstance(renderer, structlog.dev.ConsoleRenderer)

    def test_json_renderer(self):
        configure_logging(cache_loggers=False)
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_reset(self):
        configure_logging(cache_loggers=False)
        reset_logging()
        assert not is_configured()

    def test_get_logger(self):
        assert get_logger("cluster_uri.test") is not None
        assert get_logger() is not None


class TestParserEvents:
    """The parser reports outcomes at debug level."""

    def test_success_event(self):
        with capture_logs() as logs:
            parse("redis://h1:1,h2:2")
        assert logs == [
            {"event": "uri_parsed", "log_level": "debug", "scheme": "redis", "host_count": 2}
        ]

    def test_failure_event(self):
        with capture_logs() as logs:
            with pytest.raises(PortOutOfRange):
                parse("http://host:99999/")
        assert len(logs) == 1
        assert logs[0]["event"] == "uri_parse_failed"
        assert logs[0]["kind"] == "port_out_of_range"
        assert logs[0]["log_level"] == "debug"

    def test_unconfigured_parse_is_silent(self):
        """Without logging configured, parsing writes nothing to stdout or stderr."""
        root = Path(__file__).resolve().parents[2]
        env = dict(os.environ, PYTHONPATH=str(root))
        result = subprocess.run(
            [
                sys.executable,
                "-c",
                "from cluster_uri import parse; parse('redis://h1:1,h2:2')\n"
                "try:\n"
                "    parse('http://host:99999/')\n"
                "except ValueError:\n"
                "    pass\n",
            ],
            capture_output=True,
            text=True,
            env=env,
            check=True,
        )
        assert result.stdout == ""
        assert result.stderr == ""

    def test_debug_events_reach_stdlib_logger(self, caplog):
        caplog.set_level("DEBUG", logger="cluster_uri.parser")
        parse("redis://h1:1")
        assert any("uri_parsed" in record.getMessage() for record in caplog.records)
