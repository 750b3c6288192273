"""
Unit tests for structlog configuration and renderers.
"""

import json

import pytest
import structlog

from artifact_store.infrastructure.logging import logging_config


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    logging_config.clear_context()
    structlog.reset_defaults()


@pytest.mark.unit
class TestHumanReadableRenderer:

    def test_renders_fields_in_order(self):
        line = logging_config.human_readable_renderer(
            None,
            "info",
            {
                "timestamp": "2025-01-14 10:30:45",
                "level": "info",
                "logger": "artifact_store.rest",
                "event": "Version uploaded",
                "version": "1.0.0",
                "project": "acme",
            },
        )
        assert line == (
            "[2025-01-14 10:30:45] [INFO] [artifact_store.rest] Version uploaded project=acme version=1.0.0"
        )

    def test_appends_exception(self):
        line = logging_config.human_readable_renderer(
            None, "error", {"event": "boom", "level": "error", "exception": "Traceback ..."}
        )
        assert line.endswith("boom\nTraceback ...")

    def test_add_color_wraps_level(self):
        event = logging_config.add_color(None, "warning", {"level": "warning"})
        assert event["level"] == "\033[33mWARNING\033[0m"


@pytest.mark.unit
class TestConfigureLogging:

    def test_json_output(self, capsys):
        logging_config.configure_logging("INFO", "json")
        logging_config.bind_context(request_id="r-1")
        logging_config.get_logger("artifact_store.test").info("Version uploaded", project="acme")

        record = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert record["event"] == "Version uploaded"
        assert record["project"] == "acme"
        assert record["request_id"] == "r-1"
        assert record["level"] == "info"

    def test_level_filters_debug(self, capsys):
        logging_config.configure_logging("WARNING", "text")
        logging_config.get_logger("artifact_store.test").info("quiet")
        assert "quiet" not in capsys.readouterr().out

    def test_text_output_keeps_color_codes_intact(self, capsys):
        logging_config.configure_logging("INFO", "text")
        logging_config.get_logger("artifact_store.test").info("Version uploaded", project="acme")

        line = capsys.readouterr().out.strip().splitlines()[-1]
        assert "[\033[32mINFO\033[0m]" in line
        assert "[artifact_store.test] Version uploaded project=acme" in line
        assert "\033[32M" not in line
        assert "\033[0M" not in line
