"""Unit tests for structured logging setup."""

import json

import structlog

from authz_config.core.config import Settings
from authz_config.core.logging import (
    LoggingContext,
    bind_validation_pass,
    clear_context,
    configure_logging,
    get_logger,
    rename_message_field,
)


def teardown_function():
    clear_context()
    structlog.reset_defaults()


def test_rename_message_field():
    event = rename_message_field(None, "info", {"event": "hello"})

    assert event == {"message": "hello"}


def test_json_output_includes_bound_context(capsys):
    configure_logging(Settings(environment="production", log_format="json"))
    bind_validation_pass("pass-1")

    with LoggingContext(document="cruise-config.xml"):
        get_logger("authz_config.test").info("Role validation passed", role_count=2)

    entry = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert entry["message"] == "Role validation passed"
    assert entry["role_count"] == 2
    assert entry["validation_pass"] == "pass-1"
    assert entry["document"] == "cruise-config.xml"
    assert entry["level"] == "info"
    assert "timestamp" in entry


def test_logging_context_unbinds_on_exit():
    with LoggingContext(document="a.xml"):
        assert structlog.contextvars.get_contextvars()["document"] == "a.xml"

    assert "document" not in structlog.contextvars.get_contextvars()


def test_level_filtering(capsys):
    configure_logging(Settings(environment="production", log_format="json", log_level="WARNING"))

    get_logger().info("hidden")

    assert capsys.readouterr().out == ""
