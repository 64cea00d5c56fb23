"""Tests for structured logging helpers."""

import logging
import subprocess
import sys
import textwrap
from pathlib import Path

import pytest
import structlog
from structlog.testing import capture_logs

from ibanspec.core.specification import Specification
from ibanspec.exceptions import InvalidBBANError
from ibanspec.utils.logging import (
    LogPerformance,
    add_app_context,
    configure_logging,
    get_logger,
    mask_account_numbers,
)

pytestmark = pytest.mark.unit


class TestMaskAccountNumbers:
    def test_masks_iban_in_any_string_field(self):
        event = {"event": "iban_generated", "iban": "GB82WEST12345698765432"}

        masked = mask_account_numbers(None, "info", event)

        assert masked["iban"] == "GB82**************5432"
        assert masked["event"] == "iban_generated"

    def test_masks_inside_free_text(self):
        event = {"event": "Transfer to DE89370400440532013000 received"}

        masked = mask_account_numbers(None, "info", event)

        assert masked["event"] == "Transfer to DE89**************3000 received"

    def test_leaves_other_values_alone(self):
        event = {"event": "x", "count": 3, "code": "GB", "short": "GB82WEST"}

        assert mask_account_numbers(None, "info", dict(event)) == event


def test_app_context_added():
    from ibanspec import __version__

    event = add_app_context(None, "info", {"event": "x"})

    assert event["app"] == "ibanspec"
    assert event["version"] == __version__


def test_get_logger_returns_bound_logger():
    logger = get_logger("ibanspec.test")
    assert hasattr(logger, "info")


class TestLibraryEvents:
    def test_rejected_bban_is_logged(self):
        spec = Specification("GB", 22, "4!a6!n8!n", "GB29NWBK60161331926819")

        with capture_logs() as logs:
            with pytest.raises(InvalidBBANError):
                spec.from_bban("WEST")

        rejected = [entry for entry in logs if entry["event"] == "bban_rejected"]
        assert rejected
        assert rejected[0]["log_level"] == "warning"
        assert rejected[0]["country_code"] == "GB"
        assert rejected[0]["bban_length"] == 4

    def test_structure_compilation_is_logged_once(self):
        spec = Specification("NL", 18, "4!a10!n", "NL91ABNA0417164300")

        with capture_logs() as logs:
            spec.is_valid(spec.example)
            spec.is_valid(spec.example)

        compiled = [entry for entry in logs if entry["event"] == "structure_compiled"]
        assert len(compiled) == 1
        assert compiled[0]["structure"] == "4!a10!n"

    def test_malformed_structure_is_logged(self):
        spec = Specification("XX", 8, "4!q", "")

        with capture_logs() as logs:
            assert spec.is_valid("XX000000") is False

        malformed = [entry for entry in logs if entry["event"] == "structure_malformed"]
        assert malformed
        assert malformed[0]["log_level"] == "error"
        assert malformed[0]["country_code"] == "XX"


class TestLogPerformance:
    def test_success(self):
        logger = structlog.get_logger("perf")

        with capture_logs() as logs:
            with LogPerformance("batch_validation", logger):
                pass

        completed = [entry for entry in logs if entry["event"] == "batch_validation_completed"]
        assert completed
        assert completed[0]["duration_ms"] >= 0

    def test_failure(self):
        logger = structlog.get_logger("perf")

        with capture_logs() as logs:
            with pytest.raises(ValueError):
                with LogPerformance("batch_validation", logger):
                    raise ValueError("boom")

        failed = [entry for entry in logs if entry["event"] == "batch_validation_failed"]
        assert failed
        assert failed[0]["error_type"] == "ValueError"


class TestConfigureLogging:
    def test_json_renderer(self):
        configure_logging(json_logs=True, cache_loggers=False)

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
        assert mask_account_numbers in processors

    def test_key_value_renderer(self):
        configure_logging(dev_mode=False, cache_loggers=False)

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.KeyValueRenderer)

    def test_sets_root_level(self):
        configure_logging(log_level="debug", cache_loggers=False)

        assert logging.getLogger().level == logging.DEBUG


HOST_APPLICATION = textwrap.dedent(
    """
    import logging

    import structlog

    logging.getLogger().setLevel(logging.DEBUG)
    structlog.configure(processors=[structlog.processors.JSONRenderer()])

    import ibanspec
    import ibanspec.cli.main

    ibanspec.from_bban("GB", "WEST12345698765432")

    root = logging.getLogger()
    assert root.level == logging.DEBUG, logging.getLevelName(root.level)
    assert root.handlers == [], root.handlers
    last = structlog.get_config()["processors"][-1]
    assert isinstance(last, structlog.processors.JSONRenderer), last
    """
)


def test_import_leaves_host_logging_untouched():
    result = subprocess.run(
        [sys.executable, "-c", HOST_APPLICATION],
        capture_output=True,
        text=True,
        cwd=Path(__file__).resolve().parents[2],
        check=False,
    )

    assert result.returncode == 0, result.stderr
