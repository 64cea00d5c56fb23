"""
Pytest configuration and global fixtures.

This module provides shared fixtures used across all tests.
"""

import logging
import os
from collections.abc import Generator
from functools import partial

import pytest
import structlog

from ibanspec.cli import main as cli_main
from ibanspec.core.specification import Specification
from ibanspec.registry import CountryRegistry
from ibanspec.utils import config
from ibanspec.utils.logging import configure_logging


@pytest.fixture
def gb_spec() -> Specification:
    """Registry specification for the United Kingdom (4!a6!n8!n)."""
    return CountryRegistry.require("GB")


@pytest.fixture
def fresh_gb_spec() -> Specification:
    """Unshared GB specification whose matcher has not been compiled yet."""
    return Specification("GB", 22, "4!a6!n8!n", "GB29NWBK60161331926819")


@pytest.fixture(autouse=True)
def reset_settings(monkeypatch) -> Generator[None, None, None]:
    """Isolate tests from IBANSPEC_* variables and the settings singleton."""
    for key in list(os.environ):
        if key.startswith("IBANSPEC_"):
            monkeypatch.delenv(key)
    config._settings = None
    yield
    config._settings = None


@pytest.fixture(autouse=True)
def reset_logging(monkeypatch) -> Generator[None, None, None]:
    """Undo the logging setup a CLI invocation performs.

    CLI runs configure structlog without logger caching, so module loggers
    always pick up the current configuration (including ``capture_logs``).
    """
    root = logging.getLogger()
    level = root.level
    monkeypatch.setattr(
        cli_main, "configure_logging", partial(configure_logging, cache_loggers=False)
    )
    yield
    structlog.reset_defaults()
    root.setLevel(level)
