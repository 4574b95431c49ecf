"""Shared test fixtures."""

from __future__ import annotations

import logging

import pytest
import structlog

from objtasks.selector.builder import Selector, css_selector_builder


@pytest.fixture()
def builder() -> Selector:
    """The shared, empty selector entry point."""
    return css_selector_builder


@pytest.fixture(autouse=True)
def _reset_logging():
    """Drop handlers bound to per-test streams."""
    yield
    package_logger = logging.getLogger("objtasks")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
    structlog.reset_defaults()
