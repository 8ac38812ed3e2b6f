"""Pytest configuration and shared fixtures for the mdexport test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import logging
from typing import Any

import pytest

from mdexport.logging_utils import PACKAGE_LOGGER, remove_cli_handlers

# Configure Hypothesis for property-based testing
try:
    from hypothesis import Phase, Verbosity, settings

    # Register custom Hypothesis profiles
    settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=20)
    settings.register_profile(
        "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
    )

    # Load profile from environment or use default
    import os

    profile = os.getenv("HYPOTHESIS_PROFILE", "dev")
    settings.load_profile(profile)
except ImportError:
    # Hypothesis not installed, skip configuration
    pass


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def sample_html() -> str:
    """Provide a rendered wiki note as HTML.

    Returns
    -------
    str
        Markup with a heading, formatted paragraph, internal link and list.

    """
    return (
        "<h1>Weekly Review</h1>"
        "<p>Talked to <strong>Alice</strong> about <a href='#Project%20Atlas'>Project Atlas</a>.</p>"
        "<ol><li>Ship the beta</li><li>Plan the retro</li></ol>"
    )


@pytest.fixture
def sample_metadata() -> dict[str, Any]:
    """Provide document fields for front matter tests.

    Returns
    -------
    dict
        Fields as the wiki stores them.

    """
    return {
        "title": "Weekly Review",
        "tags": ["Meeting", "2024", "team sync"],
        "modified": "20240131120000000",
        "priority": 2,
    }


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo the handlers and level configure_logging sets during a test."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    level = logger.level
    yield
    remove_cli_handlers(logger)
    logger.setLevel(level)
