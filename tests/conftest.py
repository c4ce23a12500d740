"""
Pytest configuration and shared fixtures for exprcalc tests.
"""

import logging

import pytest

from exprcalc.config import EvaluatorConfig


@pytest.fixture
def tight_config():
    """Fixture providing a config with a short length limit."""
    return EvaluatorConfig(max_length=10)


@pytest.fixture
def debug_logs(caplog):
    """Fixture capturing DEBUG records emitted by the evaluator."""
    caplog.set_level(logging.DEBUG, logger="exprcalc")
    return caplog


@pytest.fixture
def eur_field():
    """Fixture providing field formatting options for a European locale."""
    return {
        'prefix': '',
        'suffix': ' €',
        'group_separator': '.',
        'decimal_separator': ',',
    }


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests that test individual components"
    )
    config.addinivalue_line(
        "markers", "guard: Input guard tests (length, characters, finiteness)"
    )
    config.addinivalue_line(
        "markers", "cli: Command-line interface tests"
    )


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on test names/paths."""
    for item in items:
        nodeid = item.nodeid.lower()
        if "guard" in nodeid:
            item.add_marker(pytest.mark.guard)
        if "cli" in nodeid:
            item.add_marker(pytest.mark.cli)
        if "lexer" in nodeid or "parser" in nodeid:
            item.add_marker(pytest.mark.unit)
