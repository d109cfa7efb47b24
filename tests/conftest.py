# tests/conftest.py
# This file is part of Simple Predicates - Boolean Predicate Expressions
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for the predicate library tests.

This module provides pytest configuration, fixtures, and utilities shared by
all test modules. It ensures proper module path setup and restores the
process-wide settings that individual tests change.

The configuration handles:
- Python path setup for module and helper imports
- Test environment verification
- Common fixtures for variables and contexts
- Isolation of the global conversion config and log level
"""

import io
import logging
import sys
import pytest
from pathlib import Path

# Ensure project modules and test helpers can be imported
project_root = Path(__file__).parent.parent
tests_root = Path(__file__).parent
for path in (project_root, tests_root):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from sample_variables import Item  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Verify that the library packages are importable.

    Automatically runs before any tests and skips the entire session if the
    project packages cannot be imported.

    Yields:
        None: Control to test execution
    """
    try:
        import predicates
        import normal_form
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


@pytest.fixture(autouse=True)
def restore_global_settings():
    """Restore the default conversion config and log level after each test."""
    from normal_form.config import get_config, set_config
    from utils.logger import get_logger

    config = get_config()
    level = get_logger().level
    yield
    set_config(config)
    get_logger().set_level(level)


@pytest.fixture
def log_stream():
    """Capture library log output in memory.

    Yields:
        io.StringIO: Stream receiving formatted log records
    """
    from utils.logger import PredicatesFormatter, get_logger

    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(PredicatesFormatter())

    logger = get_logger().logger
    logger.addHandler(handler)
    yield stream
    logger.removeHandler(handler)


@pytest.fixture
def items():
    """Provide the reference membership context.

    Returns:
        FrozenSet[int]: Integers considered present
    """
    return frozenset({1, 2, 4, 7, 9, 10})


@pytest.fixture
def item():
    """Provide the integer-membership variable type.

    Returns:
        type: Item class, call it with an integer to build a variable
    """
    return Item
