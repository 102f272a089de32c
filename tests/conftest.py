"""Pytest configuration and shared fixtures for klaw-optional tests."""

from __future__ import annotations

import logging

import pytest
import structlog

from tests.models import Book, Person


@pytest.fixture(autouse=True)
def reset_globals():
    """Reset configuration, log hooks and logging around each test."""
    import klaw_optional._config as config_module
    from klaw_optional import clear_log_hooks

    config_module._config = None
    clear_log_hooks()
    yield
    config_module._config = None
    clear_log_hooks()
    structlog.reset_defaults()
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(logging.WARNING)


@pytest.fixture
def book_kind():
    """Kind accepting Book instances."""
    from klaw_optional import Kind

    return Kind.instance_of(Book)


@pytest.fixture
def person_kind():
    """Kind accepting Person instances."""
    from klaw_optional import Kind

    return Kind.instance_of(Person)


@pytest.fixture
def sample_present():
    """Sample present Optional for testing."""
    from klaw_optional import INT

    return INT.of(42)


@pytest.fixture
def sample_absent():
    """Sample empty Optional for testing."""
    from klaw_optional import INT

    return INT.of_empty()
