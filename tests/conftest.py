"""Shared fixtures for formvalidator tests."""

import pytest

from formvalidator.validation.registry import reset_default_registry
from formvalidator.validation.settings import reset_default_settings


@pytest.fixture(autouse=True)
def reset_process_state():
    """Drop custom registrations and locale changes around each test."""
    reset_default_registry()
    reset_default_settings()
    yield
    reset_default_registry()
    reset_default_settings()
