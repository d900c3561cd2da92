"""Pytest fixtures for framework tests."""
import pytest

from clicker import logging as clicker_logging


@pytest.fixture
def restore_logging():
    """Snapshot logging configuration and restore it after the test."""
    saved_default = clicker_logging._config['default_level']
    saved_modules = dict(clicker_logging._config['module_levels'])
    yield
    clicker_logging._config['default_level'] = saved_default
    clicker_logging._config['module_levels'] = saved_modules
