"""Shared pytest configuration and fixtures for all tests."""

import logging

import pytest

MARKERS = {
    "unit": "fast tests against recording driver doubles",
    "integration": "tests against an in-memory mongomock database",
    "query": "Query component",
    "mongo": "Mongo database wrapper",
    "logging": "logging helpers",
}


def pytest_configure(config):
    for name, description in MARKERS.items():
        config.addinivalue_line("markers", f"{name}: {description}")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


def minimal_config_dict() -> dict:
    """Smallest valid Mongo configuration."""
    return {"user": "peter", "password": "mysecretpassword", "db": "main"}


@pytest.fixture
def mongo_config_dict() -> dict:
    return minimal_config_dict()


@pytest.fixture(autouse=True)
def _propagate_package_logs():
    """Let caplog see mongoquery records regardless of configure_logging() calls."""
    package_logger = logging.getLogger("mongoquery")
    previous = package_logger.propagate
    package_logger.propagate = True
    yield
    package_logger.propagate = previous
