"""Shared fixtures for the DazzleSelect test suite."""

import pytest

from dazzleselect import build_default
from trees import nested_categories


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "slow: large-tree tests, skipped by run_tests.py unless --all"
    )


@pytest.fixture
def schema():
    return nested_categories()


@pytest.fixture
def value(schema):
    return build_default(schema)
