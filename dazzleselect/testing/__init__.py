"""Testing utilities for DazzleSelect consumers."""

from .fixtures import SelectionTestHelper

__all__ = ['SelectionTestHelper']
