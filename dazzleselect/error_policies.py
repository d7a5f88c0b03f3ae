"""
Error handling policies for DazzleSelect.

A toggle addressed at a path that does not resolve in both the Schema and
the Value never mutates anything. What happens next is decided by a pluggable
policy: the default keeps the historical silent no-op, stricter policies
raise or record the failure.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence

from .core.node import Value

logger = logging.getLogger(__name__)


class SelectionError(Exception):
    """Base class for all DazzleSelect errors."""
    pass


class PathNotFoundError(SelectionError):
    """Raised when a path does not resolve in both the Schema and the Value.

    Attributes:
        path: The full path that was requested
        key: The key that failed to resolve (None for an empty path)
        depth: Index of the failing key within path
        reason: Short machine-friendly reason
    """

    def __init__(self, path: Sequence[str], key: Optional[str], depth: int, reason: str):
        self.path = tuple(path)
        self.key = key
        self.depth = depth
        self.reason = reason
        if key is None:
            message = f"Cannot resolve path {list(self.path)!r}: {reason}"
        else:
            message = (
                f"Cannot resolve path {list(self.path)!r}: "
                f"key {key!r} at depth {depth} {reason}"
            )
        super().__init__(message)


class InvalidPathPolicy(ABC):
    """
    Base class for invalid path policies.

    Subclasses decide what a toggle returns when its path cannot be
    resolved.
    """

    @abstractmethod
    def handle(self, error: PathNotFoundError, value: Value) -> Value:
        """
        Handle a path that failed to resolve.

        Args:
            error: Description of the failure
            value: The untouched input Value

        Returns:
            The Value the toggle should return, or raises to abort.
        """
        pass


class IgnoreInvalidPathPolicy(InvalidPathPolicy):
    """
    Policy that silently returns the input Value unchanged.

    This is the default. UI callers wire every row's press handler straight
    to toggle and rely on a stale or malformed path being a no-op.
    """

    def handle(self, error: PathNotFoundError, value: Value) -> Value:
        logger.debug("Ignoring toggle on unresolvable path: %s", error)
        return value


class FailFastPolicy(InvalidPathPolicy):
    """
    Policy that immediately re-raises the error.

    Useful in tests and tooling where a bad path is a programming error.
    """

    def handle(self, error: PathNotFoundError, value: Value) -> Value:
        raise error


class CollectErrorsPolicy(InvalidPathPolicy):
    """
    Policy that records every failure and returns the input unchanged.

    Useful for auditing which paths a caller sends that the tree does not
    know about, without changing the no-op behaviour.
    """

    def __init__(self, verbose: bool = False):
        """
        Initialize the policy.

        Args:
            verbose: If True, log a warning for each recorded failure
        """
        self.errors: List[Dict[str, Any]] = []
        self.verbose = verbose

    def handle(self, error: PathNotFoundError, value: Value) -> Value:
        self.errors.append({
            'path': error.path,
            'key': error.key,
            'depth': error.depth,
            'reason': error.reason,
            'error': error,
        })

        if self.verbose:
            logger.warning("Skipping toggle: %s", error)

        return value

    def get_statistics(self) -> Dict[str, Any]:
        """
        Get statistics about recorded failures.

        Returns:
            Dictionary with total count, counts per reason and the records
        """
        by_reason: Dict[str, int] = {}
        for record in self.errors:
            by_reason[record['reason']] = by_reason.get(record['reason'], 0) + 1

        return {
            'total_errors': len(self.errors),
            'by_reason': by_reason,
            'errors': self.errors,
        }

    def clear(self) -> None:
        """Forget all recorded failures."""
        self.errors.clear()
