"""Configuration system for DazzleSelect.

This module defines how callers tune the selection engine: the state new
trees start in, the order cascades visit nodes in, what to do with a path
that does not resolve, and whether to re-check tree consistency after every
toggle.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from .core.node import OptionState
from .core.traverser import CascadeTraverser, create_traverser
from .error_policies import (
    SelectionError,
    InvalidPathPolicy,
    IgnoreInvalidPathPolicy,
    FailFastPolicy,
)


class ConfigurationError(SelectionError):
    """Raised when a SelectionConfig is not usable."""
    pass


class CascadeStrategy(Enum):
    """Order in which a cascade visits the toggled subtree.

    The resulting states are identical for every strategy; the order only
    matters for debugging and for custom traversal hooks.
    """
    DEPTH_FIRST_PRE = "dfs_pre"     # Parent, then each child subtree in turn
    BREADTH_FIRST = "bfs"           # Level by level


@dataclass
class SelectionConfig:
    """Complete configuration for the selection engine."""

    # State of every node in a freshly built tree
    default_state: OptionState = OptionState.UNSELECTED

    # Cascade traversal order
    cascade_strategy: CascadeStrategy = CascadeStrategy.DEPTH_FIRST_PRE

    # What a toggle on an unresolvable path does (None = silent no-op)
    error_policy: Optional[InvalidPathPolicy] = None

    # Re-validate the whole tree after every toggle (debug only, O(tree))
    check_consistency: bool = False

    @classmethod
    def strict(cls) -> 'SelectionConfig':
        """Create config that raises on unresolvable paths.

        Returns:
            SelectionConfig with a FailFastPolicy
        """
        return cls(error_policy=FailFastPolicy())

    @classmethod
    def debug(cls) -> 'SelectionConfig':
        """Create config for tests: fail fast and verify every result.

        Returns:
            SelectionConfig with a FailFastPolicy and consistency checks
        """
        return cls(error_policy=FailFastPolicy(), check_consistency=True)

    def get_policy(self) -> InvalidPathPolicy:
        """Return the configured policy, falling back to the silent default."""
        return self.error_policy or IgnoreInvalidPathPolicy()

    def create_traverser(self) -> CascadeTraverser:
        """Instantiate the traverser for the configured cascade strategy."""
        return create_traverser(self.cascade_strategy.value)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.default_state, OptionState):
            errors.append(f"default_state must be an OptionState, got {self.default_state!r}")
        elif self.default_state is OptionState.INDETERMINATE:
            errors.append("default_state cannot be INDETERMINATE")

        if not isinstance(self.cascade_strategy, CascadeStrategy):
            errors.append(f"cascade_strategy must be a CascadeStrategy, got {self.cascade_strategy!r}")

        if self.error_policy is not None and not isinstance(self.error_policy, InvalidPathPolicy):
            errors.append("error_policy must be an InvalidPathPolicy instance")

        return errors

    def ensure_valid(self) -> 'SelectionConfig':
        """Raise ConfigurationError if validate() reports problems.

        Returns:
            self, for chaining
        """
        errors = self.validate()
        if errors:
            raise ConfigurationError(f"Invalid configuration: {'; '.join(errors)}")
        return self
