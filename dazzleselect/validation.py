"""Consistency checks for Schema/Value pairs.

The engine trusts that a Value was built from its Schema and never
re-validates it on the hot path. These helpers are for tests and debug
builds: they walk both trees and report every broken invariant.
"""

from typing import List, Tuple

from .core.node import OptionState, Schema, Value, aggregate_state
from .error_policies import SelectionError


class ConsistencyError(SelectionError):
    """Raised by assert_consistent when a Value breaks an invariant.

    Attributes:
        problems: Every problem found
    """

    def __init__(self, problems: List[str]):
        self.problems = problems
        super().__init__(
            f"{len(problems)} consistency problem(s): {'; '.join(problems)}"
        )


def _fmt(path: Tuple[str, ...]) -> str:
    return "/".join(path)


def check_consistency(schema: Schema, value: Value) -> List[str]:
    """Report structural mismatches and state invariant violations.

    Checks, for every node:
    - the key exists in both trees
    - Schema and Value agree on whether the node has children
    - a leaf never holds INDETERMINATE
    - an internal node's state matches the aggregate of its direct children

    Args:
        schema: Option schema
        value: Value tree to check

    Returns:
        List of problem descriptions (empty if consistent)
    """
    problems: List[str] = []
    pending: List[Tuple[Schema, Value, Tuple[str, ...]]] = [
        (schema, value, ())
    ]

    while pending:
        schema_children, value_children, parent = pending.pop()

        for key in schema_children:
            if key not in value_children:
                problems.append(f"{_fmt(parent + (key,))}: missing from value")
        for key in value_children:
            if key not in schema_children:
                problems.append(f"{_fmt(parent + (key,))}: not declared in schema")

        for key, schema_node in schema_children.items():
            value_node = value_children.get(key)
            if value_node is None:
                continue
            path = parent + (key,)

            if (schema_node.children is None) != (value_node.children is None):
                problems.append(f"{_fmt(path)}: schema and value disagree on children")
                continue

            if value_node.is_leaf():
                if value_node.state is OptionState.INDETERMINATE:
                    problems.append(f"{_fmt(path)}: leaf is INDETERMINATE")
                continue

            expected = aggregate_state(value_node.children)
            if expected is not None and value_node.state is not expected:
                problems.append(
                    f"{_fmt(path)}: state is {value_node.state.name}, "
                    f"children aggregate to {expected.name}"
                )
            pending.append((schema_node.children, value_node.children, path))

    return problems


def assert_consistent(schema: Schema, value: Value) -> None:
    """Raise ConsistencyError if check_consistency finds any problem."""
    problems = check_consistency(schema, value)
    if problems:
        raise ConsistencyError(problems)
