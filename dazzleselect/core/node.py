"""Option tree data model for DazzleSelect.

Two parallel trees describe a selectable option hierarchy:

- The Schema is immutable. It holds the shape of the tree and the labels.
- The Value mirrors the Schema and holds the selection state of every node.

Both are plain ordered dictionaries keyed by option key, so insertion order
is render order and either tree can be walked with ordinary dict operations.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Sequence


class OptionState(Enum):
    """Selection state of one option.

    INDETERMINATE is never assigned by a toggle. It only appears on
    internal nodes whose direct children disagree.
    """
    SELECTED = "selected"
    UNSELECTED = "unselected"
    INDETERMINATE = "indeterminate"


@dataclass(frozen=True)
class SchemaNode:
    """Immutable description of one option: its label and optional children."""

    label: str
    children: Optional[Dict[str, "SchemaNode"]] = None

    def is_leaf(self) -> bool:
        """True if the schema declares no children (or an empty mapping)."""
        return not self.children


@dataclass
class ValueNode:
    """Selection state of one option, parallel to a SchemaNode."""

    state: OptionState = OptionState.UNSELECTED
    children: Optional[Dict[str, "ValueNode"]] = None

    def is_leaf(self) -> bool:
        return not self.children

    def copy(self, state: Optional[OptionState] = None) -> "ValueNode":
        """Shallow copy with a fresh children dict.

        The child nodes themselves are shared with the original.

        Args:
            state: Replacement state (defaults to the current one)

        Returns:
            New ValueNode
        """
        return ValueNode(
            state=self.state if state is None else state,
            children=dict(self.children) if self.children is not None else None,
        )


Schema = Dict[str, SchemaNode]
Value = Dict[str, ValueNode]
Path = Sequence[str]


def aggregate_state(children: Value) -> Optional[OptionState]:
    """Compute a parent's state from its direct children.

    Args:
        children: The parent's children mapping

    Returns:
        The children's common state if they all agree, INDETERMINATE if
        they differ, or None when there are no children
    """
    states = iter(child.state for child in children.values())
    first = next(states, None)
    if first is None:
        return None
    for state in states:
        if state is not first:
            return OptionState.INDETERMINATE
    return first
