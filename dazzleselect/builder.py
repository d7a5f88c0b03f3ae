"""Value tree construction for DazzleSelect."""

from typing import List, Tuple

from .core.node import OptionState, Schema, Value, ValueNode


def build_default(schema: Schema, state: OptionState = OptionState.UNSELECTED) -> Value:
    """Build a Value tree mirroring schema with every node in one state.

    Nodes whose schema declares children (even an empty mapping) get a
    children dict; schema leaves get children=None. The schema is never
    modified, and each call returns a brand new tree.

    Args:
        schema: Option schema
        state: State for every node (SELECTED or UNSELECTED)

    Returns:
        New Value tree

    Raises:
        ValueError: If state is INDETERMINATE, which leaves can never hold
    """
    if state is OptionState.INDETERMINATE:
        raise ValueError("Cannot build a value tree in the INDETERMINATE state")

    root: Value = {}
    pending: List[Tuple[Schema, Value]] = [(schema, root)]

    while pending:
        schema_children, value_children = pending.pop()
        for key, schema_node in schema_children.items():
            if schema_node.children is None:
                value_children[key] = ValueNode(state)
                continue
            node = ValueNode(state, {})
            value_children[key] = node
            pending.append((schema_node.children, node.children))

    return root


def select_all(schema: Schema) -> Value:
    """Build a Value tree with every option selected."""
    return build_default(schema, OptionState.SELECTED)


def clear_all(schema: Schema) -> Value:
    """Build a Value tree with every option unselected."""
    return build_default(schema, OptionState.UNSELECTED)
