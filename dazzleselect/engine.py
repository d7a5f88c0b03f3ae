"""Selection engine for DazzleSelect.

toggle() is the one state transition a user can trigger. It flips the node
addressed by a path, forces the new state onto the whole subtree under it
(cascade) and recomputes every ancestor from its direct children
(aggregate).

Updates are copy-on-write: the nodes along the path and the toggled subtree
are rebuilt, untouched sibling branches are shared with the input, and the
input Value is never mutated. Every successful toggle returns a new root
dict, so reference-equality change detection in a UI layer always fires.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from .config import SelectionConfig
from .core.node import (
    OptionState,
    Path,
    Schema,
    SchemaNode,
    Value,
    ValueNode,
    aggregate_state,
)
from .core.traverser import CascadeTraverser, VisitedNode
from .error_policies import PathNotFoundError
from .validation import assert_consistent

logger = logging.getLogger(__name__)


@dataclass
class ToggleResult:
    """Outcome of try_toggle.

    Attributes:
        value: The new Value on success, the untouched input on failure
        error: Why the path did not resolve, or None on success
    """
    value: Value
    error: Optional[PathNotFoundError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _resolve(schema: Schema,
             value: Value,
             path: Path) -> Tuple[List[SchemaNode], List[ValueNode]]:
    """Walk path through both trees, root first.

    Raises:
        PathNotFoundError: On the first key that does not resolve in both
    """
    if len(path) == 0:
        raise PathNotFoundError(path, None, 0, "path is empty")

    schema_chain: List[SchemaNode] = []
    value_chain: List[ValueNode] = []
    schema_children: Optional[Schema] = schema
    value_children: Optional[Value] = value

    for depth, key in enumerate(path):
        if schema_children is None or value_children is None:
            raise PathNotFoundError(path, key, depth, "is below a node without children")
        if key not in schema_children:
            raise PathNotFoundError(path, key, depth, "is not declared in schema")
        if key not in value_children:
            raise PathNotFoundError(path, key, depth, "is missing from value")

        schema_node = schema_children[key]
        value_node = value_children[key]
        schema_chain.append(schema_node)
        value_chain.append(value_node)
        schema_children = schema_node.children
        value_children = value_node.children

    return schema_chain, value_chain


def resolve_path(schema: Schema, value: Value, path: Path) -> List[ValueNode]:
    """Return the ValueNodes along path, root first; the last is the target.

    Args:
        schema: Option schema
        value: Value tree
        path: Keys from the root to the target node

    Returns:
        List of ValueNodes, one per key in path

    Raises:
        PathNotFoundError: If any key is missing from the Schema or the Value
    """
    return _resolve(schema, value, path)[1]


def get_state(value: Value, path: Path) -> Optional[OptionState]:
    """Read the state of the node at path, or None if it does not exist."""
    children: Optional[Value] = value
    node = None
    for key in path:
        if not children or key not in children:
            return None
        node = children[key]
        children = node.children
    return node.state if node is not None else None


def flipped(state: OptionState) -> OptionState:
    """State a node takes when it is toggled.

    SELECTED becomes UNSELECTED; UNSELECTED and INDETERMINATE both become
    SELECTED, so toggling a partially selected branch selects all of it.
    """
    if state is OptionState.SELECTED:
        return OptionState.UNSELECTED
    return OptionState.SELECTED


def _cascade(target: ValueNode,
             schema_node: SchemaNode,
             state: OptionState,
             traverser: CascadeTraverser) -> ValueNode:
    """Rebuild the subtree under target with every node set to state.

    Parents are always visited before their children, so each rebuilt child
    can be attached to its already rebuilt parent. Nodes the traverser does
    not descend into keep their existing children.
    """
    # Keyed by id() of the visit; the visit is stored too so it stays alive
    rebuilt: Dict[int, Tuple[VisitedNode, ValueNode]] = {}
    root: Optional[ValueNode] = None

    for visit in traverser.traverse(target, schema_node):
        old = visit.value_node
        if traverser.descends(old, visit.schema_node):
            children: Optional[Value] = {}
        else:
            children = dict(old.children) if old.children is not None else None

        node = ValueNode(state, children)
        rebuilt[id(visit)] = (visit, node)
        if visit.parent is None:
            root = node
        else:
            rebuilt[id(visit.parent)][1].children[visit.key] = node

    return root


def _apply(schema: Schema,
           value: Value,
           path: Path,
           schema_chain: List[SchemaNode],
           value_chain: List[ValueNode],
           config: SelectionConfig) -> Value:
    target = value_chain[-1]
    new_state = flipped(target.state)
    node = _cascade(target, schema_chain[-1], new_state, config.create_traverser())

    # Closest parent first, up to the root
    for depth in range(len(path) - 2, -1, -1):
        ancestor = value_chain[depth].copy()
        ancestor.children[path[depth + 1]] = node
        aggregated = aggregate_state(ancestor.children)
        if aggregated is not None:
            ancestor.state = aggregated
        node = ancestor

    new_value = dict(value)
    new_value[path[0]] = node

    logger.debug("Toggled %s to %s", "/".join(path), new_state.name)

    if config.check_consistency:
        assert_consistent(schema, new_value)

    return new_value


def toggle(schema: Schema,
           value: Value,
           path: Path,
           config: Optional[SelectionConfig] = None) -> Value:
    """Toggle the node at path and return the updated Value tree.

    Steps:
    1. Flip the target (INDETERMINATE counts as not selected).
    2. Force the new state onto every descendant.
    3. Recompute each ancestor from its direct children, closest first.
       An ancestor with no children keeps its state.

    If path does not resolve in both trees nothing is modified and the
    configured error policy decides the result. By default the input Value
    is returned unchanged.

    Args:
        schema: Option schema
        value: Current Value tree (not modified)
        path: Keys from the root to the node to toggle
        config: Engine configuration (defaults to SelectionConfig())

    Returns:
        New Value tree, or the policy's result for an unresolvable path

    Example:
        >>> value = build_default(schema)
        >>> value = toggle(schema, value, ["class", "mammals"])
        >>> value["class"].state
        <OptionState.INDETERMINATE: 'indeterminate'>
    """
    config = (config or SelectionConfig()).ensure_valid()

    try:
        schema_chain, value_chain = _resolve(schema, value, path)
    except PathNotFoundError as error:
        return config.get_policy().handle(error, value)

    return _apply(schema, value, path, schema_chain, value_chain, config)


def try_toggle(schema: Schema,
               value: Value,
               path: Path,
               config: Optional[SelectionConfig] = None) -> ToggleResult:
    """Like toggle(), but report an unresolvable path instead of hiding it.

    The configured error policy is bypassed; the failure is returned in the
    result and never raised.

    Returns:
        ToggleResult whose ok flag tells success from PathNotFound
    """
    config = (config or SelectionConfig()).ensure_valid()

    try:
        schema_chain, value_chain = _resolve(schema, value, path)
    except PathNotFoundError as error:
        logger.debug("try_toggle could not resolve path: %s", error)
        return ToggleResult(value, error)

    return ToggleResult(_apply(schema, value, path, schema_chain, value_chain, config))
