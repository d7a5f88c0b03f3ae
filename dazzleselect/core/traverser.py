"""Tree walking strategies for DazzleSelect.

Two kinds of walk are needed:

- Cascade traversers walk a Value subtree (paired with its Schema node) so
  the engine can force one state onto every descendant. They are explicit
  stack/queue loops so very deep or wide trees never hit the recursion limit,
  and their visiting order is a fixed, testable contract.
- iter_options walks Schema and Value in lockstep, Schema-driven, and yields
  one row per visible option for renderers and collectors.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Iterator, List, NamedTuple, Optional, Tuple

from .node import OptionState, Schema, SchemaNode, Value, ValueNode


class VisitedNode(NamedTuple):
    """One node reached by a cascade traverser.

    key and parent are None for the traversal root. schema_node is None for
    Value keys the Schema does not declare.
    """
    key: Optional[str]
    depth: int
    value_node: ValueNode
    schema_node: Optional[SchemaNode]
    parent: Optional["VisitedNode"]

    @property
    def path(self) -> Tuple[str, ...]:
        """Keys from the traversal root to this node; () for the root."""
        keys = []
        visit = self
        while visit.parent is not None:
            keys.append(visit.key)
            visit = visit.parent
        return tuple(reversed(keys))


class OptionRow(NamedTuple):
    """One visible option, as handed to a render callback."""
    key: str
    path: Tuple[str, ...]
    depth: int
    label: str
    state: OptionState
    is_leaf: bool


class CascadeTraverser(ABC):
    """Abstract base class for cascade traversal strategies.

    Subclasses only decide the visiting order. Which nodes get visited is
    the same for every strategy: a node's children are explored only when
    both the Value node and its Schema node declare children. A node where
    the two trees disagree is treated as a leaf.
    """

    name = "custom"

    @abstractmethod
    def traverse(self,
                 root: ValueNode,
                 schema_root: Optional[SchemaNode]) -> Iterator[VisitedNode]:
        """Walk the subtree under root, root included.

        Args:
            root: Value node to start from
            schema_root: Matching schema node

        Yields:
            VisitedNode for every node, parents always before their children
        """
        pass

    @staticmethod
    def descends(value_node: ValueNode, schema_node: Optional[SchemaNode]) -> bool:
        """Check whether the children of this pair should be explored."""
        return (
            value_node.children is not None
            and schema_node is not None
            and schema_node.children is not None
        )

    def _children_of(self, visit: VisitedNode) -> List[VisitedNode]:
        if not self.descends(visit.value_node, visit.schema_node):
            return []
        schema_children = visit.schema_node.children
        return [
            VisitedNode(key, visit.depth + 1, child, schema_children.get(key), visit)
            for key, child in visit.value_node.children.items()
        ]


class DepthFirstPreOrderTraverser(CascadeTraverser):
    """Depth-first pre-order traversal using an explicit stack.

    Visits a parent, then its whole first subtree, then the next sibling.
    """

    name = "dfs_pre"

    def traverse(self,
                 root: ValueNode,
                 schema_root: Optional[SchemaNode]) -> Iterator[VisitedNode]:
        stack: List[VisitedNode] = [VisitedNode(None, 0, root, schema_root, None)]

        while stack:
            visit = stack.pop()
            yield visit

            # Reversed so the first child is popped first
            stack.extend(reversed(self._children_of(visit)))


class BreadthFirstTraverser(CascadeTraverser):
    """Breadth-first traversal using an explicit queue.

    Visits every node at depth N before any node at depth N+1.
    """

    name = "bfs"

    def traverse(self,
                 root: ValueNode,
                 schema_root: Optional[SchemaNode]) -> Iterator[VisitedNode]:
        queue: Deque[VisitedNode] = deque([VisitedNode(None, 0, root, schema_root, None)])

        while queue:
            visit = queue.popleft()
            yield visit
            queue.extend(self._children_of(visit))


def create_traverser(strategy: str) -> CascadeTraverser:
    """Create a cascade traverser by strategy name.

    Args:
        strategy: Name of traversal strategy (dfs_pre, bfs and long forms)

    Returns:
        CascadeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    strategies = {
        'dfs_pre': DepthFirstPreOrderTraverser,
        'depth_first_pre': DepthFirstPreOrderTraverser,
        'bfs': BreadthFirstTraverser,
        'breadth_first': BreadthFirstTraverser,
    }

    strategy_lower = strategy.lower()
    if strategy_lower not in strategies:
        raise ValueError(
            f"Unknown cascade strategy: {strategy}. "
            f"Choose from: {', '.join(strategies.keys())}"
        )

    return strategies[strategy_lower]()


def iter_options(schema: Schema,
                 value: Value,
                 max_depth: Optional[int] = None) -> Iterator[OptionRow]:
    """Walk Schema and Value in lockstep, in render order.

    The walk is Schema-driven: keys are taken from the Schema in insertion
    order. A key missing from the Value is skipped together with its
    subtree. A row is a leaf unless both trees declare children and the
    Schema's children are non-empty.

    Args:
        schema: Option schema
        value: Value tree built from the schema
        max_depth: Deepest level to yield (0 = top-level options only)

    Yields:
        OptionRow for every visible option, parents before children
    """
    stack: List[Tuple[str, SchemaNode, ValueNode, Tuple[str, ...], int]] = []

    def push_level(schema_children: Schema, value_children: Value,
                   parent_path: Tuple[str, ...], depth: int) -> None:
        level = [
            (key, schema_node, value_children[key], parent_path + (key,), depth)
            for key, schema_node in schema_children.items()
            if key in value_children
        ]
        stack.extend(reversed(level))

    push_level(schema, value, (), 0)

    while stack:
        key, schema_node, value_node, path, depth = stack.pop()

        paired = schema_node.children is not None and value_node.children is not None
        is_leaf = not (paired and len(schema_node.children) > 0)

        yield OptionRow(key, path, depth, schema_node.label, value_node.state, is_leaf)

        if paired and (max_depth is None or depth < max_depth):
            push_level(schema_node.children, value_node.children, path, depth + 1)
