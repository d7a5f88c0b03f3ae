"""Test fixtures for DazzleSelect consumers.

These helpers give test suites a stable, flat view of a Value tree so
assertions do not depend on how the nested dicts are laid out.
"""

from typing import Any, Dict, Optional, Tuple

from ..core.collector import StateCountCollector, run_collector
from ..core.node import OptionState, Path, Schema, Value
from ..validation import check_consistency


class SelectionTestHelper:
    """Public test fixture for selection verification.

    Example:
        helper = SelectionTestHelper(schema, value)
        assert helper.state_at("class/mammals") is OptionState.SELECTED
        assert helper.is_consistent()
    """

    def __init__(self, schema: Schema, value: Value):
        """Initialize with the Schema/Value pair under test.

        Args:
            schema: Option schema
            value: Value tree to inspect
        """
        self.schema = schema
        self.value = value

    def states_by_path(self) -> Dict[str, OptionState]:
        """Every node of the Value tree keyed by slash-joined path.

        Walks the Value only, so nodes the Schema does not declare are
        included too.
        """
        out: Dict[str, OptionState] = {}
        pending = [(self.value, ())]
        while pending:
            children, parent = pending.pop()
            for key, node in children.items():
                path: Tuple[str, ...] = parent + (key,)
                out["/".join(path)] = node.state
                if node.children:
                    pending.append((node.children, path))
        return out

    def state_at(self, path: Any) -> Optional[OptionState]:
        """State at a path given as "a/b/c" or as a sequence of keys."""
        keys: Path = path.split("/") if isinstance(path, str) else path
        children = self.value
        node = None
        for key in keys:
            if not children or key not in children:
                return None
            node = children[key]
            children = node.children
        return node.state if node is not None else None

    def leaf_states(self) -> Dict[str, OptionState]:
        """States of leaf nodes only, keyed by slash-joined path."""
        leaves: Dict[str, OptionState] = {}
        pending = [(self.value, ())]
        while pending:
            children, parent = pending.pop()
            for key, node in children.items():
                path = parent + (key,)
                if node.children:
                    pending.append((node.children, path))
                else:
                    leaves["/".join(path)] = node.state
        return leaves

    def is_consistent(self) -> bool:
        return not check_consistency(self.schema, self.value)

    def get_summary(self) -> Dict[str, Any]:
        """Returns high-level selection state for testing.

        Returns:
            Dictionary containing:
            - total_nodes: Visible options
            - selected / unselected / indeterminate: Counts per state
            - selected_leaves: Leaves in SELECTED state
            - problems: Output of check_consistency
        """
        stats = run_collector(self.schema, self.value, StateCountCollector())
        return {
            'total_nodes': stats['total_nodes'],
            'selected': stats['states'][OptionState.SELECTED],
            'unselected': stats['states'][OptionState.UNSELECTED],
            'indeterminate': stats['states'][OptionState.INDETERMINATE],
            'selected_leaves': stats['leaf_states'][OptionState.SELECTED],
            'problems': check_consistency(self.schema, self.value),
        }
