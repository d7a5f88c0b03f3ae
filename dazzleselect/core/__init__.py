"""Core abstractions for DazzleSelect.

This package contains the option tree data model and the traversal and
collection strategies that the engine and the high-level API build on.
"""

from .node import OptionState, SchemaNode, ValueNode, Schema, Value, Path
from .traverser import (
    CascadeTraverser,
    DepthFirstPreOrderTraverser,
    BreadthFirstTraverser,
    VisitedNode,
    OptionRow,
    create_traverser,
    iter_options,
)
from .collector import (
    OptionCollector,
    SelectedLabelCollector,
    SelectedPathCollector,
    StateCountCollector,
    CustomCollector,
    run_collector,
    collect_selected,
)

__all__ = [
    "OptionState",
    "SchemaNode",
    "ValueNode",
    "Schema",
    "Value",
    "Path",
    "CascadeTraverser",
    "DepthFirstPreOrderTraverser",
    "BreadthFirstTraverser",
    "VisitedNode",
    "OptionRow",
    "create_traverser",
    "iter_options",
    "OptionCollector",
    "SelectedLabelCollector",
    "SelectedPathCollector",
    "StateCountCollector",
    "CustomCollector",
    "run_collector",
    "collect_selected",
]
