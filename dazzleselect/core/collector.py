"""Data collection strategies for DazzleSelect.

Collectors are fed the OptionRows produced by iter_options and decide what
to keep. The same walk can then answer different questions (selected
labels, selected paths, state statistics) without re-implementing it.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional, Tuple

from .node import OptionState, Schema, Value
from .traverser import OptionRow, iter_options


class OptionCollector(ABC):
    """Abstract base class for row collectors."""

    @abstractmethod
    def collect(self, row: OptionRow) -> None:
        """Consume one row.

        Args:
            row: Row from the lockstep walk
        """
        pass

    @abstractmethod
    def result(self) -> Any:
        """Return what has been collected so far."""
        pass


class SelectedLabelCollector(OptionCollector):
    """Collects labels of selected leaf options, in render order."""

    def __init__(self):
        self._labels: List[str] = []

    def collect(self, row: OptionRow) -> None:
        if row.is_leaf and row.state is OptionState.SELECTED:
            self._labels.append(row.label)

    def result(self) -> List[str]:
        return list(self._labels)


class SelectedPathCollector(OptionCollector):
    """Collects key paths of selected leaf options.

    Labels are not required to be unique, paths are. Use this when the
    caller needs to map a selection back to its own identifiers.
    """

    def __init__(self):
        self._paths: List[Tuple[str, ...]] = []

    def collect(self, row: OptionRow) -> None:
        if row.is_leaf and row.state is OptionState.SELECTED:
            self._paths.append(row.path)

    def result(self) -> List[Tuple[str, ...]]:
        return list(self._paths)


class StateCountCollector(OptionCollector):
    """Counts rows per state, split into leaves and internal nodes."""

    def __init__(self):
        self._stats: Dict[str, Any] = {
            'total_nodes': 0,
            'leaf_nodes': 0,
            'internal_nodes': 0,
            'max_depth': 0,
            'states': {state: 0 for state in OptionState},
            'leaf_states': {state: 0 for state in OptionState},
        }

    def collect(self, row: OptionRow) -> None:
        stats = self._stats
        stats['total_nodes'] += 1
        stats['max_depth'] = max(stats['max_depth'], row.depth)
        stats['states'][row.state] += 1

        if row.is_leaf:
            stats['leaf_nodes'] += 1
            stats['leaf_states'][row.state] += 1
        else:
            stats['internal_nodes'] += 1

    def result(self) -> Dict[str, Any]:
        return {
            **self._stats,
            'states': dict(self._stats['states']),
            'leaf_states': dict(self._stats['leaf_states']),
        }


class CustomCollector(OptionCollector):
    """Collects whatever a user function returns for each row.

    Rows for which the function returns None are dropped.
    """

    def __init__(self, collect_fn: Callable[[OptionRow], Any]):
        self.collect_fn = collect_fn
        self._items: List[Any] = []

    def collect(self, row: OptionRow) -> None:
        item = self.collect_fn(row)
        if item is not None:
            self._items.append(item)

    def result(self) -> List[Any]:
        return list(self._items)


def run_collector(schema: Schema,
                  value: Value,
                  collector: OptionCollector,
                  max_depth: Optional[int] = None) -> Any:
    """Feed every row of a Schema/Value pair to a collector.

    Args:
        schema: Option schema
        value: Value tree
        collector: Collector instance
        max_depth: Optional depth limit for the walk

    Returns:
        The collector's result
    """
    for row in iter_options(schema, value, max_depth=max_depth):
        collector.collect(row)
    return collector.result()


def collect_selected(schema: Schema, value: Value) -> List[str]:
    """Return labels of all selected leaves in render order.

    Nodes present in the Schema but missing from the Value are skipped.

    Example:
        >>> value = toggle(schema, value, ["colors", "red"])
        >>> collect_selected(schema, value)
        ['Red']
    """
    return run_collector(schema, value, SelectedLabelCollector())
