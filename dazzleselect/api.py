"""High-level API for DazzleSelect.

This module provides simple, functional interfaces for the common cases:
turning plain records into option trees, toggling options, and reading the
selection back. They wrap the engine, builder and collectors for callers
that do not need to touch those directly.
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from .builder import build_default
from .config import SelectionConfig
from .core.collector import (
    SelectedPathCollector,
    StateCountCollector,
    run_collector,
)
from .core.node import OptionState, Path, Schema, Value
from .codec import schema_from_dict
from .engine import get_state, toggle


def make_schema(records: Mapping[str, Any]) -> Schema:
    """Build a Schema from nested label/children records.

    Example:
        >>> schema = make_schema({
        ...     "colors": {"label": "Colors", "children": {
        ...         "red": {"label": "Red"},
        ...         "blue": {"label": "Blue"},
        ...     }},
        ... })
    """
    return schema_from_dict(records)


def toggle_many(schema: Schema,
                value: Value,
                paths: Iterable[Path],
                config: Optional[SelectionConfig] = None) -> Value:
    """Apply several toggles in order and return the final Value.

    Each toggle sees the result of the previous one, exactly as if the user
    had pressed each option in turn.

    Args:
        schema: Option schema
        value: Starting Value (not modified)
        paths: Paths to toggle, in order
        config: Engine configuration

    Returns:
        Value after the last toggle
    """
    for path in paths:
        value = toggle(schema, value, path, config)
    return value


def selected_paths(schema: Schema, value: Value) -> List[Tuple[str, ...]]:
    """Return key paths of all selected leaves in render order."""
    return run_collector(schema, value, SelectedPathCollector())


def select_paths(schema: Schema,
                 paths: Iterable[Path],
                 config: Optional[SelectionConfig] = None) -> Value:
    """Build a fresh Value in which every given option is selected.

    Starts from an all-UNSELECTED tree whatever config.default_state is.
    A path that is already SELECTED (listed twice, or covered by an
    earlier ancestor) is left alone so it never toggles back off. Paths
    that no longer exist are handled by the configured error policy.

    Useful to restore a selection saved with selected_paths().
    """
    config = config or SelectionConfig()
    value = build_default(schema, OptionState.UNSELECTED)
    for path in paths:
        if get_state(value, path) is OptionState.SELECTED:
            continue
        value = toggle(schema, value, path, config)
    return value


def get_selection_stats(schema: Schema, value: Value) -> Dict[str, Any]:
    """Get statistics about a selection.

    Returns:
        Dictionary with node counts and per-state counts

    Example:
        >>> stats = get_selection_stats(schema, value)
        >>> stats['leaf_states'][OptionState.SELECTED]
        3
    """
    return run_collector(schema, value, StateCountCollector())
