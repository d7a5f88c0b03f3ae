"""DazzleSelect - Hierarchical Tri-State Selection Engine.

DazzleSelect tracks the selection state of an arbitrary-depth tree of
checkable options. Toggling an option cascades the new state to every
descendant and re-aggregates its ancestors, which become INDETERMINATE when
their children disagree.

Typical use::

    from dazzleselect import build_default, toggle, collect_selected

    value = build_default(schema)
    value = toggle(schema, value, ["class", "mammals"])
    collect_selected(schema, value)

Schema and Value are plain ordered dicts of SchemaNode / ValueNode, so a
UI layer can walk them directly or through iter_options().
"""

import logging

__version__ = "0.1.0"

from .core.node import OptionState, SchemaNode, ValueNode, Schema, Value, Path
from .core.traverser import (
    CascadeTraverser,
    DepthFirstPreOrderTraverser,
    BreadthFirstTraverser,
    OptionRow,
    create_traverser,
    iter_options,
)
from .core.collector import (
    OptionCollector,
    SelectedLabelCollector,
    SelectedPathCollector,
    StateCountCollector,
    CustomCollector,
    run_collector,
    collect_selected,
)
from .builder import build_default, select_all, clear_all
from .config import SelectionConfig, CascadeStrategy, ConfigurationError
from .error_policies import (
    SelectionError,
    PathNotFoundError,
    InvalidPathPolicy,
    IgnoreInvalidPathPolicy,
    FailFastPolicy,
    CollectErrorsPolicy,
)
from .engine import toggle, try_toggle, resolve_path, get_state, ToggleResult
from .validation import check_consistency, assert_consistent, ConsistencyError
from .codec import (
    SchemaFormatError,
    schema_from_dict,
    schema_to_dict,
    value_from_dict,
    value_to_dict,
    dumps_value,
    loads_value,
    dumps_schema,
    loads_schema,
)
from .controller import OptionsController
from .api import (
    make_schema,
    toggle_many,
    selected_paths,
    select_paths,
    get_selection_stats,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Model
    "OptionState",
    "SchemaNode",
    "ValueNode",
    "Schema",
    "Value",
    "Path",
    # Traversal and collection
    "CascadeTraverser",
    "DepthFirstPreOrderTraverser",
    "BreadthFirstTraverser",
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
    # Builder and engine
    "build_default",
    "select_all",
    "clear_all",
    "toggle",
    "try_toggle",
    "resolve_path",
    "get_state",
    "ToggleResult",
    # Config and errors
    "SelectionConfig",
    "CascadeStrategy",
    "ConfigurationError",
    "SelectionError",
    "PathNotFoundError",
    "InvalidPathPolicy",
    "IgnoreInvalidPathPolicy",
    "FailFastPolicy",
    "CollectErrorsPolicy",
    "check_consistency",
    "assert_consistent",
    "ConsistencyError",
    # Codec
    "SchemaFormatError",
    "schema_from_dict",
    "schema_to_dict",
    "value_from_dict",
    "value_to_dict",
    "dumps_value",
    "loads_value",
    "dumps_schema",
    "loads_schema",
    # Caller side
    "OptionsController",
    "make_schema",
    "toggle_many",
    "selected_paths",
    "select_paths",
    "get_selection_stats",
]
