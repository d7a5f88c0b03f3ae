"""Caller-side holder for one option tree.

A UI surface keeps a long-lived Schema and the current Value, feeds user
presses into toggle(), swaps in the returned Value and re-renders. The
OptionsController packages that loop so a surface only has to supply a
row renderer and, optionally, an on_change callback.
"""

from typing import Any, Callable, List, Optional, TypeVar

from .builder import build_default
from .config import SelectionConfig
from .core.collector import collect_selected
from .core.node import OptionState, Path, Schema, Value
from .core.traverser import OptionRow, iter_options
from .engine import get_state, toggle

T = TypeVar("T")


class OptionsController:
    """Owns a Schema and its current Value.

    Every change replaces the Value with a new root object. on_change is
    called with the new Value only when the root actually changed, so an
    ignored toggle on a bad path does not trigger a re-render.

    Example:
        controller = OptionsController(schema, on_change=store.set)
        controller.toggle(["class", "mammals"])
        rows = controller.render(lambda row: f"{'  ' * row.depth}{row.label}")
    """

    def __init__(self,
                 schema: Schema,
                 value: Optional[Value] = None,
                 on_change: Optional[Callable[[Value], Any]] = None,
                 config: Optional[SelectionConfig] = None):
        """Initialize the controller.

        Args:
            schema: Option schema (never modified)
            value: Initial Value; built from schema when omitted
            on_change: Called with each new Value
            config: Engine configuration
        """
        self.schema = schema
        self.config = (config or SelectionConfig()).ensure_valid()
        self.on_change = on_change
        self._value = value if value is not None else self._build(self.config.default_state)

    @property
    def value(self) -> Value:
        return self._value

    def _build(self, state: OptionState) -> Value:
        return build_default(self.schema, state)

    def _replace(self, new_value: Value) -> bool:
        if new_value is self._value:
            return False
        self._value = new_value
        if self.on_change is not None:
            self.on_change(new_value)
        return True

    def toggle(self, path: Path) -> bool:
        """Toggle one option.

        Returns:
            True if the Value changed
        """
        return self._replace(toggle(self.schema, self._value, path, self.config))

    def select_all(self) -> None:
        """Replace the Value with a fully selected tree."""
        self._replace(self._build(OptionState.SELECTED))

    def clear_all(self) -> None:
        """Replace the Value with a fully unselected tree."""
        self._replace(self._build(OptionState.UNSELECTED))

    def reset(self) -> None:
        """Replace the Value with a fresh tree in the configured default state."""
        self._replace(self._build(self.config.default_state))

    def state_of(self, path: Path) -> Optional[OptionState]:
        return get_state(self._value, path)

    def selected_labels(self) -> List[str]:
        return collect_selected(self.schema, self._value)

    def rows(self, max_depth: Optional[int] = None) -> List[OptionRow]:
        return list(iter_options(self.schema, self._value, max_depth=max_depth))

    def render(self,
               render_option: Callable[[OptionRow], T],
               options_container: Optional[Callable[[List[Any]], Any]] = None,
               max_depth: Optional[int] = None) -> List[Any]:
        """Render the tree with caller-supplied callbacks.

        render_option is called once per visible row, in render order. When
        options_container is given, the rendered children of every option
        with children are passed to it as one list and its result is placed
        right after the parent's row. Without it, children follow their
        parent inline.

        Args:
            render_option: Row renderer
            options_container: Wrapper for each nesting level
            max_depth: Deepest level to render

        Returns:
            Rendered top-level items
        """
        levels: List[List[Any]] = [[]]

        def close_level() -> None:
            children = levels.pop()
            if options_container is not None:
                levels[-1].append(options_container(children))
            else:
                levels[-1].extend(children)

        for row in iter_options(self.schema, self._value, max_depth=max_depth):
            while len(levels) > row.depth + 1:
                close_level()

            levels[-1].append(render_option(row))

            if not row.is_leaf and (max_depth is None or row.depth < max_depth):
                levels.append([])

        while len(levels) > 1:
            close_level()

        return levels[0]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(options={len(self.schema)}, selected={len(self.selected_labels())})"
