#!/usr/bin/env python3
"""Demo script for nested option selection in DazzleSelect.

Builds the nested-categories option tree, applies a few toggles the way a
user would tap rows, and prints the tree after each step.
"""

import logging
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from dazzleselect import (
    OptionState,
    OptionsController,
    make_schema,
)

SCHEMA = make_schema({
    "colors": {"label": "Colors", "children": {
        "red": {"label": "Red"},
        "blue": {"label": "Blue"},
        "green": {"label": "Green"},
    }},
    "class": {"label": "Class", "children": {
        "mammals": {"label": "Mammals", "children": {
            "cat": {"label": "Cat"},
            "dog": {"label": "Dog"},
        }},
        "reptiles": {"label": "Reptiles", "children": {
            "turtle": {"label": "Turtle"},
            "frog": {"label": "Frog"},
            "lizard": {"label": "Lizard"},
        }},
    }},
})

MARKS = {
    OptionState.SELECTED: "[x]",
    OptionState.UNSELECTED: "[ ]",
    OptionState.INDETERMINATE: "[-]",
}


def render_row(row):
    return f"{'    ' * row.depth}{MARKS[row.state]} {row.label}"


def show(controller, title):
    print(f"\n=== {title} ===")
    for line in controller.render(render_row):
        print(line)
    selected = controller.selected_labels()
    print(f"Selected leaf options: {', '.join(selected) if selected else 'None'}")


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    controller = OptionsController(SCHEMA)
    show(controller, "Initial")

    steps = [
        ["class", "mammals"],
        ["class", "reptiles", "turtle"],
        ["class", "reptiles", "frog"],
        ["class", "reptiles", "lizard"],
        ["class", "mammals"],
        ["class", "birds"],  # unknown: ignored
    ]
    for path in steps:
        changed = controller.toggle(path)
        show(controller, f"Toggle {'/'.join(path)}{'' if changed else ' (no change)'}")

    controller.select_all()
    show(controller, "Select all")

    controller.clear_all()
    show(controller, "Clear all")
    return 0


if __name__ == "__main__":
    sys.exit(main())
