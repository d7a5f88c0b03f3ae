"""
Tests for OptionsController, the caller-side holder of a Schema/Value pair.
"""

import pytest

from dazzleselect import (
    OptionState,
    OptionsController,
    PathNotFoundError,
    SelectionConfig,
    build_default,
    toggle,
)


@pytest.fixture
def changes():
    return []


@pytest.fixture
def controller(schema, changes):
    return OptionsController(schema, on_change=changes.append)


class TestStateChanges:

    def test_starts_unselected(self, controller):
        assert controller.selected_labels() == []
        assert controller.state_of(["class"]) is OptionState.UNSELECTED

    def test_toggle_replaces_root_and_notifies(self, controller, changes):
        before = controller.value

        assert controller.toggle(["class", "mammals"]) is True

        assert controller.value is not before
        assert changes == [controller.value]
        assert controller.selected_labels() == ["Cat", "Dog"]
        assert controller.state_of(["class"]) is OptionState.INDETERMINATE

    def test_bad_path_does_not_notify(self, controller, changes):
        before = controller.value
        assert controller.toggle(["nope"]) is False
        assert controller.value is before
        assert changes == []

    def test_strict_controller_raises(self, schema):
        controller = OptionsController(schema, config=SelectionConfig.strict())
        with pytest.raises(PathNotFoundError):
            controller.toggle(["nope"])

    def test_select_all_and_clear_all(self, controller, changes):
        controller.select_all()
        assert controller.state_of(["colors"]) is OptionState.SELECTED
        assert len(controller.selected_labels()) == 8

        controller.clear_all()
        assert controller.selected_labels() == []
        assert len(changes) == 2

    def test_reset_uses_default_state(self, schema):
        controller = OptionsController(schema, config=SelectionConfig(default_state=OptionState.SELECTED))
        assert controller.state_of(["class"]) is OptionState.SELECTED

        controller.toggle(["class"])
        controller.reset()
        assert controller.state_of(["class"]) is OptionState.SELECTED

    def test_initial_value_is_used(self, schema):
        value = toggle(schema, build_default(schema), ["colors", "red"])
        controller = OptionsController(schema, value=value)
        assert controller.value is value
        assert controller.selected_labels() == ["Red"]

    def test_works_without_callback(self, schema):
        controller = OptionsController(schema)
        controller.toggle(["colors"])
        assert controller.selected_labels() == ["Red", "Blue", "Green"]


class TestRender:

    def test_rows(self, controller):
        rows = controller.rows()
        assert len(rows) == 12
        assert rows[0].label == "Colors"
        assert [r.key for r in controller.rows(max_depth=0)] == ["colors", "class"]

    def test_render_inline(self, controller):
        rendered = controller.render(lambda row: "  " * row.depth + row.label)
        assert rendered[:5] == ["Colors", "  Red", "  Blue", "  Green", "Class"]
        assert rendered[-1] == "    Lizard"
        assert len(rendered) == 12

    def test_render_with_container(self, controller):
        rendered = controller.render(lambda row: row.label, options_container=tuple)
        assert rendered == [
            "Colors", ("Red", "Blue", "Green"),
            "Class", (
                "Mammals", ("Cat", "Dog"),
                "Reptiles", ("Turtle", "Frog", "Lizard"),
            ),
        ]

    def test_render_reflects_state(self, controller):
        controller.toggle(["class", "reptiles", "turtle"])
        marks = {
            OptionState.SELECTED: "[x]",
            OptionState.UNSELECTED: "[ ]",
            OptionState.INDETERMINATE: "[-]",
        }
        rendered = controller.render(lambda row: f"{marks[row.state]} {row.label}")
        assert "[-] Class" in rendered
        assert "[-] Reptiles" in rendered
        assert "[x] Turtle" in rendered
        assert "[ ] Frog" in rendered

    def test_render_max_depth(self, controller):
        rendered = controller.render(lambda row: row.label, options_container=list, max_depth=0)
        assert rendered == ["Colors", "Class"]

    def test_repr(self, controller):
        controller.toggle(["colors", "red"])
        assert repr(controller) == "OptionsController(options=2, selected=1)"
