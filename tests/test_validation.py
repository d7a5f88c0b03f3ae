"""
Tests for the debug-only consistency checks.
"""

import pytest

from dazzleselect import (
    ConsistencyError,
    OptionState,
    SchemaNode,
    ValueNode,
    assert_consistent,
    build_default,
    check_consistency,
    toggle,
)

S = OptionState.SELECTED
U = OptionState.UNSELECTED
I = OptionState.INDETERMINATE


class TestCheckConsistency:

    def test_fresh_tree_is_consistent(self, schema, value):
        assert check_consistency(schema, value) == []

    def test_toggled_tree_is_consistent(self, schema, value):
        value = toggle(schema, value, ["class", "reptiles", "frog"])
        assert check_consistency(schema, value) == []

    def test_missing_and_extra_keys(self, schema, value):
        del value["colors"].children["red"]
        value["colors"].children["purple"] = ValueNode(U)

        problems = check_consistency(schema, value)
        assert "colors/red: missing from value" in problems
        assert "colors/purple: not declared in schema" in problems

    def test_children_disagreement(self):
        schema = {"p": SchemaNode("P", {"c": SchemaNode("C")})}
        value = {"p": ValueNode(U)}
        assert check_consistency(schema, value) == ["p: schema and value disagree on children"]

    def test_indeterminate_leaf(self):
        schema = {"a": SchemaNode("A")}
        value = {"a": ValueNode(I)}
        assert check_consistency(schema, value) == ["a: leaf is INDETERMINATE"]

    def test_stale_parent_state(self, schema, value):
        value["class"].children["mammals"].children["cat"].state = S

        problems = check_consistency(schema, value)
        assert "class/mammals: state is UNSELECTED, children aggregate to INDETERMINATE" in problems

    def test_empty_children_never_flagged(self):
        schema = {"g": SchemaNode("G", {})}
        value = build_default(schema)
        value["g"].state = S
        assert check_consistency(schema, value) == []


class TestAssertConsistent:

    def test_passes_silently(self, schema, value):
        assert_consistent(schema, value)

    def test_raises_with_problems(self):
        schema = {"a": SchemaNode("A")}
        with pytest.raises(ConsistencyError) as exc_info:
            assert_consistent(schema, {"a": ValueNode(I), "b": ValueNode(U)})

        assert exc_info.value.problems == [
            "b: not declared in schema",
            "a: leaf is INDETERMINATE",
        ]
        assert str(exc_info.value).startswith("2 consistency problem(s)")
