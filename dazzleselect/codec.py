"""Conversion between option trees and plain JSON-like records.

Schema records look like::

    {"colors": {"label": "Colors", "children": {"red": {"label": "Red"}}}}

Value records look like::

    {"colors": {"state": "indeterminate", "children": {"red": {"state": "selected"}}}}

Incoming records are validated into pydantic models (SchemaRecord and
ValueRecord) before they are turned into nodes, so a malformed tree is
rejected as a whole with the path of the first bad option.

The engine itself never persists anything; these helpers let a caller store
or ship trees in whatever format it already uses.
"""

import json
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, Field, TypeAdapter, ValidationError, field_validator

from .core.node import OptionState, Schema, SchemaNode, Value, ValueNode
from .error_policies import SelectionError


class SchemaFormatError(SelectionError):
    """Raised when a record cannot be converted into a Schema or Value."""
    pass


def parse_state(state: Union[OptionState, str]) -> OptionState:
    """Parse a state from an enum, its value or its name.

    Args:
        state: OptionState, "selected", "SELECTED", ...

    Returns:
        OptionState enum value

    Raises:
        ValueError: If the state is not recognized
    """
    if isinstance(state, OptionState):
        return state

    if isinstance(state, str):
        state_lower = state.lower()
        for candidate in OptionState:
            if candidate.value == state_lower:
                return candidate

    raise ValueError(f"Unknown option state: {state!r}")


class SchemaRecord(BaseModel):
    """One option of a serialized Schema."""

    label: str = Field(description="Text shown for the option")
    children: Optional[Dict[str, "SchemaRecord"]] = Field(
        default=None,
        description="Nested options; absent for a leaf",
    )

    model_config = {"extra": "ignore"}

    def to_node(self) -> SchemaNode:
        children = None
        if self.children is not None:
            children = {key: record.to_node() for key, record in self.children.items()}
        return SchemaNode(label=self.label, children=children)


class ValueRecord(BaseModel):
    """One node of a serialized Value tree."""

    state: OptionState = Field(
        default=OptionState.UNSELECTED,
        description="Selection state; names are accepted case-insensitively",
    )
    children: Optional[Dict[str, "ValueRecord"]] = Field(
        default=None,
        description="Nested nodes; absent for a leaf",
    )

    model_config = {"extra": "ignore"}

    @field_validator("state", mode="before")
    @classmethod
    def _validate_state(cls, value: Any) -> OptionState:
        return parse_state(value)

    def to_node(self) -> ValueNode:
        children = None
        if self.children is not None:
            children = {key: record.to_node() for key, record in self.children.items()}
        return ValueNode(state=self.state, children=children)


_SCHEMA_RECORDS = TypeAdapter(Dict[str, SchemaRecord])
_VALUE_RECORDS = TypeAdapter(Dict[str, ValueRecord])


def _format_error(exc: ValidationError) -> SchemaFormatError:
    """Turn the first pydantic error into a SchemaFormatError.

    The error location alternates option keys with "children"; only the
    keys are kept, so ("a", "children", "b", "label") is reported as "a/b".
    """
    error = exc.errors()[0]
    if error["type"] == "json_invalid":
        return SchemaFormatError(error["msg"])

    keys = []
    expect_key = True
    for part in error["loc"]:
        if expect_key:
            keys.append(str(part))
            expect_key = False
        elif part == "children":
            expect_key = True
        else:
            break

    ctx_error = error.get("ctx", {}).get("error")
    detail = str(ctx_error) if ctx_error is not None else error["msg"]
    return SchemaFormatError(f"{'/'.join(keys) or '<root>'}: {detail}")


def schema_from_dict(data: Any) -> Schema:
    """Build a Schema from nested label/children records.

    Raises:
        SchemaFormatError: If a record is not a mapping, lacks a string
            label, or has children that are not a mapping
    """
    try:
        records = _SCHEMA_RECORDS.validate_python(data)
    except ValidationError as e:
        raise _format_error(e) from e
    return {key: record.to_node() for key, record in records.items()}


def schema_to_dict(schema: Schema) -> Dict[str, Any]:
    """Convert a Schema back into nested label/children records."""
    out: Dict[str, Any] = {}
    for key, node in schema.items():
        record: Dict[str, Any] = {"label": node.label}
        if node.children is not None:
            record["children"] = schema_to_dict(node.children)
        out[key] = record
    return out


def value_from_dict(data: Any) -> Value:
    """Build a Value tree from nested state/children records.

    A record without a state is UNSELECTED.

    Raises:
        SchemaFormatError: If a record is malformed or names an unknown state
    """
    try:
        records = _VALUE_RECORDS.validate_python(data)
    except ValidationError as e:
        raise _format_error(e) from e
    return {key: record.to_node() for key, record in records.items()}


def value_to_dict(value: Value) -> Dict[str, Any]:
    """Convert a Value tree into nested state/children records."""
    out: Dict[str, Any] = {}
    for key, node in value.items():
        record: Dict[str, Any] = {"state": node.state.value}
        if node.children is not None:
            record["children"] = value_to_dict(node.children)
        out[key] = record
    return out


def dumps_value(value: Value, indent: Optional[int] = None) -> str:
    """Serialize a Value tree to a JSON string."""
    return json.dumps(value_to_dict(value), indent=indent)


def loads_value(text: str) -> Value:
    """Parse a Value tree from a JSON string.

    Raises:
        SchemaFormatError: If the text is not valid JSON or not a valid tree
    """
    try:
        records = _VALUE_RECORDS.validate_json(text)
    except ValidationError as e:
        raise _format_error(e) from e
    return {key: record.to_node() for key, record in records.items()}


def dumps_schema(schema: Schema, indent: Optional[int] = None) -> str:
    """Serialize a Schema to a JSON string."""
    return json.dumps(schema_to_dict(schema), indent=indent)


def loads_schema(text: str) -> Schema:
    """Parse a Schema from a JSON string.

    Raises:
        SchemaFormatError: If the text is not valid JSON or not a valid schema
    """
    try:
        records = _SCHEMA_RECORDS.validate_json(text)
    except ValidationError as e:
        raise _format_error(e) from e
    return {key: record.to_node() for key, record in records.items()}
