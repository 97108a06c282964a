"""Parameter value model — the tagged union carried in a content node's params.

A value is exactly one of number, text, object or array. Accessors return
``None`` on a variant mismatch; there is no implicit number/text coercion.
Authoring front-ends emit plain JSON, which ``to_param_value`` tags.
"""
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class _BaseValue(BaseModel):
    model_config = ConfigDict(frozen=True)

    def as_number(self) -> float | None:
        return None

    def as_text(self) -> str | None:
        return None

    def as_object(self) -> "dict[str, ParamValue] | None":
        return None

    def as_array(self) -> "list[ParamValue] | None":
        return None

    def get(self, key: str) -> "ParamValue | None":
        """Entry ``key`` of an object value; None for absent keys and non-objects."""
        entries = self.as_object()
        if entries is None:
            return None
        return entries.get(key)

    def at(self, index: int) -> "ParamValue | None":
        """Element ``index`` of an array value; None when out of range or not an array."""
        items = self.as_array()
        if items is None or not 0 <= index < len(items):
            return None
        return items[index]


class NumberValue(_BaseValue):
    kind: Literal["number"] = "number"
    value: float

    def as_number(self) -> float:
        return self.value

    def to_raw(self) -> float:
        return self.value


class TextValue(_BaseValue):
    kind: Literal["text"] = "text"
    value: str

    def as_text(self) -> str:
        return self.value

    def to_raw(self) -> str:
        return self.value


class ObjectValue(_BaseValue):
    kind: Literal["object"] = "object"
    entries: "dict[str, ParamValue]" = Field(default_factory=dict)

    def as_object(self) -> "dict[str, ParamValue]":
        return self.entries

    def to_raw(self) -> dict[str, Any]:
        return {key: value.to_raw() for key, value in self.entries.items()}


class ArrayValue(_BaseValue):
    kind: Literal["array"] = "array"
    items: "list[ParamValue]" = Field(default_factory=list)

    def as_array(self) -> "list[ParamValue]":
        return self.items

    def to_raw(self) -> list[Any]:
        return [value.to_raw() for value in self.items]


ParamValue = Annotated[
    Union[NumberValue, TextValue, ObjectValue, ArrayValue],
    Field(discriminator="kind"),
]

ObjectValue.model_rebuild()
ArrayValue.model_rebuild()


def to_param_value(raw: Any) -> ParamValue:
    """Tag plain JSON-shaped data (numbers, strings, dicts, lists).

    Already-tagged values are returned unchanged. Booleans, nulls, non-string
    object keys and any other type have no representation and raise ValueError.
    """
    if isinstance(raw, _BaseValue):
        return raw
    # bool is an int subclass; JSON true/false is not a number here
    if isinstance(raw, bool) or raw is None:
        raise ValueError(f"unsupported parameter value: {raw!r}")
    if isinstance(raw, (int, float)):
        return NumberValue(value=raw)
    if isinstance(raw, str):
        return TextValue(value=raw)
    if isinstance(raw, dict):
        return ObjectValue(entries=to_param_mapping(raw))
    if isinstance(raw, (list, tuple)):
        return ArrayValue(items=[to_param_value(item) for item in raw])
    raise ValueError(f"unsupported parameter value type: {type(raw).__name__}")


def to_param_mapping(raw: dict) -> dict[str, ParamValue]:
    """Tag every entry of a raw mapping, preserving key order."""
    result: dict[str, ParamValue] = {}
    for key, item in raw.items():
        if not isinstance(key, str):
            raise ValueError(f"parameter keys must be strings, got {key!r}")
        result[key] = to_param_value(item)
    return result
