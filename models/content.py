"""Content node model — the attribute bag handed to the style resolvers.

Nodes arrive as plain JSON (or YAML) from the authoring layer, e.g.::

    {"params": {"style": {"grid": {"width": 0.5}}, "leading": 14}}

The ``params`` validator tags the raw values, so resolvers only ever see
``ParamValue`` instances.
"""
import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, TypeAdapter, field_serializer, field_validator

from models.values import ParamValue, to_param_mapping


class ContentNode(BaseModel):
    params: dict[str, ParamValue] = Field(default_factory=dict)

    @field_validator("params", mode="before")
    @classmethod
    def tag_raw_params(cls, v: Any) -> Any:
        # Raw JSON dicts are tagged here; anything else is left for Pydantic
        # to reject (e.g. a list where a mapping is expected).
        if isinstance(v, dict):
            return to_param_mapping(v)
        return v

    @field_serializer("params")
    def dump_raw_params(self, params: dict[str, ParamValue]) -> dict[str, Any]:
        return {key: value.to_raw() for key, value in params.items()}

    @classmethod
    def load(cls, path: Path) -> "ContentNode":
        """Load a single node from a JSON or YAML file.

        Raises FileNotFoundError if path does not exist.
        """
        data = _read_data(path) or {}
        return cls.model_validate(data)

    @classmethod
    def load_many(cls, path: Path) -> list["ContentNode"]:
        """Load a list of nodes, given either as a top-level list or under a ``nodes`` key.

        Raises ValidationError when the nodes are not a list.
        """
        data = _read_data(path) or []
        if isinstance(data, dict):
            data = data.get("nodes") or []
        return TypeAdapter(list[cls]).validate_python(data)


def _read_data(path: Path) -> Any:
    """Parse ``.json`` files with json, anything else as YAML. Blank files give None."""
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return None
    if path.suffix.lower() == ".json":
        return json.loads(text)
    import yaml  # lazy — only needed for YAML input
    return yaml.safe_load(text)
