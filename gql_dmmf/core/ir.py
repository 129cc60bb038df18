"""Normalized representation of a DMMF document.

This module defines the dataclasses produced by the structural transform.
Compared to the raw document every type reference is a plain name, every
argument has exactly one input type and relation fields use the
``"relation"`` kind.
"""

from dataclasses import dataclass, field
from typing import Any, Callable

from .errors import DocumentLookupError


@dataclass
class MutationResolverParams:
    """The request triple handed to computed input functions."""
    root: Any
    args: dict[str, Any]
    ctx: Any


# Derives the value of an input field from the request instead of the caller
ComputedInput = Callable[[MutationResolverParams], Any]
ComputedInputs = dict[str, ComputedInput]


@dataclass
class Enum:
    """An enum from either the datamodel or the schema."""
    name: str
    values: list[Any] = field(default_factory=list)
    documentation: str | None = None

    @property
    def value_names(self) -> list[str]:
        """Return the enum member names, whichever shape the values use."""
        return [v["name"] if isinstance(v, dict) else v for v in self.values]


@dataclass
class ModelField:
    """A field of a datamodel model."""
    name: str
    kind: str  # 'scalar', 'relation' or 'enum'
    type: str
    is_list: bool = False
    is_required: bool = False
    is_id: bool = False
    is_unique: bool = False
    relation_name: str | None = None
    default: Any = None
    documentation: str | None = None


@dataclass
class Model:
    name: str
    fields: list[ModelField]
    db_name: str | None = None
    id_fields: list[str] = field(default_factory=list)
    documentation: str | None = None

    def get_field(self, name: str) -> ModelField:
        for model_field in self.fields:
            if model_field.name == name:
                return model_field
        raise DocumentLookupError(name, f"fields of model {self.name}")


@dataclass
class Datamodel:
    models: list[Model] = field(default_factory=list)
    enums: list[Enum] = field(default_factory=list)


@dataclass
class InputTypeRef:
    """The single input type chosen for an argument."""
    kind: str  # 'scalar', 'object' or 'enum'
    type: str
    is_list: bool = False
    is_required: bool = False


@dataclass
class SchemaArg:
    """An argument of an output field, or a field of an input type."""
    name: str
    input_type: InputTypeRef
    # Cleared by the transform; kept for shape compatibility with the raw arg
    is_relation_filter: bool | None = None


@dataclass
class InputType:
    """An input object type.

    ``computed_inputs`` holds the globally computed inputs that apply to
    this type. Their fields are no longer part of ``fields``.
    """
    name: str
    fields: list[SchemaArg]
    computed_inputs: ComputedInputs = field(default_factory=dict)

    def get_field(self, name: str) -> SchemaArg:
        for input_field in self.fields:
            if input_field.name == name:
                return input_field
        raise DocumentLookupError(name, f"fields of input type {self.name}")


@dataclass
class OutputTypeRef:
    kind: str
    type: str
    is_list: bool = False
    is_required: bool = False


@dataclass
class OutputField:
    name: str
    args: list[SchemaArg]
    output_type: OutputTypeRef


@dataclass
class OutputType:
    name: str
    fields: list[OutputField]

    def get_field(self, name: str) -> OutputField:
        for output_field in self.fields:
            if output_field.name == name:
                return output_field
        raise DocumentLookupError(name, f"fields of output type {self.name}")


@dataclass
class Schema:
    enums: list[Enum] = field(default_factory=list)
    input_types: list[InputType] = field(default_factory=list)
    output_types: list[OutputType] = field(default_factory=list)


@dataclass
class Mapping:
    """Operation name to resolver name mapping for one model."""
    model: str
    actions: dict[str, str] = field(default_factory=dict)

    def get_action(self, action: str) -> str | None:
        """Return the resolver name for an action like 'findOne', if any."""
        return self.actions.get(action)


@dataclass
class Document:
    """Complete normalized DMMF document."""
    datamodel: Datamodel
    schema: Schema
    mappings: list[Mapping] = field(default_factory=list)
