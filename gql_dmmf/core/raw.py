"""Pydantic models for the raw DMMF document.

These mirror the JSON emitted by the data-access client generator. Keys are
camelCase on the wire and snake_case in Python; unknown keys are tolerated
so newer generator versions still validate.
"""

from typing import Any, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class RawBase(BaseModel):
    """Base for all raw DMMF models."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        frozen=True,
    )


class RawTypeReference(RawBase):
    """A nested type descriptor used where a plain type name is expected."""
    name: str


# A type is referenced either by name or by an inline descriptor
RawTypeRef = Union[str, RawTypeReference]


class RawEnum(RawBase):
    name: str
    # Schema enums list plain names, datamodel enums list {name, dbName}
    values: list[Any] = Field(default_factory=list)
    documentation: str | None = None


class RawField(RawBase):
    """A field of a datamodel model."""
    name: str
    kind: str  # 'scalar', 'object' or 'enum'
    type: str
    is_list: bool = False
    is_required: bool = False
    is_id: bool = False
    is_unique: bool = False
    relation_name: str | None = None
    default: Any = None
    documentation: str | None = None


class RawModel(RawBase):
    name: str
    fields: list[RawField] = Field(default_factory=list)
    db_name: str | None = None
    id_fields: list[str] = Field(default_factory=list)
    documentation: str | None = None


class RawDatamodel(RawBase):
    models: list[RawModel] = Field(default_factory=list)
    enums: list[RawEnum] = Field(default_factory=list)


class RawInputTypeVariant(RawBase):
    """One candidate type an argument may accept."""
    kind: str  # 'scalar', 'object' or 'enum'
    type: RawTypeRef
    is_list: bool = False
    is_required: bool = False


class RawSchemaArg(RawBase):
    """An argument of an output field, or a field of an input type.

    The generator allows several candidate types per argument, listed in
    order under ``inputType`` (or ``inputTypes`` in newer releases).
    """
    name: str
    input_type: list[RawInputTypeVariant] = Field(
        min_length=1,
        validation_alias=AliasChoices("inputType", "inputTypes", "input_type"),
    )
    is_relation_filter: bool | None = None

    @field_validator("input_type", mode="before")
    @classmethod
    def _wrap_single_variant(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return [value]
        return value


class RawInputType(RawBase):
    name: str
    fields: list[RawSchemaArg] = Field(default_factory=list)


class RawOutputTypeRef(RawBase):
    kind: str
    type: RawTypeRef
    is_list: bool = False
    is_required: bool = False


class RawOutputField(RawBase):
    name: str
    args: list[RawSchemaArg] = Field(default_factory=list)
    output_type: RawOutputTypeRef


class RawOutputType(RawBase):
    name: str
    fields: list[RawOutputField] = Field(default_factory=list)


class RawSchema(RawBase):
    enums: list[RawEnum] = Field(default_factory=list)
    input_types: list[RawInputType] = Field(default_factory=list)
    output_types: list[RawOutputType] = Field(default_factory=list)


class RawMapping(RawBase):
    """Operation name to resolver name mapping for one model.

    Only ``model`` is declared; the action keys (``findOne``, ``create``...)
    arrive as extra fields.
    """
    model: str

    @property
    def actions(self) -> dict[str, str]:
        """Return the action -> resolver name pairs of this mapping."""
        extra = self.model_extra or {}
        return {k: v for k, v in extra.items() if isinstance(v, str)}


class RawDocument(RawBase):
    """The complete raw DMMF document."""
    datamodel: RawDatamodel
    schema_: RawSchema = Field(alias="schema")
    mappings: list[RawMapping] = Field(default_factory=list)

    @field_validator("mappings", mode="before")
    @classmethod
    def _unwrap_model_operations(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return value.get("modelOperations", [])
        return value
