"""Structural transform from the raw DMMF to the normalized document.

The transform is a single pure pass: it never mutates the raw document and
performs no I/O. It establishes the invariants documented in ``ir``:
relation kinds, plain-name type references, one input type per argument and
globally computed inputs moved off the visible field list.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Sequence

from .document import DmmfDocument
from .hooks import HookRunner
from .ir import (
    ComputedInputs,
    Datamodel,
    Document,
    Enum,
    InputType,
    InputTypeRef,
    Mapping,
    Model,
    ModelField,
    OutputField,
    OutputType,
    OutputTypeRef,
    Schema,
    SchemaArg,
)
from .loader import get_raw_document
from .raw import (
    RawDatamodel,
    RawDocument,
    RawEnum,
    RawInputType,
    RawInputTypeVariant,
    RawOutputType,
    RawSchema,
    RawSchemaArg,
    RawTypeRef,
)

logger = logging.getLogger(__name__)


@dataclass
class TransformOptions:
    """Options for ``transform``.

    Attributes:
        globally_computed_inputs: Field name -> function of the resolver
            params. Every input type declaring one of these fields has it
            hidden and computed at request time instead.
    """
    globally_computed_inputs: ComputedInputs = field(default_factory=dict)


def transform(document: RawDocument, options: TransformOptions | None = None) -> Document:
    """Transform a raw DMMF document into the normalized document."""
    options = options or TransformOptions()
    result = Document(
        datamodel=transform_datamodel(document.datamodel),
        schema=transform_schema(document.schema_, options.globally_computed_inputs),
        mappings=[Mapping(model=m.model, actions=m.actions) for m in document.mappings],
    )
    logger.debug(
        "Transformed DMMF: %d models, %d input types, %d output types",
        len(result.datamodel.models),
        len(result.schema.input_types),
        len(result.schema.output_types),
    )
    return result


def transform_datamodel(datamodel: RawDatamodel) -> Datamodel:
    """Copy the datamodel, renaming the 'object' field kind to 'relation'."""
    return Datamodel(
        enums=[_transform_enum(e) for e in datamodel.enums],
        models=[
            Model(
                name=model.name,
                fields=[
                    ModelField(
                        name=f.name,
                        kind="relation" if f.kind == "object" else f.kind,
                        type=f.type,
                        is_list=f.is_list,
                        is_required=f.is_required,
                        is_id=f.is_id,
                        is_unique=f.is_unique,
                        relation_name=f.relation_name,
                        default=f.default,
                        documentation=f.documentation,
                    )
                    for f in model.fields
                ],
                db_name=model.db_name,
                id_fields=list(model.id_fields),
                documentation=model.documentation,
            )
            for model in datamodel.models
        ],
    )


def transform_schema(schema: RawSchema, globally_computed_inputs: ComputedInputs) -> Schema:
    return Schema(
        enums=[_transform_enum(e) for e in schema.enums],
        input_types=[
            transform_input_type(t, globally_computed_inputs) for t in schema.input_types
        ],
        output_types=[transform_output_type(t) for t in schema.output_types],
    )


def transform_output_type(output_type: RawOutputType) -> OutputType:
    return OutputType(
        name=output_type.name,
        fields=[
            OutputField(
                name=f.name,
                args=[transform_arg(arg) for arg in f.args],
                output_type=OutputTypeRef(
                    kind=f.output_type.kind,
                    type=get_type_name(f.output_type.type),
                    is_list=f.output_type.is_list,
                    is_required=f.output_type.is_required,
                ),
            )
            for f in output_type.fields
        ],
    )


def transform_input_type(
    input_type: RawInputType, globally_computed_inputs: ComputedInputs
) -> InputType:
    """Disambiguate the fields of an input type and attach its computed inputs.

    Only globally computed inputs are handled here. Resolver-level computed
    inputs are filtered when the API is published and evaluated at request
    time alongside these.
    """
    field_names = {f.name for f in input_type.fields}
    return InputType(
        name=input_type.name,
        fields=[
            transform_arg(f)
            for f in input_type.fields
            if f.name not in globally_computed_inputs
        ],
        computed_inputs={
            name: fn
            for name, fn in globally_computed_inputs.items()
            if name in field_names
        },
    )


def transform_arg(arg: RawSchemaArg) -> SchemaArg:
    """Collapse the candidate input types of an argument to a single one.

    GraphQL arguments cannot be union typed, so one candidate has to stand
    for the whole list.
    """
    variant = choose_input_type(arg.input_type)
    return SchemaArg(
        name=arg.name,
        input_type=InputTypeRef(
            kind=variant.kind,
            type=get_type_name(variant.type),
            is_list=variant.is_list,
            is_required=variant.is_required,
        ),
        is_relation_filter=None,
    )


def choose_input_type(candidates: Sequence[RawInputTypeVariant]) -> RawInputTypeVariant:
    """Pick the first enum candidate, else the first object, else the first.

    Scalar candidates are usually loose fallbacks for the richer enum or
    object variant, so they only win when nothing else is offered.
    """
    for kind in ("enum", "object"):
        for candidate in candidates:
            if candidate.kind == kind:
                return candidate
    return candidates[0]


def get_type_name(type_ref: RawTypeRef | dict[str, Any]) -> str:
    """Return the name of a type given by name or by nested descriptor.

    Besides validated references, the descriptor may also be a decoded JSON
    dict, for callers inspecting unvalidated DMMF payloads.
    """
    if isinstance(type_ref, str):
        return type_ref
    if isinstance(type_ref, dict):
        return type_ref["name"]
    return type_ref.name


def _transform_enum(enum: RawEnum) -> Enum:
    return Enum(name=enum.name, values=list(enum.values), documentation=enum.documentation)


def get_transformed_dmmf(
    reference: Any,
    options: TransformOptions | None = None,
    hooks: HookRunner | None = None,
) -> DmmfDocument:
    """Load a DMMF reference, transform it and index the result.

    Args:
        reference: Anything ``get_raw_document`` accepts
        options: Transform options
        hooks: Optional pre/post transform hooks

    Raises:
        DocumentLoadError: If the reference cannot be loaded
    """
    raw = get_raw_document(reference)
    if hooks is not None:
        raw = hooks.run_pre_hooks(raw)
    document = transform(raw, options)
    if hooks is not None:
        document = hooks.run_post_hooks(document)
    return DmmfDocument(document)
