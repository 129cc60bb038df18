"""Core modules for DMMF transformation and querying."""

from .computed_inputs import add_computed_inputs, add_globally_computed_inputs
from .document import DmmfDocument, SchemaBuildSession
from .errors import DmmfError, DocumentLoadError, DocumentLookupError
from .hooks import (
    FilterTypesHook,
    HookRunner,
    PostTransformHook,
    PreTransformHook,
)
from .ir import (
    ComputedInput,
    ComputedInputs,
    Datamodel,
    Document,
    Enum,
    InputType,
    InputTypeRef,
    Mapping,
    Model,
    ModelField,
    MutationResolverParams,
    OutputField,
    OutputType,
    OutputTypeRef,
    Schema,
    SchemaArg,
)
from .loader import get_raw_document
from .publisher import SchemaPublisher, derived_type_name, wrap_type
from .raw import RawDocument
from .scalars import (
    DateTimeHandler,
    JSONHandler,
    ScalarHandler,
    ScalarRegistry,
    UUIDHandler,
)
from .transformer import (
    TransformOptions,
    choose_input_type,
    get_transformed_dmmf,
    transform,
)

__all__ = [
    # Errors
    "DmmfError",
    "DocumentLoadError",
    "DocumentLookupError",
    # Raw and normalized documents
    "RawDocument",
    "ComputedInput",
    "ComputedInputs",
    "Datamodel",
    "Document",
    "Enum",
    "InputType",
    "InputTypeRef",
    "Mapping",
    "Model",
    "ModelField",
    "MutationResolverParams",
    "OutputField",
    "OutputType",
    "OutputTypeRef",
    "Schema",
    "SchemaArg",
    # Loading and transforming
    "get_raw_document",
    "TransformOptions",
    "choose_input_type",
    "get_transformed_dmmf",
    "transform",
    # Document index
    "DmmfDocument",
    "SchemaBuildSession",
    # Computed inputs
    "add_computed_inputs",
    "add_globally_computed_inputs",
    # Hooks
    "PreTransformHook",
    "PostTransformHook",
    "FilterTypesHook",
    "HookRunner",
    # Scalars
    "ScalarHandler",
    "ScalarRegistry",
    "DateTimeHandler",
    "UUIDHandler",
    "JSONHandler",
    # Publishing
    "SchemaPublisher",
    "wrap_type",
    "derived_type_name",
]
