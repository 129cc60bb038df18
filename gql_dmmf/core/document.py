"""Indexed, read-only view over a normalized DMMF document.

``DmmfDocument`` is built once per schema build and shared by everything
that needs to resolve names: schema generation at build time and the
computed inputs engine at request time. It never changes after construction.

Bookkeeping that does change during the build (which types were emitted)
lives in ``SchemaBuildSession`` so request handling code never sees it.
"""

import logging
from types import MappingProxyType
from typing import Callable, Iterable, TypeVar

from .errors import DocumentLookupError
from .ir import Document, Enum, InputType, Mapping, Model, OutputType

logger = logging.getLogger(__name__)

T = TypeVar("T")


def index_by(key: Callable[[T], str], items: Iterable[T]) -> MappingProxyType:
    """Index items by a key, later items winning on duplicate keys."""
    return MappingProxyType({key(item): item for item in items})


class DmmfDocument:
    """Name lookups over models, enums, input types, output types and mappings.

    Example:
        dmmf = DmmfDocument(transform(raw))
        user = dmmf.get_model("User")
        create_input = dmmf.get_input_type("UserCreateInput")
    """

    QUERY_TYPE_NAME = "Query"
    MUTATION_TYPE_NAME = "Mutation"

    def __init__(self, document: Document):
        self.document = document
        self._models = index_by(lambda m: m.name, document.datamodel.models)
        # Schema enums shadow datamodel enums of the same name
        self._enums = index_by(
            lambda e: e.name, [*document.datamodel.enums, *document.schema.enums]
        )
        self._input_types = index_by(lambda t: t.name, document.schema.input_types)
        self._output_types = index_by(lambda t: t.name, document.schema.output_types)
        self._mappings = index_by(lambda m: m.model, document.mappings)

    # Collections

    @property
    def models(self) -> tuple[Model, ...]:
        return tuple(self._models.values())

    @property
    def enums(self) -> tuple[Enum, ...]:
        return tuple(self._enums.values())

    @property
    def input_types(self) -> tuple[InputType, ...]:
        return tuple(self._input_types.values())

    @property
    def output_types(self) -> tuple[OutputType, ...]:
        return tuple(self._output_types.values())

    @property
    def mappings(self) -> tuple[Mapping, ...]:
        return tuple(self._mappings.values())

    # Lookups

    def get_model(self, name: str) -> Model:
        return self._lookup(self._models, name, "models")

    def get_enum(self, name: str) -> Enum:
        return self._lookup(self._enums, name, "enums")

    def get_input_type(self, name: str) -> InputType:
        return self._lookup(self._input_types, name, "input types")

    def get_output_type(self, name: str) -> OutputType:
        return self._lookup(self._output_types, name, "output types")

    def get_mapping(self, model_name: str) -> Mapping:
        """Return the operation mapping of a model."""
        return self._lookup(self._mappings, model_name, "mappings")

    def has_model(self, name: str) -> bool:
        return name in self._models

    def has_enum(self, name: str) -> bool:
        return name in self._enums

    def has_input_type(self, name: str) -> bool:
        return name in self._input_types

    def has_output_type(self, name: str) -> bool:
        return name in self._output_types

    @property
    def query_type(self) -> OutputType:
        """The root query output type."""
        return self.get_output_type(self.QUERY_TYPE_NAME)

    @property
    def mutation_type(self) -> OutputType:
        """The root mutation output type."""
        return self.get_output_type(self.MUTATION_TYPE_NAME)

    @staticmethod
    def _lookup(index: MappingProxyType, name: str, collection: str):
        try:
            return index[name]
        except KeyError:
            raise DocumentLookupError(name, collection) from None


class SchemaBuildSession:
    """Build-time bookkeeping over a ``DmmfDocument``.

    Schema generation records the types it emits and the models returned by
    the fields it publishes. Once ``finish`` is called the session is closed
    and only the read-only document is handed on to request handling.

    Example:
        session = SchemaBuildSession(dmmf)
        session.mark_referenced("User")
        session.missing_types()   # ['User']
        session.mark_emitted("User")
        dmmf = session.finish()
    """

    def __init__(self, document: DmmfDocument):
        self.document = document
        self._emitted: set[str] = set()
        self._referenced: set[str] = set()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def emitted_types(self) -> frozenset[str]:
        return frozenset(self._emitted)

    def mark_emitted(self, type_name: str):
        """Record that a type has been added to the schema under construction."""
        self._ensure_open()
        if type_name not in self._emitted:
            logger.debug("Emitted type %s", type_name)
        self._emitted.add(type_name)

    def mark_referenced(self, type_name: str):
        """Record that a published field returns the given type."""
        self._ensure_open()
        self._referenced.add(type_name)

    def is_emitted(self, type_name: str) -> bool:
        return type_name in self._emitted

    def missing_types(self) -> list[str]:
        """Return referenced model names that no one has emitted, sorted."""
        return sorted(
            name
            for name in self._referenced
            if name not in self._emitted and self.document.has_model(name)
        )

    def finish(self) -> DmmfDocument:
        """Close the session and return the read-only document."""
        self._closed = True
        return self.document

    def _ensure_open(self):
        if self._closed:
            raise RuntimeError("Schema build session is already finished")
