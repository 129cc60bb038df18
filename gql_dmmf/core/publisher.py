"""graphql-core helpers for publishing DMMF types.

``SchemaPublisher`` turns the normalized input types and enums of a
document into graphql-core types on demand, and builds argument maps for
output fields. Everything it builds is recorded on the build session, so the
caller can tell which types made it into the schema.
"""

import logging
from typing import Iterable

from graphql import (
    GraphQLArgument,
    GraphQLEnumType,
    GraphQLInputField,
    GraphQLInputObjectType,
    GraphQLInputType,
    GraphQLList,
    GraphQLNonNull,
    GraphQLNullableType,
)

from .document import SchemaBuildSession
from .ir import InputTypeRef
from .scalars import ScalarRegistry

logger = logging.getLogger(__name__)


def wrap_type(named: GraphQLNullableType, is_list: bool, is_required: bool):
    """Apply DMMF list/required modifiers to a named type.

    List fields become ``[T!]`` and required fields are non-null.
    """
    wrapped = named
    if is_list:
        wrapped = GraphQLList(GraphQLNonNull(wrapped))
    if is_required:
        wrapped = GraphQLNonNull(wrapped)
    return wrapped


def upper_first(name: str) -> str:
    return name[:1].upper() + name[1:]


def derived_type_name(name: str, excluded: Iterable[str]) -> str:
    """Name of an input type published without some of its fields.

    ``derived_type_name("UserCreateInput", ["browser"])`` is
    ``"UserCreateInputWithoutBrowser"``.
    """
    return name + "Without" + "".join(upper_first(n) for n in sorted(excluded))


class SchemaPublisher:
    """Builds graphql-core types from a document during a schema build.

    Example:
        session = SchemaBuildSession(dmmf)
        publisher = SchemaPublisher(session)
        # 'browser' is a resolver-level computed input of createOneUser
        args = publisher.field_args("Mutation", "createOneUser", computed_inputs=["browser"])
        user_input = publisher.input_object("UserCreateInput")
    """

    DATA_ARG_NAME = "data"

    def __init__(self, session: SchemaBuildSession, scalars: ScalarRegistry | None = None):
        self.session = session
        self.scalars = scalars or ScalarRegistry()
        self._input_objects: dict[tuple[str, frozenset[str]], GraphQLInputObjectType] = {}
        self._enums: dict[str, GraphQLEnumType] = {}

    @property
    def document(self):
        return self.session.document

    def input_object(self, name: str, exclude: Iterable[str] = ()) -> GraphQLInputObjectType:
        """Return the graphql-core input object for an input type.

        Fields named in ``exclude`` are left out at every depth. Any type
        that loses fields that way is published under a derived name (see
        ``derived_type_name``); types that reach none of them keep their own
        name and are shared with unfiltered uses.

        Fields are resolved lazily so self-referencing and mutually
        recursive input types are supported.
        """
        excluded = frozenset(exclude)
        if excluded and not self._reaches_field(name, excluded):
            excluded = frozenset()

        key = (name, excluded)
        if key in self._input_objects:
            return self._input_objects[key]

        input_type = self.document.get_input_type(name)
        type_name = derived_type_name(name, excluded) if excluded else name
        gql_type = GraphQLInputObjectType(
            type_name,
            lambda: {
                f.name: GraphQLInputField(self.input_type(f.input_type, excluded))
                for f in input_type.fields
                if f.name not in excluded
            },
        )
        self._input_objects[key] = gql_type
        self.session.mark_emitted(type_name)
        return gql_type

    def enum(self, name: str) -> GraphQLEnumType:
        """Return the graphql-core enum for a DMMF enum."""
        if name in self._enums:
            return self._enums[name]

        enum = self.document.get_enum(name)
        gql_type = GraphQLEnumType(
            name,
            {value: value for value in enum.value_names},
            description=enum.documentation,
        )
        self._enums[name] = gql_type
        self.session.mark_emitted(name)
        return gql_type

    def input_type(self, ref: InputTypeRef, exclude: Iterable[str] = ()) -> GraphQLInputType:
        """Return the wrapped graphql-core type for an input type reference."""
        if ref.kind == "scalar":
            named = self.scalars.get_graphql_type(ref.type)
        elif ref.kind == "enum":
            named = self.enum(ref.type)
        else:
            named = self.input_object(ref.type, exclude)
        return wrap_type(named, ref.is_list, ref.is_required)

    def field_args(
        self,
        output_type_name: str,
        field_name: str,
        exclude: Iterable[str] = (),
        computed_inputs: Iterable[str] = (),
    ) -> dict[str, GraphQLArgument]:
        """Build the arguments of an output field.

        Args:
            output_type_name: The output type holding the field, e.g. 'Mutation'
            field_name: The field, e.g. 'createOneUser'
            exclude: Argument names to leave out
            computed_inputs: Names of the resolver-level computed inputs.
                They are hidden from the input type of the 'data' argument
                and from every input type nested in it.

        The model returned by the field is recorded as referenced.
        """
        output_field = self.document.get_output_type(output_type_name).get_field(field_name)
        self.session.mark_referenced(output_field.output_type.type)
        excluded = set(exclude)
        hidden = frozenset(computed_inputs)
        return {
            arg.name: GraphQLArgument(
                self.input_type(arg.input_type, hidden if arg.name == self.DATA_ARG_NAME else ())
            )
            for arg in output_field.args
            if arg.name not in excluded
        }

    def _reaches_field(self, name: str, field_names: frozenset[str]) -> bool:
        """Whether the input type, or any input type nested in it, has one of the fields."""
        seen = set()
        pending = [name]
        while pending:
            current = pending.pop()
            if current in seen:
                continue
            seen.add(current)
            for input_field in self.document.get_input_type(current).fields:
                if input_field.name in field_names:
                    return True
                if input_field.input_type.kind == "object":
                    pending.append(input_field.input_type.type)
        return False
