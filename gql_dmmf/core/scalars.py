"""Scalar mapping from DMMF scalar names to graphql-core scalar types.

The standard GraphQL scalars map directly. Other DMMF scalars (``DateTime``,
``Json``, ``UUID``...) are backed by a ``ScalarHandler`` that knows how to
serialize and parse values.

Example usage:
    from gql_dmmf.core.scalars import ScalarRegistry

    registry = ScalarRegistry()
    registry.get_graphql_type("DateTime")  # GraphQLScalarType named DateTime

    # Custom handler
    class DecimalHandler:
        description = "Arbitrary precision decimal"

        def serialize(self, value):
            return str(value)

        def deserialize(self, value):
            from decimal import Decimal
            return Decimal(value)

    registry.register("Decimal", DecimalHandler())
"""

from datetime import datetime
from typing import Any, Protocol, runtime_checkable
from uuid import UUID

from graphql import (
    GraphQLBoolean,
    GraphQLFloat,
    GraphQLID,
    GraphQLInt,
    GraphQLScalarType,
    GraphQLString,
)

from .errors import DocumentLookupError

STANDARD_SCALARS: dict[str, GraphQLScalarType] = {
    "String": GraphQLString,
    "Int": GraphQLInt,
    "Float": GraphQLFloat,
    "Boolean": GraphQLBoolean,
    "ID": GraphQLID,
}


@runtime_checkable
class ScalarHandler(Protocol):
    """Protocol for custom scalar handlers.

    Attributes:
        description: Description of the generated GraphQL scalar
    """

    description: str

    def serialize(self, value: Any) -> Any:
        """Convert a Python value to its JSON representation."""
        ...

    def deserialize(self, value: Any) -> Any:
        """Convert a JSON value received from a client to Python."""
        ...


class DateTimeHandler:
    """Handler for DateTime scalars using ISO 8601 format."""

    description = "ISO 8601 date-time string"

    def serialize(self, value: datetime | str) -> str:
        if isinstance(value, str):
            return value
        return value.isoformat()

    def deserialize(self, value: str) -> datetime:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))


class UUIDHandler:
    """Handler for UUID scalars."""

    description = "UUID string"

    def serialize(self, value: UUID | str) -> str:
        return str(value)

    def deserialize(self, value: str) -> UUID:
        return UUID(value)


class JSONHandler:
    """Handler for Json scalars (pass-through)."""

    description = "Arbitrary JSON value"

    def serialize(self, value: Any) -> Any:
        return value

    def deserialize(self, value: Any) -> Any:
        return value


class ScalarRegistry:
    """Registry of DMMF scalar names and their graphql-core types.

    Example:
        registry = ScalarRegistry()
        registry.get_graphql_type("Int")       # GraphQLInt
        registry.get_graphql_type("DateTime")  # custom GraphQLScalarType
    """

    def __init__(self):
        self._handlers: dict[str, ScalarHandler] = {}
        self._types: dict[str, GraphQLScalarType] = dict(STANDARD_SCALARS)
        self._register_defaults()

    def _register_defaults(self):
        self.register("DateTime", DateTimeHandler())
        self.register("UUID", UUIDHandler())
        self.register("Json", JSONHandler())

    def register(self, scalar_name: str, handler: ScalarHandler):
        """Register a handler for a scalar, replacing any previous one."""
        self._handlers[scalar_name] = handler
        self._types[scalar_name] = GraphQLScalarType(
            name=scalar_name,
            description=handler.description,
            serialize=handler.serialize,
            parse_value=handler.deserialize,
        )

    def get(self, scalar_name: str) -> ScalarHandler | None:
        """Get the handler for a scalar, or None if it is not custom."""
        return self._handlers.get(scalar_name)

    def has(self, scalar_name: str) -> bool:
        return scalar_name in self._types

    def get_graphql_type(self, scalar_name: str) -> GraphQLScalarType:
        """Return the graphql-core type for a DMMF scalar name."""
        try:
            return self._types[scalar_name]
        except KeyError:
            raise DocumentLookupError(scalar_name, "scalars") from None
