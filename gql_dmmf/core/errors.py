"""Exceptions raised while loading and querying DMMF documents."""


class DmmfError(Exception):
    """Base class for all gql-dmmf errors."""


class DocumentLoadError(DmmfError):
    """Raised when a raw DMMF document cannot be obtained or validated."""

    def __init__(self, reference: str, message: str):
        self.reference = reference
        self.message = message
        super().__init__(f"Could not load DMMF from {reference!r}: {message}")


class DocumentLookupError(DmmfError, LookupError):
    """Raised when a name is absent from a document collection.

    Names passed to lookups are expected to come from the document itself,
    so a miss points at an internal inconsistency rather than bad user input.
    """

    def __init__(self, name: str, collection: str):
        self.name = name
        self.collection = collection
        super().__init__(f"{name!r} not found in {collection}")
