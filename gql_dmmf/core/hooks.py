"""Transform hooks for customizing the DMMF pipeline.

Provides protocols for hooks that adjust the raw document before the
structural transform, or the normalized document after it.

Example usage:
    from gql_dmmf.core.hooks import HookRunner, FilterTypesHook

    runner = HookRunner()
    runner.add_post_hook(FilterTypesHook(exclude_suffix="ScalarWhereInput"))
    dmmf = get_transformed_dmmf("./prisma", hooks=runner)
"""

from dataclasses import replace
from typing import Protocol, runtime_checkable

from .ir import Document
from .raw import RawDocument


@runtime_checkable
class PreTransformHook(Protocol):
    """Protocol for hooks run on the raw document.

    Raw documents are immutable pydantic models, so hooks return a new one:

        class DropModels:
            def pre_transform(self, raw):
                datamodel = raw.datamodel.model_copy(update={"models": []})
                return raw.model_copy(update={"datamodel": datamodel})
    """

    def pre_transform(self, raw: RawDocument) -> RawDocument:
        """Called before the structural transform.

        Args:
            raw: The validated raw document

        Returns:
            The raw document to transform
        """
        ...


@runtime_checkable
class PostTransformHook(Protocol):
    """Protocol for hooks run on the normalized document before indexing."""

    def post_transform(self, document: Document) -> Document:
        """Called after the structural transform.

        Args:
            document: The normalized document

        Returns:
            The document to index
        """
        ...


class FilterTypesHook:
    """Built-in hook to filter schema types by name prefix/suffix.

    Applies to input types, output types and schema enums. Datamodel models
    are never filtered.

    Example:
        # Drop the aggregate helpers
        hook = FilterTypesHook(exclude_prefix="Aggregate")
    """

    def __init__(
        self,
        exclude_prefix: str | None = None,
        exclude_suffix: str | None = None,
        include_prefix: str | None = None,
        include_suffix: str | None = None,
    ):
        self.exclude_prefix = exclude_prefix
        self.exclude_suffix = exclude_suffix
        self.include_prefix = include_prefix
        self.include_suffix = include_suffix

    def _should_include(self, name: str) -> bool:
        if self.exclude_prefix and name.startswith(self.exclude_prefix):
            return False
        if self.exclude_suffix and name.endswith(self.exclude_suffix):
            return False
        if self.include_prefix and not name.startswith(self.include_prefix):
            return False
        if self.include_suffix and not name.endswith(self.include_suffix):
            return False
        return True

    def post_transform(self, document: Document) -> Document:
        """Return a copy of the document without the filtered types."""
        schema = document.schema
        return replace(
            document,
            schema=replace(
                schema,
                enums=[e for e in schema.enums if self._should_include(e.name)],
                input_types=[t for t in schema.input_types if self._should_include(t.name)],
                output_types=[t for t in schema.output_types if self._should_include(t.name)],
            ),
        )


class HookRunner:
    """Runs a collection of hooks in order."""

    def __init__(self):
        self.pre_hooks: list[PreTransformHook] = []
        self.post_hooks: list[PostTransformHook] = []

    def add_pre_hook(self, hook: PreTransformHook):
        self.pre_hooks.append(hook)

    def add_post_hook(self, hook: PostTransformHook):
        self.post_hooks.append(hook)

    def run_pre_hooks(self, raw: RawDocument) -> RawDocument:
        for hook in self.pre_hooks:
            raw = hook.pre_transform(raw)
        return raw

    def run_post_hooks(self, document: Document) -> Document:
        for hook in self.post_hooks:
            document = hook.post_transform(document)
        return document
