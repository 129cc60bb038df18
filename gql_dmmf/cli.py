"""Command-line interface for gql-dmmf."""

import logging

import click

from .core.document import DmmfDocument
from .core.errors import DmmfError, DocumentLookupError
from .core.ir import MutationResolverParams
from .core.transformer import TransformOptions, get_transformed_dmmf


def _placeholder(params: MutationResolverParams):
    return None


def load_document(dmmf: str, computed: tuple[str, ...] = ()) -> DmmfDocument:
    """Load and transform a DMMF reference, exiting on load errors.

    Computed input names only preview which fields get hidden, so they are
    bound to a placeholder function.
    """
    options = TransformOptions(
        globally_computed_inputs={name: _placeholder for name in computed}
    )
    try:
        return get_transformed_dmmf(dmmf, options)
    except DmmfError as e:
        raise click.ClickException(str(e)) from e


dmmf_option = click.option(
    "--dmmf",
    "-d",
    required=True,
    help="DMMF reference: JSON file, directory holding dmmf.json, URL or module name.",
)
computed_option = click.option(
    "--computed",
    "-c",
    multiple=True,
    help="Field name to treat as globally computed (repeatable).",
)
verbose_option = click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)


@click.group()
@click.version_option(package_name="gql-dmmf")
def main():
    """Inspect DMMF documents used to generate GraphQL APIs."""
    pass


@main.command()
@dmmf_option
@computed_option
@verbose_option
def inspect(dmmf: str, computed: tuple[str, ...], verbose: bool):
    """Print a summary of a transformed DMMF document.

    Examples:

        gql-dmmf inspect --dmmf ./prisma/dmmf.json

        gql-dmmf inspect -d ./prisma -c browser -c createdBy
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    click.echo("Loading DMMF...")
    document = load_document(dmmf, computed)

    click.echo(f"  Models: {len(document.models)}")
    click.echo(f"  Enums: {len(document.enums)}")
    click.echo(f"  Input types: {len(document.input_types)}")
    click.echo(f"  Output types: {len(document.output_types)}")
    click.echo(f"  Mappings: {len(document.mappings)}")

    with_computed = [t for t in document.input_types if t.computed_inputs]
    if computed:
        click.echo(f"  Input types with computed inputs: {len(with_computed)}")
    if verbose:
        for input_type in with_computed:
            names = ", ".join(sorted(input_type.computed_inputs))
            click.echo(f"    {input_type.name}: {names}")


@main.command()
@dmmf_option
@computed_option
@click.argument(
    "kind",
    type=click.Choice(["model", "enum", "input", "output", "mapping"]),
)
@click.argument("name")
def lookup(dmmf: str, computed: tuple[str, ...], kind: str, name: str):
    """Print one entry of a transformed DMMF document.

    Examples:

        gql-dmmf lookup --dmmf ./prisma model User

        gql-dmmf lookup -d ./prisma -c browser input UserCreateInput
    """
    document = load_document(dmmf, computed)
    try:
        lines = _describe(document, kind, name)
    except DocumentLookupError as e:
        raise click.ClickException(str(e)) from e
    for line in lines:
        click.echo(line)


def _describe(document: DmmfDocument, kind: str, name: str) -> list[str]:
    if kind == "model":
        model = document.get_model(name)
        return [f"model {model.name}"] + [
            f"  {f.name}: {_modifiers(f.type, f.is_list, f.is_required)} ({f.kind})"
            for f in model.fields
        ]
    if kind == "enum":
        enum = document.get_enum(name)
        return [f"enum {enum.name}"] + [f"  {v}" for v in enum.value_names]
    if kind == "input":
        input_type = document.get_input_type(name)
        lines = [f"input {input_type.name}"] + [
            f"  {f.name}: {_modifiers(f.input_type.type, f.input_type.is_list, f.input_type.is_required)}"
            f" ({f.input_type.kind})"
            for f in input_type.fields
        ]
        if input_type.computed_inputs:
            lines.append(f"  computed: {', '.join(sorted(input_type.computed_inputs))}")
        return lines
    if kind == "output":
        output_type = document.get_output_type(name)
        lines = [f"type {output_type.name}"]
        for f in output_type.fields:
            args = ", ".join(a.name for a in f.args)
            signature = f"({args})" if args else ""
            ref = f.output_type
            lines.append(
                f"  {f.name}{signature}: {_modifiers(ref.type, ref.is_list, ref.is_required)}"
            )
        return lines
    mapping = document.get_mapping(name)
    return [f"mapping {mapping.model}"] + [
        f"  {action}: {resolver}" for action, resolver in mapping.actions.items()
    ]


def _modifiers(type_name: str, is_list: bool, is_required: bool) -> str:
    rendered = f"[{type_name}!]" if is_list else type_name
    return f"{rendered}!" if is_required else rendered


if __name__ == "__main__":
    main()
