#!/usr/bin/env python3
"""Demonstration of the DMMF pipeline.

This script shows how to:
1. Load and transform a DMMF document
2. Publish the mutation arguments with graphql-core
3. Inject computed inputs into submitted mutation data

Pass the path of a DMMF JSON file (or a directory holding dmmf.json).
"""

import sys

from gql_dmmf.core import (
    DocumentLoadError,
    MutationResolverParams,
    SchemaBuildSession,
    SchemaPublisher,
    TransformOptions,
    add_computed_inputs,
    get_transformed_dmmf,
)


def main():
    if len(sys.argv) != 2:
        print("Usage: demo_computed_inputs.py <dmmf.json>")
        return

    print("=== DMMF Pipeline Demo ===\n")

    print("1. Loading DMMF...")
    options = TransformOptions(
        globally_computed_inputs={"browser": lambda params: params.ctx["browser"]}
    )
    try:
        dmmf = get_transformed_dmmf(sys.argv[1], options)
    except DocumentLoadError as e:
        print(f"   {e}")
        return
    print(f"   {len(dmmf.models)} models, {len(dmmf.input_types)} input types")

    print("\n2. Publishing Mutation arguments...")
    session = SchemaBuildSession(dmmf)
    publisher = SchemaPublisher(session)
    mutation = dmmf.mutation_type
    for field in mutation.fields:
        args = publisher.field_args(mutation.name, field.name)
        rendered = ", ".join(f"{name}: {arg.type}" for name, arg in args.items())
        print(f"   {field.name}({rendered})")
    missing = session.missing_types()
    if missing:
        print(f"   Types still to define: {', '.join(missing)}")
    dmmf = session.finish()

    print("\n3. Injecting computed inputs into createOneUser...")
    if not dmmf.has_input_type("UserCreateInput"):
        print("   No UserCreateInput in this document")
        return
    params = MutationResolverParams(
        root=None,
        args={"data": {"name": "Alice"}},
        ctx={"browser": "Chrome"},
    )
    args = add_computed_inputs(
        input_type=dmmf.get_input_type("UserCreateInput"),
        params=params,
        dmmf=dmmf,
        locally_computed_inputs={},
    )
    print(f"   {args['data']}")

    print("\n=== Demo Complete ===")


if __name__ == "__main__":
    main()
