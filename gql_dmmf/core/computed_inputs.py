"""Injection of computed inputs into submitted mutation data.

Computed inputs are fields whose values come from the request (root, args
and context) rather than from the caller. They are declared at two levels:

- globally, via ``TransformOptions.globally_computed_inputs``. These are
  attached to every input type declaring the field and apply at any depth
  of the submitted data;
- locally, by a single resolver. These only apply to the top level ``data``
  argument of that resolver.

Precedence on key collisions, strongest first: locally computed, submitted
(or nested computed) values, globally computed.
"""

from collections.abc import Mapping
from typing import Any

from .document import DmmfDocument
from .ir import ComputedInputs, InputType, MutationResolverParams


def add_computed_inputs(
    *,
    input_type: InputType,
    params: MutationResolverParams,
    dmmf: DmmfDocument,
    locally_computed_inputs: ComputedInputs,
) -> dict[str, Any]:
    """Return the resolver args with computed inputs injected into ``data``.

    Args:
        input_type: The input type of the ``data`` argument
        params: The resolver params of the current request
        dmmf: The document used to resolve nested input types
        locally_computed_inputs: Resolver-level computed inputs

    Returns:
        A new args dict. ``params.args`` is left untouched.
    """
    args = dict(params.args)
    if "data" not in args:
        return args

    data = add_globally_computed_inputs(
        input_type=input_type,
        params=params,
        dmmf=dmmf,
        data=args["data"],
    )
    local_values = _evaluate(locally_computed_inputs, params)
    if isinstance(data, list):
        args["data"] = [
            {**item, **local_values} if isinstance(item, Mapping) else item
            for item in data
        ]
    else:
        args["data"] = {**(data or {}), **local_values}
    return args


def add_globally_computed_inputs(
    *,
    input_type: InputType,
    params: MutationResolverParams,
    dmmf: DmmfDocument,
    data: Any,
) -> Any:
    """Recursively populate globally computed inputs throughout ``data``.

    Lists are handled element by element. For a mapping, the computed inputs
    of ``input_type`` seed the result and every submitted field is laid over
    them, recursing into fields whose input type is an object. Any other
    value is returned as is.

    Raises:
        DocumentLookupError: If ``data`` has a field ``input_type`` does not
            declare.
    """
    if isinstance(data, list):
        return [
            add_globally_computed_inputs(
                input_type=input_type, params=params, dmmf=dmmf, data=value
            )
            for value in data
        ]
    if not isinstance(data, Mapping):
        return data

    result = _evaluate(input_type.computed_inputs, params)
    for field_name, value in data.items():
        field = input_type.get_field(field_name)
        if field.input_type.kind == "object":
            value = add_globally_computed_inputs(
                input_type=dmmf.get_input_type(field.input_type.type),
                params=params,
                dmmf=dmmf,
                data=value,
            )
        result[field_name] = value
    return result


def _evaluate(computed_inputs: ComputedInputs, params: MutationResolverParams) -> dict[str, Any]:
    return {name: fn(params) for name, fn in computed_inputs.items()}
