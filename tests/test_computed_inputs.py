"""Tests for computed input injection."""

import pytest

from gql_dmmf.core.computed_inputs import add_computed_inputs, add_globally_computed_inputs
from gql_dmmf.core.document import DmmfDocument
from gql_dmmf.core.errors import DocumentLookupError
from gql_dmmf.core.ir import MutationResolverParams
from gql_dmmf.core.raw import RawDocument
from gql_dmmf.core.transformer import TransformOptions, transform


def browser_from_ctx(params):
    return params.ctx["browser"]


@pytest.fixture
def dmmf(raw_dmmf):
    options = TransformOptions(globally_computed_inputs={"browser": browser_from_ctx})
    return DmmfDocument(transform(RawDocument.model_validate(raw_dmmf), options))


@pytest.fixture
def plain_dmmf(raw_dmmf):
    """The same document without any globally computed inputs."""
    return DmmfDocument(transform(RawDocument.model_validate(raw_dmmf)))


def make_params(data, browser="Chrome", **args):
    return MutationResolverParams(root=None, args={"data": data, **args}, ctx={"browser": browser})


class TestAddComputedInputs:
    """Tests for the resolver-level entry point."""

    def test_global_computed_input_added(self, dmmf):
        params = make_params({"name": "Alice"})
        result = add_computed_inputs(
            input_type=dmmf.get_input_type("UserCreateInput"),
            params=params,
            dmmf=dmmf,
            locally_computed_inputs={},
        )
        assert result == {"data": {"browser": "Chrome", "name": "Alice"}}

    def test_other_args_preserved(self, dmmf):
        params = make_params({"name": "Alice"}, select={"id": True})
        result = add_computed_inputs(
            input_type=dmmf.get_input_type("UserCreateInput"),
            params=params,
            dmmf=dmmf,
            locally_computed_inputs={},
        )
        assert result["select"] == {"id": True}

    def test_params_not_mutated(self, dmmf):
        data = {"name": "Alice", "posts": {"create": [{"title": "Hello"}]}}
        params = make_params(data)
        add_computed_inputs(
            input_type=dmmf.get_input_type("UserCreateInput"),
            params=params,
            dmmf=dmmf,
            locally_computed_inputs={"role": lambda p: "ADMIN"},
        )
        assert params.args["data"] == {"name": "Alice", "posts": {"create": [{"title": "Hello"}]}}

    def test_locally_computed_input_added(self, plain_dmmf):
        params = make_params({"name": "Alice", "browser": "Firefox"})
        result = add_computed_inputs(
            input_type=plain_dmmf.get_input_type("UserCreateInput"),
            params=params,
            dmmf=plain_dmmf,
            locally_computed_inputs={"role": lambda p: "ADMIN"},
        )
        assert result["data"] == {"name": "Alice", "browser": "Firefox", "role": "ADMIN"}

    def test_local_overrides_submitted(self, plain_dmmf):
        params = make_params({"name": "Alice", "browser": "Firefox"})
        result = add_computed_inputs(
            input_type=plain_dmmf.get_input_type("UserCreateInput"),
            params=params,
            dmmf=plain_dmmf,
            locally_computed_inputs={"browser": browser_from_ctx},
        )
        assert result["data"]["browser"] == "Chrome"

    def test_local_overrides_global(self, dmmf):
        params = make_params({"name": "Alice"})
        result = add_computed_inputs(
            input_type=dmmf.get_input_type("UserCreateInput"),
            params=params,
            dmmf=dmmf,
            locally_computed_inputs={"browser": lambda p: "Local"},
        )
        assert result["data"] == {"browser": "Local", "name": "Alice"}

    def test_local_only_applies_to_top_level(self, dmmf):
        data = {"name": "Alice", "posts": {"create": [{"title": "Hello"}]}}
        params = make_params(data)
        result = add_computed_inputs(
            input_type=dmmf.get_input_type("UserCreateInput"),
            params=params,
            dmmf=dmmf,
            locally_computed_inputs={"browser": lambda p: "Local"},
        )
        assert result["data"]["browser"] == "Local"
        assert result["data"]["posts"]["create"] == [{"browser": "Chrome", "title": "Hello"}]

    def test_computed_functions_receive_params(self, dmmf):
        seen = []

        def record(params):
            seen.append(params)
            return "x"

        params = make_params({"name": "Alice"})
        add_computed_inputs(
            input_type=dmmf.get_input_type("UserCreateInput"),
            params=params,
            dmmf=dmmf,
            locally_computed_inputs={"role": record},
        )
        assert seen == [params]

    def test_list_data(self, dmmf):
        params = make_params([{"name": "Alice"}, {"name": "Bob"}])
        result = add_computed_inputs(
            input_type=dmmf.get_input_type("UserCreateInput"),
            params=params,
            dmmf=dmmf,
            locally_computed_inputs={"role": lambda p: "USER"},
        )
        assert result["data"] == [
            {"browser": "Chrome", "name": "Alice", "role": "USER"},
            {"browser": "Chrome", "name": "Bob", "role": "USER"},
        ]

    def test_list_data_with_null_element(self, dmmf):
        params = make_params([{"name": "Alice"}, None])
        result = add_computed_inputs(
            input_type=dmmf.get_input_type("UserCreateInput"),
            params=params,
            dmmf=dmmf,
            locally_computed_inputs={"role": lambda p: "USER"},
        )
        assert result["data"] == [
            {"browser": "Chrome", "name": "Alice", "role": "USER"},
            None,
        ]

    def test_missing_data_returns_args_unchanged(self, dmmf):
        params = MutationResolverParams(root=None, args={"where": {"id": 1}}, ctx={})
        result = add_computed_inputs(
            input_type=dmmf.get_input_type("UserCreateInput"),
            params=params,
            dmmf=dmmf,
            locally_computed_inputs={"role": lambda p: "USER"},
        )
        assert result == {"where": {"id": 1}}
        assert result is not params.args

    def test_unknown_field_raises(self, dmmf):
        params = make_params({"nickname": "Al"})
        with pytest.raises(DocumentLookupError) as exc_info:
            add_computed_inputs(
                input_type=dmmf.get_input_type("UserCreateInput"),
                params=params,
                dmmf=dmmf,
                locally_computed_inputs={},
            )
        assert exc_info.value.name == "nickname"


class TestAddGloballyComputedInputs:
    """Tests for the recursive global pass."""

    def test_nested_object_gets_computed_inputs(self, dmmf):
        result = add_globally_computed_inputs(
            input_type=dmmf.get_input_type("PostCreateManyWithoutAuthorInput"),
            params=make_params(None),
            dmmf=dmmf,
            data={"create": {}},
        )
        assert result == {"create": {"browser": "Chrome"}}

    def test_deeply_nested_lists(self, dmmf):
        data = {
            "name": "Alice",
            "posts": {
                "create": [{"title": "First"}, {"title": "Second"}],
                "connect": [{"id": 1}],
            },
        }
        result = add_globally_computed_inputs(
            input_type=dmmf.get_input_type("UserCreateInput"),
            params=make_params(data, browser="Safari"),
            dmmf=dmmf,
            data=data,
        )
        assert result == {
            "browser": "Safari",
            "name": "Alice",
            "posts": {
                "create": [
                    {"browser": "Safari", "title": "First"},
                    {"browser": "Safari", "title": "Second"},
                ],
                "connect": [{"id": 1}],
            },
        }

    def test_list_order_preserved(self, dmmf):
        data = [{"title": str(i)} for i in range(5)]
        result = add_globally_computed_inputs(
            input_type=dmmf.get_input_type("PostCreateWithoutAuthorInput"),
            params=make_params(data),
            dmmf=dmmf,
            data=data,
        )
        assert [item["title"] for item in result] == ["0", "1", "2", "3", "4"]
        assert all(item["browser"] == "Chrome" for item in result)

    def test_submitted_value_overrides_global(self, raw_dmmf):
        # Bypass the field removal to exercise the merge order directly
        document = transform(RawDocument.model_validate(raw_dmmf))
        dmmf = DmmfDocument(document)
        input_type = dmmf.get_input_type("PostCreateWithoutAuthorInput")
        input_type.computed_inputs["browser"] = browser_from_ctx
        result = add_globally_computed_inputs(
            input_type=input_type,
            params=make_params(None),
            dmmf=dmmf,
            data={"title": "Hello", "browser": "Submitted"},
        )
        assert result == {"title": "Hello", "browser": "Submitted"}

    def test_null_nested_value_passes_through(self, dmmf):
        result = add_globally_computed_inputs(
            input_type=dmmf.get_input_type("UserCreateInput"),
            params=make_params(None),
            dmmf=dmmf,
            data={"name": "Alice", "posts": None},
        )
        assert result == {"browser": "Chrome", "name": "Alice", "posts": None}

    def test_scalar_values_untouched(self, plain_dmmf):
        result = add_globally_computed_inputs(
            input_type=plain_dmmf.get_input_type("IntFilter"),
            params=make_params(None),
            dmmf=plain_dmmf,
            data={"equals": 3, "in": [1, 2]},
        )
        assert result == {"equals": 3, "in": [1, 2]}

    def test_unknown_nested_field_raises(self, dmmf):
        with pytest.raises(DocumentLookupError):
            add_globally_computed_inputs(
                input_type=dmmf.get_input_type("UserCreateInput"),
                params=make_params(None),
                dmmf=dmmf,
                data={"posts": {"create": [{"body": "x"}]}},
            )


class TestContextArgsScenario:
    """A browser taken from the request context never reaches the API."""

    def test_browser_from_context(self):
        raw = RawDocument.model_validate(
            {
                "datamodel": {
                    "models": [
                        {
                            "name": "User",
                            "fields": [
                                {"name": "id", "kind": "scalar", "type": "Int", "isRequired": True},
                                {"name": "name", "kind": "scalar", "type": "String", "isRequired": True},
                                {"name": "browser", "kind": "scalar", "type": "String", "isRequired": True},
                            ],
                        }
                    ],
                },
                "schema": {
                    "inputTypes": [
                        {
                            "name": "UserCreateInput",
                            "fields": [
                                {"name": "name", "inputType": [{"kind": "scalar", "type": "String"}]},
                                {"name": "browser", "inputType": [{"kind": "scalar", "type": "String"}]},
                            ],
                        }
                    ],
                },
            }
        )
        options = TransformOptions(globally_computed_inputs={"browser": lambda p: p.ctx.browser})
        dmmf = DmmfDocument(transform(raw, options))
        user_create = dmmf.get_input_type("UserCreateInput")
        assert [f.name for f in user_create.fields] == ["name"]

        class Context:
            browser = "Chrome"

        params = MutationResolverParams(root=None, args={"data": {"name": "Alice"}}, ctx=Context())
        result = add_computed_inputs(
            input_type=user_create,
            params=params,
            dmmf=dmmf,
            locally_computed_inputs={},
        )
        assert result["data"] == {"browser": "Chrome", "name": "Alice"}


class TestDoublyNestedPrecedence:
    """Global computed inputs at a nested type combined with resolver-level ones."""

    def test_local_does_not_leak_into_nested_types(self, dmmf):
        data = {"name": "Alice", "posts": {"create": [{"title": "Hello"}]}}
        result = add_computed_inputs(
            input_type=dmmf.get_input_type("UserCreateInput"),
            params=make_params(data),
            dmmf=dmmf,
            locally_computed_inputs={"browser": lambda p: "Local", "role": lambda p: "ADMIN"},
        )
        assert result["data"] == {
            "browser": "Local",
            "name": "Alice",
            "role": "ADMIN",
            "posts": {"create": [{"browser": "Chrome", "title": "Hello"}]},
        }

    def test_local_replaces_nested_submitted_object(self, dmmf):
        data = {"name": "Alice", "posts": {"create": [{"title": "Submitted"}]}}
        replacement = {"create": [{"title": "Computed"}]}
        result = add_computed_inputs(
            input_type=dmmf.get_input_type("UserCreateInput"),
            params=make_params(data),
            dmmf=dmmf,
            locally_computed_inputs={"posts": lambda p: replacement},
        )
        # Resolver-level values are used verbatim, without the global pass
        assert result["data"]["posts"] == {"create": [{"title": "Computed"}]}
