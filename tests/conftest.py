"""Shared DMMF fixtures."""

import copy

import pytest


def scalar(type_name, is_list=False, is_required=False):
    return {"kind": "scalar", "type": type_name, "isList": is_list, "isRequired": is_required}


def obj(type_name, is_list=False, is_required=False):
    return {"kind": "object", "type": type_name, "isList": is_list, "isRequired": is_required}


def enum(type_name, is_list=False, is_required=False):
    return {"kind": "enum", "type": type_name, "isList": is_list, "isRequired": is_required}


def arg(name, *variants):
    return {"name": name, "inputType": list(variants), "isRelationFilter": False}


RAW_DMMF = {
    "datamodel": {
        "enums": [
            {"name": "Role", "values": [{"name": "USER", "dbName": None}, {"name": "ADMIN", "dbName": None}]},
        ],
        "models": [
            {
                "name": "User",
                "idFields": [],
                "fields": [
                    {"name": "id", "kind": "scalar", "type": "Int", "isList": False, "isRequired": True, "isId": True},
                    {"name": "name", "kind": "scalar", "type": "String", "isList": False, "isRequired": True},
                    {"name": "browser", "kind": "scalar", "type": "String", "isList": False, "isRequired": True},
                    {"name": "role", "kind": "enum", "type": "Role", "isList": False, "isRequired": True},
                    {
                        "name": "posts",
                        "kind": "object",
                        "type": "Post",
                        "isList": True,
                        "isRequired": False,
                        "relationName": "PostToUser",
                    },
                ],
            },
            {
                "name": "Post",
                "fields": [
                    {"name": "id", "kind": "scalar", "type": "Int", "isList": False, "isRequired": True, "isId": True},
                    {"name": "title", "kind": "scalar", "type": "String", "isList": False, "isRequired": True},
                    {"name": "browser", "kind": "scalar", "type": "String", "isList": False, "isRequired": True},
                    {
                        "name": "author",
                        "kind": "object",
                        "type": "User",
                        "isList": False,
                        "isRequired": False,
                        "relationName": "PostToUser",
                    },
                ],
            },
        ],
    },
    "schema": {
        "enums": [
            {"name": "Role", "values": ["USER", "ADMIN"]},
            {"name": "OrderByArg", "values": ["asc", "desc"]},
        ],
        "inputTypes": [
            {
                "name": "UserCreateInput",
                "fields": [
                    arg("name", scalar("String", is_required=True)),
                    arg("browser", scalar("String", is_required=True)),
                    arg("role", enum("Role")),
                    arg("posts", obj("PostCreateManyWithoutAuthorInput")),
                ],
            },
            {
                "name": "PostCreateManyWithoutAuthorInput",
                "fields": [
                    arg("create", obj("PostCreateWithoutAuthorInput", is_list=True)),
                    arg("connect", obj("PostWhereUniqueInput", is_list=True)),
                ],
            },
            {
                "name": "PostCreateWithoutAuthorInput",
                "fields": [
                    arg("title", scalar("String", is_required=True)),
                    arg("browser", scalar("String", is_required=True)),
                ],
            },
            {
                "name": "PostWhereUniqueInput",
                "fields": [arg("id", scalar("Int"))],
            },
            {
                "name": "UserWhereUniqueInput",
                "fields": [arg("id", scalar("Int"))],
            },
            {
                "name": "UserWhereInput",
                "fields": [
                    arg("id", scalar("Int"), obj("IntFilter")),
                    arg("role", scalar("String"), obj("RoleFilter"), enum("Role")),
                    arg("name", scalar("String"), scalar("Null")),
                ],
            },
            {
                "name": "IntFilter",
                "fields": [arg("equals", scalar("Int")), arg("in", scalar("Int", is_list=True))],
            },
            {
                "name": "RoleFilter",
                "fields": [arg("equals", enum("Role"))],
            },
            {
                "name": "UserOrderByInput",
                "fields": [arg("name", enum("OrderByArg"))],
            },
        ],
        "outputTypes": [
            {
                "name": "Query",
                "fields": [
                    {
                        "name": "user",
                        "args": [arg("where", obj("UserWhereUniqueInput", is_required=True))],
                        "outputType": {
                            "kind": "object",
                            "type": {"name": "User", "fields": []},
                            "isList": False,
                            "isRequired": False,
                        },
                    },
                    {
                        "name": "users",
                        "args": [
                            arg("where", obj("UserWhereInput")),
                            arg("orderBy", obj("UserOrderByInput")),
                            arg("skip", scalar("Int")),
                        ],
                        "outputType": {"kind": "object", "type": "User", "isList": True, "isRequired": True},
                    },
                ],
            },
            {
                "name": "Mutation",
                "fields": [
                    {
                        "name": "createOneUser",
                        "args": [arg("data", obj("UserCreateInput", is_required=True))],
                        "outputType": {"kind": "object", "type": "User", "isList": False, "isRequired": True},
                    },
                ],
            },
            {
                "name": "User",
                "fields": [
                    {"name": "id", "args": [], "outputType": {"kind": "scalar", "type": "Int", "isRequired": True}},
                    {"name": "name", "args": [], "outputType": {"kind": "scalar", "type": "String", "isRequired": True}},
                    {
                        "name": "posts",
                        "args": [arg("skip", scalar("Int"))],
                        "outputType": {"kind": "object", "type": {"name": "Post"}, "isList": True},
                    },
                ],
            },
        ],
    },
    "mappings": [
        {"model": "User", "findOne": "user", "findMany": "users", "create": "createOneUser", "plural": "users"},
        {"model": "Post", "findOne": "post", "findMany": "posts"},
    ],
}


@pytest.fixture
def raw_dmmf():
    """A fresh copy of the raw DMMF JSON payload."""
    return copy.deepcopy(RAW_DMMF)
