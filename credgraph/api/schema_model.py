# credgraph/api/schema_model.py
"""
Read-only view of a schema used by schema validators.

Schema.types maps type name -> Type; Type.fields maps field name -> Field.
A field's `type` tag is "Connection" when it is a paginated to-many relation
(edges/cursor style), otherwise the name of the type it returns.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Optional

from graphql import (
    GraphQLInterfaceType,
    GraphQLObjectType,
    GraphQLSchema,
    get_named_type,
)

CONNECTION = "Connection"


@dataclass(frozen=True)
class Field:
    name: str
    type: str
    # for connections, the type of the nodes on the other end
    of_type: Optional[str] = None


@dataclass(frozen=True)
class Type:
    name: str
    fields: Dict[str, Field] = field(default_factory=dict)


@dataclass(frozen=True)
class Schema:
    types: Dict[str, Type] = field(default_factory=dict)

    @classmethod
    def from_graphql(cls, graphql_schema: GraphQLSchema) -> "Schema":
        types = {}
        for name, graphql_type in graphql_schema.type_map.items():
            if name.startswith("__"):
                continue
            if not isinstance(graphql_type, (GraphQLObjectType, GraphQLInterfaceType)):
                continue
            types[name] = Type(
                name=name,
                fields={
                    field_name: _field_from_graphql(field_name, graphql_field)
                    for field_name, graphql_field in graphql_type.fields.items()
                },
            )
        return cls(types=types)


def _is_connection_type(graphql_type) -> bool:
    return (
        isinstance(graphql_type, GraphQLObjectType)
        and graphql_type.name.endswith(CONNECTION)
        and "edges" in graphql_type.fields
    )


def _field_from_graphql(name: str, graphql_field) -> Field:
    named = get_named_type(graphql_field.type)
    if _is_connection_type(named):
        node_type = named.name[: -len(CONNECTION)] or None
        return Field(name=name, type=CONNECTION, of_type=node_type)
    return Field(name=name, type=named.name)


def is_connection(field: Field) -> bool:
    return field.type == CONNECTION
