# credgraph/api/schema.py
"""
Base GraphQL SDL plus the builtin credential type-sets.
The application imports build_type_defs()/build_bindables() and hands the
result to ariadne.make_executable_schema.
Edit the SDL below to add/remove root fields; credential types are defined in
credgraph/api/builtins/credential_types.py.
"""
from credgraph.api.builtins.credential_types import create_credential_types

type_defs = """
schema {
  query: Query
}

type Query {
  ping: String!
  viewer: User
  user(id: ID!): User
}

type User {
  id: ID!
  username: String
  credentials: ReindexCredentialCollection
}
"""

credential_type_sets = create_credential_types()


def build_type_defs(type_sets=None) -> list:
    type_sets = credential_type_sets if type_sets is None else type_sets
    return [type_defs, *(type_set.type_defs for type_set in type_sets)]


def build_bindables(type_sets=None) -> list:
    type_sets = credential_type_sets if type_sets is None else type_sets
    bindables = []
    for type_set in type_sets:
        bindables.extend(type_set.bindables)
    return bindables
