# credgraph/api/validators/is_connection.py
"""
Schema rule checking that a field referenced by name is a connection.

The schema-compilation pipeline builds one IsConnectionValidator per rule
parameter that names a connection field (e.g. an ordering or filter argument),
then calls validate(schema, field_name, parameters) with the parameters of the
rule being checked; run_validators applies a list of such rules in order.
Schema.from_graphql gives the read-only schema view the rules expect.
"""
from dataclasses import dataclass
from typing import Iterable, Mapping

from credgraph.api.errors import SchemaError
from credgraph.api.schema_model import Schema, is_connection


@dataclass(frozen=True)
class IsConnectionValidator:
    """
    Checks that the type named by parameters[type_parameter] has a field
    called `name`, and that the field is a connection.

    If the schema has no such type the check passes; a dangling type
    reference is left for other rules to report.
    """

    type_parameter: str

    def validate(self, schema: Schema, name: str, parameters: Mapping) -> bool:
        existing_type = schema.types.get(parameters.get(self.type_parameter))
        if existing_type:
            existing_field = existing_type.fields.get(name)
            if not existing_field:
                raise SchemaError(
                    f'Type "{existing_type.name}" does not have a field "{name}".'
                )
            if not is_connection(existing_field):
                raise SchemaError(
                    f'Field "{name}" of "{existing_type.name}" is not a connection. '
                    "Expected a connection field."
                )
        return True


def run_validators(validators: Iterable, schema: Schema, name: str, parameters: Mapping) -> bool:
    for validator in validators:
        validator.validate(schema, name, parameters)
    return True
