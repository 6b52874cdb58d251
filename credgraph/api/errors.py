# credgraph/api/errors.py


class SchemaError(Exception):
    """Raised when a schema definition references something invalid.

    This is a configuration error found while validating the schema, not a
    request error: it is never retried and never shown to API clients.
    """
