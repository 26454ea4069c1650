"""
Pydantic integration for the index types.

Lets OneBased* classes be used directly as pydantic field types. On the wire
an index is its 1-based integer, matching the textual format, and zero is
rejected by the same constructor that rejects it in code.
"""

from typing import Any

from pydantic import GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema


def serialize_one_based(index: Any) -> int:
    """Serialize an index as its 1-based integer."""
    return index.as_one_based().get()


def one_based_core_schema(index_type: Any) -> core_schema.CoreSchema:
    """
    Build the pydantic core schema for one index class.

    Python input may be an instance of the same class or an int; JSON input
    must be an integer. Both are strict: strings, floats and bools are
    rejected rather than coerced, as from_one_based does. Integers go
    through index_type.from_one_based, whose OneBasedError and
    TryFromIntError (both ValueError) become ValidationError entries.

    Args:
        index_type: The OneBased* class being described

    Returns:
        core_schema.CoreSchema: Validation and serialization schema
    """
    from_int = core_schema.no_info_after_validator_function(
        index_type.from_one_based,
        core_schema.int_schema(strict=True),
    )
    return core_schema.json_or_python_schema(
        json_schema=from_int,
        python_schema=core_schema.union_schema([
            core_schema.is_instance_schema(index_type),
            from_int,
        ]),
        serialization=core_schema.plain_serializer_function_ser_schema(
            serialize_one_based,
            return_schema=core_schema.int_schema(),
        ),
    )


def one_based_json_schema(
    index_type: Any,
    schema: core_schema.CoreSchema,
    handler: GetJsonSchemaHandler
) -> JsonSchemaValue:
    """Describe an index as an integer in [1, MAX] in JSON Schema."""
    json_schema = handler.resolve_ref_schema(handler(schema))
    json_schema['minimum'] = 1
    json_schema['maximum'] = index_type.MAX.as_one_based().get()
    return json_schema
