"""Map scalar parameter schemas to language-neutral types.

Only string, number, integer and boolean are supported. Anything else
(objects, arrays, compositions, content-based parameters) aborts the run.
"""

from __future__ import annotations

from typing import Any, Mapping

from .errors import UnsupportedConstructError
from .loader import resolve_ref
from .model import Parameter, ScalarType, TypeRef

_SCALAR_TYPES: dict[str, ScalarType] = {
    "string": ScalarType.TEXT,
    "number": ScalarType.FLOAT,
    "integer": ScalarType.INTEGER,
    "boolean": ScalarType.BOOLEAN,
}

_COMPOSITION_KEYS = ("allOf", "oneOf", "anyOf", "not")


def resolve_schema_kind(
    schema: Mapping[str, Any],
    spec: Mapping[str, Any] | None = None,
) -> ScalarType:
    """Resolve an OpenAPI schema to a scalar type, or fail."""
    if "$ref" in schema:
        if spec is None:
            raise UnsupportedConstructError(f"cannot resolve schema reference {schema['$ref']!r}")
        schema = resolve_ref(spec, schema["$ref"])

    for key in _COMPOSITION_KEYS:
        if key in schema:
            raise UnsupportedConstructError(f"{key} schemas are not supported for parameters")

    schema_type = schema.get("type")
    if isinstance(schema_type, list):
        # OpenAPI 3.1 spells a nullable scalar as ["T", "null"].
        non_null = [t for t in schema_type if t != "null"]
        if len(non_null) != 1:
            raise UnsupportedConstructError(f"unsupported parameter schema type {schema_type!r}")
        schema_type = non_null[0]
    if not isinstance(schema_type, str):
        raise UnsupportedConstructError(f"unsupported parameter schema type {schema_type!r}")
    if schema_type in _SCALAR_TYPES:
        return _SCALAR_TYPES[schema_type]
    if schema_type in ("object", "array"):
        raise UnsupportedConstructError(f"{schema_type} parameters are not supported")
    raise UnsupportedConstructError(f"unsupported parameter schema type {schema_type!r}")


def resolve_parameter_type(
    parameter: Parameter,
    spec: Mapping[str, Any] | None = None,
) -> TypeRef:
    """Resolve a parameter's type, wrapping it in optional when not required."""
    if parameter.has_content:
        raise UnsupportedConstructError(
            f"parameter {parameter.name!r} uses content instead of schema"
        )
    if parameter.schema is None:
        raise UnsupportedConstructError(f"parameter {parameter.name!r} has no schema")

    try:
        scalar = resolve_schema_kind(parameter.schema, spec)
    except UnsupportedConstructError as exc:
        raise UnsupportedConstructError(f"parameter {parameter.name!r}: {exc}") from exc
    return TypeRef(scalar, optional=not parameter.required)
