"""Build the ordered argument list of a generated handler.

Composition, in order:
  1. the shared server state (always)
  2. one tuple binding for the path's shared parameters (if any)
  3. one query binding per operation parameter
  4. one body binding when a request body is declared
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from .errors import UnsupportedConstructError
from .model import (
    PLACEHOLDER,
    STATE_BINDING,
    ArgumentBinding,
    BindingKind,
    BoundField,
    Operation,
    Parameter,
)
from .naming import to_snake_case
from .typemap import resolve_parameter_type

# Request-body media type -> binder kind
SUPPORTED_MEDIA_TYPES: dict[str, BindingKind] = {
    "application/json": BindingKind.JSON,
    "application/x-www-form-urlencoded": BindingKind.FORM,
}

BODY_FIELD_NAME = "request"


def _bind_field(parameter: Parameter, spec: Mapping[str, Any] | None) -> BoundField:
    name = to_snake_case(parameter.name)
    if not name:
        raise UnsupportedConstructError(
            f"cannot derive an identifier from parameter name {parameter.name!r}"
        )
    return BoundField(
        name=name,
        type=resolve_parameter_type(parameter, spec),
        source=parameter.name,
    )


def build_path_binding(
    parameters: Iterable[Parameter],
    spec: Mapping[str, Any] | None = None,
) -> ArgumentBinding | None:
    """Combine a path's shared parameters into one tuple binding."""
    fields = tuple(_bind_field(p, spec) for p in parameters)
    if not fields:
        return None
    return ArgumentBinding(BindingKind.PATH, fields)


def build_body_binding(operation: Operation) -> ArgumentBinding | None:
    """Pick the body binder from the first declared media type."""
    if operation.request_body is None:
        return None
    media_type = operation.request_body.media_type
    kind = SUPPORTED_MEDIA_TYPES.get(media_type)
    if kind is None:
        raise UnsupportedConstructError(
            f"{operation.method.upper()} {operation.operation_id}: "
            f"unsupported request body media type {media_type!r}"
        )
    return ArgumentBinding(kind, (BoundField(BODY_FIELD_NAME, PLACEHOLDER, media_type),))


def build_arguments(
    path_binding: ArgumentBinding | None,
    operation: Operation,
    spec: Mapping[str, Any] | None = None,
) -> tuple[ArgumentBinding, ...]:
    """Build the full argument list for one operation."""
    arguments = [STATE_BINDING]
    if path_binding is not None:
        arguments.append(path_binding)

    # Every operation-scoped parameter is bound query-style, whatever its `in`.
    for parameter in operation.parameters:
        arguments.append(ArgumentBinding(BindingKind.QUERY, (_bind_field(parameter, spec),)))

    body = build_body_binding(operation)
    if body is not None:
        arguments.append(body)
    return tuple(arguments)
