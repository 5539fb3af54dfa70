"""Walk the document's path table in a stable order.

Paths are visited sorted by path string; on each path the operations are
visited in a fixed method order. Shared and operation-scoped parameter
references are dereferenced here, before any type resolution.
"""

from __future__ import annotations

import logging
from typing import Any, Iterator, Mapping

from .errors import UnsupportedConstructError
from .loader import deref
from .model import ApiDocument, Operation, Parameter, PathEntry, RequestBody

logger = logging.getLogger(__name__)

# Priority order for emitted operations on one path. Nothing else is visited.
HTTP_METHODS: tuple[str, ...] = ("options", "head", "get", "post", "delete", "patch", "trace")

# Path item keys that may sit next to operations without being one.
_PATH_ITEM_FIELDS = {"summary", "description", "servers", "parameters"}


def resolve_parameter(document: ApiDocument, raw: Mapping[str, Any]) -> Parameter:
    """Dereference a parameter (or ``$ref`` to one) into a Parameter."""
    resolved = deref(document.raw, raw)
    if "name" not in resolved:
        raise UnsupportedConstructError("parameter without a name")
    return Parameter.from_dict(resolved)


def _resolve_parameters(document: ApiDocument, raw: list[Any] | None) -> tuple[Parameter, ...]:
    return tuple(resolve_parameter(document, p) for p in raw or ())


def _resolve_request_body(
    document: ApiDocument,
    raw: Mapping[str, Any] | None,
) -> RequestBody | None:
    if not raw:
        return None
    body = deref(document.raw, raw)
    content = body.get("content") or {}
    # Only the first declared media type selects the body binder.
    for media_type in content:
        return RequestBody(media_type=media_type)
    return None


def build_operation(
    document: ApiDocument,
    method: str,
    raw: Mapping[str, Any],
) -> Operation:
    """Turn a raw operation object into an Operation record."""
    return Operation(
        method=method,
        operation_id=raw.get("operationId"),
        summary=raw.get("summary"),
        description=raw.get("description"),
        parameters=_resolve_parameters(document, raw.get("parameters")),
        request_body=_resolve_request_body(document, raw.get("requestBody")),
    )


def iter_paths(document: ApiDocument) -> Iterator[PathEntry]:
    """Yield every path entry, sorted by path."""
    for path in sorted(document.paths):
        path_item = document.paths[path] or {}
        if "$ref" in path_item:
            raise UnsupportedConstructError(f"path item {path} is a $ref, which is not supported")

        logger.debug("Visiting path %s", path)
        operations = {}
        for key, value in path_item.items():
            if key in HTTP_METHODS:
                operations[key] = value
            elif key not in _PATH_ITEM_FIELDS and not key.startswith("x-"):
                logger.warning("Skipping %s %s: method not supported", key.upper(), path)

        yield PathEntry(
            path=path,
            parameters=_resolve_parameters(document, path_item.get("parameters")),
            operations=operations,
        )


def iter_operations(
    document: ApiDocument,
    entry: PathEntry,
) -> Iterator[tuple[str, Operation]]:
    """Yield (method, operation) pairs for one path in HTTP_METHODS order."""
    for method in HTTP_METHODS:
        if method not in entry.operations:
            continue
        yield method, build_operation(document, method, entry.operations[method])
