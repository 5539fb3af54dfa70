"""Build one GeneratedOperation per (method, operation) pair."""

from __future__ import annotations

import textwrap
from typing import Any, Mapping

from .binder import build_arguments
from .errors import MissingOperationIdError
from .model import NOT_IMPLEMENTED, ArgumentBinding, GeneratedOperation, Operation, ResultType
from .naming import to_snake_case

WRAP_WIDTH = 80


def _wrap_description(description: str) -> list[str]:
    lines: list[str] = []
    for source_line in description.strip().splitlines():
        # Blank source lines survive as blank doc lines (paragraph breaks).
        lines.extend(textwrap.wrap(source_line, WRAP_WIDTH) or [""])
    return lines


def build_doc_lines(method: str, path: str, operation: Operation) -> tuple[str, ...]:
    """Doc comment: ``[METHOD] /path``, then summary, then wrapped description."""
    lines = [f"[{method.upper()}] {path}"]
    if operation.summary:
        lines.append(" ".join(operation.summary.split()))
    if operation.description and operation.description.strip():
        lines.extend(_wrap_description(operation.description))
    return tuple(lines)


def operation_name(method: str, path: str, operation: Operation) -> str:
    operation_id = operation.operation_id
    if not isinstance(operation_id, str) or not to_snake_case(operation_id):
        raise MissingOperationIdError(method, path)
    return to_snake_case(operation_id)


def synthesize_operation(
    path: str,
    method: str,
    operation: Operation,
    path_binding: ArgumentBinding | None,
    spec: Mapping[str, Any] | None = None,
) -> GeneratedOperation:
    """Build the handler record for one operation."""
    name = operation_name(method, path, operation)
    return GeneratedOperation(
        name=name,
        method=method,
        path=path,
        doc_lines=build_doc_lines(method, path, operation),
        arguments=build_arguments(path_binding, operation, spec),
        returns=ResultType(),
        body=NOT_IMPLEMENTED,
        is_async=True,
    )
