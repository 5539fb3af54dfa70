"""Typed records shared by the walker, binder, synthesizer and backends.

Two halves:
- document side (ApiDocument, PathEntry, Operation, Parameter, RequestBody)
  holds what was read from the OpenAPI document;
- generated side (TypeRef, BoundField, ArgumentBinding, ResultType,
  GeneratedOperation) is the language-neutral representation that
  backends render into source text.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping


# ---------------------------------------------------------------------------
# Document side
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ApiDocument:
    """Read-only view of a loaded OpenAPI document."""

    paths: Mapping[str, Any]
    components: Mapping[str, Any]
    raw: Mapping[str, Any] = field(repr=False)

    @classmethod
    def from_dict(cls, spec: Mapping[str, Any]) -> "ApiDocument":
        return cls(
            paths=MappingProxyType(dict(spec.get("paths") or {})),
            components=MappingProxyType(dict(spec.get("components") or {})),
            raw=MappingProxyType(dict(spec)),
        )


@dataclass(frozen=True)
class Parameter:
    name: str
    required: bool = False
    location: str = "query"
    schema: Mapping[str, Any] | None = None
    has_content: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Parameter":
        return cls(
            name=data["name"],
            required=bool(data.get("required", False)),
            location=data.get("in", "query"),
            schema=data.get("schema"),
            has_content="content" in data,
        )


@dataclass(frozen=True)
class RequestBody:
    # Payload schema is deliberately not kept: bodies are always placeholders.
    media_type: str


@dataclass(frozen=True)
class Operation:
    method: str
    operation_id: str | None
    summary: str | None = None
    description: str | None = None
    parameters: tuple[Parameter, ...] = ()
    request_body: RequestBody | None = None


@dataclass(frozen=True)
class PathEntry:
    path: str
    parameters: tuple[Parameter, ...]
    operations: Mapping[str, Mapping[str, Any]]


# ---------------------------------------------------------------------------
# Generated side
# ---------------------------------------------------------------------------

class ScalarType(str, Enum):
    TEXT = "text"
    FLOAT = "float64"
    INTEGER = "int64"
    BOOLEAN = "boolean"
    PLACEHOLDER = "placeholder"


@dataclass(frozen=True)
class TypeRef:
    scalar: ScalarType
    optional: bool = False


PLACEHOLDER = TypeRef(ScalarType.PLACEHOLDER)


class BindingKind(str, Enum):
    STATE = "state"
    PATH = "path"
    QUERY = "query"
    JSON = "json"
    FORM = "form"


@dataclass(frozen=True)
class BoundField:
    name: str
    type: TypeRef
    source: str


@dataclass(frozen=True)
class ArgumentBinding:
    """One handler argument; a path binding carries several fields."""

    kind: BindingKind
    fields: tuple[BoundField, ...] = ()


STATE_BINDING = ArgumentBinding(BindingKind.STATE)


@dataclass(frozen=True)
class ResultType:
    success: TypeRef = PLACEHOLDER
    error: TypeRef = PLACEHOLDER


NOT_IMPLEMENTED = "not-implemented"


@dataclass(frozen=True)
class GeneratedOperation:
    name: str
    method: str
    path: str
    doc_lines: tuple[str, ...]
    arguments: tuple[ArgumentBinding, ...]
    returns: ResultType = ResultType()
    body: str = NOT_IMPLEMENTED
    is_async: bool = True
