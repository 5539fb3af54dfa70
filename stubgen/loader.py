"""Load an OpenAPI spec from disk and resolve local $ref pointers.

JSON and YAML documents are both accepted; the suffix picks the parser.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

import yaml

from .errors import LoaderError, MissingReferenceError, UnsupportedConstructError

_YAML_SUFFIXES = {".yaml", ".yml"}


def load_spec(path: Path) -> dict[str, Any]:
    """Load the OpenAPI spec from disk."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise LoaderError(f"cannot read {path}: {exc}") from exc

    try:
        if Path(path).suffix.lower() in _YAML_SUFFIXES:
            spec = yaml.safe_load(text)
        else:
            spec = json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise LoaderError(f"cannot parse {path}: {exc}") from exc

    if not isinstance(spec, dict):
        raise LoaderError(f"{path} does not contain an OpenAPI document")
    return spec


def _unescape(token: str) -> str:
    return token.replace("~1", "/").replace("~0", "~")


def resolve_ref(
    spec: Mapping[str, Any],
    ref: str,
    _seen: frozenset[str] = frozenset(),
) -> Mapping[str, Any]:
    """Resolve a local $ref pointer (``#/components/...``) in the spec."""
    if ref in _seen:
        raise UnsupportedConstructError(f"circular reference {ref!r}")
    if not ref.startswith("#/"):
        raise UnsupportedConstructError(f"only local references are supported, got {ref!r}")

    node: Any = spec
    for part in ref[2:].split("/"):
        if not isinstance(node, Mapping) or _unescape(part) not in node:
            raise MissingReferenceError(ref)
        node = node[_unescape(part)]

    if not isinstance(node, Mapping):
        raise MissingReferenceError(ref)
    if "$ref" in node:
        return resolve_ref(spec, node["$ref"], _seen | {ref})
    return node


def deref(spec: Mapping[str, Any], node: Mapping[str, Any]) -> Mapping[str, Any]:
    """Return ``node`` itself, or its target when it is a ``$ref`` object."""
    if "$ref" in node:
        return resolve_ref(spec, node["$ref"])
    return node
