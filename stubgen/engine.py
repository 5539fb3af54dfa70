"""Run one generation pass: walk the document, synthesize handlers, emit.

The pass is fail-fast. Any GenerationError propagates out of generate()
before anything is emitted, so callers never see partial output.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping

from .backends import DEFAULT_BACKEND, Backend, get_backend
from .binder import build_path_binding
from .emitter import emit
from .model import ApiDocument
from .registry import NameRegistry
from .synthesizer import synthesize_operation
from .walker import iter_operations, iter_paths

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationResult:
    files: dict[str, str]
    registry: NameRegistry

    @property
    def handler_count(self) -> int:
        return len(self.registry)


def build_registry(document: ApiDocument, registry: NameRegistry | None = None) -> NameRegistry:
    """Synthesize every operation of the document into ``registry``."""
    if registry is None:
        registry = NameRegistry()

    for entry in iter_paths(document):
        # Built once per path and shared by every method on it.
        path_binding = build_path_binding(entry.parameters, document.raw)
        for method, operation in iter_operations(document, entry):
            registry.add(
                synthesize_operation(entry.path, method, operation, path_binding, document.raw)
            )
    return registry


def generate(
    spec: Mapping[str, Any] | ApiDocument,
    backend: str | Backend = DEFAULT_BACKEND,
) -> GenerationResult:
    """Generate handler stubs for ``spec`` with the given backend."""
    if isinstance(backend, str):
        backend = get_backend(backend)
    document = spec if isinstance(spec, ApiDocument) else ApiDocument.from_dict(spec)

    registry = build_registry(document)
    files = emit(registry, backend)
    logger.info("Generated %d handlers with the %s backend", len(registry), backend.name)
    return GenerationResult(files=files, registry=registry)
