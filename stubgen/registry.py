"""Registry of generated handlers keyed by normalized name."""

from __future__ import annotations

from typing import Iterator

from .errors import DuplicateNameError
from .model import GeneratedOperation


class NameRegistry:
    """Name -> GeneratedOperation, unique by name, iterated in sorted order.

    A registry belongs to one generation run; the engine creates it, passes
    it through the walk and hands it back with the emitted output.
    """

    def __init__(self) -> None:
        self._operations: dict[str, GeneratedOperation] = {}

    def add(self, operation: GeneratedOperation) -> None:
        if operation.name in self._operations:
            raise DuplicateNameError(operation.name, operation.path, operation.method)
        self._operations[operation.name] = operation

    def names(self) -> list[str]:
        return sorted(self._operations)

    def get(self, name: str) -> GeneratedOperation | None:
        return self._operations.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._operations

    def __len__(self) -> int:
        return len(self._operations)

    def __iter__(self) -> Iterator[GeneratedOperation]:
        for name in self.names():
            yield self._operations[name]
