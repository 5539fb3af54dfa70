"""Errors raised while turning an OpenAPI document into handler stubs.

Every GenerationError is fatal: the run stops at the first one and no
output is produced.
"""

from __future__ import annotations


class GenerationError(Exception):
    """Base class for errors that abort a generation run."""


class UnsupportedConstructError(GenerationError):
    """The document uses a shape the generator cannot express.

    Object/array parameter schemas, content-based parameters, unsupported
    request-body media types and `$ref` path items all end up here.
    """


class MissingOperationIdError(UnsupportedConstructError):
    """An operation has no operationId to derive a handler name from."""

    def __init__(self, method: str, path: str) -> None:
        super().__init__(f"{method.upper()} {path} has no operationId")
        self.method = method
        self.path = path


class MissingReferenceError(GenerationError):
    """A `$ref` does not resolve against the document."""

    def __init__(self, ref: str) -> None:
        super().__init__(f"unresolved reference {ref!r}")
        self.ref = ref


class DuplicateNameError(GenerationError):
    """Two operations normalize to the same handler name."""

    def __init__(self, name: str, path: str, method: str) -> None:
        super().__init__(
            f"handler name {name!r} from {method.upper()} {path} is already taken"
        )
        self.name = name
        self.path = path
        self.method = method


class UnknownBackendError(GenerationError):
    """No backend is registered under the requested name."""


class FormatterError(GenerationError):
    """A backend formatter rejected the assembled unit."""


class LoaderError(Exception):
    """The spec file could not be read or parsed."""
