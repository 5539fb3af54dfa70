"""Target-language backends, looked up by name."""

from __future__ import annotations

from ..errors import UnknownBackendError
from .axum import AxumBackend
from .base import Backend
from .fastapi import FastApiBackend

BACKENDS: dict[str, type[Backend]] = {
    AxumBackend.name: AxumBackend,
    FastApiBackend.name: FastApiBackend,
}

DEFAULT_BACKEND = AxumBackend.name


def get_backend(name: str) -> Backend:
    """Instantiate the backend registered under ``name``."""
    try:
        return BACKENDS[name]()
    except KeyError:
        choices = ", ".join(sorted(BACKENDS))
        raise UnknownBackendError(f"unknown backend {name!r} (choose from {choices})") from None


__all__ = ["BACKENDS", "DEFAULT_BACKEND", "Backend", "get_backend"]
