"""Assemble every generated handler into one output unit."""

from __future__ import annotations

import re

from .backends import Backend
from .registry import NameRegistry


def strip_marker(text: str, marker: str) -> str:
    """Blank out the separator declarations left between generated items."""
    return re.sub(rf"^{re.escape(marker)}$", "", text, flags=re.MULTILINE)


def emit(registry: NameRegistry, backend: Backend) -> dict[str, str]:
    """Render, format and clean the unit; returns {unit name: text}."""
    assembled = backend.render(list(registry))
    formatted = backend.format(assembled)
    return {backend.unit_name: strip_marker(formatted, backend.marker)}
