"""Shared fixtures for the stub generator tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from stubgen.loader import load_spec
from stubgen.model import ApiDocument

FIXTURES = Path(__file__).parent / "fixtures"


def _make_spec(paths: dict[str, Any], components: dict[str, Any] | None = None) -> dict[str, Any]:
    """Wrap a path table in a minimal OpenAPI document."""
    spec: dict[str, Any] = {
        "openapi": "3.0.3",
        "info": {"title": "Test", "version": "1.0"},
        "paths": paths,
    }
    if components is not None:
        spec["components"] = components
    return spec


@pytest.fixture
def make_spec():
    """Factory for minimal documents: make_spec(paths, components=None)."""
    return _make_spec


@pytest.fixture
def users_path() -> Path:
    return FIXTURES / "users.yaml"


@pytest.fixture
def users_spec(users_path) -> dict[str, Any]:
    return load_spec(users_path)


@pytest.fixture
def users_document(users_spec) -> ApiDocument:
    return ApiDocument.from_dict(users_spec)


@pytest.fixture
def health_path() -> Path:
    return FIXTURES / "health.json"
