"""Generate server handler stubs from OpenAPI documents."""

from .engine import GenerationResult, generate

__version__ = "0.1.0"

__all__ = ["GenerationResult", "generate"]
