"""Turn operationIds and parameter names into snake_case identifiers.

Examples:
  getUserById      -> get_user_by_id
  HTTPServerStatus -> http_server_status
  list-pets        -> list_pets
  X-Request-ID     -> x_request_id
  page[size]       -> page_size
"""

from __future__ import annotations

import re


def _camel_to_snake(name: str) -> str:
    """Convert camelCase or PascalCase to snake_case."""
    s1 = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", name)
    return re.sub(r"([a-z\d])([A-Z])", r"\1_\2", s1).lower()


def split_words(name: str) -> list[str]:
    """Split a raw name into lowercase words on separators and case changes."""
    words: list[str] = []
    for chunk in re.split(r"[^A-Za-z0-9]+", name):
        if chunk:
            words.extend(w for w in _camel_to_snake(chunk).split("_") if w)
    return words


def to_snake_case(name: str) -> str:
    """Lowercase, split on word boundaries, rejoin with underscores."""
    return "_".join(split_words(name))
