"""Entry point: python -m stubgen SPEC OUT_DIR

Reads an OpenAPI document and writes handler stubs under OUT_DIR.
"""

from __future__ import annotations

from .cli import main

if __name__ == "__main__":
    main()
