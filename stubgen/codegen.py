"""Write generated output units to disk.

Takes the files mapping from engine.generate() and writes each unit
under the output directory.
"""

from __future__ import annotations

from pathlib import Path


def write_files(files: dict[str, str], out_dir: Path) -> list[Path]:
    """Write every unit to ``out_dir`` (created if missing)."""
    out_dir.mkdir(parents=True, exist_ok=True)
    written = []
    for name, content in sorted(files.items()):
        output_path = out_dir / name
        output_path.write_text(content, encoding="utf-8")
        written.append(output_path)
    return written
