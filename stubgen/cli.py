"""Command-line entry point: stubgen SPEC OUT_DIR."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from .backends import BACKENDS, DEFAULT_BACKEND
from .codegen import write_files
from .engine import generate
from .errors import GenerationError, LoaderError
from .loader import load_spec


@click.command()
@click.argument("spec", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("out_dir", type=click.Path(file_okay=False, path_type=Path))
@click.option(
    "--backend",
    default=DEFAULT_BACKEND,
    envvar="STUBGEN_BACKEND",
    show_default=True,
    type=click.Choice(sorted(BACKENDS)),
    help="Target language backend.",
)
@click.option("--stdout", "to_stdout", is_flag=True, help="Print the generated source instead of writing files.")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(spec: Path, out_dir: Path, backend: str, to_stdout: bool, verbose: bool):
    """Generate server handler stubs from an OpenAPI document."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        result = generate(load_spec(spec), backend=backend)
    except (GenerationError, LoaderError) as exc:
        raise click.ClickException(str(exc)) from exc

    if to_stdout:
        for content in result.files.values():
            click.echo(content, nl=False)
        return

    for output_path in write_files(result.files, out_dir):
        click.echo(f"Generated {output_path} ({result.handler_count} handlers)")
