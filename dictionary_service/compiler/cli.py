# dictionary_service/compiler/cli.py
"""Compile a declarative dictionary seed (JSON) into an embeddable seed module."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import NoReturn, Optional, Tuple

import click

from dictionary_service.compiler.compile import GEO_SETS, compile_source, parse_source
from dictionary_service.compiler.render import render_module
from dictionary_service.errors import SpecError


def _fail(message: str) -> NoReturn:
    click.echo(message, err=True)
    sys.exit(1)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("input_path", required=False, type=click.Path(path_type=Path))
@click.argument("output_path", required=False, type=click.Path(path_type=Path))
@click.option(
    "--exclude-set",
    "exclude_sets",
    multiple=True,
    default=GEO_SETS,
    show_default=True,
    help="Set name to leave out (repeatable)",
)
@click.option("--include-all-sets", is_flag=True, help="Do not exclude any set")
@click.option(
    "--allow-root-fallback",
    is_flag=True,
    help="Store options with an undefined parent as root-level instead of failing",
)
@click.option("--seed-id", type=str, default=None, help="Override the seed unit id")
@click.option("--description", type=str, default=None, help="Override the seed unit description")
def main(
    input_path: Optional[Path],
    output_path: Optional[Path],
    exclude_sets: Tuple[str, ...],
    include_all_sets: bool,
    allow_root_fallback: bool,
    seed_id: Optional[str],
    description: Optional[str],
) -> None:
    """Compile INPUT_PATH (JSON) into the Python seed module OUTPUT_PATH."""
    if input_path is None or output_path is None:
        _fail("Usage: dictionary-seeds-compile <input.json> <output.py>")

    try:
        raw = input_path.read_bytes()
    except OSError as e:
        _fail(f"Error reading file: {e}")

    try:
        compiled = compile_source(
            parse_source(raw),
            exclude_sets=() if include_all_sets else exclude_sets,
            allow_root_fallback=allow_root_fallback,
            seed_id=seed_id,
            description=description,
        )
    except SpecError as e:
        _fail(f"Error parsing seed source: {e}")

    code = render_module(compiled, source_name=input_path.name, output_name=output_path.as_posix())
    try:
        output_path.write_text(code, encoding="utf-8")
    except OSError as e:
        _fail(f"Error writing output file: {e}")

    click.echo(
        f"Generated {output_path} with {compiled.set_count} sets and "
        f"{len(compiled.options)} options ({len(compiled.locales)} locales)"
    )


if __name__ == "__main__":
    main()
