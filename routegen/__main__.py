"""Entry point: python -m routegen

Reads a Swagger document (petstore.json by default) and writes a Camel
RouteBuilder under target/generated-sources/swagger-routes.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from .assembler import build_artifact
from .codegen import DEFAULT_OUTPUT_DIR, DEFAULT_PACKAGE, GenerationError, generate
from .loader import DEFAULT_SPEC, SpecLoadError, load_spec
from .spec_parser import parse_specification


@click.command()
@click.argument("spec", default=str(DEFAULT_SPEC))
@click.option("-o", "--output", "output_dir", default=str(DEFAULT_OUTPUT_DIR), type=click.Path(path_type=Path), help="Directory for generated sources.")
@click.option("-p", "--package", default=DEFAULT_PACKAGE, help="Java package of the generated class.")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(spec: str, output_dir: Path, package: str, verbose: bool) -> None:
    """Generate a Camel REST DSL RouteBuilder from a Swagger document (path or URL)."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        raw = load_spec(spec)
        artifact = build_artifact(parse_specification(raw))
        output_path = generate(artifact, output_dir, package)
    except (SpecLoadError, GenerationError) as exc:
        raise click.ClickException(str(exc)) from exc

    click.echo(f"Generated {output_path} ({len(artifact.statements) - 1} routes)")


if __name__ == "__main__":
    main()
