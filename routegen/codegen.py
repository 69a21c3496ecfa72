"""Render a generated artifact as a Camel RouteBuilder and write it.

Takes the artifact from the assembler and produces
<output_dir>/<package path>/<ClassName>.java.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import jinja2

from .statement import EnumConstant, GeneratedArtifact, GeneratedStatement, Literal, Quoted

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"
TEMPLATE_NAME = "route_builder.java.j2"
DEFAULT_OUTPUT_DIR = Path("target") / "generated-sources" / "swagger-routes"
DEFAULT_PACKAGE = "com.example.helloworld"

# Always needed by the class skeleton and the bootstrap statement
BASE_IMPORTS = (
    "org.apache.camel.builder.RouteBuilder",
    "org.apache.camel.model.rest.RestDefinition",
)

_JAVA_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\b": "\\b",
    "\f": "\\f",
}


class GenerationError(Exception):
    """Raised when the generated source cannot be rendered or written."""


def java_string(value: str) -> str:
    """Quote a value as a Java string literal."""
    chars = []
    for c in value:
        if c in _JAVA_ESCAPES:
            chars.append(_JAVA_ESCAPES[c])
        elif ord(c) < 0x20:
            chars.append(f"\\u{ord(c):04x}")
        else:
            chars.append(c)
    return '"' + "".join(chars) + '"'


def simple_name(qualified: str) -> str:
    return qualified.rsplit(".", 1)[-1]


def render_argument(argument: Any, imports: set[str]) -> str:
    """Render one argument, recording the types it needs imported."""
    if isinstance(argument, Quoted):
        return java_string(argument.value)
    if isinstance(argument, EnumConstant):
        imports.add(argument.enum_type)
        return f"{simple_name(argument.enum_type)}.{argument.value}"
    if isinstance(argument, Literal):
        return argument.text
    raise GenerationError(f"Unknown argument kind: {argument!r}")


def render_statement(statement: GeneratedStatement, imports: set[str] | None = None) -> str:
    """Render a statement with each chained call on its own line."""
    imports = imports if imports is not None else set()
    lines = [
        fragment.template.format(*(render_argument(a, imports) for a in fragment.arguments))
        for fragment in statement.fragments
    ]
    return "\n".join(lines)


def build_context(artifact: GeneratedArtifact, package: str = DEFAULT_PACKAGE) -> dict[str, Any]:
    """Build the template context for one artifact."""
    imports: set[str] = set(BASE_IMPORTS)
    statements = [render_statement(s, imports) for s in artifact.statements]
    return {
        "package": package,
        "class_name": artifact.name,
        "imports": sorted(imports),
        "statements": statements,
        "route_count": len(statements) - 1,
    }


def _environment() -> jinja2.Environment:
    return jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=jinja2.StrictUndefined,
    )


def render(artifact: GeneratedArtifact, package: str = DEFAULT_PACKAGE) -> str:
    """Render the RouteBuilder source for an artifact."""
    try:
        template = _environment().get_template(TEMPLATE_NAME)
        return template.render(**build_context(artifact, package))
    except jinja2.TemplateError as exc:
        raise GenerationError(f"Cannot render {TEMPLATE_NAME}: {exc}") from exc


def output_path_for(
    artifact: GeneratedArtifact,
    output_dir: Path = DEFAULT_OUTPUT_DIR,
    package: str = DEFAULT_PACKAGE,
) -> Path:
    package_dir = Path(*package.split(".")) if package else Path()
    return Path(output_dir) / package_dir / f"{artifact.name}.java"


def generate(
    artifact: GeneratedArtifact,
    output_dir: Path = DEFAULT_OUTPUT_DIR,
    package: str = DEFAULT_PACKAGE,
) -> Path:
    """Render the artifact and write it below output_dir."""
    output = render(artifact, package)
    output_path = output_path_for(artifact, output_dir, package)

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(output, encoding="utf-8")
    except OSError as exc:
        raise GenerationError(f"Cannot write {output_path}: {exc}") from exc

    logger.info("Wrote %s", output_path)
    return output_path
