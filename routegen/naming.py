"""Derive generated class and processor names.

Class name: the specification title with every character that cannot
appear inside a Java identifier dropped, order preserved.

Examples:
  "Swagger Petstore"  -> SwaggerPetstore
  "Pet Store v2!!"    -> PetStorev2
  "my-api (beta)"     -> myapibeta

No fallback is applied when the result is empty or starts with a digit.
"""

from __future__ import annotations

from .model import Operation


def is_identifier_part(char: str) -> bool:
    """Check if a character may appear after the first one in an identifier."""
    return char == "$" or f"_{char}".isidentifier()


def class_name_for(title: str | None) -> str:
    """Build the generated class name from the specification title."""
    return "".join(c for c in title or "" if is_identifier_part(c))


def processor_name_for(operation: Operation) -> str:
    """Name of the processor bean the generated route hands off to."""
    return operation.operation_id or ""
