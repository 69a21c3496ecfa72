"""Intermediate form of generated REST DSL statements.

A statement is an ordered chain of fragments. Each fragment is a template
with one ``{}`` placeholder per argument, and each argument records how the
emission backend must render it:

- Literal:      inserted as-is (``true``, ``42``, ``get``)
- Quoted:       rendered as a string literal with escaping
- EnumConstant: rendered as ``Type.VALUE``; the backend imports ``Type``

StatementBuilder appends fragments conditionally. Absent values (None,
empty string, empty list) never produce a call.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Union

REST_PARAM_TYPE = "org.apache.camel.model.rest.RestParamType"
COLLECTION_FORMAT = "org.apache.camel.model.rest.CollectionFormat"


@dataclass(frozen=True)
class Literal:
    text: str


@dataclass(frozen=True)
class Quoted:
    value: str


@dataclass(frozen=True)
class EnumConstant:
    enum_type: str
    value: str


Argument = Union[Literal, Quoted, EnumConstant]


@dataclass(frozen=True)
class Fragment:
    template: str
    arguments: tuple[Argument, ...] = ()


@dataclass(frozen=True)
class GeneratedStatement:
    fragments: tuple[Fragment, ...]


@dataclass(frozen=True)
class GeneratedArtifact:
    name: str
    statements: tuple[GeneratedStatement, ...]


def literal_text(value: Any) -> str:
    """Stringify a value as a raw source token."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class StatementBuilder:
    """Accumulates the fragments of one statement."""

    def __init__(self, template: str = "", *arguments: Argument) -> None:
        self._fragments: list[Fragment] = []
        if template:
            self.append_raw(template, *arguments)

    def append_raw(self, template: str, *arguments: Argument) -> None:
        self._fragments.append(Fragment(template, tuple(arguments)))

    def append_boolean(self, method: str, value: bool | None) -> None:
        if value is not None:
            self.append_raw(f".{method}({{}})", Literal(literal_text(value)))

    def append_enum(self, method: str, enum_type: str, value: str | None) -> None:
        if value:
            self.append_raw(f".{method}({{}})", EnumConstant(enum_type, value))

    def append_object(self, method: str, value: Any) -> None:
        if value is not None:
            self.append_raw(f".{method}({{}})", Literal(literal_text(value)))

    def append_string(self, method: str, value: str | None) -> None:
        if value:
            self.append_raw(f".{method}({{}})", Quoted(value))

    def append_joined(self, method: str, values: Iterable[str] | None) -> None:
        """Emit one call with all values joined by commas into one string."""
        if not values:
            return
        self.append_string(method, ",".join(values))

    def append_varargs(self, method: str, values: Iterable[Any] | None) -> None:
        """Emit one call with one quoted argument per value."""
        if not values:
            return
        arguments = tuple(Quoted(literal_text(v)) for v in values)
        placeholders = ", ".join("{}" for _ in arguments)
        self.append_raw(f".{method}({placeholders})", *arguments)

    def build(self) -> GeneratedStatement:
        return GeneratedStatement(tuple(self._fragments))
