"""Read-only views over a loaded Swagger specification.

The spec_parser module builds these from the raw document; the emitters
only ever read them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union


@dataclass(frozen=True)
class ItemSpec:
    """Item description of an array-typed parameter."""

    type: str | None = None


@dataclass(frozen=True)
class LocationParameter:
    """A query, header, path or formData parameter."""

    name: str
    location: str
    required: bool | None = None
    description: str | None = None
    type: str | None = None
    default: Any = None
    enum_values: tuple[Any, ...] = ()
    collection_format: str | None = None
    items: ItemSpec | None = None


@dataclass(frozen=True)
class BodyParameter:
    """The request body parameter; carries a schema instead of a type."""

    name: str
    location: str = "body"
    required: bool | None = None
    description: str | None = None
    schema: dict[str, Any] = field(default_factory=dict)


Parameter = Union[LocationParameter, BodyParameter]


@dataclass(frozen=True)
class Operation:
    operation_id: str | None = None
    description: str | None = None
    consumes: tuple[str, ...] = ()
    produces: tuple[str, ...] = ()
    parameters: tuple[Parameter, ...] = ()


@dataclass(frozen=True)
class PathItem:
    # lower-case HTTP method -> operation, declaration order
    operations: dict[str, Operation] = field(default_factory=dict)


@dataclass(frozen=True)
class Specification:
    title: str = ""
    paths: dict[str, PathItem] = field(default_factory=dict)
