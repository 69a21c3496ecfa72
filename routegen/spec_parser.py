"""Map a raw Swagger 2.0 document onto the read-only model.

Handles:
- Operation keys in document order (non-method keys such as
  ``parameters`` or ``x-*`` extensions are ignored)
- $ref parameters pointing into ``#/parameters``
- Body parameters vs. location parameters
- Type metadata declared inline or under ``schema``
- ``required`` left as None when the document does not declare it

Nothing is validated: missing fields become None or empty tuples.
"""

from __future__ import annotations

from typing import Any

from .loader import SpecLoadError, get_paths, resolve_ref
from .model import (
    BodyParameter,
    ItemSpec,
    LocationParameter,
    Operation,
    Parameter,
    PathItem,
    Specification,
)

HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch")


def _as_tuple(values: Any) -> tuple[Any, ...]:
    if not values:
        return ()
    if isinstance(values, (list, tuple)):
        return tuple(values)
    return (values,)


def _resolve_parameter(spec: dict[str, Any], param: dict[str, Any]) -> dict[str, Any]:
    ref = param.get("$ref")
    if not ref:
        return param
    try:
        return resolve_ref(spec, ref)
    except (KeyError, TypeError) as exc:
        raise SpecLoadError(f"Unresolvable parameter reference {ref!r}") from exc


def _metadata(param: dict[str, Any], key: str) -> Any:
    """Read a type attribute from the parameter, falling back to its schema."""
    if key in param:
        return param[key]
    return (param.get("schema") or {}).get(key)


def parse_parameter(spec: dict[str, Any], param: dict[str, Any]) -> Parameter:
    """Convert one raw parameter into its model variant."""
    param = _resolve_parameter(spec, param)
    location = param.get("in", "")

    if location == "body":
        return BodyParameter(
            name=param.get("name", ""),
            required=param.get("required"),
            description=param.get("description"),
            schema=param.get("schema") or {},
        )

    items = _metadata(param, "items")
    return LocationParameter(
        name=param.get("name", ""),
        location=location,
        required=param.get("required"),
        description=param.get("description"),
        type=_metadata(param, "type"),
        default=_metadata(param, "default"),
        enum_values=_as_tuple(_metadata(param, "enum")),
        collection_format=param.get("collectionFormat"),
        items=ItemSpec(type=items.get("type")) if isinstance(items, dict) else None,
    )


def parse_operation(spec: dict[str, Any], operation: dict[str, Any]) -> Operation:
    """Convert one raw operation object."""
    return Operation(
        operation_id=operation.get("operationId"),
        description=operation.get("description"),
        consumes=_as_tuple(operation.get("consumes")),
        produces=_as_tuple(operation.get("produces")),
        parameters=tuple(parse_parameter(spec, p) for p in operation.get("parameters") or []),
    )


def parse_path_item(spec: dict[str, Any], path_item: dict[str, Any]) -> PathItem:
    """Collect the operations of one path in declaration order."""
    operations = {
        method.lower(): parse_operation(spec, operation)
        for method, operation in path_item.items()
        if method.lower() in HTTP_METHODS and isinstance(operation, dict)
    }
    return PathItem(operations=operations)


def parse_specification(spec: dict[str, Any]) -> Specification:
    """Build the Specification model from the raw document."""
    title = (spec.get("info") or {}).get("title") or ""
    paths = {
        path: parse_path_item(spec, path_item or {})
        for path, path_item in get_paths(spec).items()
    }
    return Specification(title=str(title), paths=paths)
