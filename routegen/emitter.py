"""Emit REST DSL statements for operations and their parameters.

One statement per operation, in this order:

  rest.<verb>("<path>")
  .id(...) .description(...) .consumes(...) .produces(...)
  .param() ... .endParam()      (one per parameter)
  .route().process("<processor>")

Parameter fields follow a fixed order as well: name, type, dataType,
allowableValues, collectionFormat, defaultValue, arrayType, required,
description.
"""

from __future__ import annotations

from .model import BodyParameter, LocationParameter, Operation, Parameter, PathItem
from .naming import processor_name_for
from .statement import (
    COLLECTION_FORMAT,
    REST_PARAM_TYPE,
    GeneratedStatement,
    Literal,
    Quoted,
    StatementBuilder,
)

ARRAY_TYPE = "array"


def emit_parameter(statement: StatementBuilder, parameter: Parameter) -> None:
    """Append a ``.param() ... .endParam()`` fragment for one parameter."""
    statement.append_raw(".param()")
    statement.append_string("name", parameter.name)
    statement.append_enum("type", REST_PARAM_TYPE, parameter.location)

    match parameter:
        case LocationParameter():
            statement.append_string("dataType", parameter.type)
            statement.append_varargs("allowableValues", parameter.enum_values)
            statement.append_enum("collectionFormat", COLLECTION_FORMAT, parameter.collection_format)
            statement.append_object("defaultValue", parameter.default)
            if parameter.type == ARRAY_TYPE and parameter.items is not None:
                statement.append_string("arrayType", parameter.items.type)
        case BodyParameter():
            pass

    statement.append_boolean("required", parameter.required)
    statement.append_string("description", parameter.description)
    statement.append_raw(".endParam()")


class OperationEmitter:
    """Builds the statement for each operation found at one path.

    Subclasses may override processor_name_for to bind routes to
    differently named processors.
    """

    def __init__(self, path: str) -> None:
        self.path = path

    def processor_name_for(self, operation: Operation) -> str:
        return processor_name_for(operation)

    def emit(self, method: str, operation: Operation) -> GeneratedStatement:
        statement = StatementBuilder("rest.{}({})", Literal(method.lower()), Quoted(self.path))

        statement.append_string("id", operation.operation_id)
        statement.append_string("description", operation.description)
        statement.append_joined("consumes", operation.consumes)
        statement.append_joined("produces", operation.produces)

        for parameter in operation.parameters:
            emit_parameter(statement, parameter)

        statement.append_raw(".route().process({})", Quoted(self.processor_name_for(operation)))
        return statement.build()


def visit_path(
    path: str,
    path_item: PathItem,
    emitter_factory: type[OperationEmitter] = OperationEmitter,
) -> list[GeneratedStatement]:
    """Emit one statement per operation declared at a path."""
    emitter = emitter_factory(path)
    return [emitter.emit(method, operation) for method, operation in path_item.operations.items()]
