"""Shared fixtures: a small Swagger 2.0 petstore document and its model."""

from __future__ import annotations

import copy
from typing import Any

import pytest

from routegen.spec_parser import parse_specification


# ---------------------------------------------------------------------------
# Raw document
# ---------------------------------------------------------------------------

PETSTORE: dict[str, Any] = {
    "swagger": "2.0",
    "info": {"title": "Pet Store v2!!", "version": "1.0.0"},
    "parameters": {
        "limitParam": {
            "name": "limit",
            "in": "query",
            "type": "integer",
            "default": 20,
        },
    },
    "paths": {
        "/pets": {
            "get": {
                "operationId": "findPets",
                "description": "Returns all pets",
                "produces": ["application/json", "application/xml"],
                "parameters": [
                    {
                        "name": "tags",
                        "in": "query",
                        "type": "array",
                        "items": {"type": "string"},
                        "collectionFormat": "csv",
                        "enum": ["a", "b"],
                    },
                    {"$ref": "#/parameters/limitParam"},
                ],
            },
            "post": {
                "operationId": "addPet",
                "consumes": ["application/json"],
                "produces": ["application/json"],
                "parameters": [
                    {
                        "name": "pet",
                        "in": "body",
                        "required": True,
                        "description": "Pet to add",
                        "schema": {"$ref": "#/definitions/Pet"},
                    },
                ],
            },
        },
        "/pets/{id}": {
            "parameters": [{"name": "id", "in": "path", "type": "string"}],
            "get": {
                "operationId": "getPetById",
                "produces": ["application/json"],
                "parameters": [
                    {"name": "id", "in": "path", "required": True, "type": "string"},
                ],
            },
            "delete": {
                "operationId": "deletePet",
                "parameters": [
                    {"name": "id", "in": "path", "required": True, "type": "string"},
                    {"name": "api_key", "in": "header", "type": "string"},
                ],
            },
        },
    },
    "definitions": {
        "Pet": {"type": "object", "properties": {"name": {"type": "string"}}},
    },
}


@pytest.fixture
def petstore() -> dict[str, Any]:
    """A fresh copy of the raw petstore document."""
    return copy.deepcopy(PETSTORE)


@pytest.fixture
def petstore_spec(petstore):
    """The petstore document parsed into the model."""
    return parse_specification(petstore)
