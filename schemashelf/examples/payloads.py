"""
Sample documents uploaded by the example scripts.

Two generations each of an Avro record schema and of an OpenAPI 3.0
description. The second generation is a compatible extension of the
first: an optional ``email`` field for the Avro record, and a
``/pets/{petId}`` resource plus a ``status`` property for the API.
"""

from __future__ import annotations

import json
from typing import Any, Dict


def _dumps(document: Dict[str, Any]) -> str:
    return json.dumps(document, indent=4)


_USER_FIELDS = [
    {"name": "id", "type": "string"},
    {"name": "username", "type": "string"},
]

AVRO_SCHEMA_V1 = _dumps(
    {
        "type": "record",
        "name": "User",
        "namespace": "com.example",
        "fields": _USER_FIELDS,
    }
)

AVRO_SCHEMA_V2 = _dumps(
    {
        "type": "record",
        "name": "User",
        "namespace": "com.example",
        "fields": _USER_FIELDS + [
            {"name": "email", "type": ["null", "string"], "default": None},
        ],
    }
)


def _pet_schema(with_status: bool) -> Dict[str, Any]:
    properties: Dict[str, Any] = {
        "id": {"type": "integer", "format": "int64"},
        "name": {"type": "string"},
        "tag": {"type": "string"},
    }
    if with_status:
        properties["status"] = {
            "type": "string",
            "enum": ["available", "pending", "sold"],
        }
    return {"type": "object", "required": ["id", "name"], "properties": properties}


def _query_param(name: str, description: str, schema: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "name": name,
        "in": "query",
        "description": description,
        "required": False,
        "schema": schema,
    }


def _pet_id_param(description: str) -> Dict[str, Any]:
    return {
        "name": "petId",
        "in": "path",
        "required": True,
        "description": description,
        "schema": {"type": "integer", "format": "int64"},
    }


def _json_body(ref: str) -> Dict[str, Any]:
    return {"application/json": {"schema": {"$ref": f"#/components/schemas/{ref}"}}}


def _petstore(version: str, description: str, extended: bool) -> Dict[str, Any]:
    list_params = [
        _query_param(
            "limit",
            "How many items to return at one time (max 100)",
            {"type": "integer", "format": "int32"},
        )
    ]
    if extended:
        list_params.append(_query_param("tag", "Filter by tag", {"type": "string"}))

    paths: Dict[str, Any] = {
        "/pets": {
            "get": {
                "summary": "List all pets",
                "operationId": "listPets",
                "tags": ["pets"],
                "parameters": list_params,
                "responses": {
                    "200": {"description": "A paged array of pets", "content": _json_body("Pets")}
                },
            },
            "post": {
                "summary": "Create a pet",
                "operationId": "createPet",
                "tags": ["pets"],
                "requestBody": {"required": True, "content": _json_body("Pet")},
                "responses": {"201": {"description": "Pet created"}},
            },
        }
    }
    if extended:
        paths["/pets/{petId}"] = {
            "get": {
                "summary": "Info for a specific pet",
                "operationId": "getPetById",
                "tags": ["pets"],
                "parameters": [_pet_id_param("The id of the pet to retrieve")],
                "responses": {
                    "200": {
                        "description": "Expected response to a valid request",
                        "content": _json_body("Pet"),
                    },
                    "404": {"description": "Pet not found"},
                },
            },
            "delete": {
                "summary": "Delete a specific pet",
                "operationId": "deletePet",
                "tags": ["pets"],
                "parameters": [_pet_id_param("The id of the pet to delete")],
                "responses": {
                    "204": {"description": "Pet deleted"},
                    "404": {"description": "Pet not found"},
                },
            },
        }

    major = version.split(".")[0]
    return {
        "openapi": "3.0.0",
        "info": {"title": "Pet Store API", "description": description, "version": version},
        "servers": [{"url": f"https://api.petstore.example.com/v{major}"}],
        "paths": paths,
        "components": {
            "schemas": {
                "Pet": _pet_schema(with_status=extended),
                "Pets": {"type": "array", "items": {"$ref": "#/components/schemas/Pet"}},
            }
        },
    }


OPENAPI_SPEC_V1 = _dumps(_petstore("1.0.0", "A simple pet store API example", extended=False))

OPENAPI_SPEC_V2 = _dumps(
    _petstore(
        "2.0.0",
        "A simple pet store API example with extended functionality",
        extended=True,
    )
)
