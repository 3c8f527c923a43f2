"""
Общие фикстуры тестов генератора
"""

import json

import pytest


@pytest.fixture
def pet_store_spec():
    """Документ Pet Store с операциями и схемами"""
    return {
        "openapi": "3.0.0",
        "info": {"title": "Pet Store", "version": "v1"},
        "paths": {
            "/pets": {
                "get": {"summary": "List pets"},
                "post": {
                    "requestBody": {
                        "content": {
                            "application/json": {
                                "schema": {"$ref": "#/components/schemas/Pet"}
                            }
                        }
                    }
                },
            },
            "/pets/{petId}": {
                "get": {
                    "parameters": [
                        {
                            "name": "petId",
                            "in": "path",
                            "required": True,
                            "schema": {"type": "integer"},
                        }
                    ]
                },
                "delete": {
                    "parameters": [
                        {
                            "name": "petId",
                            "in": "path",
                            "schema": {"$ref": "#/components/schemas/PetId"},
                        }
                    ]
                },
            },
            "/user-profile/{id}": {
                "put": {
                    "parameters": [{"name": "id", "in": "path"}],
                    "requestBody": {
                        "content": {"application/json": {"schema": {"type": "object"}}}
                    },
                }
            },
        },
        "components": {
            "schemas": {
                "Status": {"type": "string", "enum": ["Active", "Inactive"]},
                "Pet": {
                    "type": "object",
                    "properties": {
                        "id": {"type": "integer"},
                        "name": {"type": "string"},
                        "is_good": {"type": "boolean"},
                        "Tags": {"type": "array", "items": {"type": "string"}},
                        "owner": {"$ref": "#/components/schemas/Owner"},
                        "kind": {"type": "animals.pet_kind"},
                    },
                },
                "Empty": {"type": "object", "properties": {}},
                "Opaque": {"type": "object"},
            }
        },
    }


@pytest.fixture
def pet_store_json(pet_store_spec):
    return json.dumps(pet_store_spec)
