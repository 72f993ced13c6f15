"""Builds a minimal OpenAPI spec from existing Pydantic schemas."""
from __future__ import annotations

from typing import Any, Dict

from flask import request

from ..api.tutorials.schemas import TutorialIn, TutorialOut

_REF = "#/components/schemas/{model}"


def _schemas() -> Dict[str, Any]:
    return {
        "TutorialIn": TutorialIn.model_json_schema(ref_template=_REF),
        "TutorialOut": TutorialOut.model_json_schema(ref_template=_REF),
    }


def _envelope(description: str, item: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "description": description,
        "content": {
            "application/json": {
                "schema": {"type": "object", "properties": {"data": item}}
            }
        },
    }


def build_openapi() -> Dict[str, Any]:
    base_url = f"{request.scheme}://{request.host}"
    one = {"$ref": _REF.format(model="TutorialOut")}
    many = {"type": "array", "items": one}
    body = {
        "required": True,
        "content": {"application/json": {"schema": {"$ref": _REF.format(model="TutorialIn")}}},
    }
    id_param = [{"name": "tutorial_id", "in": "path", "required": True, "schema": {"type": "integer"}}]
    return {
        "openapi": "3.0.3",
        "info": {"title": "Tutorial API", "version": "1.0.0"},
        "servers": [{"url": base_url}],
        "tags": [
            {"name": "Health"},
            {"name": "Tutorials"},
        ],
        "paths": {
            "/api/health/": {
                "get": {"tags": ["Health"], "summary": "Liveness probe", "responses": {"200": {"description": "OK"}}}
            },
            "/api/health/db": {
                "get": {
                    "tags": ["Health"], "summary": "Database round trip",
                    "responses": {"200": {"description": "OK"}, "503": {"description": "Database unavailable"}},
                }
            },
            "/api/tutorials/": {
                "get": {
                    "tags": ["Tutorials"], "summary": "List tutorials, optionally filtered by title substring",
                    "parameters": [{"name": "title", "in": "query", "required": False, "schema": {"type": "string"}}],
                    "responses": {"200": _envelope("OK", many)},
                },
                "post": {
                    "tags": ["Tutorials"], "summary": "Create tutorial",
                    "requestBody": body,
                    "responses": {"201": _envelope("Created", one), "422": {"description": "Invalid body"}},
                },
                "delete": {
                    "tags": ["Tutorials"], "summary": "Delete all tutorials",
                    "responses": {"204": {"description": "Deleted"}},
                },
            },
            "/api/tutorials/published": {
                "get": {
                    "tags": ["Tutorials"], "summary": "List tutorials by published flag",
                    "parameters": [{"name": "flag", "in": "query", "required": False, "schema": {"type": "boolean", "default": True}}],
                    "responses": {"200": _envelope("OK", many)},
                }
            },
            "/api/tutorials/{tutorial_id}": {
                "parameters": id_param,
                "get": {
                    "tags": ["Tutorials"], "summary": "Get tutorial by id",
                    "responses": {"200": _envelope("OK", one), "404": {"description": "Not found"}},
                },
                "put": {
                    "tags": ["Tutorials"],
                    "summary": "Update tutorial; titles are stored with an 'Update ' prefix",
                    "requestBody": body,
                    "responses": {"200": _envelope("OK", one), "404": {"description": "Not found"}},
                },
                "delete": {
                    "tags": ["Tutorials"], "summary": "Delete tutorial (idempotent)",
                    "responses": {"204": {"description": "Deleted"}},
                },
            },
        },
        "components": {"schemas": _schemas()},
    }
