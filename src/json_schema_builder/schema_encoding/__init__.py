"""Schema encoding exports."""

from .document_rendering import render_document, render_json, render_yaml
from .json_encoder import JsonObject, JsonValue, encode

__all__ = [
    "JsonObject",
    "JsonValue",
    "encode",
    "render_document",
    "render_json",
    "render_yaml",
]
