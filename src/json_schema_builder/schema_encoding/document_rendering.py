"""Text rendering of encoded schemas."""

from __future__ import annotations

import json

import yaml

from json_schema_builder.configuration.runtime_settings import RenderSettings
from json_schema_builder.schema_model.schema_nodes import Schema

from .json_encoder import encode


def render_json(schema: Schema, *, indent: int | None = 2, ensure_ascii: bool = False) -> str:
    """Serialize ``schema`` as JSON text, keeping declaration order."""
    return json.dumps(encode(schema), indent=indent, ensure_ascii=ensure_ascii)


def render_yaml(schema: Schema, *, indent: int = 2, ensure_ascii: bool = False) -> str:
    """Serialize ``schema`` as block-style YAML text, keeping declaration order."""
    return yaml.safe_dump(
        encode(schema),
        sort_keys=False,
        indent=indent,
        allow_unicode=not ensure_ascii,
        default_flow_style=False,
    )


def render_document(schema: Schema, settings: RenderSettings) -> str:
    """Render ``schema`` in the configured output format."""
    if settings.output_format == "yaml":
        return render_yaml(schema, indent=settings.indent, ensure_ascii=settings.ensure_ascii)
    json_indent = settings.indent if settings.indent > 0 else None
    return render_json(schema, indent=json_indent, ensure_ascii=settings.ensure_ascii)
