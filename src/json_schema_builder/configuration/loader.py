"""Configuration loader service."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import OUTPUT_FORMATS, RenderSettings

_MAX_INDENT = 8
_MIN_YAML_INDENT = 2


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_render_settings(config_path: Path | str) -> RenderSettings:
    """Load and validate render settings from a YAML/JSON file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    return parse_render_section(parsed.get("render"))


def parse_render_section(value: Any) -> RenderSettings:
    """Build render settings from the optional ``render`` mapping."""
    if value is None:
        return RenderSettings()
    if not isinstance(value, Mapping):
        raise ConfigurationError("Configuration section 'render' must be a mapping.")

    defaults = RenderSettings()
    output_format = _require_output_format(
        value.get("format", defaults.output_format), "render.format"
    )
    indent = _require_indent(value.get("indent", defaults.indent), "render.indent")
    ensure_ascii = value.get("ensure_ascii", defaults.ensure_ascii)
    if not isinstance(ensure_ascii, bool):
        raise ConfigurationError("render.ensure_ascii must be a boolean.")
    return _check_yaml_indent(
        RenderSettings(output_format=output_format, indent=indent, ensure_ascii=ensure_ascii),
        "render.indent",
    )


def override_render_settings(
    settings: RenderSettings, *, output_format: str | None = None, indent: int | None = None
) -> RenderSettings:
    """Return ``settings`` with explicitly provided values replaced."""
    changes: dict[str, Any] = {}
    if output_format is not None:
        changes["output_format"] = _require_output_format(output_format, "format")
    if indent is not None:
        changes["indent"] = _require_indent(indent, "indent")
    return _check_yaml_indent(dataclasses.replace(settings, **changes), "indent")


def _require_output_format(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    normalized = value.strip().lower()
    if normalized not in OUTPUT_FORMATS:
        allowed = ", ".join(OUTPUT_FORMATS)
        raise ConfigurationError(f"{field_name} must be one of: {allowed}.")
    return normalized


def _check_yaml_indent(settings: RenderSettings, field_name: str) -> RenderSettings:
    if settings.output_format == "yaml" and settings.indent < _MIN_YAML_INDENT:
        raise ConfigurationError(
            f"{field_name} must be at least {_MIN_YAML_INDENT} for yaml output."
        )
    return settings


def _require_indent(value: Any, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value < 0 or value > _MAX_INDENT:
        raise ConfigurationError(f"{field_name} must be between 0 and {_MAX_INDENT}.")
    return value
