"""Configuration domain exports."""

from .loader import (
    ConfigurationError,
    load_render_settings,
    override_render_settings,
    parse_render_section,
)
from .runtime_settings import OUTPUT_FORMATS, RenderSettings

__all__ = [
    "OUTPUT_FORMATS",
    "RenderSettings",
    "ConfigurationError",
    "load_render_settings",
    "override_render_settings",
    "parse_render_section",
]
