"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass

OUTPUT_FORMATS: tuple[str, ...] = ("json", "yaml")


@dataclass(frozen=True)
class RenderSettings:
    """Normalized document rendering settings.

    ``indent`` 0 renders compact JSON; yaml output needs at least 2.
    """

    output_format: str = "json"
    indent: int = 2
    ensure_ascii: bool = False
