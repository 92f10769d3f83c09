"""Command line interface entry point."""

from __future__ import annotations

import importlib
import logging
import sys
from typing import cast

import click

from json_schema_builder.configuration import (
    OUTPUT_FORMATS,
    ConfigurationError,
    RenderSettings,
    load_render_settings,
    override_render_settings,
)
from json_schema_builder.schema_encoding import render_document
from json_schema_builder.schema_model import Schema, SchemaError
from json_schema_builder.schema_model.schema_nodes import is_schema

_LOGGER = logging.getLogger(__name__)


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="json-schema-builder")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log debug output to stderr.")
def cli(verbose: bool) -> None:
    """Composable JSON Schema builder utility."""
    if verbose:
        _enable_debug_logging()


def _enable_debug_logging() -> None:
    package_logger = logging.getLogger("json_schema_builder")
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG)


@cli.command(name="render")
@click.argument("target")
@click.option(
    "--format",
    "output_format",
    required=False,
    type=click.Choice(OUTPUT_FORMATS, case_sensitive=False),
    help="Output format (defaults to the configured format, or json)",
)
@click.option(
    "--indent",
    required=False,
    type=click.IntRange(0, 8),
    help="Indentation width; 0 renders compact JSON",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON configuration file with a 'render' section",
)
def render(
    target: str, output_format: str | None, indent: int | None, config_path: str | None
) -> None:
    """Print the JSON Schema document of TARGET (package.module:attribute)."""
    try:
        settings = load_render_settings(config_path) if config_path else RenderSettings()
        settings = override_render_settings(settings, output_format=output_format, indent=indent)
        schema = resolve_schema_target(target)
        document = render_document(schema, settings)
    except (ConfigurationError, SchemaError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(document)


def resolve_schema_target(target: str) -> Schema:
    """Import ``package.module:attribute`` and return the schema it names.

    The attribute may be a schema or a zero-argument callable returning one.
    """
    module_name, separator, attribute_path = target.partition(":")
    if not separator or not module_name or not attribute_path:
        raise CliError(f"Target must look like 'package.module:attribute', got: {target}")

    try:
        value: object = importlib.import_module(module_name)
    except ImportError as exc:
        raise CliError(f"Cannot import module '{module_name}': {exc}") from exc
    for attribute in attribute_path.split("."):
        try:
            value = getattr(value, attribute)
        except AttributeError as exc:
            raise CliError(f"'{module_name}' has no attribute '{attribute_path}'.") from exc

    if not is_schema(value) and callable(value):
        _LOGGER.debug("Calling %s to build the schema", target)
        value = value()
    if not is_schema(value):
        raise CliError(f"{target} is not a schema (got {type(value).__name__}).")
    schema = cast(Schema, value)
    _LOGGER.debug("Resolved %s to a %s schema", target, schema.kind.value)
    return schema


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
