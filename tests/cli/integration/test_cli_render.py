"""CLI render orchestration tests."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
import yaml
from click.testing import CliRunner
from json_schema_builder.cli import cli, main

_SCHEMA_MODULE = """
from json_schema_builder import (
    StringFormat, array, format_, integer, items, min_items, number, object_, optional,
    properties, required, string, title,
)

EVENT = object_(
    title("Event"),
    properties([
        required("id", string(format_(StringFormat.UUID))),
        optional("tags", array(items(string()), min_items(1))),
        optional("score", number()),
    ]),
)


def build_counter():
    return integer(title("Counter"))


def build_nothing():
    return 42
"""


@pytest.fixture
def schema_module(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> str:
    module_name = "render_target_schemas"
    (tmp_path / f"{module_name}.py").write_text(_SCHEMA_MODULE, encoding="utf-8")
    monkeypatch.syspath_prepend(str(tmp_path))
    return module_name


def test_renders_schema_attribute_as_json(schema_module: str) -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["render", f"{schema_module}:EVENT"])

    assert result.exit_code == 0, result.output
    document = json.loads(result.output)
    assert document["title"] == "Event"
    assert document["properties"]["id"]["format"] == "uuid"
    assert document["required"] == ["id"]
    assert list(document["properties"]) == ["id", "tags", "score"]


def test_renders_callable_target_as_yaml(schema_module: str) -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["render", f"{schema_module}:build_counter", "--format", "yaml"])

    assert result.exit_code == 0, result.output
    assert yaml.safe_load(result.output) == {"type": "integer", "title": "Counter"}


def test_callable_returning_non_schema_is_rejected(schema_module: str, capsys) -> None:
    exit_code = main(["render", f"{schema_module}:build_nothing"])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "is not a schema (got int)" in captured.err


def test_command_line_options_override_configuration(
    schema_module: str, tmp_path: Path
) -> None:
    config_path = tmp_path / "render.yaml"
    config_path.write_text("render:\n  format: yaml\n  indent: 4\n", encoding="utf-8")
    runner = CliRunner()

    configured = runner.invoke(
        cli, ["render", f"{schema_module}:EVENT", "--config", str(config_path)]
    )
    overridden = runner.invoke(
        cli,
        ["render", f"{schema_module}:EVENT", "--config", str(config_path), "--format", "json",
         "--indent", "0"],
    )

    assert configured.exit_code == 0, configured.output
    assert configured.output.startswith("type: object")
    assert overridden.exit_code == 0, overridden.output
    assert overridden.output.strip().startswith('{"type": "object"')
    assert len(overridden.output.strip().splitlines()) == 1


def test_invalid_configuration_is_reported(schema_module: str, tmp_path: Path, capsys) -> None:
    config_path = tmp_path / "render.yaml"
    config_path.write_text("render:\n  format: xml\n", encoding="utf-8")

    exit_code = main(["render", f"{schema_module}:EVENT", "--config", str(config_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "render.format must be one of" in captured.err


@pytest.fixture
def restore_package_logger():
    package_logger = logging.getLogger("json_schema_builder")
    handlers, level = list(package_logger.handlers), package_logger.level
    yield package_logger
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)


def test_verbose_flag_writes_debug_records_to_stderr(
    schema_module: str, restore_package_logger: logging.Logger
) -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--verbose", "render", f"{schema_module}:build_counter"])

    assert result.exit_code == 0, result.output
    assert restore_package_logger.level == logging.DEBUG
    assert f"DEBUG json_schema_builder.cli: Resolved {schema_module}:build_counter" in (
        result.output
    )
    assert '"title": "Counter"' in result.output


def test_without_verbose_no_debug_records_are_written(schema_module: str) -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["render", f"{schema_module}:build_counter"])

    assert result.exit_code == 0, result.output
    assert "DEBUG" not in result.output
