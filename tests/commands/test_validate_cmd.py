"""Tests for the validate CLI command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from gqlnno.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestValidateCommand:
    def test_valid_payload(self, cli_runner: CliRunner, schema_file: Path) -> None:
        result = cli_runner.invoke(
            cli,
            ["validate", str(schema_file), "Mutation.setItem", "--args", '{"item": {"b": null}}'],
        )
        assert result.exit_code == 0
        assert "no forbidden nulls" in result.output

    def test_violation_exits_nonzero(self, cli_runner: CliRunner, schema_file: Path) -> None:
        result = cli_runner.invoke(
            cli,
            [
                "--json",
                "validate",
                str(schema_file),
                "Mutation.setOuter",
                "--args",
                '{"wrapper": {"outer": {"inner": null}}}',
            ],
        )
        assert result.exit_code == 1
        data = json.loads(result.stderr)
        assert data["error"]["code"] == "NON_NULL_OPTIONAL"
        assert data["error"]["detail"]["paths"] == ["args.wrapper.outer.inner"]

    def test_human_violation(self, cli_runner: CliRunner, schema_file: Path) -> None:
        result = cli_runner.invoke(
            cli,
            ["validate", str(schema_file), "Query.search", "--args", '{"term": null}'],
        )
        assert result.exit_code == 1
        assert "null at args.term" in result.stderr

    def test_args_file(self, cli_runner: CliRunner, schema_file: Path, tmp_path: Path) -> None:
        payload = tmp_path / "payload.json"
        payload.write_text(json.dumps({"items": [{"a": "x"}, {"a": None}]}))
        result = cli_runner.invoke(
            cli,
            [
                "--json",
                "validate",
                str(schema_file),
                "Mutation.setItems",
                "--args-file",
                str(payload),
            ],
        )
        assert result.exit_code == 1
        assert json.loads(result.stderr)["error"]["detail"]["paths"] == ["args.items.1.a"]

    def test_defaults_to_empty_args(self, cli_runner: CliRunner, schema_file: Path) -> None:
        result = cli_runner.invoke(cli, ["--json", "validate", str(schema_file), "Query.search"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["data"]["checked"] is True

    def test_invalid_json(self, cli_runner: CliRunner, schema_file: Path) -> None:
        result = cli_runner.invoke(
            cli, ["validate", str(schema_file), "Query.search", "--args", "{nope"]
        )
        assert result.exit_code == 2
        assert "Invalid JSON" in result.output

    def test_both_sources_rejected(
        self, cli_runner: CliRunner, schema_file: Path, tmp_path: Path
    ) -> None:
        payload = tmp_path / "payload.json"
        payload.write_text("{}")
        result = cli_runner.invoke(
            cli,
            [
                "validate",
                str(schema_file),
                "Query.search",
                "--args",
                "{}",
                "--args-file",
                str(payload),
            ],
        )
        assert result.exit_code == 2

    def test_unknown_field(self, cli_runner: CliRunner, schema_file: Path) -> None:
        result = cli_runner.invoke(cli, ["--json", "validate", str(schema_file), "Query.nope"])
        assert result.exit_code == 1
        assert json.loads(result.stderr)["error"]["code"] == "FIELD_NOT_FOUND"
