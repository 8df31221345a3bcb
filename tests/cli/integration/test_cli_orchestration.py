"""CLI orchestration integration tests."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner
from schema_docgen.cli import cli


def _samples_dir() -> Path:
    return Path(__file__).resolve().parents[3] / "samples"


def _write_config(tmp_path: Path, **overrides) -> Path:
    config = {
        "schema": {"path": str(_samples_dir() / "demo-schema.yaml")},
        "descriptions": {"path": str(_samples_dir() / "descriptions.yaml")},
        **overrides,
    }
    path = tmp_path / "docgen.json"
    path.write_text(json.dumps(config), encoding="utf-8")
    return path


def test_generate_command_prints_report_to_stdout(tmp_path: Path) -> None:
    runner = CliRunner()
    config_path = _write_config(tmp_path)

    result = runner.invoke(cli, ["generate", "--config", str(config_path)])

    assert result.exit_code == 0
    report = json.loads(result.output)
    assert report[0]["full_name"] == "broker:Root Config Keys"
    assert report[0]["fields"][0]["desc"] == "Network listeners accepting client connections."


def test_generate_command_writes_report_file_with_language_override(tmp_path: Path) -> None:
    runner = CliRunner()
    config_path = _write_config(tmp_path, output={"path": "docs/reference.json", "indent": 4})
    output_path = tmp_path / "docs" / "reference.json"

    result = runner.invoke(cli, ["generate", "--config", str(config_path), "--lang", "zh"])

    assert result.exit_code == 0
    assert str(output_path.resolve()) in result.output
    report = json.loads(output_path.read_text(encoding="utf-8"))
    assert report[1]["desc"] == "网络监听器。"


def test_generate_command_output_option_overrides_configuration(tmp_path: Path) -> None:
    runner = CliRunner()
    config_path = _write_config(tmp_path, output={"path": "ignored.json"})
    output_path = tmp_path / "explicit.json"

    result = runner.invoke(
        cli,
        ["generate", "--config", str(config_path), "--output", str(output_path)],
    )

    assert result.exit_code == 0
    assert output_path.exists()
    assert not (tmp_path / "ignored.json").exists()


def test_check_command_summarizes_valid_schema(tmp_path: Path) -> None:
    runner = CliRunner()
    config_path = _write_config(tmp_path)

    result = runner.invoke(cli, ["check", "--config", str(config_path)])

    assert result.exit_code == 0
    assert result.output.startswith("ok: 5 structs")


def test_check_command_reports_struct_without_visible_fields(tmp_path: Path) -> None:
    runner = CliRunner()
    schema_path = tmp_path / "schema.yaml"
    schema_path.write_text(
        "roots:\n  - name: root\n    type: {ref: empty}\nfields:\n  empty: []\n",
        encoding="utf-8",
    )
    config_path = tmp_path / "docgen.yaml"
    config_path.write_text("schema:\n  path: schema.yaml\n", encoding="utf-8")

    result = runner.invoke(cli, ["check", "--config", str(config_path)])

    assert result.exit_code != 0
    assert "Struct empty has no visible fields" in str(result.exception)


def test_generate_command_returns_error_for_invalid_config(tmp_path: Path) -> None:
    runner = CliRunner()
    config_path = tmp_path / "invalid-config.json"
    config_path.write_text(json.dumps({"schema": {}}), encoding="utf-8")

    result = runner.invoke(cli, ["generate", "--config", str(config_path)])

    assert result.exit_code != 0
    assert "either path or module" in str(result.exception)


def test_generate_config_command_writes_placeholder_file_with_default_name(tmp_path: Path) -> None:
    runner = CliRunner()
    with runner.isolated_filesystem(temp_dir=str(tmp_path)):
        result = runner.invoke(cli, ["generate-config"])
        output_path = Path("docgen.yaml").resolve()

        assert result.exit_code == 0
        assert output_path.exists()
        content = output_path.read_text(encoding="utf-8")
        assert "schema:" in content
        assert "descriptions:" in content
        assert "<REQUIRED>" in content
        assert str(output_path) in result.output


def test_generate_config_command_fails_when_output_file_already_exists(tmp_path: Path) -> None:
    runner = CliRunner()
    output_path = tmp_path / "docgen.yaml"
    output_path.write_text("already-there", encoding="utf-8")

    result = runner.invoke(cli, ["generate-config", "--output", str(output_path)])

    assert result.exit_code != 0
    assert "already exists" in str(result.exception).lower()
    assert output_path.read_text(encoding="utf-8") == "already-there"
