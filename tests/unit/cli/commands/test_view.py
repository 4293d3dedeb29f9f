"""
Unit tests for the 'view' command.
"""

import json
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from click.testing import CliRunner

from irlens.cli.commands.view import view
from irlens.cli.main import main


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def ir_file(sample_ir):
    """Write the sample IR inside the runner's isolated filesystem."""
    def _write(name: str = "square.ll") -> str:
        Path(name).write_text(sample_ir)
        return name
    return _write


class TestViewCommand:
    def test_text_output_with_locations(self, runner, ir_file):
        with runner.isolated_filesystem():
            result = runner.invoke(view, [ir_file()])

        assert result.exit_code == 0
        assert "define dso_local i32 @square(i32 noundef %0) #0 !dbg !10 {" in result.output
        load = next(l for l in result.output.splitlines() if "load i32" in l)
        assert "!dbg !18" in load
        assert "; square.c:4:12" in load

    def test_no_source(self, runner, ir_file):
        with runner.isolated_filesystem():
            result = runner.invoke(view, [ir_file(), "--no-source"])

        assert result.exit_code == 0
        assert "square.c:4:12" not in result.output

    def test_json_output(self, runner, ir_file):
        with runner.isolated_filesystem():
            result = runner.invoke(view, [ir_file(), "--json", "-d", "--directives", "--comments"])

        assert result.exit_code == 0
        payload = json.loads(result.output)
        assert payload["meta"] == {"command": "view", "status": "success"}

        data = payload["data"]
        assert data["languageId"] == "llvm-ir"
        assert data["labelDefinitions"] == {}
        assert len(data["asm"]) == 11

        load = next(line for line in data["asm"] if "load i32" in line["text"])
        assert load["scope"] == "!18"
        assert load["source"] == {"file": "square.c", "line": 4, "column": 12}
        define = next(line for line in data["asm"] if line["text"].startswith("define"))
        assert define["source"] == {"file": "square.c", "line": 3}

    def test_reads_stdin(self, runner, sample_ir):
        with runner.isolated_filesystem():
            result = runner.invoke(view, ["-", "--json"], input=sample_ir)

        assert result.exit_code == 0
        assert len(json.loads(result.output)["data"]["asm"]) == 29

    def test_max_lines(self, runner, ir_file):
        with runner.isolated_filesystem():
            result = runner.invoke(view, [ir_file(), "--json", "--max-lines", "3"])

        asm = json.loads(result.output)["data"]["asm"]
        assert len(asm) == 4
        assert asm[-1] == {"text": "[truncated; too many lines]"}

    def test_config_default_filters(self, runner, ir_file):
        with runner.isolated_filesystem():
            Path("irlens.yaml").write_text("default_filters:\n  filterIRMetadata: true\n")
            result = runner.invoke(view, [ir_file(), "--json", "-c", "irlens.yaml"])

        assert len(json.loads(result.output)["data"]["asm"]) == 14

    def test_flag_overrides_config(self, runner, ir_file):
        with runner.isolated_filesystem():
            Path("irlens.yaml").write_text("default_filters:\n  filterIRMetadata: true\n")
            result = runner.invoke(view, [ir_file(), "--json", "-c", "irlens.yaml", "--no-directives"])

        assert len(json.loads(result.output)["data"]["asm"]) == 29

    def test_missing_file(self, runner):
        with runner.isolated_filesystem():
            result = runner.invoke(view, ["nope.ll"])

        assert result.exit_code == 1
        assert "Input file not found: nope.ll" in result.output

    def test_missing_file_json(self, runner):
        with runner.isolated_filesystem():
            result = runner.invoke(view, ["nope.ll", "--json"])

        assert result.exit_code == 1
        payload = json.loads(result.output)
        assert payload["meta"]["status"] == "error"
        assert payload["error"]["type"] == "InputNotFoundError"

    @patch("irlens.demangler.subprocess.run")
    def test_demangle(self, mock_run, runner):
        mock_run.return_value = MagicMock(stdout="square(int)\n", stderr="", returncode=0)

        with runner.isolated_filesystem():
            Path("a.ll").write_text("define i32 @_Z6squarei(i32 %0) {\n}\n")
            result = runner.invoke(view, ["a.ll", "--demangle"])

        assert result.exit_code == 0
        assert "define i32 @square(int)(i32 %0) {" in result.output

    @patch("irlens.demangler.subprocess.run", side_effect=FileNotFoundError())
    def test_demangler_missing(self, mock_run, runner):
        with runner.isolated_filesystem():
            Path("a.ll").write_text("define i32 @_Z6squarei(i32 %0) {\n}\n")
            result = runner.invoke(view, ["a.ll", "--demangle"])

        assert result.exit_code == 1
        assert "executable not found" in result.output

    def test_invalid_config(self, runner, ir_file):
        with runner.isolated_filesystem():
            Path("bad.yaml").write_text("max_lines_of_asm: -5\n")
            result = runner.invoke(view, [ir_file(), "-c", "bad.yaml"])

        assert result.exit_code == 1
        assert "bad.yaml" in result.output

    def test_missing_config_is_reported(self, runner, ir_file):
        with runner.isolated_filesystem():
            result = runner.invoke(view, [ir_file(), "--json", "-c", "typo.yaml"])

        assert result.exit_code == 1
        payload = json.loads(result.output)
        assert payload["error"]["type"] == "ConfigError"
        assert "typo.yaml" in payload["error"]["message"]


class TestMainGroup:
    def test_view_registered(self, runner, ir_file):
        with runner.isolated_filesystem():
            result = runner.invoke(main, ["view", ir_file(), "--json"])

        assert result.exit_code == 0
        assert json.loads(result.output)["meta"]["command"] == "view"
