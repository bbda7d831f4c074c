"""E2E tests for the dotgen command line."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from dotgen import __version__
from dotgen.cli import cli

pytestmark = pytest.mark.e2e


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


class TestInfo:
    def test_version(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_attributes_subgraph(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["attributes", "subgraph"])
        assert result.exit_code == 0
        assert result.output == "rank: RankType\n"

    def test_attributes_node(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["attributes", "node"])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert "sides: Int [3..]" in lines
        assert "label: EscString or HtmlValue" in lines
        assert "color: Color" in lines

    def test_attributes_unknown_kind(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["attributes", "table"])
        assert result.exit_code != 0


class TestColors:
    def test_color(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["color", "Red"])
        assert result.exit_code == 0
        assert result.output.strip() == "#FF0000"

    def test_unknown_color(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["color", "nosuchcolor"])
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_hsv(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["hsv", "0.5", "1", "1"])
        assert result.exit_code == 0
        assert result.output.strip() == "#00FFFF"

    def test_hsv_out_of_range(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["hsv", "1.5", "1", "1"])
        assert result.exit_code == 1
        assert "Error:" in result.output


class TestBuild:
    def test_build_to_stdout(self, runner: CliRunner, sample_yaml_file: Path) -> None:
        result = runner.invoke(cli, ["build", str(sample_yaml_file)])
        assert result.exit_code == 0
        assert result.output == (
            "digraph deps {\n"
            '  graph [rankdir="LR"];\n'
            '  node [shape="box"];\n'
            '  a [color="red"];\n'
            "  b;\n"
            "  c;\n"
            '  a -> b [style="dashed"];\n'
            "  b -> c;\n"
            "  subgraph cluster_core {\n"
            '    graph [label="Core"];\n'
            "    d;\n"
            "  }\n"
            "}\n"
        )

    def test_build_to_file_with_config(
        self, runner: CliRunner, sample_yaml_file: Path, tmp_path: Path
    ) -> None:
        config = tmp_path / "render.json"
        config.write_text(json.dumps({"indent": 1, "trailing_newline": False}))
        out = tmp_path / "out" / "deps.dot"

        result = runner.invoke(
            cli,
            ["--verbose", "build", str(sample_yaml_file), "--out", str(out), "--config", str(config)],
        )
        assert result.exit_code == 0
        assert f"Wrote {out}" in result.output
        text = out.read_text()
        assert text.startswith("digraph deps {\n graph [rankdir=\"LR\"];\n")
        assert text.endswith("\n}")

    def test_build_invalid_description(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("name: g\nnodes:\n  a: {sides: 2}\n")
        result = runner.invoke(cli, ["build", str(path)])
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_build_missing_config(
        self, runner: CliRunner, sample_yaml_file: Path, tmp_path: Path
    ) -> None:
        result = runner.invoke(
            cli, ["build", str(sample_yaml_file), "--config", str(tmp_path / "none.json")]
        )
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_build_missing_file(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(cli, ["build", str(tmp_path / "none.yaml")])
        assert result.exit_code != 0
