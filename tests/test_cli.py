"""Tests for the command-line interface."""

import json

import pytest
from click.testing import CliRunner

from src import cli


CONTROLLER = "\n".join(
    ["<?php", "class Report", "{", "    public function build()", "    {"]
    + ["        $rows[] = $row;"] * 10
    + ["        print_r($rows);", "        return $rows;", "    }", "}"]
) + "\n"


@pytest.fixture
def runner(monkeypatch):
    monkeypatch.setattr(cli, "configure_logging", lambda **kwargs: None)
    return CliRunner()


@pytest.fixture
def controller(tmp_path):
    path = tmp_path / "Report.php"
    path.write_text(CONTROLLER)
    return path


class TestSnippetCommand:
    """Tests for `snippet`."""

    def test_json_output(self, runner, controller):
        result = runner.invoke(cli.main, ["snippet", str(controller), "16", "--context", "8", "--format", "json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["target_line"] == 16
        assert data["context_lines"] == 8
        # 5 lines lost below the end of the file move to the top
        assert list(data["lines"]) == [str(n) for n in range(3, 20)]

    def test_console_output(self, runner, controller):
        result = runner.invoke(cli.main, ["snippet", str(controller), "16", "-c", "2"])

        assert result.exit_code == 0, result.output
        assert "print_r($rows);" in result.output
        assert "public function build()" not in result.output

    def test_rejects_line_zero(self, runner, controller):
        result = runner.invoke(cli.main, ["snippet", str(controller), "0"])
        assert result.exit_code == 2
        assert "line numbers start at 1" in result.output

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(cli.main, ["snippet", str(tmp_path / "nope.php"), "3"])
        assert result.exit_code == 2

    def test_empty_file(self, runner, tmp_path):
        path = tmp_path / "empty.php"
        path.write_text("")
        result = runner.invoke(cli.main, ["snippet", str(path), "1"])
        assert result.exit_code == 1
        assert "Could not read a snippet" in result.output


class TestAnalyzeAndRender:
    """Tests for `analyze` and `render`."""

    def test_analyze_writes_json_and_render_reads_it(self, runner, controller, tmp_path):
        output = tmp_path / "report.json"
        result = runner.invoke(cli.main, ["analyze", str(controller), "-f", "json", "-o", str(output)])

        assert result.exit_code == 0, result.output
        data = json.loads(output.read_text())
        assert data["summary"]["total_issues"] == 1
        issue = data["issues"][0]
        assert issue["line_number"] == 16
        assert issue["code_snippet"]["target_line"] == 16

        rendered = runner.invoke(cli.main, ["render", str(output)])
        assert rendered.exit_code == 0, rendered.output
        assert "print_r($rows);" in rendered.output

    def test_analyze_without_snippets(self, runner, controller, tmp_path):
        output = tmp_path / "report.json"
        result = runner.invoke(cli.main, ["analyze", str(controller), "-f", "json", "-o", str(output), "--no-snippets"])

        assert result.exit_code == 0, result.output
        issue = json.loads(output.read_text())["issues"][0]
        assert "code_snippet" not in issue

    @pytest.mark.parametrize("content", [
        "{not json",
        "[]",
        '{"issues": [1]}',
        '{"issues": {"category": "style"}}',
        json.dumps({"issues": [{
            "category": "style",
            "severity": "low",
            "title": "t",
            "file_path": "a.php",
            "code_snippet": {"lines": ["x"]},
        }]}),
    ])
    def test_render_rejects_invalid_report(self, runner, tmp_path, content):
        path = tmp_path / "broken.json"
        path.write_text(content)
        result = runner.invoke(cli.main, ["render", str(path)])
        assert result.exit_code == 1
        assert "Invalid report" in result.output
