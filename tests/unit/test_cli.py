"""
Tests for the marketmatch command line interface.
"""

import pytest
from typer.testing import CliRunner

from marketmatch.cli import app

runner = CliRunner()


@pytest.fixture
def data_args(data_files):
    agents_file, tasks_file = data_files
    return ["--agents", str(agents_file), "--tasks", str(tasks_file)]


class TestInfoCommands:
    def test_version(self):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_info(self):
        result = runner.invoke(app, ["info"])
        assert result.exit_code == 0
        assert "MarketMatch Configuration" in result.output
        assert "testing" in result.output


class TestMatchTask:
    def test_table(self, data_args):
        result = runner.invoke(app, ["match-task", "t-nlp", *data_args])
        assert result.exit_code == 0
        assert "Statistics" in result.output
        assert "Total matches: 2" in result.output
        assert "Top score: 97.50" in result.output

    def test_json(self, data_args):
        result = runner.invoke(app, ["match-task", "t-nlp", "--json", *data_args])
        assert result.exit_code == 0
        assert '"taskId": "t-nlp"' in result.output
        assert '"id": "a-senior"' in result.output
        assert "a-busy" not in result.output

    def test_unknown_task(self, data_args):
        result = runner.invoke(app, ["match-task", "t-missing", *data_args])
        assert result.exit_code == 1
        assert "Task not found: t-missing" in result.output

    def test_missing_file(self, tmp_path, data_files):
        _, tasks_file = data_files
        result = runner.invoke(
            app,
            ["match-task", "t-nlp", "-a", str(tmp_path / "none.json"), "-t", str(tasks_file)],
        )
        assert result.exit_code == 1
        assert "Error loading data" in result.output

    def test_no_matches(self, tmp_path, data_files):
        agents_file, _ = data_files
        tasks_file = tmp_path / "rust.json"
        tasks_file.write_text('[{"id": "t-rust", "requiredSkills": ["Rust"]}]', encoding="utf-8")
        result = runner.invoke(
            app, ["match-task", "t-rust", "-a", str(agents_file), "-t", str(tasks_file)]
        )
        assert result.exit_code == 0
        assert "No agents matched" in result.output


class TestRecommend:
    def test_json(self, data_args):
        result = runner.invoke(app, ["recommend", "a-senior", "--json", "-n", "2", *data_args])
        assert result.exit_code == 0
        assert '"id": "t-nlp"' in result.output
        assert '"id": "t-script"' in result.output
        assert "t-done" not in result.output

    def test_table(self, data_args):
        result = runner.invoke(app, ["recommend", "a-senior", *data_args])
        assert result.exit_code == 0
        assert "Recommended Tasks" in result.output

    def test_unknown_agent(self, data_args):
        result = runner.invoke(app, ["recommend", "nobody", *data_args])
        assert result.exit_code == 1
        assert "Agent profile not found: nobody" in result.output


class TestScore:
    def test_breakdown(self, data_args):
        result = runner.invoke(app, ["score", "a-senior", "t-nlp", *data_args])
        assert result.exit_code == 0
        assert "price_score" in result.output
        assert "complexity_score" in result.output

    def test_unknown_ids(self, data_args):
        result = runner.invoke(app, ["score", "a-senior", "t-missing", *data_args])
        assert result.exit_code == 1
        assert "Task not found" in result.output
