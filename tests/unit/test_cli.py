"""Unit tests for the quack CLI."""

import json

import pytest
from typer.testing import CliRunner

from quack import __version__
from quack.cli import app


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def write_doc(tmp_path):
    """Write a document to a temporary file and return its path."""
    def write(doc, name="doc.json"):
        path = tmp_path / name
        path.write_text(json.dumps(doc), encoding="utf-8")
        return str(path)
    return write


@pytest.fixture
def no_config(tmp_path):
    """Options pointing at a config file that does not exist, so defaults apply."""
    return ["--config", str(tmp_path / "absent.json")]


class TestValidateCommand:
    """Test the validate command."""

    def test_valid_document(self, runner, write_doc, no_config, note):
        result = runner.invoke(app, ["validate", write_doc(note), *no_config])
        assert result.exit_code == 0
        assert "No faults found" in result.stdout

    def test_faults_reported_in_table(self, runner, write_doc, no_config, person):
        del person["inbox"]
        result = runner.invoke(app, ["validate", write_doc(person), *no_config])
        assert result.exit_code == 1
        assert "Found 1 faults" in result.stdout

    def test_json_output(self, runner, write_doc, no_config, person):
        del person["inbox"]
        result = runner.invoke(app, ["validate", write_doc(person), "--format", "json", *no_config])
        assert result.exit_code == 1
        records = json.loads(result.stdout)
        assert [r["fault"] for r in records] == ["no-inbox"]
        assert records[0]["severity"] == "must"
        assert records[0]["type"] == "Fault"

    def test_list_of_documents(self, runner, write_doc, no_config, note, person):
        result = runner.invoke(app, ["validate", write_doc([note, person]), "-f", "json", *no_config])
        assert result.exit_code == 0
        assert json.loads(result.stdout) == [[], []]

    def test_severity_filter(self, runner, write_doc, no_config, note):
        del note["@context"]
        result = runner.invoke(app, ["validate", write_doc(note), "-f", "json", "-s", "must", *no_config])
        assert result.exit_code == 0
        assert json.loads(result.stdout) == []

    def test_reject_severity(self, runner, write_doc, no_config, note):
        del note["@context"]
        result = runner.invoke(app, ["validate", write_doc(note), "--reject-severity", "should", *no_config])
        assert result.exit_code == 1

    def test_reject_severity_relaxed(self, runner, write_doc, no_config, person):
        del person["inbox"]
        result = runner.invoke(app, ["validate", write_doc(person), "--reject-severity", "critical", *no_config])
        assert result.exit_code == 0

    def test_rejection_ignores_report_filter(self, runner, write_doc, no_config, person):
        """Hiding faults from the report does not accept the document."""
        del person["inbox"]
        result = runner.invoke(app, ["validate", write_doc(person), "-s", "critical", "-f", "json", *no_config])
        assert json.loads(result.stdout) == []
        assert result.exit_code == 1

    def test_explicit_shape(self, runner, write_doc, no_config, note):
        result = runner.invoke(app, ["validate", write_doc(note), "--as", "actor", "-f", "json", *no_config])
        assert "not-actor-type" in [r["fault"] for r in json.loads(result.stdout)]
        assert result.exit_code == 1

    def test_stdin(self, runner, no_config, note):
        result = runner.invoke(app, ["validate", "-f", "json", *no_config], input=json.dumps(note))
        assert result.exit_code == 0
        assert json.loads(result.stdout) == []

    def test_file_uri(self, runner, tmp_path, no_config, note):
        path = tmp_path / "note.json"
        path.write_text(json.dumps(note), encoding="utf-8")
        result = runner.invoke(app, ["validate", path.as_uri(), *no_config])
        assert result.exit_code == 0

    def test_config_file(self, runner, write_doc, tmp_path, person):
        del person["inbox"]
        config_path = tmp_path / ".quack.json"
        config_path.write_text(json.dumps({"validation": {"rejectSeverity": "critical"}}))
        result = runner.invoke(app, ["validate", write_doc(person), "--config", str(config_path)])
        assert result.exit_code == 0


class TestValidateErrors:
    """Test input errors, which exit with code 2."""

    def test_missing_file(self, runner, tmp_path, no_config):
        result = runner.invoke(app, ["validate", str(tmp_path / "missing.json"), *no_config])
        assert result.exit_code == 2
        assert "Could not read" in result.stdout

    def test_invalid_json(self, runner, tmp_path, no_config):
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        result = runner.invoke(app, ["validate", str(path), *no_config])
        assert result.exit_code == 2

    def test_invalid_format(self, runner, write_doc, no_config, note):
        result = runner.invoke(app, ["validate", write_doc(note), "--format", "xml", *no_config])
        assert result.exit_code == 2
        assert "Invalid format" in result.stdout

    def test_invalid_severity(self, runner, write_doc, no_config, note):
        result = runner.invoke(app, ["validate", write_doc(note), "--severity", "fatal", *no_config])
        assert result.exit_code == 2
        assert "Invalid severity" in result.stdout

    def test_invalid_shape(self, runner, write_doc, no_config, note):
        result = runner.invoke(app, ["validate", write_doc(note), "--as", "duck", *no_config])
        assert result.exit_code == 2

    def test_invalid_config(self, runner, write_doc, tmp_path, note):
        config_path = tmp_path / ".quack.json"
        config_path.write_text("{not json")
        result = runner.invoke(app, ["validate", write_doc(note), "--config", str(config_path)])
        assert result.exit_code == 2
        assert "Invalid JSON in config file" in result.stdout

    def test_invalid_log_level(self, runner, write_doc, no_config, note):
        result = runner.invoke(app, ["validate", write_doc(note), "--log-level", "verbose", *no_config])
        assert result.exit_code == 2
        assert "Invalid log level" in result.stdout

    def test_unusable_uri(self, runner, no_config):
        result = runner.invoke(app, ["validate", "http://example.com:abc/alice", *no_config])
        assert result.exit_code == 2
        assert "Could not read" in result.stdout


class TestOtherCommands:
    """Test the remaining commands and options."""

    def test_version(self, runner):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.stdout

    def test_faults_listing(self, runner):
        result = runner.invoke(app, ["faults"])
        assert result.exit_code == 0
        assert "Fault codes" in result.stdout
        assert "no-inbox" in result.stdout
