"""Tests for the command-line interface."""

import json

from typer.testing import CliRunner

from python_docx_tree import __version__
from python_docx_tree.cli import app

runner = CliRunner()


class TestCLIVersion:
    """Tests for version command."""

    def test_version_flag(self):
        """Test --version shows version."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert f"docx-tree version {__version__}" in result.stdout

    def test_version_short_flag(self):
        """Test -v shows version."""
        result = runner.invoke(app, ["-v"])
        assert result.exit_code == 0
        assert __version__ in result.stdout


class TestCLIHelp:
    """Tests for help output."""

    def test_help(self):
        """Test --help lists the commands."""
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "inspect" in result.stdout
        assert "dump" in result.stdout


class TestCLIInspect:
    """Tests for inspect command."""

    def test_inspect_summary(self, make_docx):
        """Test inspect prints part counts and node types."""
        result = runner.invoke(app, ["inspect", str(make_docx())])

        assert result.exit_code == 0
        assert "Notes: 0" in result.stdout
        assert "Comments: 0" in result.stdout
        assert "paragraph: 1" in result.stdout
        assert "run: 1" in result.stdout
        assert "text: 1" in result.stdout
        assert "Warnings: 0" in result.stdout

    def test_inspect_lists_warnings(self, make_docx):
        """Test inspect prints each warning."""
        path = make_docx(body="<w:p/><w:mystery/>")

        result = runner.invoke(app, ["inspect", str(path), "--no-images"])

        assert result.exit_code == 0
        assert "Warnings: 1" in result.stdout
        assert "warning: An unrecognised element was ignored: w:mystery" in result.stdout

    def test_inspect_invalid_file(self, tmp_path):
        """Test inspect fails cleanly on a file that isn't a .docx."""
        path = tmp_path / "broken.docx"
        path.write_text("not a zip")

        result = runner.invoke(app, ["inspect", str(path)])

        assert result.exit_code == 1
        assert "Error:" in result.output


class TestCLIDump:
    """Tests for dump command."""

    def test_dump_json(self, make_docx):
        """Test dump prints the tree as JSON."""
        result = runner.invoke(app, ["dump", str(make_docx())])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["messages"] == []
        document = data["document"]
        assert document["type"] == "document"
        paragraph = document["children"][0]
        assert paragraph["type"] == "paragraph"
        assert paragraph["children"][0]["children"][0] == {"type": "text", "value": "Hello world"}

    def test_dump_messages(self, make_docx):
        """Test dump includes warnings."""
        result = runner.invoke(app, ["dump", str(make_docx(body="<w:mystery/>")), "-i", "0"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["messages"] == [
            {"type": "warning", "message": "An unrecognised element was ignored: w:mystery"}
        ]

    def test_dump_missing_file(self, tmp_path):
        """Test dump exits with an error for a missing file."""
        result = runner.invoke(app, ["dump", str(tmp_path / "missing.docx")])
        assert result.exit_code == 1
        assert "file not found" in result.output
