"""Tests for the jsonfold CLI."""

from pathlib import Path
from unittest.mock import patch

import pyperclip
import pytest
from click.testing import CliRunner

from jsonfold.commands import cli
from jsonfold.commands.copy import _ask_with_comments


@pytest.fixture
def runner():
    """Create a CliRunner for testing."""
    return CliRunner()


class TestFmt:
    """Test fmt command."""

    def test_fmt_stdin(self, runner):
        """Lenient input is printed as strict JSON with a 4-space indent."""
        result = runner.invoke(cli, ["fmt"], input="{a: 1, 'b': [1,2,],} // c\n")

        assert result.exit_code == 0
        assert result.output == (
            '{\n    "a": 1,\n    "b": [\n        1,\n        2\n    ]\n}\n'
        )

    def test_fmt_file_with_comments(self, runner, annotated_text):
        with runner.isolated_filesystem() as tmpdir:
            source = Path(tmpdir) / "in.json"
            source.write_text(annotated_text)

            result = runner.invoke(cli, ["fmt", str(source)])

            assert result.exit_code == 0
            assert "//" not in result.output.replace("http://", "")
            assert '"url": "http://example.com"' in result.output

    def test_fmt_write_flag(self, runner):
        """Test that --write flag overwrites the file."""
        with runner.isolated_filesystem() as tmpdir:
            source = Path(tmpdir) / "in.json"
            source.write_text("{\n  // drop me\n  items: [],\n}")

            result = runner.invoke(cli, ["fmt", str(source), "--write"])

            assert result.exit_code == 0
            assert "Formatted" in result.output
            assert source.read_text() == '{\n    "items": []\n}\n'
            assert list(Path(tmpdir).glob("*.tmp.*")) == []

    def test_fmt_write_requires_file(self, runner):
        result = runner.invoke(cli, ["fmt", "--write"], input="[1]")
        assert result.exit_code == 1
        assert "--write requires a FILE" in result.output

    def test_fmt_parse_error(self, runner):
        result = runner.invoke(cli, ["fmt"], input="{a: }")
        assert result.exit_code == 1
        assert "Error: line 1, col" in result.output
        assert "Expecting value" in result.output

    def test_fmt_empty_input(self, runner):
        result = runner.invoke(cli, ["fmt"], input="  \n")
        assert result.exit_code == 0
        assert result.output == ""

    def test_fmt_debug_logging(self, runner):
        result = runner.invoke(cli, ["--debug", "fmt"], input="{a: 1} // x\n")
        assert result.exit_code == 0
        assert "[DEBUG] jsonfold.document: Parsed document" in result.output

        quiet = runner.invoke(cli, ["fmt"], input="{a: 1} // x\n")
        assert "[DEBUG]" not in quiet.output

    def test_fmt_missing_file(self, runner):
        result = runner.invoke(cli, ["fmt", "does-not-exist.json"])
        assert result.exit_code == 1
        assert "File not found" in result.output


class TestTree:
    """Test tree command."""

    SOURCE = '{"a": {"b": 1}, // note\n"c": [1]}'

    def test_tree_with_comments(self, runner):
        result = runner.invoke(cli, ["tree"], input=self.SOURCE)
        assert result.exit_code == 0
        assert result.output.split("\n")[1] == '    "a": {  // note'

    def test_tree_collapse_path(self, runner):
        result = runner.invoke(cli, ["tree", "--collapse", "root.a"], input=self.SOURCE)
        assert result.exit_code == 0
        assert result.output == (
            "{\n"
            '    "a": {...},  // note\n'
            '    "c": [\n'
            "        1\n"
            "    ]\n"
            "}\n"
        )

    def test_tree_collapse_all(self, runner):
        result = runner.invoke(cli, ["tree", "--collapse-all"], input=self.SOURCE)
        assert result.output == "{...}\n"

    def test_tree_no_comments(self, runner):
        result = runner.invoke(cli, ["tree", "--no-comments"], input=self.SOURCE)
        assert "// note" not in result.output

    def test_tree_parse_error(self, runner):
        result = runner.invoke(cli, ["tree"], input="[1 2]")
        assert result.exit_code == 1
        assert "Error:" in result.output


class TestComments:
    """Test comments command."""

    def test_lists_bound_comments(self, runner, annotated_text):
        result = runner.invoke(cli, ["comments"], input=annotated_text)
        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "root.name\t// project name",
            "root.nested\t// settings block",
            "root.nested.depth\t// how deep",
        ]

    def test_no_comments(self, runner):
        result = runner.invoke(cli, ["comments"], input="[1]")
        assert result.exit_code == 0
        assert result.output == ""


class TestCopy:
    """Test copy command."""

    def test_copy_plain(self, runner, mock_clipboard):
        result = runner.invoke(cli, ["copy", "--plain"], input="{a: 1}")
        assert result.exit_code == 0
        assert "Copied to clipboard" in result.output
        mock_clipboard.assert_called_once_with('{\n    "a": 1\n}')

    def test_copy_without_tty_defaults_to_plain(self, runner, mock_clipboard):
        with runner.isolated_filesystem() as tmpdir:
            source = Path(tmpdir) / "in.json"
            source.write_text("[1]")
            result = runner.invoke(cli, ["copy", str(source)])
        assert result.exit_code == 0
        mock_clipboard.assert_called_once_with("[\n    1\n]")

    def test_copy_failure(self, runner, mock_clipboard):
        mock_clipboard.side_effect = pyperclip.PyperclipException("no backend")
        result = runner.invoke(cli, ["copy", "--with-comments"], input="[1]")
        assert result.exit_code == 1
        assert "Error: Copy failed" in result.output

    def test_copy_empty_input(self, runner, mock_clipboard):
        result = runner.invoke(cli, ["copy", "--plain"], input="")
        assert result.exit_code == 1
        assert "Nothing to copy" in result.output
        mock_clipboard.assert_not_called()

    def test_ask_with_comments(self):
        with patch("questionary.select") as select:
            select.return_value.ask.return_value = True
            assert _ask_with_comments() is True

    def test_ask_with_comments_cancelled(self):
        with patch("questionary.select") as select:
            select.return_value.ask.side_effect = KeyboardInterrupt
            assert _ask_with_comments() is None


class TestView:
    """Test view command."""

    def test_view_requires_tty(self, runner):
        result = runner.invoke(cli, ["view"])
        assert result.exit_code == 1
        assert "requires a TTY" in result.output

    def test_view_rejects_bad_settings(self, runner, settings_path):
        settings_path.parent.mkdir(parents=True)
        settings_path.write_text("{split_ratio: 1}")
        result = runner.invoke(cli, ["view"])
        assert result.exit_code == 1
        assert "split_ratio" in result.output


class TestConfig:
    """Test config commands."""

    def test_init_creates_file(self, runner, settings_path):
        result = runner.invoke(cli, ["config", "init"])
        assert result.exit_code == 0
        assert "Created" in result.output
        assert "// Percentage" in settings_path.read_text()

    def test_init_refuses_to_overwrite(self, runner, settings_path):
        runner.invoke(cli, ["config", "init"])
        result = runner.invoke(cli, ["config", "init"])
        assert result.exit_code == 1
        assert "already exists" in result.output

    def test_init_force(self, runner, settings_path):
        settings_path.parent.mkdir(parents=True)
        settings_path.write_text("{}")
        result = runner.invoke(cli, ["config", "init", "--force"])
        assert result.exit_code == 0
        assert "split_ratio" in settings_path.read_text()

    def test_show(self, runner, settings_path):
        settings_path.parent.mkdir(parents=True)
        settings_path.write_text("{split_ratio: 35, // narrow\n}")
        result = runner.invoke(cli, ["config", "show"])
        assert result.exit_code == 0
        assert '"split_ratio": 35' in result.output
