"""
Tests for ListCommand — Listing labels and the default editor
"""

import pytest

from jumpedit.errors import DecodeError, UsageError
from jumpedit.presentation.formatters import LEGEND, NO_LABELS_MESSAGE


class TestListEmpty:
    """Store states with nothing to list."""

    def test_empty_store_is_usage_error(self, je_factory):
        with pytest.raises(UsageError, match="No default editor or jump labels"):
            je_factory.run("list")

    def test_editor_without_labels(self, je_factory):
        je_factory.set_editor("nvim")
        output = je_factory.run("list")
        assert "Default Editor: nvim" in output
        assert output.endswith(NO_LABELS_MESSAGE)

    def test_labels_without_editor(self, je_factory):
        je_factory.add_label("demo", "/tmp/foo.txt", "/tmp/")
        output = je_factory.run("list", "-j")
        assert "Default Editor: (not set" in output
        assert "L: demo | JP: /tmp/foo.txt" in output


class TestListModes:
    """Flag-selected layouts."""

    def test_plain(self, je_env, capsys):
        capsys.readouterr()
        output = je_env.run("list")
        files = je_env.files_dir

        assert output.startswith(LEGEND)
        assert "Default Editor: vim" in output
        assert f"L: notes\n├JP: {files}/notes.txt\n└SD: {files}/\n" in output
        assert f"L: proj\n├JP: {files}/project\n└SD: {files}/project\n" in output
        assert capsys.readouterr().out == output + "\n"

    def test_editor_record_not_listed_as_label(self, je_env):
        output = je_env.run("list", "-l")
        assert "L: default-editor" not in output
        assert sorted(output.split("\n")[-1].split(", ")) == ["notes", "proj"]

    def test_labels_only_has_no_legend(self, je_env):
        assert LEGEND not in je_env.run("list", "--label")

    def test_jump_only(self, je_env):
        output = je_env.run("list", "--jump")
        assert f"L: notes | JP: {je_env.files_dir}/notes.txt" in output.split("\n")
        assert "SD:" not in output

    def test_directory_only(self, je_env):
        output = je_env.run("list", "-d")
        assert f"L: proj | SD: {je_env.files_dir}/project" in output.split("\n")
        assert "JP:" not in output

    def test_ascii_symbols(self, tmp_path):
        from jumpedit.cli import JumpEditCLI
        from jumpedit.config import ConfigManager
        from jumpedit.core.argtree import parse

        manager = ConfigManager(tmp_path / "data", environ={"JE_SYMBOLS": "ascii"})
        with JumpEditCLI(config_manager=manager) as cli:
            cli.store.put("demo", "/tmp/foo.txt:::/tmp/")
            output = cli.run(parse(["je", "list"]))
        assert "|JP: /tmp/foo.txt\n`SD: /tmp/" in output


class TestListErrors:

    def test_unknown_flag(self, je_env):
        with pytest.raises(UsageError, match="option\\(s\\) for list not found: --all"):
            je_env.run("list", "--all")

    def test_too_many_arguments(self, je_env):
        with pytest.raises(UsageError, match="too many arguments"):
            je_env.run("list", "notes")

    def test_flag_on_program(self, je_env):
        """Only the list node's own flags are read."""
        with pytest.raises(UsageError, match="option\\(s\\) not found: --bogus"):
            je_env.run("--bogus", "list")

    def test_corrupted_record(self, je_env):
        je_env.add_raw("broken", "no separator here")
        with pytest.raises(DecodeError, match="broken"):
            je_env.run("list")
