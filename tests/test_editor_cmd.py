"""
Tests for EditorCommand — Setting the default editor
"""

import pytest

from jumpedit.commands.editor_cmd import EditorCommand
from jumpedit.errors import UsageError


class TestSetEditor:

    def test_sets_editor(self, je_factory, capsys):
        assert je_factory.run("default-editor", "vim") == "vim"
        assert je_factory.get("default-editor") == "vim"
        assert "Success: saving 'vim' as default editor" in capsys.readouterr().out

    def test_replaces_previous_editor(self, je_factory):
        je_factory.run("default-editor", "vim")
        je_factory.run("default-editor", "nvim")
        assert je_factory.get("default-editor") == "nvim"

    def test_editor_flags_are_kept(self, je_factory):
        je_factory.run("default-editor", "code", "--wait", "-n")
        assert je_factory.get("default-editor") == "code --wait -n"

    def test_editor_used_for_resolution(self, je_factory):
        je_factory.add_label("demo", "/tmp/foo.txt", "/tmp/")
        je_factory.run("default-editor", "emacs", "-nw")
        assert je_factory.run("-e", "demo") == 'emacs -nw "/tmp/foo.txt"'

    def test_editor_is_not_listed_as_label(self, je_factory):
        je_factory.run("default-editor", "vim")
        assert "L: default-editor" not in je_factory.run("list")


class TestSetEditorErrors:

    def test_no_editor(self, je_factory):
        with pytest.raises(UsageError, match="no editor provided"):
            je_factory.run("default-editor")

    def test_blank_editor(self, je_factory):
        with pytest.raises(UsageError, match="empty"):
            EditorCommand(je_factory.cli).set_editor("   ")
        assert je_factory.get("default-editor") is None

    def test_too_many_arguments(self, je_factory):
        with pytest.raises(UsageError, match="too many arguments"):
            je_factory.run("default-editor", "code", "extra")

    def test_unknown_flag_on_subcommand(self, je_factory):
        with pytest.raises(UsageError, match="option\\(s\\) not found: -x"):
            je_factory.run("default-editor", "-x", "vim")
        assert je_factory.get("default-editor") is None

    def test_unknown_flag_on_program(self, je_factory):
        with pytest.raises(UsageError, match="option\\(s\\) not found: -j"):
            je_factory.run("-j", "default-editor", "vim")
