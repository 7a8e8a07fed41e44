"""
Tests for Formatters — Shell-facing output and listings
"""

import pytest

from jumpedit.core.argtree import ArgNode
from jumpedit.errors import UsageError
from jumpedit.presentation.codec import Label
from jumpedit.presentation.formatters import (
    FormatMode, LEGEND, NO_LABELS_MESSAGE,
    format_label, format_listing, format_resolution, listing_mode, quote, resolution_mode,
)
from jumpedit.presentation.symbols import ASCII, UNICODE


DEMO = Label(name="demo", jump_path="/tmp/foo.txt", shell_dir="/tmp/")
SPACED = Label(name="docs", jump_path="/home/me/My Docs/a.md", shell_dir="/home/me/My Docs/")


class TestResolution:
    """Shell command output."""

    def test_both(self):
        assert format_resolution(FormatMode.BOTH, DEMO, "vim") == 'cd "/tmp/" && vim "/tmp/foo.txt"'

    def test_jump_only(self):
        assert format_resolution(FormatMode.JUMP_ONLY, DEMO, "vim") == 'cd "/tmp/"'

    def test_edit_only(self):
        assert format_resolution(FormatMode.EDIT_ONLY, DEMO, "vim") == 'vim "/tmp/foo.txt"'

    def test_paths_with_spaces_quoted(self):
        assert format_resolution(FormatMode.BOTH, SPACED, "code --wait") == (
            'cd "/home/me/My Docs/" && code --wait "/home/me/My Docs/a.md"'
        )

    def test_quote_is_unconditional(self):
        assert quote("/plain") == '"/plain"'

    def test_listing_mode_rejected(self):
        with pytest.raises(ValueError):
            format_resolution(FormatMode.LIST_PLAIN, DEMO, "vim")


class TestResolutionMode:
    """Flags on the program node."""

    @pytest.mark.parametrize("flags,mode", [
        ([], FormatMode.BOTH),
        (["-j"], FormatMode.JUMP_ONLY),
        (["--jump"], FormatMode.JUMP_ONLY),
        (["-e"], FormatMode.EDIT_ONLY),
        (["--edit"], FormatMode.EDIT_ONLY),
        (["-e", "-j"], FormatMode.JUMP_ONLY),
    ])
    def test_modes(self, flags, mode):
        assert resolution_mode(ArgNode("je", flags)) is mode

    def test_unknown_flag(self):
        with pytest.raises(UsageError, match="-x"):
            resolution_mode(ArgNode("je", ["-j", "-x"]))

    def test_allowed_extra(self):
        assert resolution_mode(ArgNode("je", ["-h", "-e"]), allowed_extra=("-h",)) is FormatMode.EDIT_ONLY


class TestListingMode:
    """Flags on the list node."""

    @pytest.mark.parametrize("flags,mode", [
        ([], FormatMode.LIST_PLAIN),
        (["-l"], FormatMode.LIST_LABELS_ONLY),
        (["--label"], FormatMode.LIST_LABELS_ONLY),
        (["-j"], FormatMode.LIST_JUMP_ONLY),
        (["--jump"], FormatMode.LIST_JUMP_ONLY),
        (["-d"], FormatMode.LIST_DIR_ONLY),
        (["--directory"], FormatMode.LIST_DIR_ONLY),
        (["-d", "-l"], FormatMode.LIST_LABELS_ONLY),
    ])
    def test_modes(self, flags, mode):
        assert listing_mode(ArgNode("list", flags)) is mode

    def test_unknown_flag(self):
        with pytest.raises(UsageError, match="option\\(s\\) for list not found"):
            listing_mode(ArgNode("list", ["--all"]))


class TestListing:
    """Label table rendering."""

    def test_plain_block(self):
        text = format_label(FormatMode.LIST_PLAIN, DEMO, UNICODE)
        assert text == "L: demo\n├JP: /tmp/foo.txt\n└SD: /tmp/\n"

    def test_plain_block_ascii(self):
        text = format_label(FormatMode.LIST_PLAIN, DEMO, ASCII)
        assert text == "L: demo\n|JP: /tmp/foo.txt\n`SD: /tmp/\n"

    def test_plain_listing(self):
        text = format_listing(FormatMode.LIST_PLAIN, [DEMO, SPACED], "vim", UNICODE)
        lines = text.split("\n")
        assert lines[0] == LEGEND
        assert lines[1] == "Default Editor: vim"
        assert "L: demo" in lines
        assert "L: docs" in lines
        assert text.endswith("└SD: /home/me/My Docs/\n")

    def test_labels_only_single_line(self):
        text = format_listing(FormatMode.LIST_LABELS_ONLY, [DEMO, SPACED], "vim")
        assert text.split("\n")[-1] == "demo, docs"
        assert LEGEND not in text

    def test_jump_only_lines(self):
        text = format_listing(FormatMode.LIST_JUMP_ONLY, [DEMO, SPACED], "vim")
        assert "L: demo | JP: /tmp/foo.txt" in text.split("\n")
        assert "L: docs | JP: /home/me/My Docs/a.md" in text.split("\n")
        assert "SD:" not in text

    def test_dir_only_lines(self):
        text = format_listing(FormatMode.LIST_DIR_ONLY, [DEMO], "vim")
        assert "L: demo | SD: /tmp/" in text.split("\n")
        assert "JP:" not in text

    def test_no_labels_message(self):
        text = format_listing(FormatMode.LIST_PLAIN, [], "vim")
        assert "Default Editor: vim" in text
        assert text.endswith(NO_LABELS_MESSAGE)

    def test_editor_not_set(self):
        text = format_listing(FormatMode.LIST_JUMP_ONLY, [DEMO], None)
        assert "Default Editor: (not set" in text

    def test_per_label_mode_check(self):
        with pytest.raises(ValueError):
            format_label(FormatMode.LIST_LABELS_ONLY, DEMO)
