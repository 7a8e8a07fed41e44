"""
Tests for Symbols — Unicode/ASCII selection and safe printing
"""

import io

from jumpedit.presentation.symbols import ASCII, UNICODE, get_symbols, safe_print


class TestGetSymbols:

    def test_explicit_preferences(self):
        assert get_symbols("unicode") is UNICODE
        assert get_symbols("ascii") is ASCII

    def test_auto_follows_stdout_encoding(self, monkeypatch):
        monkeypatch.setattr("sys.stdout", io.TextIOWrapper(io.BytesIO(), encoding="ascii"))
        assert get_symbols("auto") is ASCII

        monkeypatch.setattr("sys.stdout", io.TextIOWrapper(io.BytesIO(), encoding="utf-8"))
        assert get_symbols(None) is UNICODE


class TestSafePrint:

    def test_plain_text(self):
        buffer = io.StringIO()
        safe_print("cd \"/tmp/\"", file=buffer)
        assert buffer.getvalue() == "cd \"/tmp/\"\n"

    def test_falls_back_to_ascii_symbols(self):
        raw = io.BytesIO()
        stream = io.TextIOWrapper(raw, encoding="ascii")
        safe_print("├JP: /tmp/x", file=stream)
        stream.flush()
        assert raw.getvalue() == b"|JP: /tmp/x\n"

    def test_replaces_unknown_characters(self):
        raw = io.BytesIO()
        stream = io.TextIOWrapper(raw, encoding="ascii")
        safe_print("/tmp/café", end="", file=stream)
        stream.flush()
        assert raw.getvalue() == b"/tmp/caf?"

    def test_surrogate_escapes_written_as_original_bytes(self):
        raw = io.BytesIO()
        stream = io.TextIOWrapper(raw, encoding="utf-8")
        safe_print('cd "/tmp/caf\udce9/"', file=stream)
        stream.flush()
        assert raw.getvalue() == b'cd "/tmp/caf\xe9/"\n'
