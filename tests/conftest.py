"""
Shared pytest fixtures for the je test suite.

Usage in tests:
    def test_something(je_factory):
        je_factory.set_editor("vim")
        je_factory.run("list")

    def test_with_data(je_env):
        # je_env has an editor and two labels already
        je_env.run("-j", "notes")
"""

import pytest
from tests.factories import JumpEditTestFactory


@pytest.fixture
def je_factory(tmp_path):
    """
    Create an empty JumpEditTestFactory instance.

    The store is a real SQLite file in tmp_path, closed after the test.
    """
    factory = JumpEditTestFactory(tmp_path)
    yield factory
    factory.close()


@pytest.fixture
def je_env(tmp_path):
    """
    Create a JumpEditTestFactory with sample data.

    Pre-populated with:
    - default editor "vim"
    - label "notes" -> <files>/notes.txt, shell dir <files>/
    - label "proj"  -> <files>/project, shell dir <files>/project
    """
    factory = JumpEditTestFactory(tmp_path)
    notes = factory.make_file("notes.txt")
    project = factory.make_dir("project")
    factory.set_editor("vim")
    factory.run("add", "notes", str(notes))
    factory.run("add", "proj", str(project))
    yield factory
    factory.close()


@pytest.fixture
def data_env(tmp_path, monkeypatch):
    """Point main() at a private data directory through the environment."""
    data_dir = tmp_path / "je-data"
    monkeypatch.setenv("JE_DATA_DIR", str(data_dir))
    monkeypatch.setenv("JE_SYMBOLS", "unicode")
    monkeypatch.delenv("JE_LOG_LEVEL", raising=False)
    return data_dir
