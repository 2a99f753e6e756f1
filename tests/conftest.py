"""Shared fixtures for deskkit tests."""

from dataclasses import fields

import pytest

from deskkit.config import Settings, reset_settings
from deskkit.io.dialogs import ConfirmPrompt, PathPicker


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Keep the user's config file, .env and DESKKIT_* variables out of tests."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("DESKKIT_CONFIG", str(tmp_path / "missing.yaml"))
    for field in fields(Settings):
        monkeypatch.delenv(f"DESKKIT_{field.name.upper()}", raising=False)
    reset_settings()
    yield
    reset_settings()


class FakePicker(PathPicker):
    """Returns queued paths and records every call."""

    def __init__(self, *paths):
        self.paths = list(paths)
        self.save_calls = []
        self.open_calls = []

    def ask_save_path(self, suggested_name, title, file_filter):
        self.save_calls.append((suggested_name, title, file_filter))
        return self.paths.pop(0) if self.paths else ""

    def ask_open_path(self, title, file_filter):
        self.open_calls.append((title, file_filter))
        return self.paths.pop(0) if self.paths else ""


class FakePrompt(ConfirmPrompt):
    """Answers yes/no questions from a queue; answers 'no' once it runs out."""

    def __init__(self, *answers):
        self.answers = list(answers)
        self.questions = []

    def ask_yes_no(self, message, title):
        self.questions.append((message, title))
        return self.answers.pop(0) if self.answers else False


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def fake_picker():
    return FakePicker


@pytest.fixture
def fake_prompt():
    return FakePrompt
