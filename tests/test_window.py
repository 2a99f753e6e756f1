"""Tests for window title and visibility helpers."""

from unittest.mock import MagicMock

from deskkit.core.window import (
    TkWindow,
    WindowHandle,
    is_modified,
    set_modified,
    toggle_modified,
    toggle_visibility,
)


class FakeWindow(WindowHandle):
    def __init__(self, visible):
        self.visible = visible

    def is_visible(self):
        return self.visible

    def show(self):
        self.visible = True

    def hide(self):
        self.visible = False


def test_set_modified_is_idempotent():
    title = "notes.txt - Editor"
    once = set_modified(title, True)
    assert once == "*notes.txt - Editor"
    assert set_modified(once, True) == once
    assert set_modified(once, False) == title
    assert set_modified(title, False) == title


def test_toggle_modified():
    assert toggle_modified("a.txt") == "*a.txt"
    assert toggle_modified("*a.txt") == "a.txt"
    assert is_modified("*a.txt")
    assert not is_modified("a.txt")


def test_custom_marker():
    assert set_modified("a.txt", True, marker="● ") == "● a.txt"
    assert toggle_modified("● a.txt", marker="● ") == "a.txt"


def test_toggle_visibility():
    window = FakeWindow(visible=True)
    assert toggle_visibility(window) is False
    assert window.visible is False
    assert toggle_visibility(window) is True
    assert window.visible is True


def test_tk_window_adapter():
    widget = MagicMock()
    widget.winfo_viewable.return_value = 1

    assert toggle_visibility(TkWindow(widget)) is False
    widget.withdraw.assert_called_once_with()

    widget.winfo_viewable.return_value = 0
    assert toggle_visibility(TkWindow(widget)) is True
    widget.deiconify.assert_called_once_with()
