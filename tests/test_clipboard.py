"""TkClipboard and the input-box clear action, driven with stand-in widgets (no display)."""

import tkinter as tk
from types import SimpleNamespace

import pytest

from prizebonds.clipboard import TkClipboard
from prizebonds.errors import ClipboardUnavailableError
from prizebonds.ui import AppUI


class RecordingRoot:
    def __init__(self, fail=False):
        self.fail = fail
        self.calls = []

    def clipboard_clear(self):
        if self.fail:
            raise tk.TclError("CLIPBOARD selection doesn't exist")
        self.calls.append(("clear",))

    def clipboard_append(self, text):
        self.calls.append(("append", text))

    def update_idletasks(self):
        self.calls.append(("update_idletasks",))

    def update(self):
        raise AssertionError("copy must not spin the full event loop")


def test_copy_flushes_idle_tasks_only():
    root = RecordingRoot()
    TkClipboard(root).copy("0000001, 0000002")
    assert root.calls == [("clear",), ("append", "0000001, 0000002"), ("update_idletasks",)]


def test_tcl_error_becomes_clipboard_unavailable():
    with pytest.raises(ClipboardUnavailableError):
        TkClipboard(RecordingRoot(fail=True)).copy("0000001")


def test_clear_input_empties_entry_and_keeps_focus():
    focused = []
    value = {"text": "0000001-0000003 bad"}
    ui = SimpleNamespace(
        input_var=SimpleNamespace(set=lambda v: value.update(text=v)),
        input_entry=SimpleNamespace(focus_set=lambda: focused.append(True)),
    )
    AppUI.clear_input(ui)
    assert value["text"] == ""
    assert focused == [True]
