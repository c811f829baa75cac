"""
Design (clipboard.py)
- Purpose: Clipboard sink backed by Tk's clipboard_clear/clipboard_append.
- Inputs: Tk root widget; text to copy.
- Outputs: None.
- Side effects: Replaces the system clipboard contents.
- Thread-safety: Must be used from the Tk main thread.
"""

import logging
import tkinter as tk

from .errors import ClipboardUnavailableError

logger = logging.getLogger(__name__)


class TkClipboard:
    def __init__(self, root: tk.Misc) -> None:
        self.root = root

    def copy(self, text: str) -> None:
        """Replace clipboard contents; raises ClipboardUnavailableError on failure."""
        try:
            self.root.clipboard_clear()
            self.root.clipboard_append(text)
            # keep the contents available after the window loses focus
            self.root.update_idletasks()
        except tk.TclError as exc:
            logger.warning("Clipboard write failed: %s", exc)
            raise ClipboardUnavailableError(str(exc)) from exc
