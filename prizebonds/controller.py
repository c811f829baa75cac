"""
Design (controller.py)
- Purpose: One method per user action (submit, delete, clear, copy). Runs the core logic,
           mutates the repository and reports exactly one notification per action.
- Inputs: BondRepo, NotificationCenter, a clipboard sink with copy(text).
- Outputs: submit() returns whether the input box should be cleared.
- Side effects: Repository writes (persisted), clipboard writes, notifications.
- Thread-safety: Main (Tk) thread only.

Clipboard and persistence failures are caught here and shown as error toasts; nothing
raised by those boundaries reaches the UI.
"""

import logging
from typing import Callable, List, Optional

from .config import IngestSettings
from .errors import ClipboardUnavailableError, PersistenceError
from .ingest import ingest
from .notifications import NotificationCenter
from .query import filter_bonds, join_for_copy
from .repository import BondRepo

logger = logging.getLogger(__name__)

SAVE_FAILED_MESSAGE = "Changes could not be saved to disk."


class BondController:
    def __init__(
        self,
        repo: BondRepo,
        notifier: NotificationCenter,
        clipboard,
        settings: Optional[IngestSettings] = None,
    ) -> None:
        self.repo = repo
        self.notifier = notifier
        self.clipboard = clipboard
        self.settings = settings or IngestSettings()

    # -------- Reads for the UI --------

    @property
    def count(self) -> int:
        return len(self.repo)

    def visible(self, query: str = "") -> List[str]:
        return filter_bonds(self.repo.snapshot(), query)

    # -------- Actions --------

    def submit(self, text: str) -> bool:
        """
        Purpose: Ingest the input box contents.
        Outputs: True when the caller should clear the input box (success, or nothing but
                 duplicates); False when the user still has something to fix.
        """
        if not text.strip():
            self.notifier.warning("Please enter bond numbers to add.")
            return False

        outcome = ingest(text, self.repo.snapshot(), self.settings)
        if outcome.accepted:
            try:
                self.repo.insert(outcome.accepted)
            except PersistenceError:
                self.notifier.error(f"{outcome.message} {SAVE_FAILED_MESSAGE}")
                return outcome.clear_input
        self.notifier.notify(outcome.severity, outcome.message)
        return outcome.clear_input

    def delete(self, bond: str) -> None:
        try:
            self.repo.remove(bond)
        except PersistenceError:
            self.notifier.error(SAVE_FAILED_MESSAGE)
            return
        self.notifier.success(f"Bond {bond} deleted.")

    def clear_all(self, confirm: Callable[[int], bool]) -> bool:
        """
        Purpose: Empty the collection after an explicit yes from confirm(count).
        Outputs: True if the collection was cleared.
        Side effects: No-op (and no prompt) when already empty.
        """
        count = len(self.repo)
        if count == 0:
            return False
        if not confirm(count):
            logger.debug("Clear all cancelled")
            return False
        try:
            self.repo.clear_all()
        except PersistenceError:
            self.notifier.error(SAVE_FAILED_MESSAGE)
            return True
        self.notifier.success("Database cleared successfully.")
        return True

    def copy_bond(self, bond: str) -> None:
        if self._copy(bond):
            self.notifier.success(f"Copied {bond}")

    def copy_visible(self, query: str = "") -> None:
        bonds = self.visible(query)
        if not bonds:
            self.notifier.warning("No bonds to copy.")
            return
        if self._copy(join_for_copy(bonds)):
            self.notifier.success(f"Copied {len(bonds)} bonds.")

    def _copy(self, text: str) -> bool:
        try:
            self.clipboard.copy(text)
        except ClipboardUnavailableError:
            self.notifier.error("Failed to copy")
            return False
        return True
