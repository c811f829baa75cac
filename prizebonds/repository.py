"""
Design (repository.py)
- Purpose: Encapsulate the bond collection behind a tiny API (and a lock), so the UI and
           controller don't touch the list directly. Every mutation writes through to storage.
- Inputs: Bond strings; a key-value store for persistence.
- Outputs: Snapshots (copies) of the ordered collection.
- Side effects: Updates the internal list; rewrites the persisted entry after each mutation.
- Thread-safety: All mutating methods take the internal lock; snapshot returns a copy.
"""

import logging
import threading
from typing import Iterable, List

from .storage import load_bonds, save_bonds

logger = logging.getLogger(__name__)


class BondRepo:
    """
    Design (BondRepo)
    - State:
        _bonds: ordered list of bond strings, newest block first, no duplicates
        _store: key-value store the list is persisted to
        _lock: threading.Lock to protect all mutating/reading operations
    - Persistence: insert/remove/clear_all save the whole list synchronously. If the write
      fails PersistenceError propagates, but the in-memory list is already updated.
    """

    def __init__(self, store) -> None:
        self._lock = threading.Lock()
        self._store = store
        self._bonds: List[str] = []

    def hydrate(self) -> None:
        """
        Purpose: Replace the in-memory list with the persisted one (startup).
        Side effects: Never raises on bad data; storage logs and yields an empty list.
        """
        bonds = load_bonds(self._store)
        with self._lock:
            self._bonds = bonds
        logger.info("Loaded %d bonds", len(bonds))

    # -------- Mutations --------

    def insert(self, new_bonds: Iterable[str]) -> int:
        """
        Purpose: Prepend newly accepted bonds as one block, newest-looking first.
        Inputs: new_bonds in acceptance order; the block is stored reversed.
        Outputs: Number of bonds actually inserted (already-present values are skipped).
        """
        with self._lock:
            present = set(self._bonds)
            block = []
            for bond in reversed(list(new_bonds)):
                if bond not in present:
                    present.add(bond)
                    block.append(bond)
            if not block:
                return 0
            self._bonds = block + self._bonds
            logger.debug("Inserted %d bonds", len(block))
            self._persist()
            return len(block)

    def remove(self, bond: str) -> None:
        with self._lock:
            if bond in self._bonds:
                self._bonds.remove(bond)
                logger.debug("Removed bond %s", bond)
            self._persist()

    def clear_all(self) -> None:
        with self._lock:
            self._bonds = []
            logger.info("Cleared all bonds")
            self._persist()

    # -------- Reads --------

    def snapshot(self) -> List[str]:
        with self._lock:
            return list(self._bonds)

    def __len__(self) -> int:
        with self._lock:
            return len(self._bonds)

    def _persist(self) -> None:
        # caller holds _lock
        save_bonds(self._bonds, self._store)
