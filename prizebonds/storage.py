"""
Design (storage.py)
- Purpose: Load and save the bond list to/from disk (JSON).
- Inputs: Path (from get_state_path()), list of bond strings for save.
- Outputs: list[str] on load; None on save.
- Side effects: Reads/writes file. On load failure returns empty list (logged); on save
                failure raises PersistenceError so the caller can tell the user.
- Thread-safety: Call from main thread only (e.g. after repo mutations).

The file is a small string key-value map ({"prize_bonds": "[\"0000001\", ...]"}): the
bond list is serialized to a JSON string and stored under STORAGE_KEY.
"""

import json
import logging
import os
import sys
from pathlib import Path
from typing import Dict, List, Optional

from .config import BOND_DIGITS, DATA_DIR_ENV, STATE_FILENAME, STORAGE_KEY
from .errors import PersistenceError

logger = logging.getLogger(__name__)


def get_state_path() -> Path:
    """
    Resolve path for bonds.json. PRIZEBONDS_DATA_DIR wins; otherwise prefer the per-user
    app data dir so it survives reinstalls. Fallback to dir next to executable.
    """
    override = os.environ.get(DATA_DIR_ENV)
    if override:
        return Path(override) / STATE_FILENAME
    if sys.platform == "win32":
        base_env = os.environ.get("APPDATA")
        sub = "Prize Bond Tracker"
    else:
        base_env = os.environ.get("XDG_DATA_HOME") or str(Path.home() / ".local" / "share")
        sub = "prize-bond-tracker"
    if base_env:
        base = Path(base_env) / sub
        try:
            base.mkdir(parents=True, exist_ok=True)
            return base / STATE_FILENAME
        except OSError:
            pass
    # Fallback: next to executable (or project root when running as script)
    if getattr(sys, "frozen", False) and hasattr(sys, "_MEIPASS"):
        base = Path(sys.executable).parent
    else:
        base = Path(__file__).resolve().parent.parent
    return base / STATE_FILENAME


class JsonFileStore:
    """
    Design (JsonFileStore)
    - Purpose: Minimal get/set string store persisted as one JSON object file.
    - Public methods:
        get(key) -> str | None
        set(key, value): rewrites the whole file; raises PersistenceError on OSError.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:  # ValueError covers JSONDecodeError and UnicodeDecodeError
            logger.warning("Could not read %s: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring %s: expected a JSON object", self.path)
            return {}
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def get(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
        except OSError as exc:
            logger.warning("Could not write %s: %s", self.path, exc)
            raise PersistenceError(f"could not save bonds to {self.path}") from exc


def _is_bond(value) -> bool:
    return isinstance(value, str) and len(value) == BOND_DIGITS and value.isascii() and value.isdigit()


def load_bonds(store) -> List[str]:
    """
    Load the bond list from the store. Returns empty list on missing entry or parse error.
    Entries that are not 7-digit strings and repeated entries are dropped.
    """
    raw = store.get(STORAGE_KEY)
    if raw is None:
        return []
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        logger.warning("Failed to load bonds, starting empty: %s", exc)
        return []
    if not isinstance(data, list):
        logger.warning("Failed to load bonds, starting empty: expected a list, got %s", type(data).__name__)
        return []
    bonds: List[str] = []
    seen = set()
    for item in data:
        if not _is_bond(item) or item in seen:
            logger.debug("Skipping stored entry %r", item)
            continue
        seen.add(item)
        bonds.append(item)
    return bonds


def save_bonds(bonds: List[str], store) -> None:
    """
    Save the full bond list to the store. Raises PersistenceError if the write fails.
    """
    store.set(STORAGE_KEY, json.dumps(list(bonds)))
