"""
Design (config.py)
- Purpose: Centralize constants and configuration.
- Inputs: None.
- Outputs: Constants (bond width, range cap, delimiters, timeouts, file names) and IngestSettings.
- Side effects: None.
- Thread-safety: N/A (read-only constants).
"""

from dataclasses import dataclass

APP_TITLE = "Prize Bond Tracker"

# A bond is exactly this many ASCII digits, zero-padded
BOND_DIGITS = 7

# Largest allowed (end - start) for a single range entry
MAX_RANGE_SPAN = 50000

# Token separators for the input box: comma, space, newline (any run of them)
TOKEN_DELIMITERS = r"[,\s]+"

# Inverted ranges (e.g. 0944699-0944683) are swapped instead of rejected
ALLOW_INVERTED_RANGES = True

# Toasts disappear after this many milliseconds unless dismissed first
NOTIFICATION_TIMEOUT_MS = 4000

# Separator used by "Copy All"
COPY_SEPARATOR = ", "

# Persistence: key inside the state file, and the file name (path resolved in storage module)
STORAGE_KEY = "prize_bonds"
STATE_FILENAME = "bonds.json"

# Environment overrides
DATA_DIR_ENV = "PRIZEBONDS_DATA_DIR"
LOG_LEVEL_ENV = "PRIZEBONDS_LOG_LEVEL"


@dataclass(frozen=True)
class IngestSettings:
    """
    Design (IngestSettings)
    - Purpose: Bundle the knobs the ingestion engine exposes.
    - Fields:
        delimiters: regex the raw input is split on.
        max_span: largest accepted (end - start) for a range.
        allow_inverted: swap inverted range bounds instead of rejecting the range.
    """
    delimiters: str = TOKEN_DELIMITERS
    max_span: int = MAX_RANGE_SPAN
    allow_inverted: bool = ALLOW_INVERTED_RANGES
