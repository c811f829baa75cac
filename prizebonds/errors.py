"""
Design (errors.py)
- Purpose: Exceptions raised at the edges (range cap, clipboard, persistence).
- Side effects: None.

Malformed tokens and duplicates are not exceptions; the ingestion engine counts them.
"""


class PrizeBondsError(Exception):
    """Base class for every error raised by this package."""


class RangeTooLargeError(PrizeBondsError):
    def __init__(self, start: int, end: int, max_span: int) -> None:
        super().__init__(f"range {start}-{end} spans {end - start}, max is {max_span}")
        self.start = start
        self.end = end
        self.max_span = max_span


class InvertedRangeError(PrizeBondsError):
    def __init__(self, start: int, end: int) -> None:
        super().__init__(f"range {start}-{end} is inverted")
        self.start = start
        self.end = end


class ClipboardUnavailableError(PrizeBondsError):
    """The system clipboard refused the write."""


class PersistenceError(PrizeBondsError):
    """The state file could not be written. In-memory state is still current."""
