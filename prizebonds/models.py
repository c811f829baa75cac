"""
Design (models.py)
- Purpose: Define simple, typed data structures for domain values (token kinds, outcomes, toasts).
- Inputs: Field values.
- Outputs: Dataclass / Enum instances.
- Side effects: None.
- Thread-safety: Plain containers; the UI thread owns them.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from .config import BOND_DIGITS, MAX_RANGE_SPAN
from .utils import plural


class TokenKind(Enum):
    SINGLE = "single"
    RANGE = "range"
    RANGE_MALFORMED = "range_malformed"
    SINGLE_MALFORMED = "single_malformed"


class Severity(Enum):
    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class TokenMatch:
    """
    Design (TokenMatch)
    - Purpose: Result of classifying one input token.
    - Fields:
        kind: which bucket the token falls in.
        token: the token as given (trimmed).
        bounds: (start, end) integers for RANGE tokens, else None.
    """
    kind: TokenKind
    token: str
    bounds: Optional[Tuple[int, int]] = None


@dataclass
class Notification:
    id: int
    severity: Severity
    message: str


@dataclass
class IngestionOutcome:
    """
    Design (IngestionOutcome)
    - Purpose: Everything one ingestion call found out about the input.
    - Fields:
        accepted: new bonds in acceptance order (ascending within each range).
        duplicates: candidates already stored or already accepted in this call.
        range_too_large / range_malformed / single_malformed: rejected tokens per category.
        max_span: range cap in force, echoed in the user message.
    - Derived:
        clear_input: True on success and on the pure-duplicate warning; False when
                     formatting errors need fixing.
        severity / message: what to show the user.
    """
    accepted: List[str] = field(default_factory=list)
    duplicates: int = 0
    range_too_large: int = 0
    range_malformed: int = 0
    single_malformed: int = 0
    max_span: int = MAX_RANGE_SPAN

    @property
    def format_errors(self) -> int:
        return self.range_too_large + self.range_malformed + self.single_malformed

    @property
    def has_format_errors(self) -> bool:
        return self.format_errors > 0

    @property
    def is_pure_duplicate(self) -> bool:
        return not self.accepted and self.duplicates > 0 and not self.has_format_errors

    @property
    def clear_input(self) -> bool:
        return bool(self.accepted) or self.is_pure_duplicate

    @property
    def severity(self) -> Severity:
        if self.accepted:
            return Severity.SUCCESS
        if self.is_pure_duplicate or self.has_format_errors:
            return Severity.WARNING
        return Severity.ERROR

    @property
    def message(self) -> str:
        if self.accepted:
            msg = f"Added {plural(len(self.accepted), 'bond')}."
            if self.duplicates > 0:
                msg += f" {plural(self.duplicates, 'duplicate')} skipped."
            return msg

        if self.is_pure_duplicate:
            return f"Duplicate bond{'s' if self.duplicates > 1 else ''} found."

        parts = []
        if self.duplicates > 0:
            parts.append(plural(self.duplicates, "duplicate"))
        if self.range_too_large > 0:
            parts.append(f"{self.range_too_large} ranges too large (max {self.max_span})")
        if self.range_malformed > 0:
            parts.append(f"{self.range_malformed} ranges with invalid digits (must be {BOND_DIGITS})")
        if self.single_malformed > 0:
            parts.append(
                f"{plural(self.single_malformed, 'invalid number')} (must be {BOND_DIGITS} digits)"
            )
        if parts:
            return f"Issue{'s' if len(parts) > 1 else ''}: {', '.join(parts)}."
        return "No valid bonds found."
