"""
Design (ingest.py)
- Purpose: Turn a free-form input blob into new, validated, de-duplicated bonds.
- Inputs: Raw text, the bonds already stored, IngestSettings.
- Outputs: IngestionOutcome (accepted bonds + per-category counts + user message).
- Side effects: None (caller inserts outcome.accepted into the repository).
- Thread-safety: Stateless.

Outcome decision table (see IngestionOutcome):
    accepted > 0                        -> success, clear input
    accepted == 0, only duplicates      -> warning, clear input
    accepted == 0, formatting errors    -> warning listing every category, keep input
"""

import logging
import re
from typing import Iterable, List, Optional

from .config import IngestSettings, TOKEN_DELIMITERS
from .errors import InvertedRangeError, RangeTooLargeError
from .models import IngestionOutcome, TokenKind
from .ranges import expand_range
from .validator import classify_token

logger = logging.getLogger(__name__)


def split_tokens(text: str, delimiters: str = TOKEN_DELIMITERS) -> List[str]:
    """
    Purpose: Split raw input on the delimiter pattern, trim, drop empties.
    Inputs: text (str), delimiters (regex).
    Outputs: list of non-empty tokens in input order.
    """
    return [t.strip() for t in re.split(delimiters, text) if t.strip()]


def ingest(text: str, existing: Iterable[str], settings: Optional[IngestSettings] = None) -> IngestionOutcome:
    """
    Purpose: Classify and expand every token, then keep only bonds not seen before.
    Inputs:
        text: raw user input.
        existing: bonds already in the collection.
        settings: delimiter set, range cap, inverted-range policy (defaults from config).
    Outputs: IngestionOutcome; outcome.accepted is in acceptance order.
    """
    settings = settings or IngestSettings()
    existing_set = set(existing)
    seen = set()
    outcome = IngestionOutcome(max_span=settings.max_span)

    def take(bond: str) -> None:
        if bond in existing_set or bond in seen:
            outcome.duplicates += 1
        else:
            seen.add(bond)
            outcome.accepted.append(bond)

    for token in split_tokens(text, settings.delimiters):
        match = classify_token(token)

        if match.kind is TokenKind.RANGE:
            start, end = match.bounds
            try:
                bonds = expand_range(start, end, settings.max_span, settings.allow_inverted)
            except RangeTooLargeError as exc:
                logger.debug("Rejected %r: %s", token, exc)
                outcome.range_too_large += 1
                continue
            except InvertedRangeError as exc:
                logger.debug("Rejected %r: %s", token, exc)
                outcome.range_malformed += 1
                continue
            for bond in bonds:
                take(bond)
        elif match.kind is TokenKind.RANGE_MALFORMED:
            outcome.range_malformed += 1
        elif match.kind is TokenKind.SINGLE:
            take(token)
        else:
            outcome.single_malformed += 1

    logger.info(
        "Ingested input: %d accepted, %d duplicates, %d too large, %d bad ranges, %d bad numbers",
        len(outcome.accepted),
        outcome.duplicates,
        outcome.range_too_large,
        outcome.range_malformed,
        outcome.single_malformed,
    )
    return outcome
