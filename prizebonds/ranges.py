"""
Design (ranges.py)
- Purpose: Expand a validated range into the bonds it denotes.
- Inputs: Integer bounds, cap, inverted-range policy.
- Outputs: Ascending list of zero-padded bond strings.
- Side effects: None.
- Thread-safety: Stateless.
"""

from typing import List

from .config import ALLOW_INVERTED_RANGES, BOND_DIGITS, MAX_RANGE_SPAN
from .errors import InvertedRangeError, RangeTooLargeError


def format_bond(number: int) -> str:
    """Canonical form: 42 -> "0000042"."""
    return str(number).zfill(BOND_DIGITS)


def expand_range(
    start: int,
    end: int,
    max_span: int = MAX_RANGE_SPAN,
    allow_inverted: bool = ALLOW_INVERTED_RANGES,
) -> List[str]:
    """
    Purpose: Produce every bond from the lower to the upper bound, inclusive.
    Inputs: start/end (ints), max_span (cap on end - start), allow_inverted (swap vs reject).
    Outputs: list[str] in ascending numeric order.
    Raises:
        RangeTooLargeError if the span exceeds max_span (nothing is expanded).
        InvertedRangeError if start > end and allow_inverted is False.
    """
    if start > end:
        if not allow_inverted:
            raise InvertedRangeError(start, end)
        start, end = end, start
    if end - start > max_span:
        raise RangeTooLargeError(start, end, max_span)
    return [format_bond(n) for n in range(start, end + 1)]
