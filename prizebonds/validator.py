"""
Design (validator.py)
- Purpose: Classify one trimmed input token as a single bond, a range, or which kind of malformed.
- Inputs: token (str).
- Outputs: TokenMatch.
- Side effects: None.
- Thread-safety: Stateless; safe to call from any thread.

Check order matters: the strict range pattern first, then "has a hyphen" (range attempted
with wrong widths), then the strict single pattern. So "12-3456789" is a malformed range,
never a malformed single.
"""

import re

from .config import BOND_DIGITS
from .models import TokenKind, TokenMatch

RANGE_RE = re.compile(rf"^(\d{{{BOND_DIGITS}}})\s*-\s*(\d{{{BOND_DIGITS}}})$", re.ASCII)
SINGLE_RE = re.compile(rf"^\d{{{BOND_DIGITS}}}$", re.ASCII)


def classify_token(token: str) -> TokenMatch:
    m = RANGE_RE.match(token)
    if m:
        return TokenMatch(TokenKind.RANGE, token, (int(m.group(1)), int(m.group(2))))
    if "-" in token:
        return TokenMatch(TokenKind.RANGE_MALFORMED, token)
    if SINGLE_RE.match(token):
        return TokenMatch(TokenKind.SINGLE, token)
    return TokenMatch(TokenKind.SINGLE_MALFORMED, token)
