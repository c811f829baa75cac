"""
Design (query.py)
- Purpose: Search over the collection (display and "Copy All" share the same view).
- Side effects: None.
"""

from typing import List, Sequence

from .config import COPY_SEPARATOR


def filter_bonds(bonds: Sequence[str], query: str) -> List[str]:
    """Bonds containing query as a literal substring, original order kept. Empty query -> all."""
    if not query:
        return list(bonds)
    return [b for b in bonds if query in b]


def join_for_copy(bonds: Sequence[str], separator: str = COPY_SEPARATOR) -> str:
    return separator.join(bonds)
