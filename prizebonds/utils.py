"""
Design (utils.py)
- Purpose: Reusable helpers for user-facing message text.
- Side effects: None.
- Thread-safety: Stateless; safe to call from any thread.
"""


def plural(count: int, noun: str) -> str:
    """
    Purpose: Render "<count> <noun>" with an 's' when count is not 1.
    Inputs: count (int), noun (singular form).
    Outputs: e.g. "1 bond", "3 bonds".
    """
    return f"{count} {noun}{'s' if count != 1 else ''}"
