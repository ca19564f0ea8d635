"""Formats phrases as text with line-break opportunities."""
from __future__ import annotations

from typing import Iterable, Sequence

ZERO_WIDTH_SPACE = "\u200b"


def phrases_to_text(phrases: Sequence[str], separator: str = ZERO_WIDTH_SPACE) -> str:
    """
    Joins phrases with a separator marking where a line may break.

    The default separator, ZERO WIDTH SPACE, is invisible when rendered but
    lets browsers and text layout engines wrap the line between phrases.

    Args:
        phrases: The phrases of one sentence.
        separator: The string inserted between adjacent phrases.

    Returns:
        The joined text. An empty list gives an empty string.
    """
    return separator.join(phrases)


def results_to_text(results: Iterable[Sequence[str]], separator: str = ZERO_WIDTH_SPACE) -> str:
    """Formats several sentences' phrases as one line per sentence."""
    return "\n".join(phrases_to_text(phrases, separator) for phrases in results)
