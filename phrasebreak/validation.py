"""Sanity checks for segmentation output."""
from __future__ import annotations

from typing import Any, Dict, Iterator, List, Sequence, Tuple


def iter_phrase_spans(phrases: Sequence[str]) -> Iterator[Tuple[int, int]]:
    """
    Yields the character span of each phrase within the original sentence.

    Offsets count code points, so they index directly into the ``str`` the
    phrases came from.

    Args:
        phrases: The phrases returned by `Parser.parse`.

    Yields:
        A ``(start, end)`` tuple per phrase, where ``end`` is exclusive.
    """
    start = 0
    for phrase in phrases:
        end = start + len(phrase)
        yield (start, end)
        start = end


def break_offsets(phrases: Sequence[str]) -> List[int]:
    """Returns the character offsets at which a new phrase starts, excluding 0."""
    return [start for start, _ in iter_phrase_spans(phrases)][1:]


def validate(sentence: str, phrases: Sequence[str]) -> Dict[str, Any]:
    """
    Checks that a list of phrases is a lossless partition of a sentence.

    This checks that:
    -   No phrase is empty.
    -   The phrases, joined in order, reproduce the sentence exactly.

    Args:
        sentence: The input sentence.
        phrases: The phrases produced for it.

    Returns:
        A dictionary with the total ``issue_count`` and a list of ``issues``,
        where each issue is a dictionary describing the problem.
    """
    issues = []

    for idx, phrase in enumerate(phrases):
        if not phrase:
            issues.append({
                "type": "empty_phrase_error",
                "idx": idx,
                "message": f"Phrase at index {idx} is empty."
            })

    joined = "".join(phrases)
    if joined != sentence:
        mismatch = next(
            (i for i, (a, b) in enumerate(zip(joined, sentence)) if a != b),
            min(len(joined), len(sentence)),
        )
        issues.append({
            "type": "reconstruction_error",
            "offset": mismatch,
            "message": (
                f"Joined phrases differ from the sentence at offset {mismatch} "
                f"(lengths {len(joined)} and {len(sentence)})."
            )
        })

    return {"issue_count": len(issues), "issues": issues}
