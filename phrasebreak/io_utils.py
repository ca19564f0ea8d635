"""Provides helpers for reading input sentences and saving segmentation results.

Sentences are read from plain UTF-8 text, one per line. Results are written
as JSON with a single ``"sentences"`` key holding one object per input
sentence::

    {"sentences": [{"text": "今日は天気です。", "phrases": ["今日は", "天気です。"]}]}
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Sequence, Tuple


def load_sentences(path: str | Path) -> List[str]:
    """
    Loads sentences from a text file, one sentence per line.

    Line endings are stripped, but other whitespace is kept because it is part
    of the text being segmented. Blank lines become empty sentences so that
    output lines stay aligned with input lines.

    Args:
        path: The path to the input text file.

    Returns:
        A list of sentences.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is not valid UTF-8.
    """
    try:
        with open(path, "r", encoding="utf-8", newline=None) as f:
            text = f.read()
    except FileNotFoundError:
        raise FileNotFoundError(f"Input file not found at: {path}")
    except UnicodeDecodeError as e:
        raise ValueError(f"Input file {path} is not valid UTF-8: {e}")

    if not text:
        return []
    return text.removesuffix("\n").split("\n")


def results_to_dict(results: Iterable[Tuple[str, Sequence[str]]]) -> Dict[str, Any]:
    """Builds the JSON-ready structure for ``(sentence, phrases)`` pairs."""
    return {
        "sentences": [
            {"text": sentence, "phrases": list(phrases)} for sentence, phrases in results
        ]
    }


def save_results(path: str | Path, results: Iterable[Tuple[str, Sequence[str]]]) -> None:
    """
    Saves segmentation results to a JSON file.

    Args:
        path: The destination path for the output JSON file.
        results: ``(sentence, phrases)`` pairs, in input order.
    """
    data = results_to_dict(results)

    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)
