"""The phrase break parser.

Splits a sentence written without word-delimiting whitespace into phrases by
scoring every boundary between two characters against a feature-weight model.
"""
from __future__ import annotations

from pathlib import Path
from types import MappingProxyType
from typing import List, Mapping

from .model_io import load_model, total_weight
from .types import FeatureGroup, ReadOnlyModel

__all__ = ["Parser", "load_parser"]


class Parser:
    """
    Translates a sentence into a list of phrases using a feature-weight model.

    At each boundary ``i`` (the gap just before character ``i``) the parser
    starts from ``-total_weight`` and adds twice the weight of every character
    n-gram around the boundary that the model knows about. A strictly positive
    score starts a new phrase.

    The model is copied into read-only views on construction, so one Parser
    can be shared between threads and across any number of calls.

    Attributes:
        model: The read-only ``{group: {feature: weight}}`` mapping.
        total_weight: The sum of every weight in the model, including groups
                      the parser does not probe.
    """

    def __init__(self, model: Mapping[str, Mapping[str, int]]):
        self.model: ReadOnlyModel = MappingProxyType(
            {group: MappingProxyType(dict(features)) for group, features in model.items()}
        )
        self.total_weight = total_weight(self.model)

    @classmethod
    def from_file(cls, path: str | Path) -> "Parser":
        """
        Loads a parser from a model JSON file.

        Raises:
            ModelNotFoundError: If the file cannot be located or read.
            MalformedModelError: If the file does not hold a valid model.
        """
        return cls(load_model(path))

    def _get_weight(self, group: FeatureGroup, key: str) -> int:
        """Returns the weight of ``key`` in ``group``, or 0 if either is absent."""
        features = self.model.get(group.value)
        if features is None:
            return 0
        return features.get(key, 0)

    def _score_boundary(self, sentence: str, i: int) -> int:
        n = len(sentence)
        score = -self.total_weight
        w = self._get_weight

        if i - 2 > 0:
            score += 2 * w(FeatureGroup.UW1, sentence[i - 3:i - 2])
        if i - 1 > 0:
            score += 2 * w(FeatureGroup.UW2, sentence[i - 2:i - 1])
        score += 2 * w(FeatureGroup.UW3, sentence[i - 1:i])
        score += 2 * w(FeatureGroup.UW4, sentence[i:i + 1])
        if i + 1 < n:
            score += 2 * w(FeatureGroup.UW5, sentence[i + 1:i + 2])
        if i + 2 < n:
            score += 2 * w(FeatureGroup.UW6, sentence[i + 2:i + 3])

        if i > 1:
            score += 2 * w(FeatureGroup.BW1, sentence[i - 2:i])
        score += 2 * w(FeatureGroup.BW2, sentence[i - 1:i + 1])
        if i + 1 < n:
            score += 2 * w(FeatureGroup.BW3, sentence[i:i + 2])

        if i - 2 > 0:
            score += 2 * w(FeatureGroup.TW1, sentence[i - 3:i])
        if i - 1 > 0:
            score += 2 * w(FeatureGroup.TW2, sentence[i - 2:i + 1])
        if i + 1 < n:
            score += 2 * w(FeatureGroup.TW3, sentence[i - 1:i + 2])
        if i + 2 < n:
            score += 2 * w(FeatureGroup.TW4, sentence[i:i + 3])

        return score

    def score(self, sentence: str, i: int) -> int:
        """
        Calculates the break score for the boundary just before character ``i``.

        Args:
            sentence: The sentence being examined.
            i: The boundary index, between 1 and ``len(sentence) - 1``.

        Returns:
            The signed score. The boundary is a phrase break when it is > 0.

        Raises:
            IndexError: If ``i`` does not name a boundary inside the sentence.
        """
        if not 1 <= i < len(sentence):
            raise IndexError(f"Boundary {i} is out of range for a sentence of length {len(sentence)}.")
        return self._score_boundary(sentence, i)

    def boundary_scores(self, sentence: str) -> List[int]:
        """Returns the break score of every boundary in the sentence, in order."""
        return [self._score_boundary(sentence, i) for i in range(1, len(sentence))]

    def parse(self, sentence: str) -> List[str]:
        """
        Parses a sentence into phrases.

        Args:
            sentence: The sentence to break by phrase.

        Returns:
            A list of non-empty phrases whose concatenation is ``sentence``.
            An empty sentence gives an empty list.
        """
        if not sentence:
            return []

        phrases = [sentence[0]]
        for i in range(1, len(sentence)):
            if self._score_boundary(sentence, i) > 0:
                phrases.append(sentence[i])
            else:
                phrases[-1] += sentence[i]
        return phrases


def load_parser(path: str | Path) -> Parser:
    """Loads a parser from the model file at ``path``."""
    return Parser.from_file(path)
