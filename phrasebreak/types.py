"""Shared types for the phrase segmentation model."""
from __future__ import annotations

from enum import Enum
from typing import Dict, Mapping

__all__ = ["FeatureGroup", "Model", "ReadOnlyModel", "FEATURE_GROUPS"]

# {"UW1": {"あ": 12, ...}, "BW2": {...}, ...}
Model = Dict[str, Dict[str, int]]
ReadOnlyModel = Mapping[str, Mapping[str, int]]


class FeatureGroup(str, Enum):
    """
    The feature groups probed at every character boundary.

    ``UW`` groups look at single characters (unigrams), ``BW`` groups at
    character pairs (bigrams) and ``TW`` groups at character triples
    (trigrams). The digit is the window position relative to the boundary,
    counted from the left.
    """

    UW1 = "UW1"
    UW2 = "UW2"
    UW3 = "UW3"
    UW4 = "UW4"
    UW5 = "UW5"
    UW6 = "UW6"
    BW1 = "BW1"
    BW2 = "BW2"
    BW3 = "BW3"
    TW1 = "TW1"
    TW2 = "TW2"
    TW3 = "TW3"
    TW4 = "TW4"


FEATURE_GROUPS = frozenset(g.value for g in FeatureGroup)
