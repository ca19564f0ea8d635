"""Loads and validates feature-weight models.

A model is a JSON object with two levels: feature group names at the top
level, each mapping short substrings (one to three characters) to integer
weights::

    {"UW4": {"a": 100}, "BW2": {"日本": -42}, ...}

`load_model` reads such a file from disk, while `parse_model` validates an
already decoded object. Both raise on anything that does not fit this shape.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping

from .errors import MalformedModelError, ModelNotFoundError
from .types import FEATURE_GROUPS, Model

__all__ = ["load_model", "parse_model", "total_weight"]

logger = logging.getLogger(__name__)


def _coerce_weight(value: Any, group: str, key: str, source: str) -> int:
    # bool is a subclass of int, but `true` is never a meaningful weight.
    if isinstance(value, bool):
        raise MalformedModelError(
            f"Weight for {group}[{key!r}] in {source} must be an integer, got a boolean.",
            source,
        )
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise MalformedModelError(
        f"Weight for {group}[{key!r}] in {source} must be an integer, got {value!r}.",
        source,
    )


def parse_model(data: Any, source: str = "<memory>") -> Model:
    """
    Validates a decoded model object and returns a clean copy of it.

    Args:
        data: The decoded JSON object.
        source: A label for the model used in error messages, usually its path.

    Returns:
        A new ``{group: {feature: weight}}`` dictionary with integer weights.

    Raises:
        MalformedModelError: If the root is not a mapping, a group is not a
            mapping, a key is not a string, or a weight is not an integer.
    """
    if not isinstance(data, Mapping):
        raise MalformedModelError(
            f"Model root in {source} must be an object, got {type(data).__name__}.",
            source,
        )

    model: Model = {}
    for group, features in data.items():
        if not isinstance(group, str):
            raise MalformedModelError(f"Feature group name {group!r} in {source} is not a string.", source)
        if not isinstance(features, Mapping):
            raise MalformedModelError(
                f"Feature group {group} in {source} must be an object, got {type(features).__name__}.",
                source,
            )
        weights = {}
        for key, value in features.items():
            if not isinstance(key, str):
                raise MalformedModelError(f"Feature key {key!r} in group {group} of {source} is not a string.", source)
            weights[key] = _coerce_weight(value, group, key, source)
        model[group] = weights

    unknown = sorted(set(model) - FEATURE_GROUPS)
    if unknown:
        logger.debug("Model %s has unused feature groups: %s", source, ", ".join(unknown))

    return model


def load_model(path: str | Path) -> Model:
    """
    Loads a feature-weight model from a JSON file.

    Args:
        path: The path to the model JSON file.

    Returns:
        The validated model dictionary.

    Raises:
        ModelNotFoundError: If the file does not exist or cannot be read.
        MalformedModelError: If the file is not valid JSON or does not have
            the two-level integer-weight shape.
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise ModelNotFoundError(f"Model file not found at: {path}")
    except IsADirectoryError:
        raise ModelNotFoundError(f"Model path is a directory, not a file: {path}")
    except OSError as e:
        raise ModelNotFoundError(f"Could not read model file {path}: {e}")
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise MalformedModelError(f"Error decoding JSON from {path}: {e}", str(path))

    model = parse_model(data, str(path))
    logger.info("Loaded model from %s (%d feature groups)", path, len(model))
    return model


def total_weight(model: Mapping[str, Mapping[str, int]]) -> int:
    """Returns the sum of every weight across every feature group."""
    return sum(sum(features.values()) for features in model.values())
