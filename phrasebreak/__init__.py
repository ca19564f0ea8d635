"""Phrase segmentation for text written without spaces between words."""
from __future__ import annotations

from .errors import ConfigError, MalformedModelError, ModelNotFoundError, PhraseBreakError
from .languages import available_languages, load_default_parser
from .model_io import load_model, parse_model
from .parser import Parser, load_parser
from .types import FeatureGroup, Model

__all__ = [
    "Parser",
    "load_parser",
    "load_default_parser",
    "available_languages",
    "load_model",
    "parse_model",
    "FeatureGroup",
    "Model",
    "PhraseBreakError",
    "ModelNotFoundError",
    "MalformedModelError",
    "ConfigError",
]

__version__ = "0.1.0"
