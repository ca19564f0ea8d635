"""Default per-language models.

The pretrained model files are distributed separately from this package.
They are looked up by file name in a models directory, which is resolved in
this order:

1.  the ``models_dir`` argument,
2.  the ``PHRASEBREAK_MODELS_DIR`` environment variable,
3.  the ``models/`` directory next to this module.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Dict, List

from .errors import ModelNotFoundError
from .parser import Parser

__all__ = [
    "DEFAULT_MODELS",
    "MODELS_DIR_ENV",
    "available_languages",
    "resolve_model_path",
    "load_default_parser",
]

logger = logging.getLogger(__name__)

MODELS_DIR_ENV = "PHRASEBREAK_MODELS_DIR"
PACKAGE_MODELS_DIR = Path(__file__).parent / "models"

DEFAULT_MODELS: Dict[str, str] = {
    "ja": "ja.json",
    "zh-hans": "zh-hans.json",
    "zh-hant": "zh-hant.json",
}


def _normalize_tag(language: str) -> str:
    return language.strip().lower().replace("_", "-")


def available_languages() -> List[str]:
    """Returns the language tags that have a default model."""
    return sorted(DEFAULT_MODELS)


def resolve_model_path(language: str, models_dir: str | Path | None = None) -> Path:
    """
    Resolves the model file path for a language tag.

    Args:
        language: A tag such as ``"ja"`` or ``"zh-Hans"``. Matching is
                  case-insensitive and ``_`` is accepted in place of ``-``.
        models_dir: The directory holding the model files. Falls back to
                    ``$PHRASEBREAK_MODELS_DIR`` and then to the package's
                    ``models/`` directory.

    Returns:
        The path where the language's model file is expected. The file itself
        is not checked for existence here.

    Raises:
        ModelNotFoundError: If the language has no default model.
    """
    file_name = DEFAULT_MODELS.get(_normalize_tag(language))
    if file_name is None:
        raise ModelNotFoundError(
            f"No default model for language {language!r}. "
            f"Supported languages: {', '.join(available_languages())}."
        )

    if models_dir is None:
        env_dir = os.environ.get(MODELS_DIR_ENV)
        models_dir = Path(env_dir) if env_dir else PACKAGE_MODELS_DIR

    path = Path(models_dir) / file_name
    logger.debug("Resolved model for %s to %s", language, path)
    return path


def load_default_parser(language: str, models_dir: str | Path | None = None) -> Parser:
    """
    Loads the default parser for a language.

    Raises:
        ModelNotFoundError: If the language is unknown or its model file is
            missing.
        MalformedModelError: If the model file is invalid.
    """
    return Parser.from_file(resolve_model_path(language, models_dir))
