"""Manages the loading of application configuration.

This module defines the `Config` dataclass, the single container for the
settings used by the command-line interface, and the `load_config` function
that reads them from a YAML file such as::

    language: ja
    models_dir: models
    separator: " | "
    log_level: INFO
    log_file: logs/phrasebreak.log

Relative paths in the file are resolved against the directory that contains
it, so a config file can be moved together with its models.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

from .errors import ConfigError
from .writer import ZERO_WIDTH_SPACE

DEFAULT_CONFIG_PATH = "phrasebreak.yaml"


@dataclass
class Config:
    """
    A typed configuration object holding the settings for segmentation runs.

    Attributes:
        language: The language tag of a default model (e.g. ``"ja"``).
        model_path: An explicit model file path. Takes precedence over
                    ``language`` when both are set.
        models_dir: The directory searched for default language models.
        separator: The string inserted between phrases in text output.
        log_level: The name of the logging level (e.g. ``"INFO"``).
        log_file: An optional file that receives log output as well as stderr.
    """
    language: Optional[str] = None
    model_path: Optional[str] = None
    models_dir: Optional[str] = None
    separator: str = ZERO_WIDTH_SPACE
    log_level: str = "WARNING"
    log_file: Optional[str] = None


def _resolve(base: Path, value: object) -> Optional[str]:
    if value is None:
        return None
    p = Path(str(value))
    return str(p if p.is_absolute() else base / p)


def load_config(path: str = DEFAULT_CONFIG_PATH, missing_ok: bool = False) -> Config:
    """
    Loads a YAML configuration file into a Config object.

    Args:
        path: The path to the YAML configuration file.
        missing_ok: When true, a missing file yields the default `Config`
                    instead of an error.

    Returns:
        A populated `Config` object.

    Raises:
        FileNotFoundError: If the file does not exist and ``missing_ok`` is false.
        ConfigError: If the file is not valid YAML or a value has the wrong type.
        TypeError: If the root of the YAML file is not a dictionary.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            y = yaml.safe_load(f)
    except FileNotFoundError:
        if missing_ok:
            return Config()
        raise FileNotFoundError(f"Configuration file not found at: {path}")
    except yaml.YAMLError as e:
        raise ConfigError(f"Error parsing YAML file at {path}: {e}")

    # An empty file parses to None.
    if y is None:
        y = {}
    if not isinstance(y, dict):
        raise TypeError(f"Configuration file {path} must be a dictionary.")

    separator = y.get("separator", ZERO_WIDTH_SPACE)
    if not isinstance(separator, str):
        raise ConfigError(f"'separator' in {path} must be a string, got {separator!r}.")

    base = Path(path).parent
    language = y.get("language")
    return Config(
        language=str(language) if language is not None else None,
        model_path=_resolve(base, y.get("model_path")),
        models_dir=_resolve(base, y.get("models_dir")),
        separator=separator,
        log_level=str(y.get("log_level", "WARNING")).upper(),
        log_file=_resolve(base, y.get("log_file")),
    )
