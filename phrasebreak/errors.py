"""Exception types raised while acquiring a segmentation model."""
from __future__ import annotations



class PhraseBreakError(Exception):
    """Base exception for all phrasebreak errors."""

    pass


class ModelNotFoundError(PhraseBreakError, FileNotFoundError):
    """Raised when a model file or language resource cannot be located or read."""

    pass


class MalformedModelError(PhraseBreakError, ValueError):
    """Raised when a model does not decode into a two-level integer-weight mapping."""

    def __init__(self, message: str, source: str | None = None):
        super().__init__(message)
        self.source = source


class ConfigError(PhraseBreakError, ValueError):
    """Raised when a configuration file cannot be parsed."""

    pass
