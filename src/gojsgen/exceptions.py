from __future__ import annotations


class GojsGenError(Exception):
    """Base class for all gojs-gen domain errors."""


class InputValidationError(ValueError, GojsGenError):
    """Raised when command line input is rejected before generation starts."""


class ConfigurationError(InputValidationError):
    """Raised when a descriptor defaults file cannot be used."""


class ExtensionAlreadyExistsError(FileExistsError, GojsGenError):
    """Raised when the extension root already exists on disk."""


class GenerationIOError(RuntimeError, GojsGenError):
    """Raised when writing the extension tree fails part way through."""
