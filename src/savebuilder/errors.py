"""Exceptions raised by the save file pipeline.

Only misuse of the chunk tree or of the orchestrator is reported with these
types. Failures coming from collaborators (missing files, malformed payloads,
transport errors, cancellation) propagate unchanged.
"""


class SaveFileError(Exception):
    """Base exception for errors raised by savebuilder itself."""


class UnsupportedOperationError(SaveFileError, RuntimeError):
    """Raised when a synchronous operation is requested without a synchronous provider."""


class DuplicateKeyError(SaveFileError, ValueError):
    """Raised when adding a second entry under a type that is already registered."""


class NotFoundError(SaveFileError, LookupError):
    """Raised when looking up a type that was never registered."""
