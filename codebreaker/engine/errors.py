"""
Exceptions raised by the engine.

All errors are reported straight to the caller; nothing here is retried.
Re-prompting a human for better input belongs to whatever UI wraps the
engine.
"""


class CodebreakerError(Exception):
    """Base class for every engine error."""


class InvalidLength(CodebreakerError, ValueError):
    """Two codes of different lengths were compared."""


class InvalidParameters(CodebreakerError, ValueError):
    """Bad board (empty or repeated alphabet, non-positive length) or a pool used out of order."""


class InvalidFeedback(CodebreakerError, ValueError):
    """Feedback no board could produce, or text that is not canonical."""


class EmptyCandidateSet(CodebreakerError, LookupError):
    """A guess was requested but no candidate secret remains."""


class Contradiction(CodebreakerError):
    """The feedback history admits no secret at all."""
