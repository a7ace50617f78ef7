"""Exception hierarchy for voxtidy.

Every pipeline stage is total over string input, so the only error the
pipeline itself raises is :class:`InvalidInputError`.
"""


class VoxtidyError(Exception):
    """Base exception for voxtidy errors."""


class InvalidInputError(VoxtidyError, ValueError):
    """Raised when the caller passes no text (``None``) or a non-string."""
