"""Error types for the tweening core.

Every error is a ValueError so callers that already guard input with
``except ValueError`` keep working.
"""


class TweenError(ValueError):
    """Base class for tweening errors."""


class InvalidConfiguration(TweenError):
    """Raised for a bad segment duration or a malformed tweener definition."""


class EmptyValueList(TweenError):
    """Raised when there are no values to interpolate through."""


class NonFiniteInput(TweenError):
    """Raised for a delta time that is negative, NaN or infinite."""
