"""Exceptions raised by pattern collaborators."""


class IllegalMoveError(ValueError):
    """Raised when an angle is not a legal continuation of a path."""
    pass
