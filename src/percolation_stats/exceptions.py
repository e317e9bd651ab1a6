"""
Error types and argument checks shared by grids and experiments.
"""

import numbers


class InvalidArgument(ValueError):
    """Non-positive grid size, trial count or structure size."""
    def __init__(self, message="Argument must be a positive integer."):
        super().__init__(message)


class OutOfRange(IndexError):
    """Grid coordinate or element index outside the valid range."""
    def __init__(self, message="Index outside the valid range."):
        super().__init__(message)


def check_positive(value, name: str) -> int:
    """Return value as an int, raising InvalidArgument unless it is a positive integer."""
    if not isinstance(value, numbers.Integral) or isinstance(value, bool):
        raise InvalidArgument(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise InvalidArgument(f"{name} must be positive, got {value}")
    return int(value)
