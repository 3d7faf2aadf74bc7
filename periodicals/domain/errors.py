"""
Registry Error Types

Errors raised by containers when a caller addresses a position that
does not exist.
"""


class OutOfRangeError(IndexError):
    """
    Position outside the valid range for the requested operation.

    Subclasses IndexError so callers catching the builtin still see it.
    The container is left exactly as it was before the failed call.
    """

    def __init__(self, operation: str, position: int, size: int):
        super().__init__(
            f"{operation}: position {position} out of range for size {size}"
        )
        self.operation = operation
        self.position = position
        self.size = size
