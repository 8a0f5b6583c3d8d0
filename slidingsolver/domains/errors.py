class PuzzleError(ValueError):
    """Base class for rejected puzzle input."""


class InvalidShape(PuzzleError):
    """Grid is empty, not square, or does not match the other grid's size."""


class InvalidBlankCount(PuzzleError):
    """Grid does not contain exactly one blank (0) cell."""
