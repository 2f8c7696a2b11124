"""Exceptions raised by the solvers."""


class NoSolutionError(ValueError):
    """Raised when a problem instance has no valid answer."""

    def __init__(self, message: str = "NO SOLUTION") -> None:
        super().__init__(message)