from __future__ import annotations


class InvalidArgument(ValueError):
    """Raised when a guard check fails.

    Subclasses ``ValueError`` so existing ``except ValueError`` handlers keep
    catching argument errors.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
