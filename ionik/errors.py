"""Error type raised by the package."""

from __future__ import annotations


class IonikError(Exception):
    """Failure reported by a package operation.

    ``code`` holds the ``errno`` value of the failure when one is known.
    """

    def __init__(self, message: str, code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code

    def __str__(self) -> str:
        if self.code is None:
            return self.message
        return f"{self.message} (errno {self.code})"