from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    """Base exception for attendance rule violations."""


class InvalidInputError(DomainError):
    """Raised when a submission is missing fields or has the wrong shape."""


class StoreUnavailableError(DomainError):
    """Raised when the records store cannot be reached, denies access or answers garbage."""

    def __init__(self, message: str, *, code: Optional[int] = None):
        super().__init__(message)
        self.code = code


class NotFoundError(StoreUnavailableError):
    """Raised when the target spreadsheet or worksheet does not exist."""


class ConfigurationError(DomainError):
    """Raised at startup when store credentials or identifiers are unusable."""
