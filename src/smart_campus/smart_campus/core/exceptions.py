from __future__ import annotations

from typing import Mapping, Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    def __init__(self, message: str, fields: Optional[Mapping[str, str]] = None):
        super().__init__(message)
        self.fields = dict(fields or {})


class ConflictError(ValidationError):
    """Raised when a unique value (email, username, student id) is already taken."""


class AuthenticationError(DomainError):
    """Raised when credentials or tokens are missing or invalid."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class NotFoundError(DomainError):
    """Raised when a referenced row does not exist (or belongs to another tenant)."""
