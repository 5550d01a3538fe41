# core/exceptions.py

class DomainError(Exception):
    """Base class for domain-level errors."""
    def __init__(self, message: str, *, code: str | None = None):
        super().__init__(message)
        self.code = code or self.__class__.__name__


class ValidationError(DomainError):
    """Raised when entered data is invalid (e.g., negative capacity or units)."""


class NotFoundError(DomainError):
    """Raised when a resource, task or assignment is not found."""


class BusinessRuleError(DomainError):
    """Raised when an operation cannot proceed on the current data (e.g., nothing to export)."""
