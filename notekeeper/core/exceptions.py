"""
Custom Exceptions.

Application-specific exception classes for consistent error handling.
ValidationError and NotFoundError are expected outcomes of note operations.
StorageError is raised only by the store layer.
"""


class ApplicationError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class NotFoundError(ApplicationError):
    """Raised when a resource cannot be found."""

    def __init__(self, message: str = "Resource not found") -> None:
        super().__init__(message, code="RES_NOT_FOUND")


class ValidationError(ApplicationError):
    """Raised when input fails field constraints. Carries every violation."""

    def __init__(
        self,
        message: str = "Validation failed",
        violations: list[str] | None = None,
    ) -> None:
        self.violations = list(violations or [])
        self.details = {"violations": self.violations}
        super().__init__(message, code="VAL_VALIDATION_ERROR")


class StorageError(ApplicationError):
    """Raised when the backing store cannot be read or written."""

    def __init__(self, message: str = "Storage error") -> None:
        super().__init__(message, code="SYS_STORAGE_ERROR")


class CorruptStateError(StorageError):
    """Raised when the persisted collection cannot be decoded."""

    def __init__(self, message: str = "Persisted state is corrupt") -> None:
        super().__init__(message)
        self.code = "SYS_CORRUPT_STATE"
