class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is missing or malformed."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class ConflictError(DomainError):
    """Raised when the current state forbids the requested transition."""


class AlreadyMarkedError(ConflictError):
    """Attendance already exists for the employee on that date."""


class AlreadyCheckedOutError(ConflictError):
    """The attendance record is already closed."""


class NotCheckedInError(ConflictError):
    """Check-out requested without a check-in for that date."""


class PolicyError(DomainError):
    """Raised when a configured business policy rejects the request."""


class WFHLimitExceededError(PolicyError):
    """Monthly work-from-home quota is used up."""


class NotFoundError(DomainError):
    """Raised when a referenced entity does not exist."""


class OfficeNotFoundError(NotFoundError):
    pass


class EmployeeNotFoundError(NotFoundError):
    pass


class ConfigurationError(DomainError):
    """Raised when stored reference data is incomplete (e.g. office radius)."""


class StoreError(DomainError):
    """Raised when the database layer fails."""


class DuplicateRecordError(StoreError):
    """A unique constraint rejected the write."""
