class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class UnsupportedFileTypeError(DomainError):
    """Raised when an uploaded file has no matching parser."""


class NoValidPunchesError(DomainError):
    """Raised when a file was parsed but yielded no usable punch."""
