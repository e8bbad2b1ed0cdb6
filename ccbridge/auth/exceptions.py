"""Custom exceptions and failure kinds for credential handling."""

from enum import Enum


class FailureKind(str, Enum):
    """Category of a pipeline failure, reported through logs only."""

    MISSING_DEPENDENCY = "missing_dependency"
    MISSING_SOURCE = "missing_source"
    INVOCATION_ERROR = "invocation_error"
    READ_ERROR = "read_error"
    WRITE_ERROR = "write_error"


class CredentialsError(Exception):
    """Base exception for all credential-related errors."""

    pass


class CredentialsNotFoundError(CredentialsError):
    """Raised when a credentials file cannot be found."""

    pass


class CredentialsInvalidError(CredentialsError):
    """Raised when credentials are found but invalid or corrupted."""

    pass


class CredentialsStorageError(CredentialsError):
    """Raised when there's an error reading or writing credentials."""

    pass
