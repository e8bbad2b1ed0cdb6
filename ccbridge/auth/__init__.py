"""Credential models, storage and exceptions."""

from ccbridge.auth.exceptions import (
    CredentialsError,
    CredentialsInvalidError,
    CredentialsNotFoundError,
    CredentialsStorageError,
    FailureKind,
)
from ccbridge.auth.models import (
    BridgedCredentialsFile,
    BridgedOAuthToken,
    ClaudeCredentialsFile,
    SourceOAuthToken,
)


__all__ = [
    "BridgedCredentialsFile",
    "BridgedOAuthToken",
    "ClaudeCredentialsFile",
    "CredentialsError",
    "CredentialsInvalidError",
    "CredentialsNotFoundError",
    "CredentialsStorageError",
    "FailureKind",
    "SourceOAuthToken",
]
