"""Credential file storage."""

from ccbridge.auth.storage.base import BaseJsonStorage
from ccbridge.auth.storage.bridged import BridgedTokenStorage, persist
from ccbridge.auth.storage.claude import ClaudeTokenStorage


__all__ = [
    "BaseJsonStorage",
    "BridgedTokenStorage",
    "ClaudeTokenStorage",
    "persist",
]
