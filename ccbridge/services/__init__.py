"""Pipeline steps and the orchestrator that runs them."""

from ccbridge.services.pipeline import (
    CredentialBridge,
    PipelineStage,
    update_github_credentials,
)
from ccbridge.services.prerequisites import (
    does_source_credentials_exist,
    is_tool_installed,
)
from ccbridge.services.refresh import RefreshInvoker


__all__ = [
    "CredentialBridge",
    "PipelineStage",
    "RefreshInvoker",
    "does_source_credentials_exist",
    "is_tool_installed",
    "update_github_credentials",
]
