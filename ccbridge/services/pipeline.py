"""Credential transfer pipeline.

Runs the fixed sequence of steps that copies Claude CLI credentials into the
bridged ``credentials.json``::

    CHECK_TOOL_INSTALLED -> CHECK_SOURCE_EXISTS -> INVOKE_REFRESH
        -> READ_SOURCE -> TRANSFORM_AND_WRITE -> SUCCESS

Each step either passes or ends the run with ``False``. Nothing is written
before the final step, so a failed run leaves any existing output untouched.
"""

from enum import Enum

from ccbridge.auth.exceptions import FailureKind
from ccbridge.auth.models import SourceOAuthToken
from ccbridge.auth.storage import BridgedTokenStorage, ClaudeTokenStorage
from ccbridge.config.settings import BridgeConfig
from ccbridge.core.logging import get_logger
from ccbridge.services.prerequisites import (
    does_source_credentials_exist,
    is_tool_installed,
)
from ccbridge.services.refresh import RefreshInvoker


logger = get_logger(__name__)


class PipelineStage(str, Enum):
    """Stages of the credential transfer pipeline, in execution order."""

    CHECK_TOOL_INSTALLED = "check_tool_installed"
    CHECK_SOURCE_EXISTS = "check_source_exists"
    INVOKE_REFRESH = "invoke_refresh"
    READ_SOURCE = "read_source"
    TRANSFORM_AND_WRITE = "transform_and_write"
    SUCCESS = "success"


class CredentialBridge:
    """Copies Claude CLI credentials into the bridged credentials file."""

    def __init__(
        self,
        config: BridgeConfig | None = None,
        invoker: RefreshInvoker | None = None,
    ):
        """Initialize the pipeline.

        Args:
            config: Paths and refresh command (uses defaults if not provided)
            invoker: Refresh invoker (built from ``config`` if not provided)
        """
        self.config = config or BridgeConfig()
        self.invoker = invoker or RefreshInvoker(
            self.config.refresh_command, timeout=self.config.refresh_timeout
        )
        self.source_storage = ClaudeTokenStorage(self.config.source_credentials_path)
        self.output_storage = BridgedTokenStorage(self.config.output_path)
        self.stage = PipelineStage.CHECK_TOOL_INSTALLED

    def run(self) -> bool:
        """Run every stage in order.

        Returns:
            True if the bridged credentials file was written, False otherwise
        """
        logger.info("Checking prerequisites...")

        self._enter(PipelineStage.CHECK_TOOL_INSTALLED)
        if not is_tool_installed(self.config.tool_marker_path):
            return self._fail(
                "Error: claude command is not installed",
                FailureKind.MISSING_DEPENDENCY,
            )

        self._enter(PipelineStage.CHECK_SOURCE_EXISTS)
        if not does_source_credentials_exist(self.config.source_credentials_path):
            return self._fail(
                "Error: Claude credentials file not found at "
                f"{self.config.source_credentials_path}",
                FailureKind.MISSING_SOURCE,
            )

        logger.info("Prerequisites met. Executing claude command...")

        self._enter(PipelineStage.INVOKE_REFRESH)
        if not self.invoker.invoke():
            return self._fail(
                "Error: Failed to execute claude command",
                FailureKind.INVOCATION_ERROR,
            )

        logger.info("Reading Claude credentials...")

        self._enter(PipelineStage.READ_SOURCE)
        credentials = self.source_storage.load()
        if credentials is None:
            return self._fail(
                "Error: Failed to read Claude credentials", FailureKind.READ_ERROR
            )

        source = credentials.claude_ai_oauth
        if source is None:
            logger.warning(
                "claude_ai_oauth_missing", path=self.source_storage.get_location()
            )
            source = SourceOAuthToken()
        elif source.is_expired:
            # The refresh result is not checked, so stale tokens are only reported
            logger.warning(
                "source_credentials_expired",
                expires_at=source.expires_at_datetime.isoformat()
                if source.expires_at_datetime
                else None,
            )

        logger.info("Updating GitHub credentials...")

        self._enter(PipelineStage.TRANSFORM_AND_WRITE)
        if not self.output_storage.save(source.to_bridged()):
            return self._fail(None, FailureKind.WRITE_ERROR)

        self._enter(PipelineStage.SUCCESS)
        return True

    def _enter(self, stage: PipelineStage) -> None:
        self.stage = stage
        logger.debug("pipeline_stage", stage=stage.value)

    def _fail(self, message: str | None, failure: FailureKind) -> bool:
        # Write errors are already reported by the storage layer
        if message:
            logger.error(message, stage=self.stage.value, failure=failure.value)
        return False


def update_github_credentials(config: BridgeConfig | None = None) -> bool:
    """Run the credential transfer pipeline once."""
    return CredentialBridge(config).run()
