"""Reader for the Claude CLI credentials file."""

from ccbridge.auth.exceptions import CredentialsError, FailureKind
from ccbridge.auth.models import ClaudeCredentialsFile
from ccbridge.auth.storage.base import BaseJsonStorage
from ccbridge.core.logging import get_logger


logger = get_logger(__name__)


class ClaudeTokenStorage(BaseJsonStorage):
    """Read-only storage for ``~/.claude/.credentials.json``."""

    def load(self) -> ClaudeCredentialsFile | None:
        """Load Claude credentials from the JSON file.

        Only JSON well-formedness is checked; token fields are passed through
        without validation.

        Returns:
            Parsed credentials, or None if the file could not be read or parsed
        """
        logger.debug(
            "credentials_load_start", source="claude_file", path=str(self.file_path)
        )

        try:
            credentials = ClaudeCredentialsFile.model_validate(self._read_json())
        except CredentialsError as e:
            logger.error(
                f"Error reading Claude credentials: {e}",
                failure=FailureKind.READ_ERROR.value,
                path=str(self.file_path),
            )
            return None

        logger.debug(
            "credentials_load_completed",
            source="claude_file",
            has_oauth=credentials.claude_ai_oauth is not None,
        )
        return credentials
