"""Writer for the bridged ``credentials.json`` file."""

from pathlib import Path

from ccbridge.auth.exceptions import CredentialsStorageError, FailureKind
from ccbridge.auth.models import BridgedCredentialsFile, BridgedOAuthToken
from ccbridge.auth.storage.base import BaseJsonStorage
from ccbridge.core.logging import get_logger


logger = get_logger(__name__)


class BridgedTokenStorage(BaseJsonStorage):
    """Storage for the credentials file consumed by the GitHub workflow."""

    def save(self, tokens: BridgedOAuthToken) -> bool:
        """Wrap ``tokens`` in the ``claudeAiOauth`` envelope and write it.

        Args:
            tokens: Bridged token record to persist

        Returns:
            True if saved successfully, False otherwise
        """
        envelope = BridgedCredentialsFile.model_validate({"claudeAiOauth": tokens})
        data = envelope.model_dump(by_alias=True, exclude_unset=True, warnings=False)

        try:
            self._write_json(data)
        except CredentialsStorageError as e:
            logger.error(
                f"Error saving credentials: {e}",
                failure=FailureKind.WRITE_ERROR.value,
                path=str(self.file_path),
            )
            return False

        logger.debug("credentials_save_completed", path=str(self.file_path))
        return True


def persist(tokens: BridgedOAuthToken, output_path: Path | str) -> bool:
    """Persist ``tokens`` to ``output_path``; never raises."""
    return BridgedTokenStorage(Path(output_path)).save(tokens)
